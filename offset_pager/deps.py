"""Shared FastAPI dependencies."""

from functools import lru_cache

from offset_pager.core.config import get_settings
from offset_pager.db.seed import sample_people
from offset_pager.models.person import Person, PersonRecord
from offset_pager.pagination.engine import LimitOffsetPagination
from offset_pager.sources.base import DataSource, get_source


@lru_cache
def get_paginator() -> LimitOffsetPagination:
    """Dependency: paginator built from settings; bad page sizes fail on first use."""
    return LimitOffsetPagination.from_settings(get_settings())


@lru_cache
def _memory_people() -> tuple[PersonRecord, ...]:
    return tuple(sample_people())


def get_people_source() -> DataSource:
    """Dependency: Mongo-backed Person documents, or the seeded in-memory people."""
    if get_settings().record_source == "memory":
        return get_source(PersonRecord, list(_memory_people()))
    return get_source(Person)
