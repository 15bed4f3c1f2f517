from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from offset_pager.core.config import get_settings
from offset_pager.core.exceptions import ConfigurationError
from offset_pager.pagination.fields import FieldRegistry, field_registry
from offset_pager.pagination.filters import Conjunction

T = TypeVar("T")


class DataSource(ABC, Generic[T]):
    """Ordered, filterable, countable collection of records of one model type."""

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def fields(self) -> FieldRegistry:
        """Filterable fields of the record model."""
        return field_registry(self.model)

    @abstractmethod
    async def count(self, predicate: Conjunction) -> int:
        """Number of records matching predicate."""
        ...

    @abstractmethod
    async def fetch(self, predicate: Conjunction, offset: int, limit: int) -> list[T]:
        """Matching records in source order, skipping offset, at most limit."""
        ...


def get_source(model: type[BaseModel], records: list[Any] | None = None) -> DataSource:
    settings = get_settings()
    if settings.record_source == "mongo":
        from offset_pager.sources.mongo import BeanieSource
        return BeanieSource(model)
    if settings.record_source == "memory":
        from offset_pager.sources.memory import MemorySource
        return MemorySource(model, records or [])
    raise ConfigurationError(
        f"Unknown record source: {settings.record_source}",
        details={"record_source": settings.record_source},
    )
