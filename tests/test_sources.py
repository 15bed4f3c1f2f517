import pytest

from offset_pager.core.config import get_settings
from offset_pager.core.exceptions import ConfigurationError
from offset_pager.models.person import Person
from offset_pager.pagination.fields import field_registry
from offset_pager.pagination.filters import build_filters
from offset_pager.sources.base import get_source
from offset_pager.sources.memory import MemorySource
from offset_pager.sources.mongo import BeanieSource, to_mongo_filter


def test_mongo_filter_from_conjunction():
    predicate = build_filters(
        [("robot", "True"), ("greetings", "Hola"), ("ID", "2")],
        field_registry(Person),
    )
    assert to_mongo_filter(Person, predicate) == {"robot": True, "greetings": "Hola", "_id": 2}


def test_mongo_filter_empty_matches_all():
    assert to_mongo_filter(Person, build_filters([], field_registry(Person))) == {}


@pytest.fixture
def record_source(monkeypatch):
    def use(name: str):
        monkeypatch.setenv("RECORD_SOURCE", name)
        get_settings.cache_clear()

    yield use
    get_settings.cache_clear()


def test_get_source_memory(record_source):
    record_source("memory")
    assert isinstance(get_source(Person), MemorySource)


def test_get_source_mongo(record_source):
    record_source("mongo")
    source = get_source(Person)
    assert isinstance(source, BeanieSource)
    assert source.model is Person


def test_get_source_unknown(record_source):
    record_source("sqlite")
    with pytest.raises(ConfigurationError):
        get_source(Person)
