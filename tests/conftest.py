import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("RECORD_SOURCE", "memory")
os.environ.setdefault("DEFAULT_PAGE_SIZE", "10")
os.environ.setdefault("MAX_PAGE_SIZE", "25")
os.environ.setdefault("MONGODB_DB_NAME", "offset_pager_test")

URL = "https://www.willianantunes.com"


@pytest.fixture
def people():
    from offset_pager.db.seed import sample_people
    return sample_people()


@pytest.fixture
def source(people):
    from offset_pager.models.person import PersonRecord
    from offset_pager.sources.memory import MemorySource
    return MemorySource(PersonRecord, people)


@pytest.fixture
def client(source):
    from offset_pager.deps import get_people_source
    from offset_pager.main import app
    app.dependency_overrides[get_people_source] = lambda: source
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
