from fastapi.testclient import TestClient


def test_people_first_page(client):
    r = client.get("/v1/people")
    assert r.status_code == 200
    body = r.json()
    assert list(body) == ["count", "next", "previous", "results"]
    assert body["count"] == 50
    assert body["previous"] is None
    assert body["next"] == "http://testserver/v1/people/?limit=10&offset=10"
    assert body["results"][0] == {
        "identification": 1,
        "honest_name": "Person 1",
        "salute": "Bonjour",
        "am_robot": False,
    }


def test_people_filtered_and_clamped(client):
    r = client.get("/v1/people", params={"robot": "true", "limit": "1000"})
    body = r.json()
    assert body["count"] == 25
    assert len(body["results"]) == 25
    assert all(p["am_robot"] for p in body["results"])
    assert body["next"] is None


def test_people_follow_next_link(client):
    ids = []
    url = "/v1/people?greetings=Guten%20Tag&limit=2"
    while url:
        body = client.get(url).json()
        assert body["count"] == 5
        ids.extend(p["identification"] for p in body["results"])
        url = body["next"]
    assert ids == [4, 14, 24, 34, 44]


def test_people_filter_case_insensitive_name(client):
    body = client.get("/v1/people?GREETINGS=Hola&limit=1").json()
    assert body["count"] == 5
    assert body["next"] == "http://testserver/v1/people/?GREETINGS=Hola&limit=1&offset=1"


def test_people_bad_values_degrade(client):
    body = client.get("/v1/people?id=jafar&offset=-4&limit=zero").json()
    assert body["count"] == 50
    assert len(body["results"]) == 10
    assert body["previous"] is None


def test_source_failure_is_internal_error(source):
    from offset_pager.deps import get_people_source
    from offset_pager.main import app

    async def broken(*args):
        raise RuntimeError("boom")

    source.count = broken
    app.dependency_overrides[get_people_source] = lambda: source
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            r = c.get("/v1/people", headers={"X-Request-ID": "req-1"})
    finally:
        app.dependency_overrides.clear()
    assert r.status_code == 500
    assert r.json()["error"]["code"] == "INTERNAL_ERROR"
    assert r.json()["request_id"] == "req-1"


def test_people_default_source_is_seeded():
    from offset_pager.deps import get_people_source
    from offset_pager.main import app
    from offset_pager.models.person import PersonRecord

    source = get_people_source()
    assert source.model is PersonRecord
    with TestClient(app) as c:
        body = c.get("/v1/people", params={"greetings": "Bonjour"}).json()
    assert body["count"] == 5
    assert [p["identification"] for p in body["results"]] == [1, 11, 21, 31, 41]

    with TestClient(app) as c:
        body = c.get("/v1/people").json()
    assert body["count"] == 50
    assert len(body["results"]) == 10
    assert body["next"] == "http://testserver/v1/people/?limit=10&offset=10"
