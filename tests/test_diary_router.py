"""End-to-end tests for the diary HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient

from src.db.database import get_db
from src.main import app
from src.routers.diary import get_weather_provider


@pytest.fixture
def override(session_factory):
    def _override(provider):
        def _get_db():
            db = session_factory()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _get_db
        app.dependency_overrides[get_weather_provider] = lambda: provider

    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def client(override, provider):
    override(provider)
    return TestClient(app)


def test_root(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "message" in r.json()


def test_create_and_read(client, provider):
    r = client.post("/create/diary", params={"date": "2025-11-18", "text": "hello"})
    assert r.status_code == 201

    r = client.get("/read/diary", params={"date": "2025-11-18"})
    assert r.status_code == 200
    body = r.json()
    assert len(body) == 1
    assert body[0]["text"] == "hello"
    assert body[0]["date"] == "2025-11-18"
    assert body[0]["weather"] == provider.weather
    assert body[0]["icon"] == provider.icon
    assert body[0]["temperature"] == provider.temperature
    assert isinstance(body[0]["id"], int)


def test_two_entries_same_date(client, provider):
    client.post("/create/diary", params={"date": "2025-11-18", "text": "one"})
    client.post("/create/diary", params={"date": "2025-11-18", "text": "two"})

    body = client.get("/read/diary", params={"date": "2025-11-18"}).json()
    assert sorted(d["text"] for d in body) == ["one", "two"]
    assert body[0]["weather"] == body[1]["weather"]
    assert len(provider.calls) == 1


def test_read_range(client):
    for day, text in (("2025-11-01", "a"), ("2025-11-10", "b"), ("2025-11-30", "c"), ("2025-12-01", "d")):
        client.post("/create/diary", params={"date": day, "text": text})

    r = client.get("/read/diaries", params={"startDate": "2025-11-01", "endDate": "2025-11-30"})
    assert r.status_code == 200
    assert [d["text"] for d in r.json()] == ["a", "b", "c"]


def test_read_range_reversed_is_400(client):
    r = client.get("/read/diaries", params={"startDate": "2025-12-01", "endDate": "2025-11-01"})
    assert r.status_code == 400
    assert r.headers["content-type"].startswith("text/plain")
    assert "시작일" in r.text


def test_update(client):
    client.post("/create/diary", params={"date": "2025-11-18", "text": "old"})

    r = client.put("/update/diary", params={"date": "2025-11-18", "text": "new text"})
    assert r.status_code == 200

    body = client.get("/read/diary", params={"date": "2025-11-18"}).json()
    assert body[0]["text"] == "new text"


def test_update_missing_is_400(client):
    r = client.put("/update/diary", params={"date": "2025-11-18", "text": "new text"})
    assert r.status_code == 400
    assert r.text == "해당 날짜의 일기가 없습니다."


def test_delete(client):
    client.post("/create/diary", params={"date": "2025-11-18", "text": "a"})
    client.post("/create/diary", params={"date": "2025-11-18", "text": "b"})

    assert client.delete("/delete/diary", params={"date": "2025-11-18"}).status_code == 200
    assert client.get("/read/diary", params={"date": "2025-11-18"}).json() == []
    # 두 번 삭제해도 에러 X
    assert client.delete("/delete/diary", params={"date": "2025-11-18"}).status_code == 200


def test_provider_failure_is_400(override, failing_provider):
    override(failing_provider)
    client = TestClient(app)

    r = client.post("/create/diary", params={"date": "2025-11-18", "text": "x"})
    assert r.status_code == 400
    assert "날씨" in r.text
    assert client.get("/read/diary", params={"date": "2025-11-18"}).json() == []


@pytest.mark.parametrize(
    "method, path, params",
    [
        ("post", "/create/diary", {"date": "2025-11-18"}),
        ("get", "/read/diary", {"date": "18/11/2025"}),
        ("get", "/read/diaries", {"startDate": "2025-11-01"}),
        ("delete", "/delete/diary", {}),
    ],
)
def test_bad_params_are_400(client, method, path, params):
    r = getattr(client, method)(path, params=params)
    assert r.status_code == 400
    assert r.headers["content-type"].startswith("text/plain")


def test_unexpected_error_is_500(override):
    class BrokenProvider:
        def fetch(self, target_date):
            raise RuntimeError("db password is hunter2")

    override(BrokenProvider())
    client = TestClient(app, raise_server_exceptions=False)

    r = client.post("/create/diary", params={"date": "2025-11-18", "text": "x"})
    assert r.status_code == 500
    assert r.text == "서버 오류가 발생했습니다."
    assert "hunter2" not in r.text
