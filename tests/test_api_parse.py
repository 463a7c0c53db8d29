import pytest
from fastapi.testclient import TestClient

from huiswerk import __version__, resolve_version
from huiswerk.app import NO_HOMEWORK_MESSAGE, NO_LESSONS_MESSAGE, app, cors_origins

client = TestClient(app)


def test_parse_homework_endpoint() -> None:
    res = client.post(
        "/api/homework/parse",
        json={"text": "Engels: Werkblad 5 maken - morgen\nBiologie", "reference_date": "2024-03-14"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert body["items"][0] == {
        "subject": "engels",
        "description": "Werkblad 5 maken",
        "deadline": "2024-03-15",
    }
    assert body["items"][1]["deadline"] == "2024-03-15"


def test_parse_homework_requires_text() -> None:
    res = client.post("/api/homework/parse", json={"text": "   "})
    assert res.status_code == 400
    assert res.json()["detail"] == "Tekst is verplicht"

    res = client.post("/api/homework/parse", json={})
    assert res.status_code == 400


def test_parse_homework_reports_nothing_recognized() -> None:
    res = client.post("/api/homework/parse", json={"text": "-\n•"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is False
    assert body["count"] == 0
    assert body["message"] == NO_HOMEWORK_MESSAGE


def test_parse_homework_rejects_invalid_reference() -> None:
    res = client.post("/api/homework/parse", json={"text": "Biologie", "reference_date": "gisteren"})
    assert res.status_code == 422


def test_parse_schedule_endpoint() -> None:
    text = "Maandag\n08:00-08:50 Nederlands (Jansen) A102\n09:00-09:50 Wiskunde (De Vries) B205"
    res = client.post("/api/schedule/parse", json={"text": text})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    assert body["count"] == 2
    assert body["items"][0] == {
        "day_of_week": 1,
        "time_start": "08:00",
        "time_end": "08:50",
        "subject": "Nederlands",
        "teacher_name": "Jansen",
        "location": "A102",
    }


def test_parse_schedule_without_lessons() -> None:
    res = client.post("/api/schedule/parse", json={"text": "Zet hier je rooster neer"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is False
    assert body["message"] == NO_LESSONS_MESSAGE


def test_parse_schedule_requires_text() -> None:
    res = client.post("/api/schedule/parse", json={"text": ""})
    assert res.status_code == 400
    assert res.json()["detail"] == "Voer rooster tekst in"


def test_version_endpoint() -> None:
    res = client.get("/api/system/version")
    assert res.status_code == 200
    assert res.json() == {"version": __version__}


def test_version_override_from_env(monkeypatch) -> None:
    monkeypatch.setenv("HUISWERK_APP_VERSION", " 2.1.0 ")
    assert resolve_version() == "2.1.0"


def test_cors_allows_any_origin_by_default() -> None:
    res = client.get("/api/system/version", headers={"Origin": "http://localhost:5173"})
    assert res.headers["access-control-allow-origin"] == "*"


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ["*"]),
        ("", []),
        ("http://localhost:5173, https://school.example", ["http://localhost:5173", "https://school.example"]),
    ],
)
def test_cors_origins_from_env(monkeypatch, value, expected) -> None:
    if value is None:
        monkeypatch.delenv("HUISWERK_CORS_ORIGINS", raising=False)
    else:
        monkeypatch.setenv("HUISWERK_CORS_ORIGINS", value)
    assert cors_origins() == expected
