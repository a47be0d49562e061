from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from bson import ObjectId

import app.api.news as news_api
from app.models import NEWS


@pytest.fixture
def clock(monkeypatch):
    """Deterministic creation times, one minute apart."""
    t0 = datetime(2025, 1, 1, tzinfo=timezone.utc)
    ticks = iter(t0 + timedelta(minutes=i) for i in range(100))
    monkeypatch.setattr(news_api, "utcnow", lambda: next(ticks))
    return t0


def _create(client, text="Open day", url="https://example.com/open-day"):
    r = client.post("/api/news", json={"text": text, "url": url})
    assert r.status_code == 201
    return r.get_json()


def test_create_news(app_client, news_db, clock):
    item = _create(app_client)
    assert item["text"] == "Open day"
    assert item["url"] == "https://example.com/open-day"
    assert item["date"].startswith("2025-01-01T00:00:00")
    assert news_db[NEWS].count_documents({"_id": ObjectId(item["_id"])}) == 1


@pytest.mark.parametrize("body", [{"url": "x"}, {"text": "x"}, {"text": "", "url": "x"}, {}])
def test_create_news_requires_text_and_url(app_client, news_db, body):
    r = app_client.post("/api/news", json=body)
    assert r.status_code == 400
    assert r.get_json() == {"message": "Both 'text' and 'url' are required"}
    assert news_db[NEWS].count_documents({}) == 0


def test_list_news_newest_first(app_client, clock):
    older = _create(app_client, text="first")
    newer = _create(app_client, text="second")

    items = app_client.get("/api/news").get_json()
    assert [i["_id"] for i in items] == [newer["_id"], older["_id"]]


def test_created_item_appears_in_listing(app_client, clock):
    item = _create(app_client)
    items = app_client.get("/api/news").get_json()
    assert [i["_id"] for i in items] == [item["_id"]]


def test_patch_updates_only_given_fields(app_client, clock):
    item = _create(app_client)
    r = app_client.patch(f"/api/news/{item['_id']}", json={"text": "Open day moved"})
    assert r.status_code == 200
    body = r.get_json()
    assert body["text"] == "Open day moved"
    assert body["url"] == item["url"]


def test_patch_ignores_other_fields(app_client, news_db, clock):
    item = _create(app_client)
    app_client.patch(f"/api/news/{item['_id']}", json={"date": "1999-01-01", "extra": 1})
    doc = news_db[NEWS].find_one({"_id": ObjectId(item["_id"])})
    assert "extra" not in doc
    assert doc["date"] != "1999-01-01"


def test_patch_invalid_and_missing_id(app_client):
    assert app_client.patch("/api/news/abc", json={"text": "x"}).status_code == 400
    r = app_client.patch(f"/api/news/{ObjectId()}", json={"text": "x"})
    assert r.status_code == 404
    assert r.get_json() == {"message": "News not found"}


def test_put_replaces_text_and_url(app_client, clock):
    item = _create(app_client)
    r = app_client.put(
        f"/api/news/{item['_id']}", json={"text": "New", "url": "https://example.com/new"}
    )
    assert r.status_code == 200
    body = r.get_json()
    assert (body["text"], body["url"]) == ("New", "https://example.com/new")
    assert body["date"] == item["date"]


def test_put_validates(app_client, clock):
    item = _create(app_client)
    assert app_client.put("/api/news/abc", json={"text": "a", "url": "b"}).status_code == 400
    assert app_client.put(f"/api/news/{item['_id']}", json={"text": "a"}).status_code == 400
    assert app_client.put(f"/api/news/{ObjectId()}", json={"text": "a", "url": "b"}).status_code == 404


def test_delete_news(app_client, clock):
    item = _create(app_client)
    r = app_client.delete(f"/api/news/{item['_id']}")
    assert r.status_code == 200
    assert r.get_json() == {"message": "News deleted", "id": item["_id"]}
    assert app_client.get("/api/news").get_json() == []


def test_delete_news_invalid_and_missing(app_client):
    assert app_client.delete("/api/news/not-an-id").status_code == 400
    assert app_client.delete(f"/api/news/{ObjectId()}").status_code == 404


def test_created_date_survives_storage(app_client, monkeypatch):
    when = datetime(2025, 5, 6, 11, 42, 22, 729005, tzinfo=timezone.utc)
    monkeypatch.setattr(news_api, "utcnow", lambda: when)

    created = _create(app_client)
    assert created["date"] == "2025-05-06T11:42:22.729000+00:00"

    listed = app_client.get("/api/news").get_json()
    assert listed[0]["date"] == created["date"]
    patched = app_client.patch(f"/api/news/{created['_id']}", json={"text": "x"}).get_json()
    assert patched["date"] == created["date"]


def test_created_date_with_real_clock_matches_listing(app_client):
    created = _create(app_client)
    listed = app_client.get("/api/news").get_json()
    assert listed[0]["date"] == created["date"]
