from __future__ import annotations

import logging
from typing import Any, Dict

from bson import ObjectId
from flask import Blueprint, abort, jsonify
from pymongo import DESCENDING, ReturnDocument

from app.api.errors import json_body
from app.db import mongo
from app.models import NEWS, NEWS_FIELDS, news_doc, news_update, utcnow

bp = Blueprint("api_news", __name__)

logger = logging.getLogger(__name__)


def _collection():
    return mongo.get_collection(mongo.NEWS, NEWS)


def _news_id(news_id: str) -> ObjectId:
    oid = mongo.parse_object_id(news_id)
    if oid is None:
        abort(400, description="Invalid news ID")
    return oid


def _require_fields(body: Dict[str, Any]) -> None:
    if not all(body.get(f) for f in NEWS_FIELDS):
        abort(400, description="Both 'text' and 'url' are required")


def _update(oid: ObjectId, changes: Dict[str, Any]):
    coll = _collection()
    if changes:
        doc = coll.find_one_and_update(
            {"_id": oid}, {"$set": changes}, return_document=ReturnDocument.AFTER
        )
    else:
        doc = coll.find_one({"_id": oid})
    if doc is None:
        abort(404, description="News not found")
    logger.info("Updated news %s fields=%s", oid, sorted(changes))
    return jsonify(mongo.serialize(doc))


@bp.get("/news")
def list_news():
    """
    GET /api/news
    Newest first (by `date`).
    """
    cur = _collection().find().sort("date", DESCENDING)
    return jsonify([mongo.serialize(d) for d in cur])


@bp.post("/news")
def create_news():
    """
    POST /api/news  {"text": ..., "url": ...}
    Both fields required; `date` is assigned by the server.
    """
    body = json_body()
    _require_fields(body)

    doc = news_doc(str(body["text"]), str(body["url"]), date=utcnow())
    res = _collection().insert_one(doc)
    doc["_id"] = res.inserted_id
    logger.info("Created news %s", res.inserted_id)
    return jsonify(mongo.serialize(doc)), 201


@bp.put("/news/<news_id>")
def replace_news(news_id: str):
    """
    PUT /api/news/<id>  {"text": ..., "url": ...}
    Replaces both fields; the original `date` is kept.
    """
    oid = _news_id(news_id)
    body = json_body()
    _require_fields(body)
    return _update(oid, news_update(body))


@bp.patch("/news/<news_id>")
def patch_news(news_id: str):
    """
    PATCH /api/news/<id>  {"text"?: ..., "url"?: ...}
    """
    oid = _news_id(news_id)
    return _update(oid, news_update(json_body()))


@bp.delete("/news/<news_id>")
def delete_news(news_id: str):
    oid = _news_id(news_id)
    if _collection().find_one_and_delete({"_id": oid}) is None:
        abort(404, description="News not found")
    logger.info("Deleted news %s", oid)
    return jsonify({"message": "News deleted", "id": str(oid)})
