from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Blueprint, abort, jsonify
from pymongo import ReturnDocument

from app.api.errors import json_body
from app.db import mongo
from app.models import ENROLLMENT_ID, ENROLLMENTS

bp = Blueprint("api_enrollment", __name__)

logger = logging.getLogger(__name__)

_TRUE = {"true", "1"}
_FALSE = {"false", "0"}


def _collection():
    return mongo.get_collection(mongo.REGISTRATION, ENROLLMENTS)


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        v = value.strip().lower()
        if v in _TRUE:
            return True
        if v in _FALSE:
            return False
    return None


def get_enrollment() -> bool:
    """
    Current gate value. The singleton is keyed by a fixed _id and created
    with enabled=True on first access in a single atomic upsert.
    """
    doc = _collection().find_one_and_update(
        {"_id": ENROLLMENT_ID},
        {"$setOnInsert": {"enabled": True}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    return bool(doc["enabled"])


def set_enrollment(enabled: bool) -> bool:
    doc = _collection().find_one_and_update(
        {"_id": ENROLLMENT_ID},
        {"$set": {"enabled": enabled}},
        upsert=True,
        return_document=ReturnDocument.AFTER,
    )
    logger.info("Enrollment %s", "opened" if doc["enabled"] else "closed")
    return bool(doc["enabled"])


def is_enrollment_open() -> bool:
    """Gate check for registration; an absent singleton counts as closed."""
    doc = _collection().find_one({"_id": ENROLLMENT_ID})
    return bool(doc and doc.get("enabled"))


@bp.get("/enrollment")
def enrollment_status():
    """
    GET /api/enrollment
    Returns {enabled}; creates the flag (enabled) if it does not exist yet.
    """
    return jsonify({"enabled": get_enrollment()})


@bp.post("/enrollment")
def update_enrollment():
    """
    POST /api/enrollment  {"enabled": true|false}
    """
    enabled = _coerce_bool(json_body().get("enabled"))
    if enabled is None:
        abort(400, description="'enabled' must be a boolean")
    return jsonify({"message": "Enrollment status updated", "enabled": set_enrollment(enabled)})
