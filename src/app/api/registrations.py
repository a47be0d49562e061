from __future__ import annotations

import logging

from flask import Blueprint, abort, jsonify

from app.api.enrollment import is_enrollment_open
from app.api.errors import json_body
from app.db import mongo
from app.models import REGISTRATIONS, registration_doc

bp = Blueprint("api_registrations", __name__)

logger = logging.getLogger(__name__)


def _collection():
    return mongo.get_collection(mongo.REGISTRATION, REGISTRATIONS)


@bp.get("/registrations")
def list_registrations():
    """
    GET /api/registrations
    All registrations in store order, no filtering.
    """
    return jsonify([mongo.serialize(d) for d in _collection().find()])


@bp.post("/register")
def register():
    """
    POST /api/register  {firstName, middleName, lastName, gender, regNumber, mobile, email}
    Every field is optional; refused with 403 while enrollment is closed.
    """
    body = json_body()
    if not is_enrollment_open():
        abort(403, description="Enrollment is currently closed.")

    res = _collection().insert_one(registration_doc(body))
    logger.info("Stored registration %s", res.inserted_id)
    return jsonify({"message": "Registration successful", "id": str(res.inserted_id)})


@bp.delete("/registrations/<reg_id>")
def delete_registration(reg_id: str):
    oid = mongo.parse_object_id(reg_id)
    if oid is None:
        abort(400, description="Invalid registration ID")

    if _collection().find_one_and_delete({"_id": oid}) is None:
        abort(404, description="Registration not found")

    logger.info("Deleted registration %s", oid)
    return jsonify({"message": "Registration deleted successfully"})
