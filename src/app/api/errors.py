from __future__ import annotations

import logging
from typing import Any, Dict

from flask import abort, jsonify, request
from pymongo.errors import PyMongoError
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal Server Error"


def json_body() -> Dict[str, Any]:
    """
    Parsed JSON object of the current request. A missing body or one that
    is not sent as JSON is treated as {}; a JSON body that is not an object
    is a 400.
    """
    if not request.is_json or not request.get_data(cache=True):
        return {}
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        abort(400, description="Request body must be a JSON object")
    return body


def _http_error(e: HTTPException):
    return jsonify({"message": e.description}), e.code


def _db_error(e: PyMongoError):
    logger.exception("Database error on %s %s: %s", request.method, request.path, e)
    return jsonify({"message": INTERNAL_ERROR}), 500


def _unhandled(e: Exception):
    logger.exception("Unhandled error on %s %s: %s", request.method, request.path, e)
    return jsonify({"message": INTERNAL_ERROR}), 500


def register_error_handlers(app) -> None:
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(PyMongoError, _db_error)
    app.register_error_handler(Exception, _unhandled)
