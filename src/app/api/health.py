from __future__ import annotations
from datetime import datetime, timezone
from flask import Blueprint, jsonify

from app import config
from app.db import mongo

bp = Blueprint("api_health", __name__)

@bp.get("/health")
def health():
    now = datetime.now(timezone.utc).isoformat()

    return jsonify({
        "ok": True,
        "status": "ok",
        "env": config.FLASK_ENV,
        "time_utc": now,
        "db": {
            "registration": mongo.ping(mongo.REGISTRATION),
            "news": mongo.ping(mongo.NEWS),
        },
    })
