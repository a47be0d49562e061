from __future__ import annotations

import atexit
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pymongo import DESCENDING, MongoClient
from pymongo.server_api import ServerApi

# Always go through app.config so python-dotenv is applied
from app import config

logger = logging.getLogger(__name__)

REGISTRATION = "registration"
NEWS = "news"

# store -> (config attr for the URI, config attr for the database name)
STORES: Dict[str, tuple] = {
    REGISTRATION: ("REGISTRATION_MONGODB_URI", "REGISTRATION_DB"),
    NEWS: ("NEWS_MONGODB_URI", "NEWS_DB"),
}

_CLIENTS: Dict[str, MongoClient] = {}


def _store_settings(store: str) -> tuple:
    try:
        return STORES[store]
    except KeyError:
        raise ValueError(f"unknown store: {store!r}") from None


def _mongo_uri(store: str) -> str:
    uri_attr, _ = _store_settings(store)
    uri = getattr(config, uri_attr, None)
    if not uri:
        raise RuntimeError(f"{uri_attr} is not set")
    return uri


def _db_name(store: str) -> str:
    _, name_attr = _store_settings(store)
    return getattr(config, name_attr)


def get_client(store: str) -> MongoClient:
    client = _CLIENTS.get(store)
    if client is not None:
        return client
    uri = _mongo_uri(store)
    client = MongoClient(
        uri,
        serverSelectionTimeoutMS=config.MONGO_TIMEOUT_MS,
        server_api=ServerApi("1"),
    )
    _CLIENTS[store] = client
    logger.info("Opened MongoDB client for %s store", store)
    return client


def get_db(store: str):
    return get_client(store)[_db_name(store)]


def get_collection(store: str, name: str):
    return get_db(store)[name]


def ping(store: str) -> bool:
    try:
        get_client(store).admin.command("ping")
        return True
    except Exception as e:
        logger.error("Mongo ping failed for %s store: %s", store, e)
        return False


def ensure_indexes(log: Optional[logging.Logger] = None) -> None:
    """
    Safe to call on startup; creates the listing index for news if missing.
    """
    try:
        news = get_collection(NEWS, "news")
    except Exception as e:
        (log or logger).warning("[ensure_indexes] skipped: %s", e)
        return
    try:
        news.create_index([("date", DESCENDING)])
    except Exception as e:
        (log or logger).warning("index create failed for news: %s", e)


def close_clients() -> None:
    for store in list(_CLIENTS):
        client = _CLIENTS.pop(store)
        try:
            client.close()
        except Exception as e:
            logger.warning("closing %s client failed: %s", store, e)


# Released once at interpreter shutdown, however many apps were built
atexit.register(close_clients)


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return an ObjectId for a well-formed key, else None."""
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    JSON-safe copy of a Mongo document: ObjectIds become hex strings and
    datetimes become ISO-8601 strings in UTC.
    """
    if doc is None:
        return None
    out: Dict[str, Any] = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, datetime):
            # pymongo hands back naive UTC datetimes
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            out[key] = value.isoformat()
        else:
            out[key] = value
    return out
