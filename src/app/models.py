from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, Optional

REGISTRATIONS = "registrations"
ENROLLMENTS = "enrollments"
NEWS = "news"

ENROLLMENT_ID = "enrollment"

REGISTRATION_FIELDS = (
    "firstName",
    "middleName",
    "lastName",
    "gender",
    "regNumber",
    "mobile",
    "email",
)

NEWS_FIELDS = ("text", "url")


def to_millis(dt: datetime) -> datetime:
    """BSON dates keep milliseconds only."""
    return dt.replace(microsecond=dt.microsecond // 1000 * 1000)


def utcnow() -> datetime:
    return to_millis(datetime.now(timezone.utc))


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def registration_doc(body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Keep only the known registration fields; values are stored as text.
    Missing fields are simply absent, nothing is required.
    """
    doc: Dict[str, Any] = {}
    for field in REGISTRATION_FIELDS:
        value = body.get(field)
        if value is None:
            continue
        doc[field] = _as_text(value)
    return doc


def news_doc(text: str, url: str, date: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "text": text,
        "url": url,
        "date": to_millis(date or utcnow()),
    }


def news_update(body: Dict[str, Any], fields: Iterable[str] = NEWS_FIELDS) -> Dict[str, Any]:
    """$set payload for the news fields present in `body`."""
    return {f: _as_text(body[f]) for f in fields if body.get(f) is not None}
