"""
Normalization of catalog API response bodies.

The backend wraps list and detail payloads as ``{"data": ...}`` but older
deployments answer with the bare array or object, and the hotels-by-destination
endpoint has been seen returning ``{"hotels": [...]}``. Everything that reads a
response goes through these helpers instead of guessing inline.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

ENVELOPE_KEY = "data"
COLLECTION_KEYS: Sequence[str] = ("hotels", "data")


def unwrap_envelope(body: Any) -> Any:
    """Return ``body["data"]`` when the body is an envelope, else the body itself."""
    if isinstance(body, dict) and ENVELOPE_KEY in body:
        return body[ENVELOPE_KEY]
    return body


def as_collection(payload: Any, keys: Sequence[str] = COLLECTION_KEYS) -> List[Dict[str, Any]]:
    """
    Normalize a collection payload to a list.

    Fallback order: a bare list is returned as-is; for a dict, the first of
    ``keys`` holding a list wins, and a dict under one of ``keys`` is searched
    the same way one level down; anything else yields an empty list.
    """
    if isinstance(payload, list):
        return list(payload)
    if isinstance(payload, dict):
        for key in keys:
            value = payload.get(key)
            if isinstance(value, list):
                return list(value)
        for key in keys:
            value = payload.get(key)
            if isinstance(value, dict):
                nested = as_collection(value, keys=[k for k in keys if k != key])
                if nested:
                    return nested
    return []


def as_record(payload: Any) -> Optional[Dict[str, Any]]:
    """Normalize a single-record payload; non-dict payloads yield ``None``."""
    payload = unwrap_envelope(payload)
    if isinstance(payload, dict):
        return payload
    return None


def record_id(record: Optional[Dict[str, Any]]) -> Optional[str]:
    """Server identity of a record (``_id``, falling back to ``id``)."""
    if not isinstance(record, dict):
        return None
    value = record.get("_id", record.get("id"))
    if value is None or value == "":
        return None
    return str(value)
