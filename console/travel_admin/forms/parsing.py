"""Submit-time coercions from form text to payload values."""
from __future__ import annotations

import logging
import math
import re
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

_FLOAT_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^[+-]?\d+")


def parse_float(value: Any) -> float:
    """
    Leading-number float parse: "12.5km" -> 12.5.

    Unparsable input gives NaN instead of raising; the value is forwarded
    and left to the backend to reject.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    text = "" if value is None else str(value).strip()
    match = _FLOAT_PREFIX.match(text)
    if not match:
        logger.warning("Could not parse %r as a number; sending NaN", value)
        return math.nan
    return float(match.group(0))


def parse_int(value: Any) -> Optional[int]:
    """Leading-integer parse: "4 stars" -> 4, "3.9" -> 3; None when unparsable."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    text = "" if value is None else str(value).strip()
    match = _INT_PREFIX.match(text)
    if not match:
        logger.warning("Could not parse %r as an integer", value)
        return None
    return int(match.group(0))


def split_list(value: Any) -> List[str]:
    """Comma-separated text to a list of trimmed, non-empty items."""
    if isinstance(value, (list, tuple)):
        items = [str(v) for v in value]
    else:
        items = ("" if value is None else str(value)).split(",")
    return [item.strip() for item in items if item.strip()]


def join_list(items: Any) -> str:
    if not items:
        return ""
    if isinstance(items, str):
        return items.strip()
    return ", ".join(str(item) for item in items)


def parse_attractions(value: Any) -> List[Dict[str, str]]:
    """
    "Beach|5km, Park" -> [{"name": "Beach", "distance": "5km"},
                          {"name": "Park", "distance": ""}]
    """
    attractions = []
    for item in split_list(value):
        parts = item.split("|")
        name = parts[0].strip() or item
        distance = parts[1].strip() if len(parts) > 1 else ""
        attractions.append({"name": name, "distance": distance})
    return attractions


def join_attractions(attractions: Any) -> str:
    if not attractions:
        return ""
    if isinstance(attractions, (str, dict)):
        attractions = [attractions]
    items = []
    for attraction in attractions:
        if isinstance(attraction, dict):
            name = attraction.get("name") or ""
            distance = attraction.get("distance") or ""
            items.append(f"{name}|{distance}")
        else:
            items.append(str(attraction))
    return ", ".join(items)


def as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
