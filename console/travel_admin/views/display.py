from __future__ import annotations

import math
from typing import Any, Dict, Optional

from babel.numbers import format_currency

from travel_admin.services.responses import record_id

NOT_AVAILABLE = "N/A"
STAR = "★"


def _number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def clamp_stars(value: Any) -> int:
    """Star count for display: non-numeric is 0, otherwise clamped to 0..5."""
    number = _number(value)
    if number is None:
        return 0
    return int(max(0.0, min(5.0, number)))


def star_display(value: Any) -> str:
    return STAR * clamp_stars(value)


def format_price(value: Any, currency: str = "USD", locale: str = "en_IN") -> str:
    number = _number(value)
    if number is None:
        return NOT_AVAILABLE
    return format_currency(number, currency, locale=locale)


def guest_rating_display(value: Any) -> str:
    if value is None or value == "":
        return NOT_AVAILABLE
    return str(value)


def destination_label(destination: Any) -> str:
    """Label such as "Paris, France"; empty for anything that is not a record."""
    if not isinstance(destination, dict):
        return ""
    name = destination.get("name") or ""
    country = destination.get("country")
    return f"{name}, {country}" if country else name


def destination_options(destinations: Any) -> Dict[str, str]:
    """Map of destination id to label, in the order the backend returned them."""
    options: Dict[str, str] = {}
    for destination in destinations or []:
        identity = record_id(destination)
        if identity is None:
            continue
        options[identity] = destination_label(destination)
    return options
