from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError
from ..geo.model import LatLng


def require_finite(value: Any, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f"{field_name} must be a number") from None
    if isinstance(value, bool) or not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_positive(value: Any, field_name: str) -> float:
    number = require_finite(value, field_name)
    if number <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return number


def require_location(value: Any, field_name: str = "location") -> LatLng:
    """Coerce a mapping or LatLng into a validated LatLng."""
    if isinstance(value, LatLng):
        latitude, longitude = value.latitude, value.longitude
    elif isinstance(value, dict):
        latitude, longitude = value.get("latitude"), value.get("longitude")
    else:
        raise ValidationError(f"{field_name} must contain latitude and longitude")

    latitude = require_finite(latitude, f"{field_name}.latitude")
    longitude = require_finite(longitude, f"{field_name}.longitude")
    if not -90.0 <= latitude <= 90.0:
        raise ValidationError(f"{field_name}.latitude must be between -90 and 90")
    if not -180.0 <= longitude <= 180.0:
        raise ValidationError(f"{field_name}.longitude must be between -180 and 180")
    return LatLng(latitude=latitude, longitude=longitude)


def optional_note(value: Any, field_name: str = "note", *, max_len: int = 500) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    value = value.strip()
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must be at most {max_len} characters")
    return value or None
