from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def _as_degrees(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}: {value!r}") from None
    if math.isnan(number) or math.isinf(number):
        raise ValidationError(f"Invalid {field_name}: {value!r}")
    return number


def require_coordinates(lat: Any, lon: Any) -> tuple[float, float]:
    """Coerce a latitude/longitude pair to floats, rejecting out-of-range values."""
    lat_f = _as_degrees(lat, "latitude")
    lon_f = _as_degrees(lon, "longitude")
    if lat_f < -90 or lat_f > 90:
        raise ValidationError(f"Invalid latitude: {lat_f}")
    if lon_f < -180 or lon_f > 180:
        raise ValidationError(f"Invalid longitude: {lon_f}")
    return lat_f, lon_f
