from __future__ import annotations

import logging
import math
from typing import Any

from ..common.validators import require_coordinates
from ..core.constants import DEFAULT_OFFICE_RADIUS_M, EARTH_RADIUS_M
from ..core.exceptions import ValidationError
from .model import Office

logger = logging.getLogger(__name__)


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in meters on a sphere with the mean Earth radius."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def office_from_config(config: dict) -> Office:
    """Build the office from the OFFICE settings dict."""
    lat, lon = require_coordinates(config.get("lat"), config.get("lon"))
    try:
        radius = float(config.get("radius_m", DEFAULT_OFFICE_RADIUS_M))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid office radius: {config.get('radius_m')!r}") from None
    if radius < 0 or math.isnan(radius):
        raise ValidationError(f"Invalid office radius: {radius}")

    return Office(
        name=str(config.get("name") or "Office"),
        lat=lat,
        lon=lon,
        radius_m=radius,
        is_active=bool(config.get("is_active", True)),
    )


class GeofenceEvaluator:
    """Decides whether a coordinate lies within the office radius.

    Pure and deterministic: no I/O, no retries. The boundary is inclusive.
    """

    def __init__(self, office: Office):
        if office.radius_m < 0:
            raise ValidationError(f"Invalid office radius: {office.radius_m}")
        self._office = office

    @property
    def office(self) -> Office:
        return self._office

    def distance_m(self, user_lat: Any, user_lon: Any) -> float:
        lat, lon = require_coordinates(user_lat, user_lon)
        return haversine_m(self._office.lat, self._office.lon, lat, lon)

    def is_in_office(self, user_lat: Any, user_lon: Any) -> bool:
        distance = self.distance_m(user_lat, user_lon)
        inside = distance <= self._office.radius_m
        logger.debug(
            "Distance from %s: %.2fm (radius %.0fm) -> %s",
            self._office.name,
            distance,
            self._office.radius_m,
            "inside" if inside else "outside",
        )
        return inside
