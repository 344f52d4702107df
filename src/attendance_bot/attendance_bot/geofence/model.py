from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GeoPoint:
    """A coordinate as delivered by a chat backend.

    Values are kept as received; they are validated by the resolver before use.
    """

    lat: Any
    lon: Any


@dataclass(frozen=True)
class Office:
    """Reference location checked by the geofence (managed externally)."""

    name: str
    lat: float
    lon: float
    radius_m: float
    is_active: bool = True
