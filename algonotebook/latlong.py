"""Conversion between rectangular coordinates and latitude/longitude in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class LatLong:
    """Spherical coordinates: radius, latitude and longitude in degrees."""

    r: float
    lat: float
    lon: float


@dataclass(frozen=True)
class Rect:
    """Rectangular coordinates."""

    x: float
    y: float
    z: float


def to_latlong(p: Rect) -> LatLong:
    """Convert rectangular coordinates to latitude/longitude.

    Longitude comes from an arccosine, so it lies in [0, 180].
    """
    r = math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)
    lat = math.degrees(math.asin(p.z / r))
    lon = math.degrees(math.acos(p.x / math.sqrt(p.x * p.x + p.y * p.y)))
    return LatLong(r, lat, lon)


def to_rect(q: LatLong) -> Rect:
    """Convert latitude/longitude to rectangular coordinates."""
    lat = math.radians(q.lat)
    lon = math.radians(q.lon)
    return Rect(
        q.r * math.cos(lon) * math.cos(lat),
        q.r * math.sin(lon) * math.cos(lat),
        q.r * math.sin(lat),
    )