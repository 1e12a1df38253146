"""Geographic calculations - Pure functions.

This module provides distance, bearing and coordinate checks for
earthquake sources and sites. All functions are pure with no side effects.

The distance functions do not reject invalid input; callers are expected
to apply the is_valid_* predicates first.
"""

import math
from dataclasses import dataclass

from quakesim.core.calibration import (
    MAX_DEPTH_KM,
    MAX_MAGNITUDE,
    MIN_DEPTH_KM,
    MIN_MAGNITUDE,
)


# Earth's radius in kilometers
EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A point on the Earth's surface.

    Attributes:
        latitude: Degrees, negative for South
        longitude: Degrees, negative for West
    """
    latitude: float
    longitude: float

    @property
    def coordinates(self) -> tuple[float, float]:
        """Return (latitude, longitude) tuple."""
        return (self.latitude, self.longitude)


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using Haversine formula.

    Pure function.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def surface_distance(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometers.

    Pure function.
    """
    return calculate_distance(a.latitude, a.longitude, b.latitude, b.longitude)


def hypocentral_distance(epicenter: GeoPoint, depth_km: float, site: GeoPoint) -> float:
    """Straight-line distance from the hypocenter to a surface site.

    Pure function.

    Combines the horizontal great-circle distance with the source depth:
    R = sqrt(horizontal^2 + depth^2).

    Args:
        epicenter: Surface projection of the hypocenter
        depth_km: Hypocenter depth in kilometers
        site: Surface location

    Returns:
        Hypocentral distance in kilometers
    """
    horizontal = surface_distance(epicenter, site)
    return math.sqrt(horizontal ** 2 + depth_km ** 2)


def bearing(a: GeoPoint, b: GeoPoint) -> float:
    """Initial compass bearing from a to b, in degrees [0, 360).

    Pure function. Display only; not used by the intensity pipeline.
    """
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    y = math.sin(delta_lon) * math.cos(lat2_rad)
    x = (
        math.cos(lat1_rad) * math.sin(lat2_rad)
        - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(delta_lon)
    )

    theta = math.degrees(math.atan2(y, x))
    result = (theta + 360.0) % 360.0
    # (-tiny + 360) % 360 can round to 360.0
    return 0.0 if result >= 360.0 else result


def is_valid_coordinate(latitude: float, longitude: float) -> bool:
    """Check that a latitude/longitude pair is finite and in range.

    Pure function.
    """
    if not _is_finite_number(latitude) or not _is_finite_number(longitude):
        return False
    return -90 <= latitude <= 90 and -180 <= longitude <= 180


def is_valid_depth(depth_km: float) -> bool:
    """Check that a hypocenter depth is finite and within [0, 700] km.

    Pure function.
    """
    return _is_finite_number(depth_km) and MIN_DEPTH_KM <= depth_km <= MAX_DEPTH_KM


def is_valid_magnitude(magnitude: float) -> bool:
    """Check that a moment magnitude is finite and within [0, 10].

    Pure function.
    """
    return _is_finite_number(magnitude) and MIN_MAGNITUDE <= magnitude <= MAX_MAGNITUDE


def _is_finite_number(value: object) -> bool:
    """True for real, finite numbers (bools excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
