"""
Course check-in geofence.

Players check in by being within a radius of the course's coordinates.
Distances use the haversine formula on a spherical earth.
"""

import math
from typing import Optional

from config import config

EARTH_RADIUS_METERS = 6371000


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points, in meters."""
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c


def is_within_geofence(
    user_lat: float,
    user_lng: float,
    course_lat: float,
    course_lng: float,
    radius_meters: Optional[float] = None,
) -> bool:
    """
    Whether a position is close enough to the course to check in.

    The radius defaults to the configured GEOFENCE_RADIUS_METERS.
    """
    if radius_meters is None:
        radius_meters = config.GEOFENCE_RADIUS_METERS
    return calculate_distance(user_lat, user_lng, course_lat, course_lng) <= radius_meters
