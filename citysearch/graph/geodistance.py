"""Great-circle distance between two coordinates."""

from __future__ import annotations

import math

from ..domain.models import Coordinate

# Diameter of the sphere in km and the km -> mile factor used for every
# reported length. Changing either changes observable path lengths.
EARTH_DIAMETER_KM = 12746
KM_TO_MILES = 0.612


def distance(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in miles."""
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(delta_lon / 2) ** 2
    )
    d = EARTH_DIAMETER_KM * math.asin(math.sqrt(h))
    return KM_TO_MILES * d
