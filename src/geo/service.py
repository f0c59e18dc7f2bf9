"""Great-circle distance helpers.

Coordinates are ``(latitude, longitude)`` pairs in decimal degrees. Inputs are
expected to be valid device-reported coordinates (latitude in [-90, 90],
longitude in [-180, 180]); values outside those ranges are not rejected and the
result is meaningless.
"""

import math

EARTH_RADIUS_MILES = 3958.8

LatLon = tuple[float, float]


def haversine_miles(origin: LatLon, destination: LatLon) -> float:
    """Great-circle distance between two points, in miles.

    Uses the haversine formula with ``atan2``, which stays numerically stable for
    antipodal points and across the antimeridian.
    """
    lat1, lon1 = origin
    lat2, lon2 = destination
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    # a can drift a hair above 1 for antipodes
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c
