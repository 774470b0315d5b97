"""Domain Services."""

from places.domain.services.geodesic import EARTH_RADIUS_KM, distance_km

__all__ = ["EARTH_RADIUS_KM", "distance_km"]
