"""Application Queries."""

from places.application.search.queries.find_nearby_places import FindNearbyPlacesQuery

__all__ = ["FindNearbyPlacesQuery"]
