"""Places Application Layer."""

from places.application.search import (
    FindNearbyPlacesQuery,
    NearbySearchRequest,
    PlaceDistanceDTO,
    PlaceDocument,
    PlaceSearchIndex,
    RebuildPlaceIndexCommand,
)

__all__ = [
    "FindNearbyPlacesQuery",
    "NearbySearchRequest",
    "PlaceDistanceDTO",
    "PlaceDocument",
    "PlaceSearchIndex",
    "RebuildPlaceIndexCommand",
]
