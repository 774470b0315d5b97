"""Application DTOs."""

from places.application.search.dto.nearby_request import NearbySearchRequest
from places.application.search.dto.place_distance import PlaceDistanceDTO
from places.application.search.dto.place_document import PlaceDocument
from places.application.search.dto.search_query import (
    GeoDistanceExpression,
    SearchQuery,
    SortExpression,
)

__all__ = [
    "GeoDistanceExpression",
    "NearbySearchRequest",
    "PlaceDistanceDTO",
    "PlaceDocument",
    "SearchQuery",
    "SortExpression",
]
