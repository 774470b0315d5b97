"""Place Search Application Layer."""

from places.application.search.commands import RebuildPlaceIndexCommand
from places.application.search.dto import (
    NearbySearchRequest,
    PlaceDistanceDTO,
    PlaceDocument,
    SearchQuery,
)
from places.application.search.ports import PlaceSearchIndex
from places.application.search.queries import FindNearbyPlacesQuery
from places.application.search.services import (
    PlaceDistanceAssembler,
    PlaceDocumentBuilder,
    ProximityQueryBuilder,
    SearchArgumentPolicy,
)

__all__ = [
    "FindNearbyPlacesQuery",
    "NearbySearchRequest",
    "PlaceDistanceAssembler",
    "PlaceDistanceDTO",
    "PlaceDocument",
    "PlaceDocumentBuilder",
    "PlaceSearchIndex",
    "ProximityQueryBuilder",
    "RebuildPlaceIndexCommand",
    "SearchArgumentPolicy",
    "SearchQuery",
]
