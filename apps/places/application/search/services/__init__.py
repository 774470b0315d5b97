"""Application Services."""

from places.application.search.services.argument_policy import SearchArgumentPolicy
from places.application.search.services.distance_assembler import PlaceDistanceAssembler
from places.application.search.services.document_builder import PlaceDocumentBuilder
from places.application.search.services.query_builder import ProximityQueryBuilder

__all__ = [
    "PlaceDistanceAssembler",
    "PlaceDocumentBuilder",
    "ProximityQueryBuilder",
    "SearchArgumentPolicy",
]
