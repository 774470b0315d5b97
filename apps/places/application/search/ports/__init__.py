"""Application Ports."""

from places.application.search.ports.place_search_index import PlaceSearchIndex

__all__ = ["PlaceSearchIndex"]
