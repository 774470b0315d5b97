"""Application Queries."""

from places.application.catalog.queries.get_place import GetPlaceQuery

__all__ = ["GetPlaceQuery"]
