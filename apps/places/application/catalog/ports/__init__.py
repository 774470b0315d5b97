"""Application Ports."""

from places.application.catalog.ports.place_repository import PlaceRepository

__all__ = ["PlaceRepository"]
