"""Application DTOs."""

from places.application.catalog.dto.place_input import PlaceInput

__all__ = ["PlaceInput"]
