"""Domain Value Objects."""

from places.domain.value_objects.coordinates import Coordinates

__all__ = ["Coordinates"]
