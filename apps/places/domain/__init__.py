"""Places Domain Layer."""

from places.domain.entities import Place
from places.domain.value_objects import Coordinates

__all__ = ["Place", "Coordinates"]
