"""Domain Entities."""

from places.domain.entities.place import Place

__all__ = ["Place"]
