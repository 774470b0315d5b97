"""PostgreSQL Infrastructure."""

from places.infrastructure.persistence_postgres.models import Base, PlaceModel
from places.infrastructure.persistence_postgres.place_repository_sqla import (
    SqlaPlaceRepository,
)

__all__ = ["Base", "PlaceModel", "SqlaPlaceRepository"]
