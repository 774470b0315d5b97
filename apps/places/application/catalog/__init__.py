"""Place Catalog Application Layer."""

from places.application.catalog.commands import (
    AddPlaceCommand,
    RemovePlaceCommand,
    UpdatePlaceCommand,
)
from places.application.catalog.dto import PlaceInput
from places.application.catalog.ports import PlaceRepository
from places.application.catalog.queries import GetPlaceQuery

__all__ = [
    "AddPlaceCommand",
    "GetPlaceQuery",
    "PlaceInput",
    "PlaceRepository",
    "RemovePlaceCommand",
    "UpdatePlaceCommand",
]
