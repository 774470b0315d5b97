"""Application Commands."""

from places.application.catalog.commands.add_place import AddPlaceCommand
from places.application.catalog.commands.remove_place import RemovePlaceCommand
from places.application.catalog.commands.update_place import UpdatePlaceCommand

__all__ = ["AddPlaceCommand", "RemovePlaceCommand", "UpdatePlaceCommand"]
