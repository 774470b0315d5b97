"""Application Commands."""

from places.application.search.commands.rebuild_place_index import RebuildPlaceIndexCommand

__all__ = ["RebuildPlaceIndexCommand"]
