"""Setup Module."""

from places.setup.config import Settings, get_settings
from places.setup.database import async_session_factory, get_db_session
from places.setup.dependencies import (
    get_find_nearby_places_query,
    get_place_repository,
    get_rebuild_place_index_command,
    get_search_index,
)

__all__ = [
    "Settings",
    "get_settings",
    "async_session_factory",
    "get_db_session",
    "get_find_nearby_places_query",
    "get_place_repository",
    "get_rebuild_place_index_command",
    "get_search_index",
]
