"""Search Index Infrastructure."""

from places.infrastructure.search.memory_index import InMemoryPlaceSearchIndex
from places.infrastructure.search.redis_index import RedisPlaceSearchIndex
from places.infrastructure.search.timeout_index import TimeoutPlaceSearchIndex

__all__ = ["InMemoryPlaceSearchIndex", "RedisPlaceSearchIndex", "TimeoutPlaceSearchIndex"]
