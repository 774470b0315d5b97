"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from typing import Annotated

import redis.asyncio as redis
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from places.application.catalog import (
    AddPlaceCommand,
    GetPlaceQuery,
    PlaceRepository,
    RemovePlaceCommand,
    UpdatePlaceCommand,
)
from places.application.search import (
    FindNearbyPlacesQuery,
    PlaceDocumentBuilder,
    PlaceSearchIndex,
    RebuildPlaceIndexCommand,
    SearchArgumentPolicy,
)
from places.infrastructure.persistence_postgres import SqlaPlaceRepository
from places.infrastructure.search import (
    InMemoryPlaceSearchIndex,
    RedisPlaceSearchIndex,
    TimeoutPlaceSearchIndex,
)
from places.setup.config import Settings, get_settings
from places.setup.database import get_db_session

logger = logging.getLogger(__name__)

_redis_client: redis.Redis | None = None
_search_index: PlaceSearchIndex | None = None


def get_redis_client() -> redis.Redis:
    """Redis 클라이언트 싱글톤을 반환합니다."""
    global _redis_client  # noqa: PLW0603
    if _redis_client is None:
        _redis_client = redis.from_url(get_settings().redis_url, decode_responses=True)
    return _redis_client


def get_search_index() -> PlaceSearchIndex:
    """설정된 백엔드의 검색 인덱스 싱글톤을 반환합니다."""
    global _search_index  # noqa: PLW0603
    if _search_index is None:
        settings = get_settings()
        delegate: PlaceSearchIndex
        if settings.search_index_backend == "memory":
            delegate = InMemoryPlaceSearchIndex(geo_enabled=not settings.degraded_geo_search)
        else:
            delegate = RedisPlaceSearchIndex(get_redis_client(), settings.search_index_name)
        _search_index = TimeoutPlaceSearchIndex(
            delegate, timeout_seconds=settings.search_index_timeout_seconds
        )
        logger.info(
            "Place search index created",
            extra={
                "backend": settings.search_index_backend,
                "degraded_geo": settings.degraded_geo_search,
            },
        )
    return _search_index


async def close_search_index() -> None:
    """검색 인덱스 리소스를 정리합니다."""
    global _redis_client, _search_index  # noqa: PLW0603
    _search_index = None
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None


async def get_place_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PlaceRepository:
    """Place Repository를 주입합니다."""
    return SqlaPlaceRepository(session)


def get_search_argument_policy(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SearchArgumentPolicy:
    """검색 파라미터 정책을 주입합니다."""
    return SearchArgumentPolicy(
        max_results=settings.max_results,
        max_distance_km=settings.max_distance_km,
    )


def get_find_nearby_places_query(
    index: Annotated[PlaceSearchIndex, Depends(get_search_index)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> FindNearbyPlacesQuery:
    """FindNearbyPlacesQuery를 주입합니다."""
    return FindNearbyPlacesQuery(index, degraded_geo=settings.degraded_geo_search)


async def get_rebuild_place_index_command(
    index: Annotated[PlaceSearchIndex, Depends(get_search_index)],
    repository: Annotated[PlaceRepository, Depends(get_place_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RebuildPlaceIndexCommand:
    """RebuildPlaceIndexCommand를 주입합니다."""
    return RebuildPlaceIndexCommand(
        search_index=index,
        place_repository=repository,
        document_builder=PlaceDocumentBuilder(degraded_geo=settings.degraded_geo_search),
    )


async def get_place_query(
    repository: Annotated[PlaceRepository, Depends(get_place_repository)],
) -> GetPlaceQuery:
    """GetPlaceQuery를 주입합니다."""
    return GetPlaceQuery(repository)


async def get_add_place_command(
    repository: Annotated[PlaceRepository, Depends(get_place_repository)],
) -> AddPlaceCommand:
    """AddPlaceCommand를 주입합니다."""
    return AddPlaceCommand(repository)


async def get_update_place_command(
    repository: Annotated[PlaceRepository, Depends(get_place_repository)],
) -> UpdatePlaceCommand:
    """UpdatePlaceCommand를 주입합니다."""
    return UpdatePlaceCommand(repository)


async def get_remove_place_command(
    repository: Annotated[PlaceRepository, Depends(get_place_repository)],
) -> RemovePlaceCommand:
    """RemovePlaceCommand를 주입합니다."""
    return RemovePlaceCommand(repository)
