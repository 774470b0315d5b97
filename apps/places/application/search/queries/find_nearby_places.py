"""Find Nearby Places Query.

주변 장소를 거리순으로 조회하는 Query(지휘자)입니다.
Port를 통해 검색 인덱스와 통신하고, Service에 순수 로직을 위임합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from places.application.common.exceptions import SearchExecutionError, SearchIndexError
from places.application.search.dto import (
    NearbySearchRequest,
    PlaceDistanceDTO,
    PlaceDocument,
    SearchQuery,
)
from places.application.search.services import PlaceDistanceAssembler, ProximityQueryBuilder
from places.domain.value_objects import Coordinates

if TYPE_CHECKING:
    from places.application.search.ports import PlaceSearchIndex

logger = logging.getLogger(__name__)


class FindNearbyPlacesQuery:
    """주변 장소 조회 Query.

    Workflow:
        1. 거리 필터/정렬 쿼리 구성 (Service)
        2. 검색 인덱스 조회 (Port)
        3. 결과가 없고 geo 검색이 동작하지 않는 환경이면 마커 쿼리로 재조회
        4. 결과 조립 및 거리 부여 (Service)
    """

    def __init__(self, search_index: "PlaceSearchIndex", degraded_geo: bool = False) -> None:
        """Initialize.

        Args:
            search_index: 장소 검색 인덱스 Port
            degraded_geo: 인덱스의 geo 검색이 동작하지 않는 환경 여부
        """
        self._index = search_index
        self._degraded_geo = degraded_geo

    async def execute(self, request: NearbySearchRequest) -> list[PlaceDistanceDTO]:
        """주변 장소를 조회합니다.

        Args:
            request: 검증된 검색 요청 DTO

        Returns:
            거리 오름차순 PlaceDistanceDTO 목록 (최대 request.max_results개)

        Raises:
            SearchExecutionError: 검색 인덱스 호출 실패
        """
        origin = Coordinates(latitude=request.latitude, longitude=request.longitude)
        query = ProximityQueryBuilder.build(
            origin, request.max_distance_meters, request.max_results
        )

        logger.info(
            "Place search started",
            extra={
                "lat": request.latitude,
                "lon": request.longitude,
                "radius_m": request.max_distance_meters,
                "limit": request.max_results,
            },
        )

        hits = await self._run(query)
        if not hits and self._degraded_geo:
            logger.info("No geo results, falling back to marker query")
            hits = await self._run(ProximityQueryBuilder.marker_query())

        places = PlaceDistanceAssembler.assemble(
            hits,
            origin=origin,
            max_distance_meters=request.max_distance_meters,
            max_results=request.max_results,
        )

        logger.info("Place search completed", extra={"results_count": len(places)})
        return places

    async def _run(self, query: SearchQuery) -> list[PlaceDocument]:
        try:
            return await self._index.search(query)
        except SearchIndexError as e:
            logger.error("Place search failed", extra={"query": str(query), "error": e.message})
            raise SearchExecutionError(f"Place search failed: {e.message}") from e
