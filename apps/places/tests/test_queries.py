"""Application Queries 단위 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from places.application.catalog import GetPlaceQuery
from places.application.common.exceptions import (
    SearchExecutionError,
    SearchIndexPermanentError,
    SearchIndexTransientError,
)
from places.application.search import (
    FindNearbyPlacesQuery,
    NearbySearchRequest,
    PlaceDocumentBuilder,
)
from places.application.search.dto import PlaceDocument
from places.domain.entities import Place
from places.domain.exceptions import PlaceNotFoundError
from places.infrastructure.search import InMemoryPlaceSearchIndex

pytestmark = pytest.mark.asyncio


def _request(max_distance_meters: int = 10_000, max_results: int = 3) -> NearbySearchRequest:
    return NearbySearchRequest(
        latitude=37.4221,
        longitude=-122.0841,
        max_distance_meters=max_distance_meters,
        max_results=max_results,
    )


async def _indexed(places: list[Place], *, degraded: bool = False) -> InMemoryPlaceSearchIndex:
    index = InMemoryPlaceSearchIndex(geo_enabled=not degraded)
    builder = PlaceDocumentBuilder(degraded_geo=degraded)
    for place in places:
        await index.put(builder.build_from_place(place))
    return index


class TestFindNearbyPlacesQuery:
    """FindNearbyPlacesQuery 테스트."""

    async def test_returns_nearest_first_up_to_max_results(
        self, nearby_places: list[Place]
    ) -> None:
        """반경 내 5개 중 가까운 3개를 거리순으로 반환."""
        index = await _indexed(nearby_places)

        result = await FindNearbyPlacesQuery(index).execute(_request(max_results=3))

        assert [p.place_id for p in result] == [1, 2, 3]
        distances = [p.distance_km for p in result]
        assert distances == sorted(distances)
        assert all(d < 10 for d in distances)

    async def test_radius_excludes_far_places(self, nearby_places: list[Place]) -> None:
        """반경 밖 장소는 제외 (약 1.1km 간격, 반경 2.5km)."""
        index = await _indexed(nearby_places)

        result = await FindNearbyPlacesQuery(index).execute(
            _request(max_distance_meters=2500, max_results=10)
        )

        assert [p.place_id for p in result] == [1, 2]

    async def test_zero_radius_returns_empty(self, nearby_places: list[Place]) -> None:
        index = await _indexed(nearby_places)
        result = await FindNearbyPlacesQuery(index).execute(_request(max_distance_meters=0))
        assert result == []

    async def test_empty_index_returns_empty(self) -> None:
        result = await FindNearbyPlacesQuery(InMemoryPlaceSearchIndex()).execute(_request())
        assert result == []

    async def test_builds_distance_query(self, mock_search_index: AsyncMock) -> None:
        """쿼리 구성: 거리 < 반경, 정렬 기본값 반경+1, limit."""
        await FindNearbyPlacesQuery(mock_search_index).execute(_request(10_000, 3))

        query = mock_search_index.search.call_args.args[0]
        assert query.max_distance_meters == 10_000
        assert query.sort.default_value == 10_001
        assert query.limit == 3

    async def test_no_fallback_outside_degraded_environment(
        self, mock_search_index: AsyncMock
    ) -> None:
        """일반 환경에서 빈 결과는 그대로 빈 결과."""
        result = await FindNearbyPlacesQuery(mock_search_index).execute(_request())

        assert result == []
        mock_search_index.search.assert_called_once()

    async def test_fallback_to_marker_query_in_degraded_environment(
        self,
        mock_search_index: AsyncMock,
        unlocated_documents: list[PlaceDocument],
    ) -> None:
        """geo 결과가 없으면 마커 쿼리로 재조회, 거리는 5, 6, 7."""
        mock_search_index.search.side_effect = [[], unlocated_documents]

        result = await FindNearbyPlacesQuery(mock_search_index, degraded_geo=True).execute(
            _request(max_results=3)
        )

        assert [p.distance_km for p in result] == [5.0, 6.0, 7.0]
        assert mock_search_index.search.call_count == 2
        fallback_query = mock_search_index.search.call_args_list[1].args[0]
        assert fallback_query.marker_field == "value"
        assert not fallback_query.is_distance_query

    async def test_fallback_end_to_end_with_degraded_index(
        self, nearby_places: list[Place]
    ) -> None:
        """geo 검색 불가 인덱스에서도 마커 문서를 반환."""
        index = await _indexed(nearby_places, degraded=True)

        result = await FindNearbyPlacesQuery(index, degraded_geo=True).execute(
            _request(max_results=3)
        )

        assert len(result) == 3
        assert [p.distance_km for p in result] == [5.0, 6.0, 7.0]

    @pytest.mark.parametrize(
        "error",
        [SearchIndexTransientError("timeout"), SearchIndexPermanentError("bad query")],
    )
    async def test_index_error_raises_execution_error(
        self, mock_search_index: AsyncMock, error: Exception
    ) -> None:
        """인덱스 오류는 SearchExecutionError로 전파 (빈 결과와 구분)."""
        mock_search_index.search.side_effect = error

        with pytest.raises(SearchExecutionError) as exc_info:
            await FindNearbyPlacesQuery(mock_search_index).execute(_request())

        assert exc_info.value.__cause__ is error

    async def test_fallback_error_raises_execution_error(
        self, mock_search_index: AsyncMock
    ) -> None:
        mock_search_index.search.side_effect = [[], SearchIndexTransientError("down")]

        with pytest.raises(SearchExecutionError):
            await FindNearbyPlacesQuery(mock_search_index, degraded_geo=True).execute(
                _request()
            )


class TestGetPlaceQuery:
    """GetPlaceQuery 테스트."""

    async def test_returns_place(
        self, mock_place_repository: AsyncMock, sample_place: Place
    ) -> None:
        mock_place_repository.find_by_id.return_value = sample_place

        result = await GetPlaceQuery(mock_place_repository).execute(1)

        assert result == sample_place
        mock_place_repository.find_by_id.assert_called_once_with(1)

    async def test_missing_place_raises(self, mock_place_repository: AsyncMock) -> None:
        with pytest.raises(PlaceNotFoundError) as exc_info:
            await GetPlaceQuery(mock_place_repository).execute(99)
        assert exc_info.value.message == "Place 99 not found"
