"""Proximity Query Builder Service."""

from __future__ import annotations

from places.application.search.dto import (
    GeoDistanceExpression,
    SearchQuery,
    SortExpression,
)
from places.domain.value_objects import Coordinates


class ProximityQueryBuilder:
    """거리 기반 검색 쿼리 빌더."""

    @staticmethod
    def build(origin: Coordinates, max_distance_meters: int, max_results: int) -> SearchQuery:
        """기준 좌표로부터 max_distance_meters 미만인 문서를 거리순으로 조회하는 쿼리.

        거리를 계산할 수 없는 문서는 max_distance_meters + 1 로 정렬되어
        맨 뒤에 위치하고, 미만 조건 필터에 의해 제외됩니다.
        """
        expression = GeoDistanceExpression(origin=origin)
        return SearchQuery(
            distance=expression,
            max_distance_meters=max_distance_meters,
            sort=SortExpression(
                expression=expression,
                default_value=max_distance_meters + 1,
                ascending=True,
            ),
            limit=max_results,
        )

    @staticmethod
    def marker_query() -> SearchQuery:
        """geo 검색이 동작하지 않는 환경에서 쓰는 전체 문서 쿼리."""
        return SearchQuery.all_marked()
