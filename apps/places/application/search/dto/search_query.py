"""Search Query DTOs.

인덱스 어댑터가 해석하는 구조화된 검색 쿼리입니다.
str()은 로그용 쿼리 문자열을 반환합니다.
"""

from __future__ import annotations

from dataclasses import dataclass

from places.application.search.dto.place_document import FIELD_LOCATION, FIELD_MARKER
from places.domain.value_objects import Coordinates


@dataclass(frozen=True)
class GeoDistanceExpression:
    """인덱스 좌표 필드와 기준 좌표 사이의 거리(m) 표현식."""

    origin: Coordinates
    field: str = FIELD_LOCATION

    def __str__(self) -> str:
        return (
            f"distance({self.field}, "
            f"geopoint({self.origin.latitude}, {self.origin.longitude}))"
        )


@dataclass(frozen=True)
class SortExpression:
    """정렬 표현식.

    거리를 계산할 수 없는 문서에는 default_value가 사용됩니다.
    """

    expression: GeoDistanceExpression
    default_value: float
    ascending: bool = True


@dataclass(frozen=True)
class SearchQuery:
    """필터 + 정렬 + 제한 쿼리.

    distance/max_distance_meters가 있으면 거리 < max_distance_meters 필터,
    marker_field가 있으면 marker_field > 0 필터를 뜻합니다.
    """

    distance: GeoDistanceExpression | None = None
    max_distance_meters: float | None = None
    marker_field: str | None = None
    sort: SortExpression | None = None
    limit: int | None = None

    @classmethod
    def all_marked(cls, field: str = FIELD_MARKER) -> SearchQuery:
        """마커 필드가 있는 모든 문서를 선택하는 쿼리."""
        return cls(marker_field=field)

    @property
    def is_distance_query(self) -> bool:
        return self.distance is not None and self.max_distance_meters is not None

    def __str__(self) -> str:
        clauses: list[str] = []
        if self.is_distance_query:
            clauses.append(f"{self.distance} < {self.max_distance_meters:g}")
        if self.marker_field:
            clauses.append(f"{self.marker_field} > 0")
        return " AND ".join(clauses)
