"""Place Document Builder Service.

Place 정보를 검색 인덱스 문서로 변환합니다.
Port 의존성이 없는 순수 로직입니다.
"""

from __future__ import annotations

from places.application.search.dto import PlaceDocument
from places.application.search.dto.place_document import MARKER_VALUE
from places.domain.entities import Place
from places.domain.value_objects import Coordinates


class PlaceDocumentBuilder:
    """검색 인덱스 문서 빌더."""

    def __init__(self, degraded_geo: bool = False) -> None:
        """Initialize.

        Args:
            degraded_geo: 인덱스의 geo 검색이 동작하지 않는 환경 여부.
                True이면 fallback 쿼리용 마커 필드를 추가합니다.
        """
        self._degraded_geo = degraded_geo

    def build(
        self,
        place_id: int,
        name: str,
        address: str,
        location: Coordinates,
    ) -> PlaceDocument:
        """새 장소 문서를 생성합니다."""
        return PlaceDocument(
            doc_id=str(place_id),
            name=name,
            address=address,
            latitude=location.latitude,
            longitude=location.longitude,
            marker=MARKER_VALUE if self._degraded_geo else None,
        )

    def build_from_place(self, place: Place) -> PlaceDocument:
        """저장된 Place 엔티티로부터 문서를 생성합니다."""
        if place.id is None:
            raise ValueError("Place must be persisted before indexing")
        return self.build(place.id, place.name, place.address, place.location)
