"""Indexed Place Document."""

from __future__ import annotations

from dataclasses import dataclass

FIELD_ID = "id"
FIELD_NAME = "name"
FIELD_ADDRESS = "address"
FIELD_LOCATION = "place_location"
# geo 검색이 동작하지 않는 환경에서만 채워지는 상수 필드
FIELD_MARKER = "value"

MARKER_VALUE = 1


@dataclass(frozen=True)
class PlaceDocument:
    """검색 인덱스에 저장되는 비정규화 장소 문서.

    저장소의 Place 엔티티로부터 재구성되는 파생 데이터입니다.
    """

    doc_id: str
    name: str
    address: str
    latitude: float
    longitude: float
    marker: int | None = None

    @property
    def has_marker(self) -> bool:
        return self.marker is not None and self.marker > 0
