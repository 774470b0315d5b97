"""Place Entity."""

from __future__ import annotations

from dataclasses import dataclass, replace

from places.domain.value_objects import Coordinates


@dataclass(frozen=True)
class Place:
    """체크인 가능한 장소 엔티티.

    식별자는 저장소가 생성 시 부여하므로 저장 전에는 None 입니다.
    검색 인덱스 문서는 이 엔티티로부터 재구성되는 파생 데이터입니다.
    """

    id: int | None
    name: str
    address: str
    location: Coordinates

    def with_id(self, place_id: int) -> Place:
        """식별자가 부여된 복사본을 반환합니다."""
        return replace(self, id=place_id)
