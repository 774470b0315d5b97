"""Place Repository Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from places.domain.entities import Place


class PlaceRepository(ABC):
    """장소 저장소 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def list_all(self) -> Sequence[Place]:
        """저장된 모든 장소를 반환합니다."""
        ...

    @abstractmethod
    async def find_by_id(self, place_id: int) -> Place | None:
        """ID로 장소를 조회합니다.

        Args:
            place_id: 장소 ID

        Returns:
            Place 또는 None (미발견 시)
        """
        ...

    @abstractmethod
    async def add(self, place: Place) -> Place:
        """새 장소를 저장하고 ID가 부여된 엔티티를 반환합니다."""
        ...

    @abstractmethod
    async def update(self, place: Place) -> Place:
        """기존 장소를 덮어씁니다."""
        ...

    @abstractmethod
    async def delete(self, place_id: int) -> None:
        """장소를 삭제합니다."""
        ...
