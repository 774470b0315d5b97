"""Get Place Query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from places.domain.entities import Place
from places.domain.exceptions import PlaceNotFoundError

if TYPE_CHECKING:
    from places.application.catalog.ports import PlaceRepository


class GetPlaceQuery:
    """장소 단건 조회 Query."""

    def __init__(self, place_repository: "PlaceRepository") -> None:
        self._repository = place_repository

    async def execute(self, place_id: int) -> Place:
        """ID로 장소를 조회합니다.

        Raises:
            PlaceNotFoundError: 장소가 없을 때
        """
        place = await self._repository.find_by_id(place_id)
        if place is None:
            raise PlaceNotFoundError(place_id)
        return place
