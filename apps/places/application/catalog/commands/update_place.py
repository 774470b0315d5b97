"""Update Place Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from places.application.catalog.dto import PlaceInput
from places.domain.entities import Place
from places.domain.exceptions import PlaceNotFoundError

if TYPE_CHECKING:
    from places.application.catalog.ports import PlaceRepository

logger = logging.getLogger(__name__)


class UpdatePlaceCommand:
    """장소 수정 Command."""

    def __init__(self, place_repository: "PlaceRepository") -> None:
        self._repository = place_repository

    async def execute(self, place_id: int, data: PlaceInput) -> Place:
        """장소 정보를 덮어씁니다.

        Raises:
            PlaceNotFoundError: 장소가 없을 때
        """
        if await self._repository.find_by_id(place_id) is None:
            raise PlaceNotFoundError(place_id)

        place = await self._repository.update(data.to_entity(place_id))
        logger.info("Place updated", extra={"place_id": place_id})
        return place
