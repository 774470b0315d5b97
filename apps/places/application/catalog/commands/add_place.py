"""Add Place Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from places.application.catalog.dto import PlaceInput
from places.domain.entities import Place

if TYPE_CHECKING:
    from places.application.catalog.ports import PlaceRepository

logger = logging.getLogger(__name__)


class AddPlaceCommand:
    """장소 등록 Command.

    검색 인덱스는 갱신하지 않습니다. 인덱스 재구축으로 반영됩니다.
    """

    def __init__(self, place_repository: "PlaceRepository") -> None:
        self._repository = place_repository

    async def execute(self, data: PlaceInput) -> Place:
        place = await self._repository.add(data.to_entity())
        logger.info("Place created", extra={"place_id": place.id})
        return place
