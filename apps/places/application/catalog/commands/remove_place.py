"""Remove Place Command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from places.application.catalog.ports import PlaceRepository

logger = logging.getLogger(__name__)


class RemovePlaceCommand:
    """장소 삭제 Command. 없는 장소는 건너뜁니다."""

    def __init__(self, place_repository: "PlaceRepository") -> None:
        self._repository = place_repository

    async def execute(self, place_id: int) -> bool:
        """장소를 삭제합니다.

        Returns:
            실제로 삭제했으면 True, 장소가 없어 건너뛰었으면 False
        """
        if await self._repository.find_by_id(place_id) is None:
            logger.info("Place not found, skipping deletion", extra={"place_id": place_id})
            return False

        await self._repository.delete(place_id)
        logger.info("Place deleted", extra={"place_id": place_id})
        return True
