"""Rebuild Place Index Command.

검색 인덱스를 비우고 저장소의 모든 장소로 다시 채웁니다.
증분 동기화는 하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from places.application.common.exceptions import (
    SearchIndexPermanentError,
    SearchIndexTransientError,
)
from places.application.search.services import PlaceDocumentBuilder

if TYPE_CHECKING:
    from places.application.catalog.ports import PlaceRepository
    from places.application.search.ports import PlaceSearchIndex

logger = logging.getLogger(__name__)

# 인덱스가 한 번에 반환하는 문서 ID 수
DELETE_BATCH_SIZE = 1000


class RebuildPlaceIndexCommand:
    """장소 검색 인덱스 재구축 Command.

    Workflow:
        1. 인덱스의 모든 문서 삭제 (배치 단위 반복)
        2. 저장소의 전체 장소 조회 (Port)
        3. 장소별 문서 생성 후 삽입
    """

    def __init__(
        self,
        search_index: "PlaceSearchIndex",
        place_repository: "PlaceRepository",
        document_builder: PlaceDocumentBuilder,
        batch_size: int = DELETE_BATCH_SIZE,
    ) -> None:
        self._index = search_index
        self._repository = place_repository
        self._builder = document_builder
        self._batch_size = batch_size

    async def execute(self) -> bool:
        """인덱스를 재구축합니다.

        삭제 단계의 인덱스 오류는 호출자에게 전파됩니다.
        삽입 단계에서 실패하면 즉시 중단하고 False를 반환하며,
        이전 인덱스 상태는 복구되지 않습니다.

        Returns:
            성공 여부
        """
        removed = await self._clear_index()
        places = await self._repository.list_all()
        logger.info(
            "Rebuilding place index",
            extra={"removed_count": removed, "places_count": len(places)},
        )

        for place in places:
            try:
                document = self._builder.build_from_place(place)
                await self._index.put(document)
            except SearchIndexTransientError as e:
                logger.warning(
                    "Transient error while indexing place, rebuild aborted",
                    extra={"place_id": place.id, "error": e.message},
                )
                return False
            except (SearchIndexPermanentError, ValueError) as e:
                logger.error(
                    "Failed to index place, rebuild aborted",
                    extra={"place_id": place.id, "error": str(e)},
                )
                return False

        logger.info("Place index rebuilt", extra={"indexed_count": len(places)})
        return True

    async def _clear_index(self) -> int:
        """인덱스가 빌 때까지 ID 배치를 조회해 삭제합니다."""
        removed = 0
        while True:
            doc_ids = await self._index.get_ids(limit=self._batch_size)
            if not doc_ids:
                return removed
            await self._index.delete(doc_ids)
            removed += len(doc_ids)
