"""Timeout Place Search Index Decorator.

다른 PlaceSearchIndex 구현을 감싸 호출마다 타임아웃을 적용합니다.
타임아웃은 일시적 장애(SearchIndexTransientError)로 분류됩니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Sequence, TypeVar

from places.application.common.exceptions import SearchIndexTransientError
from places.application.search.dto import PlaceDocument, SearchQuery
from places.application.search.ports import PlaceSearchIndex

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TIMEOUT_SECONDS = 5.0


class TimeoutPlaceSearchIndex(PlaceSearchIndex):
    """호출별 타임아웃 데코레이터."""

    def __init__(
        self, delegate: PlaceSearchIndex, timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    ) -> None:
        """Initialize.

        Args:
            delegate: 실제 인덱스 구현
            timeout_seconds: 호출당 타임아웃 (초)
        """
        self._delegate = delegate
        self._timeout = timeout_seconds

    async def put(self, document: PlaceDocument) -> None:
        await self._bounded("put", self._delegate.put(document))

    async def get_ids(self, limit: int) -> list[str]:
        return await self._bounded("get_ids", self._delegate.get_ids(limit))

    async def delete(self, doc_ids: Sequence[str]) -> None:
        await self._bounded("delete", self._delegate.delete(doc_ids))

    async def search(self, query: SearchQuery) -> list[PlaceDocument]:
        return await self._bounded("search", self._delegate.search(query))

    async def _bounded(self, operation: str, awaitable: Awaitable[T]) -> T:
        try:
            return await asyncio.wait_for(awaitable, timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "Search index call timed out",
                extra={"operation": operation, "timeout": self._timeout},
            )
            raise SearchIndexTransientError(
                f"Search index {operation} timed out after {self._timeout}s"
            ) from None
