"""Place Search Index Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from places.application.search.dto import PlaceDocument, SearchQuery


class PlaceSearchIndex(ABC):
    """장소 검색 인덱스 포트.

    Infrastructure Layer에서 구현합니다.
    구현체는 실패를 SearchIndexTransientError / SearchIndexPermanentError로 변환해야 합니다.
    """

    @abstractmethod
    async def put(self, document: PlaceDocument) -> None:
        """문서를 삽입하거나 같은 ID의 문서를 교체합니다."""
        ...

    @abstractmethod
    async def get_ids(self, limit: int) -> list[str]:
        """인덱스에 있는 문서 ID를 최대 limit개 반환합니다."""
        ...

    @abstractmethod
    async def delete(self, doc_ids: Sequence[str]) -> None:
        """ID로 문서를 삭제합니다. 없는 ID는 무시합니다."""
        ...

    @abstractmethod
    async def search(self, query: SearchQuery) -> list[PlaceDocument]:
        """쿼리를 실행하고 순위가 매겨진 문서 목록을 반환합니다.

        Args:
            query: 필터 + 정렬 + 제한 쿼리

        Returns:
            정렬된 PlaceDocument 목록 (결과가 없으면 빈 리스트)
        """
        ...
