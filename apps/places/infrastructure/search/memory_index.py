"""In-Memory Place Search Index Implementation.

프로세스 로컬 인덱스. 로컬 개발과 테스트에서 사용합니다.
geo_enabled=False 이면 geo 검색이 동작하지 않는 플랫폼을 흉내 냅니다:
거리 쿼리는 항상 빈 결과를, 조회된 문서의 좌표는 0으로 반환합니다.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from places.application.search.dto import PlaceDocument, SearchQuery
from places.application.search.ports import PlaceSearchIndex
from places.domain.services import distance_km

METERS_IN_KILOMETER = 1000


class InMemoryPlaceSearchIndex(PlaceSearchIndex):
    """인메모리 장소 검색 인덱스."""

    def __init__(self, geo_enabled: bool = True) -> None:
        self._documents: dict[str, PlaceDocument] = {}
        self._geo_enabled = geo_enabled

    def __len__(self) -> int:
        return len(self._documents)

    async def put(self, document: PlaceDocument) -> None:
        self._documents[document.doc_id] = document

    async def get_ids(self, limit: int) -> list[str]:
        return list(self._documents)[:limit]

    async def delete(self, doc_ids: Sequence[str]) -> None:
        for doc_id in doc_ids:
            self._documents.pop(doc_id, None)

    async def search(self, query: SearchQuery) -> list[PlaceDocument]:
        documents = list(self._documents.values())

        if query.marker_field:
            documents = [d for d in documents if d.has_marker]

        if query.is_distance_query:
            if not self._geo_enabled:
                return []
            documents = self._within_distance(documents, query)

        if not self._geo_enabled:
            documents = [replace(d, latitude=0.0, longitude=0.0) for d in documents]

        if query.limit is not None:
            documents = documents[: query.limit]
        return documents

    @staticmethod
    def _within_distance(
        documents: list[PlaceDocument], query: SearchQuery
    ) -> list[PlaceDocument]:
        assert query.distance is not None and query.max_distance_meters is not None
        origin = query.distance.origin
        ranked: list[tuple[float, PlaceDocument]] = []
        for document in documents:
            meters = (
                distance_km(
                    origin.latitude, origin.longitude, document.latitude, document.longitude
                )
                * METERS_IN_KILOMETER
            )
            if meters < query.max_distance_meters:
                ranked.append((meters, document))

        ascending = query.sort.ascending if query.sort else True
        ranked.sort(key=lambda item: item[0], reverse=not ascending)
        return [document for _, document in ranked]
