"""Redis Place Search Index Implementation.

Redis GEO Sorted Set + Hash를 사용한 장소 검색 인덱스.

데이터 구조:
- {index}:ids → Sorted Set (전체 문서 ID, score=0)
- {index}:geo → GEO Sorted Set (member=doc_id, 위도 ±85.05112878 이내 문서만)
- {index}:doc:{doc_id} → Hash (문서 필드)

Redis GEO는 위도 ±85.05112878 밖의 좌표를 거부하므로 해당 문서는
Hash와 ID 목록에만 저장되어 마커 쿼리로만 조회됩니다.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Sequence

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError
from redis.exceptions import TimeoutError as RedisTimeoutError

from places.application.common.exceptions import (
    SearchIndexPermanentError,
    SearchIndexTransientError,
)
from places.application.search.dto import PlaceDocument, SearchQuery
from places.application.search.dto.place_document import (
    FIELD_ADDRESS,
    FIELD_ID,
    FIELD_MARKER,
    FIELD_NAME,
)
from places.application.search.ports import PlaceSearchIndex

logger = logging.getLogger(__name__)

FIELD_LATITUDE = "latitude"
FIELD_LONGITUDE = "longitude"

# Redis GEO (Web Mercator)가 허용하는 위도 한계
GEO_MAX_LATITUDE = 85.05112878


class RedisPlaceSearchIndex(PlaceSearchIndex):
    """Redis 장소 검색 인덱스.

    GEOSEARCH로 반경 내 문서를 거리순으로 조회합니다.
    """

    def __init__(self, redis: Redis, index_name: str = "Places") -> None:
        """Initialize.

        Args:
            redis: Redis 클라이언트 (decode_responses=True)
            index_name: 키 네임스페이스
        """
        self._redis = redis
        self._ids_key = f"{index_name}:ids"
        self._geo_key = f"{index_name}:geo"
        self._doc_key_prefix = f"{index_name}:doc:"

    def _doc_key(self, doc_id: str) -> str:
        return f"{self._doc_key_prefix}{doc_id}"

    @staticmethod
    def _is_geo_indexable(latitude: float) -> bool:
        return abs(latitude) <= GEO_MAX_LATITUDE

    async def put(self, document: PlaceDocument) -> None:
        """문서를 저장합니다. 같은 ID의 기존 문서는 통째로 교체됩니다."""
        doc_key = self._doc_key(document.doc_id)
        pipe = self._redis.pipeline(transaction=True)
        pipe.delete(doc_key)
        pipe.hset(doc_key, mapping=self._serialize(document))
        pipe.zadd(self._ids_key, {document.doc_id: 0})
        if self._is_geo_indexable(document.latitude):
            pipe.geoadd(self._geo_key, (document.longitude, document.latitude, document.doc_id))
        else:
            pipe.zrem(self._geo_key, document.doc_id)
        with self._index_errors("put"):
            await pipe.execute()

    async def get_ids(self, limit: int) -> list[str]:
        with self._index_errors("get_ids"):
            return list(await self._redis.zrange(self._ids_key, 0, limit - 1))

    async def delete(self, doc_ids: Sequence[str]) -> None:
        if not doc_ids:
            return
        pipe = self._redis.pipeline(transaction=True)
        pipe.delete(*[self._doc_key(doc_id) for doc_id in doc_ids])
        pipe.zrem(self._ids_key, *doc_ids)
        pipe.zrem(self._geo_key, *doc_ids)
        with self._index_errors("delete"):
            await pipe.execute()

    async def search(self, query: SearchQuery) -> list[PlaceDocument]:
        with self._index_errors("search"):
            if query.is_distance_query:
                doc_ids = await self._search_within_distance(query)
            else:
                doc_ids = list(await self._redis.zrange(self._ids_key, 0, -1))
            documents = await self._load(doc_ids)

        if query.marker_field:
            documents = [d for d in documents if d.has_marker]
        if query.limit is not None:
            documents = documents[: query.limit]
        return documents

    async def _search_within_distance(self, query: SearchQuery) -> list[str]:
        """반경 내 문서 ID를 거리순으로 조회합니다 (거리 < 반경)."""
        assert query.distance is not None and query.max_distance_meters is not None
        if query.max_distance_meters <= 0:
            return []
        origin = query.distance.origin
        if not self._is_geo_indexable(origin.latitude):
            logger.info(
                "Search origin outside geo index range",
                extra={"lat": origin.latitude, "lon": origin.longitude},
            )
            return []

        ascending = query.sort.ascending if query.sort else True
        rows = await self._redis.geosearch(
            self._geo_key,
            longitude=origin.longitude,
            latitude=origin.latitude,
            radius=query.max_distance_meters,
            unit="m",
            sort="ASC" if ascending else "DESC",
            count=query.limit,
            withdist=True,
        )
        # GEOSEARCH는 반경 경계를 포함하므로 미만 조건을 다시 적용
        return [member for member, distance in rows if distance < query.max_distance_meters]

    async def _load(self, doc_ids: Sequence[str]) -> list[PlaceDocument]:
        """문서 Hash를 Pipeline으로 일괄 조회합니다."""
        if not doc_ids:
            return []
        pipe = self._redis.pipeline()
        for doc_id in doc_ids:
            pipe.hgetall(self._doc_key(doc_id))
        results = await pipe.execute()

        documents: list[PlaceDocument] = []
        for data in results:
            if data:
                documents.append(self._deserialize(data))
        return documents

    @staticmethod
    def _serialize(document: PlaceDocument) -> dict[str, str]:
        data = {
            FIELD_ID: document.doc_id,
            FIELD_NAME: document.name,
            FIELD_ADDRESS: document.address,
            FIELD_LATITUDE: str(document.latitude),
            FIELD_LONGITUDE: str(document.longitude),
        }
        if document.marker is not None:
            data[FIELD_MARKER] = str(document.marker)
        return data

    @staticmethod
    def _deserialize(data: dict[str, str]) -> PlaceDocument:
        marker = data.get(FIELD_MARKER)
        return PlaceDocument(
            doc_id=data[FIELD_ID],
            name=data.get(FIELD_NAME, ""),
            address=data.get(FIELD_ADDRESS, ""),
            latitude=float(data.get(FIELD_LATITUDE, 0.0)),
            longitude=float(data.get(FIELD_LONGITUDE, 0.0)),
            marker=int(marker) if marker is not None else None,
        )

    @staticmethod
    @contextmanager
    def _index_errors(operation: str) -> Iterator[None]:
        """Redis 예외를 인덱스 예외로 변환합니다."""
        try:
            yield
        except (RedisConnectionError, RedisTimeoutError) as e:
            logger.warning(
                "Redis search index unavailable",
                extra={"operation": operation, "error": str(e)},
            )
            raise SearchIndexTransientError(f"Search index {operation} failed: {e}") from e
        except RedisError as e:
            logger.error(
                "Redis search index error",
                extra={"operation": operation, "error": str(e)},
            )
            raise SearchIndexPermanentError(f"Search index {operation} failed: {e}") from e
