"""Place Distance Assembler Service.

검색 결과 문서를 PlaceDistanceDTO로 변환하고 거리를 부여합니다.
"""

from __future__ import annotations

import logging
from typing import Iterable

from places.application.search.dto import PlaceDistanceDTO, PlaceDocument
from places.domain.services import distance_km
from places.domain.value_objects import Coordinates

logger = logging.getLogger(__name__)

METERS_IN_KILOMETER = 1000

# 좌표가 채워지지 않은 인덱스 (위경도가 0으로 반환됨) 판별 기준
COORDINATE_EPSILON = 0.0001

# 좌표가 없는 결과에 부여하는 표시용 거리 (km), 순번만큼 증가
PLACEHOLDER_BASE_DISTANCE_KM = 5


class PlaceDistanceAssembler:
    """검색 결과 조립 서비스."""

    @classmethod
    def assemble(
        cls,
        hits: Iterable[PlaceDocument],
        origin: Coordinates,
        max_distance_meters: int,
        max_results: int,
    ) -> list[PlaceDistanceDTO]:
        """검색 결과를 최대 max_results개의 PlaceDistanceDTO로 변환합니다."""
        places: list[PlaceDistanceDTO] = []
        for document in hits:
            if len(places) >= max_results:
                break
            places.append(
                PlaceDistanceDTO(
                    place_id=int(document.doc_id),
                    name=document.name,
                    address=document.address,
                    latitude=document.latitude,
                    longitude=document.longitude,
                    distance_km=cls._distance_for(
                        document, origin, max_distance_meters, position=len(places)
                    ),
                )
            )
        return places

    @staticmethod
    def _distance_for(
        document: PlaceDocument,
        origin: Coordinates,
        max_distance_meters: int,
        *,
        position: int,
    ) -> float:
        if (
            abs(document.latitude) <= COORDINATE_EPSILON
            and abs(document.longitude) <= COORDINATE_EPSILON
        ):
            return float(PLACEHOLDER_BASE_DISTANCE_KM + position)

        try:
            return distance_km(
                document.latitude,
                document.longitude,
                origin.latitude,
                origin.longitude,
            )
        except (TypeError, ValueError, OverflowError) as e:
            logger.warning(
                "Exception when calculating a distance",
                extra={"doc_id": document.doc_id, "error": str(e)},
            )
            return max_distance_meters / METERS_IN_KILOMETER
