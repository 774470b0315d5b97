"""Search Argument Policy Service.

요청 파라미터를 파싱/검증하고 상한값으로 제한합니다.
"""

from __future__ import annotations

import math

from places.application.common.exceptions import InvalidSearchArgumentError
from places.application.search.dto import NearbySearchRequest
from places.domain.value_objects import Coordinates

METERS_IN_KILOMETER = 1000
DEFAULT_MAX_RESULTS = 100
DEFAULT_MAX_DISTANCE_KM = 100


class SearchArgumentPolicy:
    """주변 검색 파라미터 정책."""

    def __init__(
        self,
        max_results: int = DEFAULT_MAX_RESULTS,
        max_distance_km: int = DEFAULT_MAX_DISTANCE_KM,
    ) -> None:
        self._max_results = max_results
        self._max_distance_km = max_distance_km

    def to_request(
        self,
        latitude: str,
        longitude: str,
        distance_km: int,
        count: int,
    ) -> NearbySearchRequest:
        """원시 파라미터를 NearbySearchRequest로 변환합니다.

        Raises:
            InvalidSearchArgumentError: 파싱 불가 또는 범위를 벗어난 값
        """
        origin = self.parse_location(latitude, longitude)
        return NearbySearchRequest(
            latitude=origin.latitude,
            longitude=origin.longitude,
            max_distance_meters=METERS_IN_KILOMETER * self.clamp_distance_km(distance_km),
            max_results=self.clamp_count(count),
        )

    @classmethod
    def parse_location(cls, latitude: str, longitude: str) -> Coordinates:
        lat = cls._parse_degrees(latitude, "latitude")
        lon = cls._parse_degrees(longitude, "longitude")
        try:
            return Coordinates(latitude=lat, longitude=lon)
        except ValueError:
            raise InvalidSearchArgumentError(
                "latitude,longitude",
                "Invalid pair of 'latitude' and 'longitude' arguments",
            ) from None

    def clamp_count(self, count: int) -> int:
        if count > self._max_results:
            return self._max_results
        if count <= 0:
            raise InvalidSearchArgumentError("count")
        return count

    def clamp_distance_km(self, distance_km: int) -> int:
        if distance_km > self._max_distance_km:
            return self._max_distance_km
        if distance_km < 0:
            raise InvalidSearchArgumentError("distanceInKm")
        return distance_km

    @staticmethod
    def _parse_degrees(raw: str, argument: str) -> float:
        try:
            value = float(raw.strip())
        except (AttributeError, ValueError):
            raise InvalidSearchArgumentError(argument) from None
        # float()은 "nan", "inf"도 허용함
        if not math.isfinite(value):
            raise InvalidSearchArgumentError(argument)
        return value
