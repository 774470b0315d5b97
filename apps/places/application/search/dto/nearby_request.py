"""Nearby Search Request DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NearbySearchRequest:
    """주변 장소 검색 요청 DTO.

    SearchArgumentPolicy를 거쳐 검증/제한된 값만 담습니다.
    """

    latitude: float
    longitude: float
    max_distance_meters: int
    max_results: int
