"""Place Distance DTO."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlaceDistanceDTO:
    """거리 정보가 포함된 장소 응답 DTO."""

    place_id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance_km: float
