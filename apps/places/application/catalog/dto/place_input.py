"""Place Input DTO."""

from __future__ import annotations

from dataclasses import dataclass

from places.domain.entities import Place
from places.domain.value_objects import Coordinates


@dataclass(frozen=True)
class PlaceInput:
    """장소 생성/수정 입력 DTO."""

    name: str
    address: str
    latitude: float
    longitude: float

    def to_entity(self, place_id: int | None = None) -> Place:
        return Place(
            id=place_id,
            name=self.name,
            address=self.address,
            location=Coordinates(latitude=self.latitude, longitude=self.longitude),
        )
