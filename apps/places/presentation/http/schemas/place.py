"""Place HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class NearbyPlaceEntry(BaseModel):
    """주변 장소 응답 스키마."""

    place_id: int
    name: str
    address: str
    latitude: float
    longitude: float
    distance_km: float

    model_config = {"from_attributes": True}


class PlaceRequest(BaseModel):
    """장소 생성/수정 요청 스키마."""

    name: str = Field(..., min_length=1, max_length=200)
    address: str = Field(..., max_length=500)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class PlaceResponse(BaseModel):
    """장소 응답 스키마."""

    id: int
    name: str
    address: str
    latitude: float
    longitude: float
