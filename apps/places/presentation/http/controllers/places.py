"""Places Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from places.application.catalog import (
    AddPlaceCommand,
    GetPlaceQuery,
    PlaceInput,
    RemovePlaceCommand,
    UpdatePlaceCommand,
)
from places.application.search import FindNearbyPlacesQuery, SearchArgumentPolicy
from places.domain.entities import Place
from places.presentation.http.schemas import NearbyPlaceEntry, PlaceRequest, PlaceResponse
from places.setup.dependencies import (
    get_add_place_command,
    get_find_nearby_places_query,
    get_place_query,
    get_remove_place_command,
    get_search_argument_policy,
    get_update_place_command,
)
from places.setup.security import (
    TokenPayload,
    access_token_dependency,
    admin_token_dependency,
)

router = APIRouter(prefix="/places", tags=["places"])


@router.get("/nearby", response_model=list[NearbyPlaceEntry], summary="List nearby places")
async def nearby(
    query: Annotated[FindNearbyPlacesQuery, Depends(get_find_nearby_places_query)],
    policy: Annotated[SearchArgumentPolicy, Depends(get_search_argument_policy)],
    _: Annotated[TokenPayload, Depends(access_token_dependency)],
    latitude: str = Query(..., description="위도 (decimal degrees)"),
    longitude: str = Query(..., description="경도 (decimal degrees)"),
    distance_km: int = Query(..., description="검색 반경 (km, 상한 초과 시 상한으로 제한)"),
    count: int = Query(..., description="최대 결과 수 (상한 초과 시 상한으로 제한)"),
) -> list[NearbyPlaceEntry]:
    """가까운 장소를 거리순으로 조회합니다."""
    request = policy.to_request(latitude, longitude, distance_km, count)
    places = await query.execute(request)
    return [NearbyPlaceEntry.model_validate(p) for p in places]


@router.get("/{place_id}", response_model=PlaceResponse, summary="Get place")
async def get_place(
    place_id: int,
    query: Annotated[GetPlaceQuery, Depends(get_place_query)],
    _: Annotated[TokenPayload, Depends(admin_token_dependency)],
) -> PlaceResponse:
    """장소를 조회합니다 (관리자 전용)."""
    return _to_response(await query.execute(place_id))


@router.post(
    "",
    response_model=PlaceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Insert place",
)
async def insert_place(
    body: PlaceRequest,
    command: Annotated[AddPlaceCommand, Depends(get_add_place_command)],
    _: Annotated[TokenPayload, Depends(admin_token_dependency)],
) -> PlaceResponse:
    """장소를 등록합니다 (관리자 전용)."""
    return _to_response(await command.execute(_to_input(body)))


@router.put("/{place_id}", response_model=PlaceResponse, summary="Update place")
async def update_place(
    place_id: int,
    body: PlaceRequest,
    command: Annotated[UpdatePlaceCommand, Depends(get_update_place_command)],
    _: Annotated[TokenPayload, Depends(admin_token_dependency)],
) -> PlaceResponse:
    """장소를 수정합니다 (관리자 전용)."""
    return _to_response(await command.execute(place_id, _to_input(body)))


@router.delete(
    "/{place_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove place",
)
async def remove_place(
    place_id: int,
    command: Annotated[RemovePlaceCommand, Depends(get_remove_place_command)],
    _: Annotated[TokenPayload, Depends(admin_token_dependency)],
) -> Response:
    """장소를 삭제합니다 (관리자 전용). 없는 장소는 무시합니다."""
    await command.execute(place_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _to_input(body: PlaceRequest) -> PlaceInput:
    return PlaceInput(
        name=body.name,
        address=body.address,
        latitude=body.latitude,
        longitude=body.longitude,
    )


def _to_response(place: Place) -> PlaceResponse:
    return PlaceResponse(
        id=place.id,
        name=place.name,
        address=place.address,
        latitude=place.location.latitude,
        longitude=place.location.longitude,
    )
