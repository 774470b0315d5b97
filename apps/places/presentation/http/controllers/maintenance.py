"""Maintenance Controller."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from places.application.search import RebuildPlaceIndexCommand
from places.presentation.http.schemas import MaintenanceResponse
from places.setup.dependencies import get_rebuild_place_index_command
from places.setup.security import TokenPayload, admin_token_dependency

router = APIRouter(prefix="/maintenance", tags=["maintenance"])


@router.post(
    "/search-index",
    response_model=MaintenanceResponse,
    responses={503: {"model": MaintenanceResponse}},
    summary="Rebuild place search index",
)
async def rebuild_search_index(
    command: Annotated[RebuildPlaceIndexCommand, Depends(get_rebuild_place_index_command)],
    _: Annotated[TokenPayload, Depends(admin_token_dependency)],
):
    """장소 검색 인덱스를 재구축합니다 (관리자 전용)."""
    if not await command.execute():
        return JSONResponse(
            status_code=503,
            content=MaintenanceResponse(
                success=False,
                message="MaintenanceTasks failed. Try again by refreshing.",
            ).model_dump(),
        )
    return MaintenanceResponse(success=True, message="MaintenanceTasks completed")
