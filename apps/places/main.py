"""Places API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- Redis 자동 계측 (검색 인덱스)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from places.infrastructure.observability import (
    instrument_fastapi,
    instrument_redis,
    setup_tracing,
    shutdown_tracing,
)
from places.presentation.http.controllers import (
    health_router,
    maintenance_router,
    places_router,
)
from places.presentation.http.errors import register_exception_handlers
from places.setup.config import get_settings
from places.setup.dependencies import close_search_index
from places.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    # OpenTelemetry 설정
    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
            environment=settings.environment,
        )
        instrument_redis()

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_search_index()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Places API",
        description="Geo-proximity place search for the mobile assistant",
        version="1.0.0",
        docs_url="/api/v1/places/docs",
        openapi_url="/api/v1/places/openapi.json",
        redoc_url="/api/v1/places/redoc",
        lifespan=lifespan,
    )

    # OpenTelemetry FastAPI instrumentation
    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(places_router, prefix="/api/v1")
    app.include_router(maintenance_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "places.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
