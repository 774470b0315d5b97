"""OpenTelemetry Tracing - Places Service.

OpenTelemetry 패키지는 선택 의존성(otel extra)입니다.
설치되지 않았으면 경고만 남기고 트레이싱 없이 동작합니다.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(
    service_name: str,
    endpoint: str,
    sampling_rate: float = 1.0,
    environment: str = "development",
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Args:
        service_name: 서비스 이름
        endpoint: OTLP gRPC exporter 엔드포인트
        sampling_rate: 샘플링 비율 (0.0 ~ 1.0)
        environment: 배포 환경 이름

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

        resource = Resource.create(
            {
                "service.name": service_name,
                "deployment.environment": environment,
            }
        )

        provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
        provider.add_span_processor(
            BatchSpanProcessor(
                OTLPSpanExporter(endpoint=endpoint, insecure=True),
                max_queue_size=2048,
                max_export_batch_size=512,
                schedule_delay_millis=1000,
            )
        )

        trace.set_tracer_provider(provider)
        _tracer_provider = provider

        logger.info(
            "OpenTelemetry tracing configured",
            extra={
                "service": service_name,
                "endpoint": endpoint,
                "sampling_rate": sampling_rate,
            },
        )
        return True

    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

        FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ready")
        logger.info("FastAPI instrumentation enabled")

    except ImportError:
        logger.warning("FastAPIInstrumentor not available")


def instrument_redis() -> None:
    """Redis 자동 계측 (검색 인덱스 추적)."""
    try:
        from opentelemetry.instrumentation.redis import RedisInstrumentor

        RedisInstrumentor().instrument()
        logger.info("Redis instrumentation enabled")

    except ImportError:
        logger.warning("RedisInstrumentor not available")


def shutdown_tracing() -> None:
    """트레이싱 종료. 대기 중인 span을 flush합니다."""
    global _tracer_provider  # noqa: PLW0603

    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
