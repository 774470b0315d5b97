"""Observability - OpenTelemetry Tracing."""

from places.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_redis,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "setup_tracing",
    "instrument_fastapi",
    "instrument_redis",
    "shutdown_tracing",
]
