"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from places.application.common.exceptions import (
    ApplicationError,
    InvalidSearchArgumentError,
    SearchExecutionError,
    SearchIndexPermanentError,
    SearchIndexTransientError,
)
from places.domain.exceptions import DomainError, PlaceNotFoundError

RETRY_HINT = "Please try again later."


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InvalidSearchArgumentError)
    async def invalid_argument_handler(request: Request, exc: InvalidSearchArgumentError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_ARGUMENT"},
        )

    @app.exception_handler(PlaceNotFoundError)
    async def place_not_found_handler(request: Request, exc: PlaceNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "PLACE_NOT_FOUND"},
        )

    @app.exception_handler(SearchExecutionError)
    async def search_execution_handler(request: Request, exc: SearchExecutionError):
        return JSONResponse(
            status_code=503,
            content={"detail": f"{exc.message}. {RETRY_HINT}", "code": "SEARCH_FAILED"},
        )

    @app.exception_handler(SearchIndexTransientError)
    async def index_transient_handler(request: Request, exc: SearchIndexTransientError):
        return JSONResponse(
            status_code=503,
            content={
                "detail": f"{exc.message}. {RETRY_HINT}",
                "code": "SEARCH_INDEX_UNAVAILABLE",
            },
        )

    @app.exception_handler(SearchIndexPermanentError)
    async def index_permanent_handler(request: Request, exc: SearchIndexPermanentError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "SEARCH_INDEX_ERROR"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
