"""검증 관련 예외."""

from places.application.common.exceptions.base import ApplicationError


class InvalidSearchArgumentError(ApplicationError):
    """잘못된 검색 파라미터 (위경도, 반경, 개수)."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or f"Invalid value of '{argument}' argument")
