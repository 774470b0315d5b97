"""검색 인덱스 관련 예외."""

from places.application.common.exceptions.base import ApplicationError


class SearchIndexError(ApplicationError):
    """검색 인덱스 호출 실패의 베이스 클래스."""

    def __init__(self, message: str = "Search index error") -> None:
        super().__init__(message)


class SearchIndexTransientError(SearchIndexError):
    """일시적으로 인덱스가 요청을 처리할 수 없음 (타임아웃 포함).

    호출자는 전체 작업을 나중에 재시도할 수 있습니다.
    """

    def __init__(self, message: str = "Search index temporarily unavailable") -> None:
        super().__init__(message)


class SearchIndexPermanentError(SearchIndexError):
    """재시도해도 성공하지 않는 인덱스 오류."""

    def __init__(self, message: str = "Search index rejected the request") -> None:
        super().__init__(message)


class SearchExecutionError(ApplicationError):
    """검색 쿼리 실행 실패."""

    def __init__(self, message: str = "Place search failed") -> None:
        super().__init__(message)
