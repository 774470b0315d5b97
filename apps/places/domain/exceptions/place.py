"""Place 도메인 예외."""

from places.domain.exceptions.base import DomainError


class PlaceNotFoundError(DomainError):
    """장소를 찾을 수 없음."""

    def __init__(self, place_id: int | None = None) -> None:
        if place_id is None:
            super().__init__("Place not found")
        else:
            super().__init__(f"Place {place_id} not found")
