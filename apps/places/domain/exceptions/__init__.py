"""도메인 예외."""

from places.domain.exceptions.base import DomainError
from places.domain.exceptions.place import PlaceNotFoundError

__all__ = [
    "DomainError",
    "PlaceNotFoundError",
]
