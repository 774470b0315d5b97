"""Application Exceptions."""

from places.application.common.exceptions.base import ApplicationError
from places.application.common.exceptions.search import (
    SearchExecutionError,
    SearchIndexError,
    SearchIndexPermanentError,
    SearchIndexTransientError,
)
from places.application.common.exceptions.validation import InvalidSearchArgumentError

__all__ = [
    "ApplicationError",
    "InvalidSearchArgumentError",
    "SearchExecutionError",
    "SearchIndexError",
    "SearchIndexPermanentError",
    "SearchIndexTransientError",
]
