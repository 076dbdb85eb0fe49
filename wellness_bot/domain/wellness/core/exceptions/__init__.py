"""Domain exceptions for wellness assessment."""

from .domain_errors import (
    IncompleteProfileError,
    InvalidFieldValueError,
    MetricsAlreadyComputedError,
    MetricsNotComputedError,
    UnknownActivityLevelError,
    WellnessDomainError,
)

__all__ = [
    "WellnessDomainError",
    "InvalidFieldValueError",
    "IncompleteProfileError",
    "MetricsAlreadyComputedError",
    "MetricsNotComputedError",
    "UnknownActivityLevelError",
]
