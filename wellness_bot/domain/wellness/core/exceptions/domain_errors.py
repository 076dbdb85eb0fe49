"""Domain exceptions for wellness assessment."""

from typing import Any, Iterable, Optional


class WellnessDomainError(Exception):
    """Base exception for wellness domain errors."""

    pass


class InvalidFieldValueError(WellnessDomainError):
    """Raised when a raw input value is not acceptable for a profile field.

    Attributes:
        field: Field the value was entered for
        raw: Raw text as entered
        minimum: Inclusive lower bound (numeric fields only)
        maximum: Inclusive upper bound (numeric fields only)
    """

    def __init__(
        self,
        field: Any,
        raw: str,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
    ):
        name = getattr(field, "value", field)
        super().__init__(f"Invalid value for {name}: {raw!r}")
        self.field = field
        self.raw = raw
        self.minimum = minimum
        self.maximum = maximum

    @property
    def has_bounds(self) -> bool:
        return self.minimum is not None and self.maximum is not None


class IncompleteProfileError(WellnessDomainError):
    """Raised when metrics are requested before every raw field is set."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(
            f"Profile is incomplete, missing: {', '.join(self.missing)}"
        )


class MetricsAlreadyComputedError(WellnessDomainError):
    """Raised when derived metrics are written to a profile twice."""

    def __init__(self) -> None:
        super().__init__("Derived metrics have already been computed")


class MetricsNotComputedError(WellnessDomainError):
    """Raised when derived metrics are read before being computed."""

    def __init__(self) -> None:
        super().__init__("Derived metrics have not been computed yet")


class UnknownActivityLevelError(WellnessDomainError):
    """Raised when an activity level has no multiplier entry."""

    def __init__(self, activity_level: Any):
        super().__init__(f"Unknown activity level: {activity_level!r}")
        self.activity_level = activity_level
