"""Validator - acceptability checks for raw profile input.

Every predicate is pure. ``accept`` combines parsing, range checks and case
normalization for one field and returns the canonical typed value, raising
``InvalidFieldValueError`` on rejection. Retrying is the caller's job.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..core.exceptions.domain_errors import InvalidFieldValueError
from ..core.value_objects.activity_level import ActivityLevel
from ..core.value_objects.choices import DietaryPreference, Gender, Lifestyle

Number = Union[int, float]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(
    r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)


def normalize(s: str) -> str:
    """Canonical (lowercase) form of a string input."""
    return s.lower()


def _is_choice(s: str, choices: type[Enum]) -> bool:
    lowered = normalize(s)
    return any(lowered == member.value for member in choices)


def is_valid_gender(s: str) -> bool:
    """True iff ``s`` is male or female, ignoring case."""
    return _is_choice(s, Gender)


def is_valid_activity_level(s: str) -> bool:
    """True iff ``s`` is one of the four activity levels, ignoring case."""
    return _is_choice(s, ActivityLevel)


def is_valid_lifestyle(s: str) -> bool:
    """True iff ``s`` is smoking, alcohol or none, ignoring case."""
    return _is_choice(s, Lifestyle)


def is_valid_dietary_pref(s: str) -> bool:
    """True iff ``s`` is vegetarian, vegan or none, ignoring case."""
    return _is_choice(s, DietaryPreference)


def is_in_range(value: Number, minimum: Number, maximum: Number) -> bool:
    """Inclusive bounds check.

    Example:
        >>> is_in_range(120, 1, 120)
        True
        >>> is_in_range(0, 1, 120)
        False
    """
    return minimum <= value <= maximum


def parse_int(raw: str) -> int:
    """Parse plain ASCII digits with an optional sign.

    Raises:
        ValueError: For anything else (fractions, underscores, non-ASCII digits)
    """
    if not _INTEGER.fullmatch(raw):
        raise ValueError(f"Not an integer: {raw!r}")
    return int(raw)


def parse_float(raw: str) -> float:
    """Parse an ASCII decimal number, optionally with an exponent.

    Raises:
        ValueError: For anything else, including nan and inf
    """
    if not _DECIMAL.fullmatch(raw):
        raise ValueError(f"Not a number: {raw!r}")
    return float(raw)


class ProfileField(str, Enum):
    """Raw profile fields, values match ``UserProfile`` attribute names."""

    AGE = "age"
    GENDER = "gender"
    HEIGHT = "height"
    WEIGHT = "weight"
    ACTIVITY_LEVEL = "activity_level"
    SLEEP_HOURS = "sleep_hours"
    LIFESTYLE = "lifestyle"
    DIETARY_PREF = "dietary_pref"


PROFILE_FIELD_ORDER: tuple[ProfileField, ...] = tuple(ProfileField)


@dataclass(frozen=True)
class FieldRule:
    """How one field is parsed and checked.

    Numeric rules set ``parse`` and the inclusive bounds; choice rules set
    ``predicate`` and the enum the canonical text maps onto.
    """

    parse: Optional[Callable[[str], Number]] = None
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    predicate: Optional[Callable[[str], bool]] = None
    choices: Optional[type[Enum]] = None

    @property
    def is_numeric(self) -> bool:
        return self.parse is not None


FIELD_RULES: dict[ProfileField, FieldRule] = {
    ProfileField.AGE: FieldRule(parse=parse_int, minimum=1, maximum=120),
    ProfileField.GENDER: FieldRule(predicate=is_valid_gender, choices=Gender),
    ProfileField.HEIGHT: FieldRule(parse=parse_float, minimum=0.5, maximum=2.5),
    ProfileField.WEIGHT: FieldRule(
        parse=parse_float, minimum=20.0, maximum=300.0
    ),
    ProfileField.ACTIVITY_LEVEL: FieldRule(
        predicate=is_valid_activity_level, choices=ActivityLevel
    ),
    ProfileField.SLEEP_HOURS: FieldRule(parse=parse_int, minimum=0, maximum=24),
    ProfileField.LIFESTYLE: FieldRule(
        predicate=is_valid_lifestyle, choices=Lifestyle
    ),
    ProfileField.DIETARY_PREF: FieldRule(
        predicate=is_valid_dietary_pref, choices=DietaryPreference
    ),
}


def is_valid(field: ProfileField, raw: str) -> bool:
    """True iff ``accept`` would accept ``raw`` for ``field``."""
    try:
        accept(field, raw)
    except InvalidFieldValueError:
        return False
    return True


def accept(field: ProfileField, raw: str) -> Any:
    """Parse, check and normalize one raw value.

    Args:
        field: Field being entered
        raw: Text as typed by the user

    Returns:
        int, float or enum member holding the canonical value

    Raises:
        InvalidFieldValueError: If ``raw`` is malformed or out of range

    Example:
        >>> accept(ProfileField.GENDER, "MALE")
        <Gender.MALE: 'male'>
        >>> accept(ProfileField.AGE, "25")
        25
    """
    rule = FIELD_RULES[field]

    if not rule.is_numeric:
        if rule.predicate is None or not rule.predicate(raw):
            raise InvalidFieldValueError(field, raw)
        return rule.choices(normalize(raw))

    try:
        value = rule.parse(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidFieldValueError(
            field, raw, rule.minimum, rule.maximum
        ) from exc

    if not is_in_range(value, rule.minimum, rule.maximum):
        raise InvalidFieldValueError(field, raw, rule.minimum, rule.maximum)

    return value
