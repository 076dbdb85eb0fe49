"""Input validation for profile fields."""

from .validator import (
    FIELD_RULES,
    PROFILE_FIELD_ORDER,
    FieldRule,
    ProfileField,
    accept,
    is_in_range,
    is_valid,
    is_valid_activity_level,
    is_valid_dietary_pref,
    is_valid_gender,
    is_valid_lifestyle,
    normalize,
    parse_float,
    parse_int,
)

__all__ = [
    "FIELD_RULES",
    "PROFILE_FIELD_ORDER",
    "FieldRule",
    "ProfileField",
    "accept",
    "is_in_range",
    "is_valid",
    "is_valid_activity_level",
    "is_valid_dietary_pref",
    "is_valid_gender",
    "is_valid_lifestyle",
    "normalize",
    "parse_float",
    "parse_int",
]
