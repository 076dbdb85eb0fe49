"""Interactive profile collection.

Each field is prompted until the validator accepts it. There is no retry
limit; a closed input stream surfaces as ``EOFError``.
"""

from typing import Any, Callable, TextIO

from wellness_bot.domain.wellness.core.entities.user_profile import UserProfile
from wellness_bot.domain.wellness.core.exceptions.domain_errors import (
    InvalidFieldValueError,
)
from wellness_bot.domain.wellness.validation.validator import (
    PROFILE_FIELD_ORDER,
    ProfileField,
    accept,
)

InputFn = Callable[[str], str]

PROMPTS: dict[ProfileField, str] = {
    ProfileField.AGE: "Enter your age: ",
    ProfileField.GENDER: "Enter your gender (male/female): ",
    ProfileField.HEIGHT: "Enter your height (in meters): ",
    ProfileField.WEIGHT: "Enter your weight (in kg): ",
    ProfileField.ACTIVITY_LEVEL: (
        "Enter your activity level "
        "(sedentary, lightly active, moderately active, very active): "
    ),
    ProfileField.SLEEP_HOURS: "Enter your hours of sleep per night: ",
    ProfileField.LIFESTYLE: (
        "Enter your lifestyle habits (smoking, alcohol, none): "
    ),
    ProfileField.DIETARY_PREF: (
        "Enter your dietary preferences (vegetarian, vegan, none): "
    ),
}


def retry_message(error: InvalidFieldValueError) -> str:
    """Message shown before re-prompting."""
    if error.has_bounds:
        return (
            "Invalid input. Please enter a value between "
            f"{error.minimum:g} and {error.maximum:g}"
        )
    return "Invalid input. Please try again."


def prompt_field(field: ProfileField, input_fn: InputFn, out: TextIO) -> Any:
    """Prompt for one field until an acceptable value is entered.

    Args:
        field: Field to ask for
        input_fn: Reads one line given a prompt (``input`` by default)
        out: Stream for retry messages

    Returns:
        Canonical value for the field
    """
    while True:
        raw = input_fn(PROMPTS[field]).strip()
        try:
            return accept(field, raw)
        except InvalidFieldValueError as exc:
            print(retry_message(exc), file=out)


def collect_profile(input_fn: InputFn, out: TextIO) -> UserProfile:
    """Fill a new profile field by field, in entry order."""
    profile = UserProfile()
    for field in PROFILE_FIELD_ORDER:
        setattr(profile, field.value, prompt_field(field, input_fn, out))
    return profile
