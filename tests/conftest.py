"""Shared fixtures for wellness tests."""

from __future__ import annotations

from typing import Any, Callable

import pytest

from wellness_bot.domain.wellness.core.entities.user_profile import UserProfile
from wellness_bot.domain.wellness.core.value_objects import (
    ActivityLevel,
    DietaryPreference,
    Gender,
    Lifestyle,
    WellnessConstants,
)


@pytest.fixture
def constants() -> WellnessConstants:
    """Standard reference tables."""
    return WellnessConstants.default()


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    """Build a complete profile; keyword arguments override the defaults.

    Defaults describe a 25 year old male, 1.80 m, 75 kg, moderately active,
    sleeping 6 hours, no lifestyle habit, no dietary preference.
    """

    def _make(**overrides: Any) -> UserProfile:
        values: dict[str, Any] = {
            "age": 25,
            "gender": Gender.MALE,
            "height": 1.80,
            "weight": 75.0,
            "activity_level": ActivityLevel.MODERATELY_ACTIVE,
            "sleep_hours": 6,
            "lifestyle": Lifestyle.NONE,
            "dietary_pref": DietaryPreference.NONE,
        }
        values.update(overrides)
        return UserProfile(**values)

    return _make
