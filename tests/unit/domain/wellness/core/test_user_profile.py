"""Unit tests for the UserProfile entity."""

import pytest

from wellness_bot.domain.wellness.core.entities import RAW_FIELDS, UserProfile
from wellness_bot.domain.wellness.core.exceptions import (
    MetricsAlreadyComputedError,
)


class TestUserProfile:
    """Test profile fill state and derived field recording."""

    def test_new_profile_is_empty(self):
        profile = UserProfile()

        assert profile.missing_fields() == list(RAW_FIELDS)
        assert not profile.is_complete()
        assert not profile.has_metrics()

    def test_partially_filled_reports_remaining_fields(self):
        profile = UserProfile(age=30, gender="male")

        assert profile.missing_fields()[0] == "height"
        assert "age" not in profile.missing_fields()

    def test_complete_profile(self, make_profile):
        profile = make_profile()

        assert profile.is_complete()
        assert profile.bmi is None
        assert profile.daily_calories is None

    def test_record_metrics(self, make_profile):
        profile = make_profile()

        profile.record_metrics(bmi=23.1, bmr=1815.0, daily_calories=2813.3)

        assert profile.has_metrics()
        assert profile.bmr == 1815.0

    def test_record_metrics_only_once(self, make_profile):
        profile = make_profile()
        profile.record_metrics(bmi=23.1, bmr=1815.0, daily_calories=2813.3)

        with pytest.raises(MetricsAlreadyComputedError):
            profile.record_metrics(bmi=1.0, bmr=1.0, daily_calories=1.0)

        assert profile.bmi == 23.1

