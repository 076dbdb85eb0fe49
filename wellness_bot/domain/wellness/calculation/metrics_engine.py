"""MetricsEngine - derives health metrics from a complete profile."""

from dataclasses import dataclass
from typing import Optional

import structlog

from ..core.entities.user_profile import UserProfile
from ..core.exceptions.domain_errors import (
    IncompleteProfileError,
    MetricsNotComputedError,
)
from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.reference_values import WellnessConstants
from .bmi_service import BMIService
from .bmr_service import BMRService
from .daily_calories_service import DailyCaloriesService
from .macro_service import MacroService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProfileMetrics:
    """Derived metrics for one profile."""

    bmi: float
    bmi_category: BMICategory
    bmr: float
    daily_calories: float
    macro_split: MacroSplit


class MetricsEngine:
    """
    Populates a profile's derived fields.

    Flow:
    1. BMI from weight and height
    2. BMR from weight, height, age and gender
    3. Daily calories from BMR and activity level
    4. BMI category and macro grams, derived on read

    Input is assumed to have passed validation; values are not re-checked.
    """

    def __init__(
        self,
        constants: WellnessConstants,
        bmi_service: Optional[BMIService] = None,
        bmr_service: Optional[BMRService] = None,
        daily_calories_service: Optional[DailyCaloriesService] = None,
        macro_service: Optional[MacroService] = None,
    ):
        self._bmi_service = bmi_service or BMIService(constants.bmi_thresholds)
        self._bmr_service = bmr_service or BMRService()
        self._daily_calories_service = (
            daily_calories_service
            or DailyCaloriesService(constants.activity_multipliers)
        )
        self._macro_service = macro_service or MacroService(
            constants.macro_ratios
        )

    def calculate(self, profile: UserProfile) -> ProfileMetrics:
        """
        Compute and record BMI, BMR and daily calories.

        Args:
            profile: Profile with every raw field set

        Returns:
            ProfileMetrics with all derived values

        Raises:
            IncompleteProfileError: If a raw field is unset
            MetricsAlreadyComputedError: If the profile was already populated
            UnknownActivityLevelError: If the activity level has no multiplier
        """
        missing = profile.missing_fields()
        if missing:
            raise IncompleteProfileError(missing)

        bmi = self._bmi_service.calculate(profile.weight, profile.height)
        bmr = self._bmr_service.calculate(
            weight=profile.weight,
            height=profile.height,
            age=profile.age,
            gender=profile.gender,
        )
        daily_calories = self._daily_calories_service.calculate(
            bmr, profile.activity_level
        )

        metrics = self._build(bmi, bmr, daily_calories)
        profile.record_metrics(bmi=bmi, bmr=bmr, daily_calories=daily_calories)
        logger.debug(
            "metrics_calculated",
            bmi=round(bmi, 2),
            bmr=round(bmr, 2),
            daily_calories=round(daily_calories, 2),
        )

        return metrics

    def summarize(self, profile: UserProfile) -> ProfileMetrics:
        """
        Build ProfileMetrics from an already-populated profile.

        Raises:
            MetricsNotComputedError: If ``calculate`` has not run
        """
        if (
            profile.bmi is None
            or profile.bmr is None
            or profile.daily_calories is None
        ):
            raise MetricsNotComputedError()

        return self._build(profile.bmi, profile.bmr, profile.daily_calories)

    def _build(
        self, bmi: float, bmr: float, daily_calories: float
    ) -> ProfileMetrics:
        return ProfileMetrics(
            bmi=bmi,
            bmi_category=self._bmi_service.classify(bmi),
            bmr=bmr,
            daily_calories=daily_calories,
            macro_split=self._macro_service.calculate(daily_calories),
        )
