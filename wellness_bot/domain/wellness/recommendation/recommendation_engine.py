"""RecommendationEngine - rule-based advice selection."""

from dataclasses import dataclass
from typing import Any, Optional

import structlog

from ..core.entities.user_profile import UserProfile
from ..core.exceptions.domain_errors import MetricsNotComputedError
from ..core.value_objects.choices import DietaryPreference, Lifestyle
from ..core.value_objects.reference_values import WellnessConstants
from .advice import (
    ADVICE_LINES,
    AdviceSection,
    DietAdvice,
    ExerciseAdvice,
    LifestyleAdvice,
    SleepAdvice,
)

logger = structlog.get_logger(__name__)


def _canonical(value: Any) -> Any:
    return getattr(value, "value", value)


@dataclass(frozen=True)
class Recommendations:
    """Advice blocks selected for one profile.

    Attributes:
        exercise: Exercise block
        sleep: Sleep block
        diet: Nutrition block
        lifestyle: Lifestyle block, None when nothing applies
    """

    exercise: ExerciseAdvice
    sleep: SleepAdvice
    diet: DietAdvice
    lifestyle: Optional[LifestyleAdvice] = None

    def sections(self) -> list[AdviceSection]:
        """Sections in display order; Lifestyle only when selected."""
        result = [
            AdviceSection("Exercise", ADVICE_LINES[self.exercise]),
            AdviceSection("Sleep", ADVICE_LINES[self.sleep]),
            AdviceSection("Nutritional", ADVICE_LINES[self.diet]),
        ]
        if self.lifestyle is not None:
            result.append(
                AdviceSection("Lifestyle", ADVICE_LINES[self.lifestyle])
            )
        return result


class RecommendationEngine:
    """Select advice blocks from a computed profile.

    Each section is decided independently:
    - Exercise: BMI at or above the Overweight threshold selects weight
      management, otherwise a balanced routine
    - Sleep: fewer than the minimum nightly hours selects more sleep
    - Diet: vegetarian, vegan, or general for anything else
    - Lifestyle: smoking or alcohol; nothing for none or other values
    """

    def __init__(self, constants: WellnessConstants):
        self._weight_management_from = constants.bmi_thresholds.overweight
        self._min_sleep_hours = constants.min_sleep_hours

    def recommend(self, profile: UserProfile) -> Recommendations:
        """Select every advice block for ``profile``.

        Raises:
            MetricsNotComputedError: If the profile has no BMI yet
        """
        if profile.bmi is None:
            raise MetricsNotComputedError()

        recommendations = Recommendations(
            exercise=self.exercise_advice(profile.bmi),
            sleep=self.sleep_advice(profile.sleep_hours),
            diet=self.diet_advice(profile.dietary_pref),
            lifestyle=self.lifestyle_advice(profile.lifestyle),
        )
        logger.debug(
            "recommendations_selected",
            exercise=recommendations.exercise.value,
            sleep=recommendations.sleep.value,
            diet=recommendations.diet.value,
            lifestyle=_canonical(recommendations.lifestyle),
        )
        return recommendations

    def exercise_advice(self, bmi: float) -> ExerciseAdvice:
        if bmi >= self._weight_management_from:
            return ExerciseAdvice.WEIGHT_MANAGEMENT
        return ExerciseAdvice.BALANCED_ROUTINE

    def sleep_advice(self, sleep_hours: int) -> SleepAdvice:
        if sleep_hours < self._min_sleep_hours:
            return SleepAdvice.INCREASE_SLEEP
        return SleepAdvice.MAINTAIN_HABITS

    def diet_advice(self, dietary_pref: Any) -> DietAdvice:
        pref = _canonical(dietary_pref)
        if pref == DietaryPreference.VEGETARIAN.value:
            return DietAdvice.VEGETARIAN
        elif pref == DietaryPreference.VEGAN.value:
            return DietAdvice.VEGAN
        return DietAdvice.GENERAL

    def lifestyle_advice(self, lifestyle: Any) -> Optional[LifestyleAdvice]:
        habit = _canonical(lifestyle)
        if habit == Lifestyle.SMOKING.value:
            return LifestyleAdvice.SMOKING_CESSATION
        elif habit == Lifestyle.ALCOHOL.value:
            return LifestyleAdvice.ALCOHOL_MODERATION
        return None
