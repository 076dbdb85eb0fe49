"""UserProfile entity - the person being assessed."""

from dataclasses import dataclass
from typing import Optional

from ..exceptions.domain_errors import MetricsAlreadyComputedError
from ..value_objects.activity_level import ActivityLevel
from ..value_objects.choices import DietaryPreference, Gender, Lifestyle

RAW_FIELDS = (
    "age",
    "gender",
    "height",
    "weight",
    "activity_level",
    "sleep_hours",
    "lifestyle",
    "dietary_pref",
)


@dataclass
class UserProfile:
    """Biometric and lifestyle data for one assessment session.

    Created empty and filled one field at a time with values the validator
    has already accepted. Derived fields stay ``None`` until
    ``record_metrics`` writes them, which can happen only once.

    Attributes:
        age: Age in years (1-120)
        gender: Gender selecting the BMR equation
        height: Height in meters (0.5-2.5)
        weight: Weight in kilograms (20-300)
        activity_level: Self-reported activity level
        sleep_hours: Nightly sleep in hours (0-24)
        lifestyle: Lifestyle habit
        dietary_pref: Dietary preference
        bmi: Body Mass Index (derived)
        bmr: Basal Metabolic Rate in kcal/day (derived)
        daily_calories: BMR scaled by activity in kcal/day (derived)
    """

    age: Optional[int] = None
    gender: Optional[Gender] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    activity_level: Optional[ActivityLevel] = None
    sleep_hours: Optional[int] = None
    lifestyle: Optional[Lifestyle] = None
    dietary_pref: Optional[DietaryPreference] = None

    bmi: Optional[float] = None
    bmr: Optional[float] = None
    daily_calories: Optional[float] = None

    def missing_fields(self) -> list[str]:
        """Names of raw fields not set yet, in entry order."""
        return [name for name in RAW_FIELDS if getattr(self, name) is None]

    def is_complete(self) -> bool:
        """True once every raw field has a value."""
        return not self.missing_fields()

    def has_metrics(self) -> bool:
        """True once derived metrics have been recorded."""
        return self.bmi is not None

    def record_metrics(
        self, bmi: float, bmr: float, daily_calories: float
    ) -> None:
        """Store derived metrics.

        Args:
            bmi: Body Mass Index
            bmr: Basal Metabolic Rate (kcal/day)
            daily_calories: Daily caloric needs (kcal/day)

        Raises:
            MetricsAlreadyComputedError: If metrics were already recorded
        """
        if self.has_metrics():
            raise MetricsAlreadyComputedError()

        self.bmi = bmi
        self.bmr = bmr
        self.daily_calories = daily_calories
