"""Reference tables used by the metrics and recommendation engines.

Built once at startup with ``WellnessConstants.default()`` and shared by
reference; every structure here is immutable.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .activity_level import ActivityLevel


def _default_activity_multipliers() -> Mapping[ActivityLevel, float]:
    return MappingProxyType(
        {
            ActivityLevel.SEDENTARY: 1.2,
            ActivityLevel.LIGHTLY_ACTIVE: 1.375,
            ActivityLevel.MODERATELY_ACTIVE: 1.55,
            ActivityLevel.VERY_ACTIVE: 1.725,
        }
    )


@dataclass(frozen=True)
class MacroRatios:
    """Share of daily calories per macronutrient.

    Attributes:
        carbs: Fraction from carbohydrates
        protein: Fraction from protein
        fat: Fraction from fat
    """

    carbs: float = 0.50
    protein: float = 0.20
    fat: float = 0.30

    def __post_init__(self) -> None:
        total = self.carbs + self.protein + self.fat
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Macro ratios must sum to 1.0, got {total}")


@dataclass(frozen=True)
class BMIThresholds:
    """Lower bounds (inclusive) of the BMI bands above Underweight.

    Attributes:
        normal: Start of Normal weight
        overweight: Start of Overweight
        obese: Start of Obese
    """

    normal: float = 18.5
    overweight: float = 24.9
    obese: float = 29.9


@dataclass(frozen=True)
class WellnessConstants:
    """Immutable bundle of every reference table.

    Attributes:
        activity_multipliers: BMR multiplier per activity level (read-only)
        macro_ratios: Macronutrient split of daily calories
        bmi_thresholds: BMI band boundaries
        min_sleep_hours: Nightly hours below which more sleep is advised
    """

    activity_multipliers: Mapping[ActivityLevel, float] = field(
        default_factory=_default_activity_multipliers
    )
    macro_ratios: MacroRatios = field(default_factory=MacroRatios)
    bmi_thresholds: BMIThresholds = field(default_factory=BMIThresholds)
    min_sleep_hours: int = 7

    @classmethod
    def default(cls) -> "WellnessConstants":
        """Build the standard tables."""
        return cls()
