"""Value objects for wellness domain."""

from .activity_level import ActivityLevel
from .bmi_category import BMICategory
from .choices import DietaryPreference, Gender, Lifestyle
from .macro_split import MacroSplit
from .reference_values import BMIThresholds, MacroRatios, WellnessConstants

__all__ = [
    "ActivityLevel",
    "BMICategory",
    "BMIThresholds",
    "DietaryPreference",
    "Gender",
    "Lifestyle",
    "MacroRatios",
    "MacroSplit",
    "WellnessConstants",
]
