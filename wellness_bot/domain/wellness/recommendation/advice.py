"""Advice blocks - identities and display lines.

Which block is selected is decided by the recommendation engine; the text
of each block lives here.
"""

from dataclasses import dataclass
from enum import Enum


class ExerciseAdvice(str, Enum):
    WEIGHT_MANAGEMENT = "weight_management"
    BALANCED_ROUTINE = "balanced_routine"


class SleepAdvice(str, Enum):
    INCREASE_SLEEP = "increase_sleep"
    MAINTAIN_HABITS = "maintain_habits"


class DietAdvice(str, Enum):
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    GENERAL = "general"


class LifestyleAdvice(str, Enum):
    SMOKING_CESSATION = "smoking_cessation"
    ALCOHOL_MODERATION = "alcohol_moderation"


ADVICE_LINES: dict[Enum, tuple[str, ...]] = {
    ExerciseAdvice.WEIGHT_MANAGEMENT: (
        "Start with low-impact activities like walking or swimming",
        "Aim for 150 minutes of moderate activity per week",
        "Include strength training 2-3 times per week",
    ),
    ExerciseAdvice.BALANCED_ROUTINE: (
        "Maintain a balanced exercise routine",
        "Mix cardio with strength training",
        "Consider adding flexibility exercises",
    ),
    SleepAdvice.INCREASE_SLEEP: (
        "Aim to increase sleep to 7-8 hours per night",
        "Establish a regular sleep schedule",
        "Create a relaxing bedtime routine",
    ),
    SleepAdvice.MAINTAIN_HABITS: (
        "Maintain your good sleep habits",
        "Consider sleep quality improvements",
    ),
    DietAdvice.VEGETARIAN: (
        "Focus on complete protein sources (eggs, dairy, legumes)",
        "Monitor B12 and iron intake",
    ),
    DietAdvice.VEGAN: (
        "Ensure adequate B12 supplementation",
        "Combine protein sources for complete amino acids",
        "Monitor iron, calcium, and vitamin D intake",
    ),
    DietAdvice.GENERAL: (
        "Choose lean protein sources",
        "Include a variety of colorful vegetables",
        "Limit processed foods",
    ),
    LifestyleAdvice.SMOKING_CESSATION: (
        "Consider smoking cessation programs",
        "Consult healthcare provider about cessation aids",
    ),
    LifestyleAdvice.ALCOHOL_MODERATION: (
        "Limit alcohol consumption",
        "Consider alcohol-free days",
        "Stay hydrated",
    ),
}


@dataclass(frozen=True)
class AdviceSection:
    """A titled group of advice lines ready for display."""

    title: str
    lines: tuple[str, ...]
