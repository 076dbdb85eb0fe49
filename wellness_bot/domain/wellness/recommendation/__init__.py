"""Rule-based wellness recommendations."""

from .advice import (
    ADVICE_LINES,
    AdviceSection,
    DietAdvice,
    ExerciseAdvice,
    LifestyleAdvice,
    SleepAdvice,
)
from .recommendation_engine import Recommendations, RecommendationEngine

__all__ = [
    "ADVICE_LINES",
    "AdviceSection",
    "DietAdvice",
    "ExerciseAdvice",
    "LifestyleAdvice",
    "Recommendations",
    "RecommendationEngine",
    "SleepAdvice",
]
