"""Calculation services for wellness metrics."""

from .bmi_service import BMIService
from .bmr_service import BMRService
from .daily_calories_service import DailyCaloriesService
from .macro_service import MacroService
from .metrics_engine import MetricsEngine, ProfileMetrics

__all__ = [
    "BMIService",
    "BMRService",
    "DailyCaloriesService",
    "MacroService",
    "MetricsEngine",
    "ProfileMetrics",
]
