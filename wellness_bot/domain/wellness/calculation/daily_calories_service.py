"""DailyCaloriesService - BMR scaled by activity level."""

from typing import Mapping, Union

from ..core.exceptions.domain_errors import UnknownActivityLevelError
from ..core.value_objects.activity_level import ActivityLevel


class DailyCaloriesService:
    """Calculate daily caloric needs.

    Formula:
        daily calories = BMR × activity multiplier

    Multipliers:
        - sedentary: 1.2
        - lightly active: 1.375
        - moderately active: 1.55
        - very active: 1.725
    """

    def __init__(self, multipliers: Mapping[ActivityLevel, float]):
        self._multipliers = multipliers

    def multiplier_for(
        self, activity_level: Union[ActivityLevel, str]
    ) -> float:
        """Look up the multiplier by exact match on the canonical value.

        Raises:
            UnknownActivityLevelError: If no table entry matches
        """
        try:
            level = ActivityLevel(activity_level)
        except ValueError as exc:
            raise UnknownActivityLevelError(activity_level) from exc

        multiplier = self._multipliers.get(level)
        if multiplier is None:
            raise UnknownActivityLevelError(activity_level)
        return multiplier

    def calculate(
        self, bmr: float, activity_level: Union[ActivityLevel, str]
    ) -> float:
        """Calculate daily calories from BMR and activity level.

        Example:
            >>> service.calculate(1815.032, ActivityLevel.MODERATELY_ACTIVE)
            2813.2996
        """
        return bmr * self.multiplier_for(activity_level)
