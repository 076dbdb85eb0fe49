"""ActivityLevel value object - self-reported activity for daily calories."""

from enum import Enum


class ActivityLevel(str, Enum):
    """Physical activity level used to pick the BMR multiplier.

    Values are the canonical lowercase texts accepted at the prompt. The
    multiplier for each level lives in ``WellnessConstants``.
    """

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly active"
    MODERATELY_ACTIVE = "moderately active"
    VERY_ACTIVE = "very active"
