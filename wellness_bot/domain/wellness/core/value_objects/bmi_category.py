"""BMICategory value object - weight classification from BMI."""

from enum import Enum


class BMICategory(str, Enum):
    """BMI band. Values are the display labels."""

    UNDERWEIGHT = "Underweight"
    NORMAL_WEIGHT = "Normal weight"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"
