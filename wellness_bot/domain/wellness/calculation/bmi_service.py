"""BMIService - Body Mass Index calculation and classification."""

from ..core.value_objects.bmi_category import BMICategory
from ..core.value_objects.reference_values import BMIThresholds


class BMIService:
    """Calculate and classify Body Mass Index.

    Formula:
        BMI = weight(kg) / height(m)²

    Bands are closed on their lower bound:
        bmi < 18.5          Underweight
        18.5 <= bmi < 24.9  Normal weight
        24.9 <= bmi < 29.9  Overweight
        bmi >= 29.9         Obese
    """

    def __init__(self, thresholds: BMIThresholds):
        self._thresholds = thresholds

    def calculate(self, weight: float, height: float) -> float:
        """Calculate BMI without rounding.

        Args:
            weight: Body weight in kilograms
            height: Height in meters

        Returns:
            float: Body Mass Index

        Example:
            >>> BMIService(BMIThresholds()).calculate(75.0, 1.80)
            23.148148148148145
        """
        return weight / height**2

    def classify(self, bmi: float) -> BMICategory:
        """Map a BMI value onto its band."""
        if bmi < self._thresholds.normal:
            return BMICategory.UNDERWEIGHT
        elif bmi < self._thresholds.overweight:
            return BMICategory.NORMAL_WEIGHT
        elif bmi < self._thresholds.obese:
            return BMICategory.OVERWEIGHT
        else:
            return BMICategory.OBESE
