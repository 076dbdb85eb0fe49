"""BMRService - Basal Metabolic Rate calculation."""

from ..core.value_objects.choices import Gender

# (constant, per kg, per cm, per year of age)
_MALE = (88.362, 13.397, 4.799, 5.677)
_FEMALE = (447.593, 9.247, 3.098, 4.330)


class BMRService:
    """Calculate Basal Metabolic Rate with a gender-conditioned equation.

    Formula (height converted to centimeters):
        Men:   BMR = 88.362 + 13.397 × weight + 4.799 × height - 5.677 × age
        Women: BMR = 447.593 + 9.247 × weight + 3.098 × height - 4.330 × age
    """

    def calculate(
        self, weight: float, height: float, age: int, gender: Gender
    ) -> float:
        """Calculate BMR from biometric data.

        Args:
            weight: Body weight in kilograms
            height: Height in meters
            age: Age in years
            gender: Selects the equation

        Returns:
            float: BMR in kcal/day

        Example:
            >>> BMRService().calculate(75.0, 1.80, 25, Gender.MALE)
            1815.032
        """
        height_cm = height * 100

        if gender == Gender.MALE:
            base, per_kg, per_cm, per_year = _MALE
        else:  # female
            base, per_kg, per_cm, per_year = _FEMALE

        return base + per_kg * weight + per_cm * height_cm - per_year * age
