"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

CALORIES_PER_GRAM_CARBS = 4.0
CALORIES_PER_GRAM_PROTEIN = 4.0
CALORIES_PER_GRAM_FAT = 9.0


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Grams are kept unrounded; rounding is a display concern. Values are not
    checked for sign, a negative energy budget yields negative grams.
    Uses standard calorie conversion: carbs 4 kcal/g, protein 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        carbs_g: Carbohydrates in grams
        protein_g: Protein in grams
        fat_g: Fat in grams
    """

    carbs_g: float
    protein_g: float
    fat_g: float

    def total_calories(self) -> float:
        """Calculate total calories from macronutrients.

        Returns:
            float: Total calories (carbs×4 + protein×4 + fat×9)

        Example:
            >>> split = MacroSplit(carbs_g=250.0, protein_g=100.0, fat_g=60.0)
            >>> split.total_calories()
            1940.0
        """
        return (
            self.carbs_g * CALORIES_PER_GRAM_CARBS
            + self.protein_g * CALORIES_PER_GRAM_PROTEIN
            + self.fat_g * CALORIES_PER_GRAM_FAT
        )

    def _percentage(self, calories: float) -> float:
        total = self.total_calories()
        if total == 0:
            return 0.0
        return calories / total * 100

    def carbs_percentage(self) -> float:
        """Carbs share of total calories (0-100)."""
        return self._percentage(self.carbs_g * CALORIES_PER_GRAM_CARBS)

    def protein_percentage(self) -> float:
        """Protein share of total calories (0-100)."""
        return self._percentage(self.protein_g * CALORIES_PER_GRAM_PROTEIN)

    def fat_percentage(self) -> float:
        """Fat share of total calories (0-100)."""
        return self._percentage(self.fat_g * CALORIES_PER_GRAM_FAT)
