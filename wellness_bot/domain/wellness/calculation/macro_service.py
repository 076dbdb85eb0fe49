"""MacroService - Macronutrient distribution calculation."""

from ..core.value_objects.macro_split import (
    CALORIES_PER_GRAM_CARBS,
    CALORIES_PER_GRAM_FAT,
    CALORIES_PER_GRAM_PROTEIN,
    MacroSplit,
)
from ..core.value_objects.reference_values import MacroRatios


class MacroService:
    """Split daily calories into gram targets using fixed ratios.

    Distribution:
        - Carbohydrates: 50% of calories, 4 kcal/g
        - Protein: 20% of calories, 4 kcal/g
        - Fat: 30% of calories, 9 kcal/g
    """

    def __init__(self, ratios: MacroRatios):
        self._ratios = ratios

    def calculate(self, daily_calories: float) -> MacroSplit:
        """Calculate macro grams.

        Args:
            daily_calories: Daily caloric needs in kcal

        Returns:
            MacroSplit: Carbs/protein/fat in grams, unrounded

        Example:
            >>> split = MacroService(MacroRatios()).calculate(2000.0)
            >>> split.carbs_g, split.protein_g, round(split.fat_g, 2)
            (250.0, 100.0, 66.67)
        """
        return MacroSplit(
            carbs_g=daily_calories * self._ratios.carbs / CALORIES_PER_GRAM_CARBS,
            protein_g=daily_calories
            * self._ratios.protein
            / CALORIES_PER_GRAM_PROTEIN,
            fat_g=daily_calories * self._ratios.fat / CALORIES_PER_GRAM_FAT,
        )
