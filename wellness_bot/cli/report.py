"""Text rendering of an assessment."""

from wellness_bot.application.wellness.assessment_service import (
    WellnessAssessment,
)
from wellness_bot.domain.wellness.calculation.metrics_engine import (
    ProfileMetrics,
)
from wellness_bot.domain.wellness.recommendation.recommendation_engine import (
    Recommendations,
)

WELCOME = "Welcome to the Wellness Bot!\n============================\n"
FAREWELL = "Thank you for using Wellness Bot! Stay healthy!"


def render_metrics(metrics: ProfileMetrics) -> list[str]:
    macros = metrics.macro_split
    return [
        "=== Wellness Assessment Results ===",
        "",
        f"BMI: {metrics.bmi:.2f} - Category: {metrics.bmi_category.value}",
        "",
        f"BMR: {metrics.bmr:.2f} calories/day",
        f"Daily Caloric Needs: {metrics.daily_calories:.2f} calories",
        "",
        "Recommended Macronutrient Distribution:",
        f"  - Carbohydrates: {macros.carbs_g:.2f} grams",
        f"  - Protein: {macros.protein_g:.2f} grams",
        f"  - Fats: {macros.fat_g:.2f} grams",
    ]


def render_recommendations(recommendations: Recommendations) -> list[str]:
    lines = ["=== Personalized Recommendations ==="]
    for section in recommendations.sections():
        lines.append("")
        lines.append(f"{section.title} Recommendations:")
        lines.extend(f"- {line}" for line in section.lines)
    return lines


def render_assessment(assessment: WellnessAssessment) -> str:
    """Full report, metrics first then advice."""
    lines = render_metrics(assessment.metrics)
    lines.append("")
    lines.extend(render_recommendations(assessment.recommendations))
    return "\n".join(lines) + "\n"
