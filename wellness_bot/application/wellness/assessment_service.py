"""WellnessAssessmentService - runs metrics then recommendations."""

from dataclasses import dataclass

from wellness_bot.domain.wellness.calculation.metrics_engine import (
    MetricsEngine,
    ProfileMetrics,
)
from wellness_bot.domain.wellness.core.entities.user_profile import UserProfile
from wellness_bot.domain.wellness.core.value_objects.reference_values import (
    WellnessConstants,
)
from wellness_bot.domain.wellness.recommendation.recommendation_engine import (
    RecommendationEngine,
    Recommendations,
)


@dataclass(frozen=True)
class WellnessAssessment:
    """Result of one assessment."""

    profile: UserProfile
    metrics: ProfileMetrics
    recommendations: Recommendations


class WellnessAssessmentService:
    """
    Orchestrates the engines for a single profile.

    Flow:
    1. Compute and record derived metrics on the profile
    2. Select advice blocks from the populated profile
    """

    def __init__(
        self,
        metrics_engine: MetricsEngine,
        recommendation_engine: RecommendationEngine,
    ):
        self._metrics_engine = metrics_engine
        self._recommendation_engine = recommendation_engine

    def assess(self, profile: UserProfile) -> WellnessAssessment:
        """
        Run the full assessment.

        Args:
            profile: Profile with every raw field set

        Returns:
            WellnessAssessment with metrics and recommendations

        Raises:
            IncompleteProfileError: If a raw field is unset
            MetricsAlreadyComputedError: If the profile was already assessed
        """
        metrics = self._metrics_engine.calculate(profile)
        recommendations = self._recommendation_engine.recommend(profile)

        return WellnessAssessment(
            profile=profile,
            metrics=metrics,
            recommendations=recommendations,
        )


def build_assessment_service(
    constants: WellnessConstants,
) -> WellnessAssessmentService:
    """Wire the default engines around shared reference tables."""
    return WellnessAssessmentService(
        metrics_engine=MetricsEngine(constants),
        recommendation_engine=RecommendationEngine(constants),
    )
