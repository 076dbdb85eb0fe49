"""Wellness assessment use case."""

from .assessment_service import (
    WellnessAssessment,
    WellnessAssessmentService,
    build_assessment_service,
)

__all__ = [
    "WellnessAssessment",
    "WellnessAssessmentService",
    "build_assessment_service",
]
