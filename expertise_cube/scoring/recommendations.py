"""
scoring/recommendations.py

Advisory messages and human-readable interpretation of expertise scores.

Recommendations look only at technical skills, leadership and communication:

    technical      >= 8  -> mentor junior developers
                   <  6  -> strengthen technical skills
    leadership     <  7  -> leadership training
                   >= 8  -> ready for senior management
    communication  >= 8  -> client-facing roles
                   <  6  -> improve communication

Messages are emitted in technical, leadership, communication order.
"""

from decimal import Decimal
from typing import List, Union

from expertise_cube.models.enumerations import PerformanceLevel, ScoreBand

Number = Union[Decimal, float, int]

MENTOR_JUNIOR_DEVELOPERS = "Excellent technical skills - consider mentoring junior developers"
STRENGTHEN_TECHNICAL_SKILLS = (
    "Focus on strengthening technical skills through training and hands-on projects"
)
LEADERSHIP_TRAINING = "Consider leadership training to strengthen management capabilities"
READY_FOR_SENIOR_MANAGEMENT = "Strong leadership skills - ready for senior management roles"
CLIENT_FACING_ROLES = "Outstanding communication skills - ideal for client-facing roles"
IMPROVE_COMMUNICATION = (
    "Improve communication skills through presentation training and workshops"
)


def generate_recommendations(
    technical_skills: Number,
    leadership: Number,
    communication: Number,
) -> List[str]:
    """Return zero to three advisory messages for the given scores."""
    recommendations: List[str] = []

    if technical_skills >= 8:
        recommendations.append(MENTOR_JUNIOR_DEVELOPERS)
    elif technical_skills < 6:
        recommendations.append(STRENGTHEN_TECHNICAL_SKILLS)

    if leadership < 7:
        recommendations.append(LEADERSHIP_TRAINING)
    elif leadership >= 8:
        recommendations.append(READY_FOR_SENIOR_MANAGEMENT)

    if communication >= 8:
        recommendations.append(CLIENT_FACING_ROLES)
    elif communication < 6:
        recommendations.append(IMPROVE_COMMUNICATION)

    return recommendations


def interpret_overall_score(overall_score: Number) -> PerformanceLevel:
    if overall_score >= Decimal("8.5"):
        return PerformanceLevel.EXCELLENT
    elif overall_score >= Decimal("7.5"):
        return PerformanceLevel.ABOVE_AVERAGE
    elif overall_score >= Decimal("6.5"):
        return PerformanceLevel.AVERAGE
    else:
        return PerformanceLevel.NEEDS_IMPROVEMENT


def score_band(score: Number) -> ScoreBand:
    if score >= 8:
        return ScoreBand.STRONG
    elif score >= 6:
        return ScoreBand.MODERATE
    return ScoreBand.WEAK
