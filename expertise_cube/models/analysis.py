from datetime import datetime
from typing import List

from pydantic import Field

from expertise_cube.models.employee import CamelModel, ExpertiseScore
from expertise_cube.models.enumerations import ExpertiseDimension, PerformanceLevel, ScoreBand
from expertise_cube.scoring.expertise_calculator import AnalysisResult


class AnalysisResponse(CamelModel):
    """
    Serialized AnalysisResult (scores as floats).
    """

    technical_skills: float = Field(..., ge=0, le=10)
    leadership: float = Field(..., ge=0, le=10)
    communication: float = Field(..., ge=0, le=10)
    project_management: float = Field(..., ge=0, le=10)
    innovation: float = Field(..., ge=0, le=10)
    domain_knowledge: float = Field(..., ge=0, le=10)
    overall_score: float = Field(..., ge=0, le=10)
    confidence: float = Field(..., ge=0, le=1)
    recommendations: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "AnalysisResponse":
        return cls(
            technical_skills=float(result.technical_skills),
            leadership=float(result.leadership),
            communication=float(result.communication),
            project_management=float(result.project_management),
            innovation=float(result.innovation),
            domain_knowledge=float(result.domain_knowledge),
            overall_score=float(result.overall_score),
            confidence=float(result.confidence),
            recommendations=list(result.recommendations),
        )


class DimensionInsight(CamelModel):
    dimension: ExpertiseDimension
    score: float
    band: ScoreBand


class InsightsResponse(CamelModel):
    """
    Interpretation of a stored expertise score.
    """

    employee_id: str
    overall_score: float
    performance_level: PerformanceLevel
    dimensions: List[DimensionInsight]
    recommendations: List[str]
    last_updated: datetime


class EvaluationAcceptedResponse(CamelModel):
    message: str = "Evaluation added successfully"
    expertise_score: ExpertiseScore
