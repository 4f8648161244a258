import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# local@domain.tld with no whitespace
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# Tolerance for the overall == mean(dimensions) invariant on stored scores
OVERALL_TOLERANCE = 1e-6


class CamelModel(BaseModel):
    """
    Base model exchanging camelCase JSON while exposing snake_case attributes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# =============================================================================
# INPUT SCHEMAS
# =============================================================================

class PersonalInfo(CamelModel):
    """
    Personal snapshot supplied at resume-intake time.
    """

    name: str = Field(..., min_length=1, description="Employee full name")
    title: str = Field(..., min_length=1, description="Job title")
    department: str = Field(..., min_length=1, description="Department")
    location: str = Field(..., min_length=1, description="Office location")
    experience_years: float = Field(
        ...,
        ge=0,
        le=50,
        description="Years of professional experience (0-50)"
    )
    email: Optional[str] = Field(default=None, description="Optional contact email")

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not EMAIL_PATTERN.match(value):
            raise ValueError("Invalid email address")
        return value


class ProjectRecord(CamelModel):
    """
    A project listed on a resume.
    """

    name: str = Field(..., min_length=1, description="Project name")
    description: Optional[str] = None
    duration: Optional[str] = Field(
        default=None,
        description="Free text, e.g. '6 months'"
    )
    role: Optional[str] = None
    technologies: Optional[List[str]] = None
    impact: Optional[str] = None


class ResumeInput(CamelModel):
    """
    Resume payload: personal info plus projects, skills and achievements.
    """

    personal_info: PersonalInfo
    projects: List[ProjectRecord] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    achievements: List[str] = Field(default_factory=list)

    @field_validator("projects", "skills", "achievements", mode="before")
    @classmethod
    def none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class EvaluationInput(CamelModel):
    """
    One evaluator's direct 1-10 ratings for an employee.
    """

    employee_id: str = Field(..., min_length=1, description="Evaluated employee")
    technical_skills: float = Field(..., ge=1, le=10)
    leadership: float = Field(..., ge=1, le=10)
    communication: float = Field(..., ge=1, le=10)
    project_management: float = Field(..., ge=1, le=10)
    innovation: float = Field(..., ge=1, le=10)
    domain_knowledge: float = Field(..., ge=1, le=10)
    feedback: Optional[str] = None
    evaluator_name: str = Field(..., min_length=1, description="Name of the evaluator")


class EvaluationRecord(EvaluationInput):
    """
    An accepted evaluation as stored in the employee's history.
    """

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Server-assigned acceptance time (UTC)"
    )


# =============================================================================
# PERSISTED RECORDS
# =============================================================================

class EmployeeCreate(CamelModel):
    """
    Fields required to create an employee.
    """

    name: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    department: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    experience_years: float = Field(..., ge=0, le=50)
    team_size: Optional[int] = Field(default=None, ge=0)
    email: Optional[str] = None
    resume_data: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Last raw resume payload, kept for re-analysis"
    )
    evaluation_data: Optional[List[EvaluationRecord]] = Field(
        default=None,
        description="Accumulated evaluation history"
    )


class Employee(EmployeeCreate):
    """
    Employee record returned by storage and the API.
    """

    id: str


class ProjectCreate(ProjectRecord):
    """
    Fields required to store a project for an employee.
    """

    employee_id: str


class Project(ProjectCreate):
    id: str


class ExpertiseScoreCreate(CamelModel):
    """
    Score record as written by the aggregator.
    """

    employee_id: str
    technical_skills: float = Field(..., ge=0, le=10)
    leadership: float = Field(..., ge=0, le=10)
    communication: float = Field(..., ge=0, le=10)
    project_management: float = Field(..., ge=0, le=10)
    innovation: float = Field(..., ge=0, le=10)
    domain_knowledge: float = Field(..., ge=0, le=10)
    overall_score: float = Field(..., ge=0, le=10)
    last_updated: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @model_validator(mode="after")
    def validate_overall_is_mean(self):
        """overall_score is always the mean of the six dimensions."""
        expected = sum(self.dimension_values()) / 6
        if abs(self.overall_score - expected) > OVERALL_TOLERANCE:
            raise ValueError(
                f"overall_score {self.overall_score} must equal the dimension mean {expected}"
            )
        return self

    def dimension_values(self) -> List[float]:
        return [
            self.technical_skills,
            self.leadership,
            self.communication,
            self.project_management,
            self.innovation,
            self.domain_knowledge,
        ]


class ExpertiseScore(ExpertiseScoreCreate):
    id: str
