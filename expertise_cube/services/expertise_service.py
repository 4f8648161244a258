"""
Expertise Score Aggregator - Employee Expertise Cube
expertise_cube/services/expertise_service.py

Decides what is written to an employee's expertise score when a resume or
an evaluation arrives.

  Resume     → new Employee + projects → analyze_resume → first ExpertiseScore
  Evaluation → append to evaluation history → analyze_evaluation
             → replace the ExpertiseScore (or, under the weighted policy,
               combine_analyses(stored score, evaluation))

The history append and the score write are two separate writes with
last-write-wins semantics; no transaction spans them.
"""

from datetime import datetime, timezone
from typing import List, Optional

import structlog

from expertise_cube.core.exceptions import EntityNotFoundException
from expertise_cube.models.analysis import DimensionInsight, InsightsResponse
from expertise_cube.models.employee import (
    Employee,
    EmployeeCreate,
    EvaluationInput,
    EvaluationRecord,
    ExpertiseScore,
    ExpertiseScoreCreate,
    Project,
    ProjectCreate,
    ResumeInput,
)
from expertise_cube.models.enumerations import ExpertiseDimension, MergePolicy
from expertise_cube.repositories.base import BaseStorage
from expertise_cube.scoring.expertise_calculator import AnalysisResult, ExpertiseCalculator
from expertise_cube.scoring.recommendations import (
    generate_recommendations,
    interpret_overall_score,
    score_band,
)

logger = structlog.get_logger(__name__)

ALL_DEPARTMENTS = "All Departments"


class ExpertiseScoreAggregator:
    """Turns resume and evaluation events into persisted expertise scores."""

    def __init__(
        self,
        storage: BaseStorage,
        calculator: Optional[ExpertiseCalculator] = None,
        merge_policy: MergePolicy = MergePolicy.REPLACE,
        merge_weights: Optional[List[float]] = None,
    ):
        self.storage = storage
        self.calculator = calculator or ExpertiseCalculator()
        self.merge_policy = MergePolicy(merge_policy)
        # [prior score weight, evaluation weight]
        self.merge_weights = merge_weights or [0.3, 0.7]

    # ------------------------------------------------------------------
    # Write paths
    # ------------------------------------------------------------------

    def submit_resume(self, resume: ResumeInput) -> Employee:
        """
        Create an employee from a resume and store their first score.

        Args:
            resume: Validated resume payload

        Returns:
            The created employee
        """
        info = resume.personal_info
        employee = self.storage.create_employee(
            EmployeeCreate(
                name=info.name,
                title=info.title,
                department=info.department,
                location=info.location,
                experience_years=info.experience_years,
                email=info.email,
                resume_data=resume.model_dump(by_alias=True, exclude_none=True),
                evaluation_data=None,
            )
        )

        for project in resume.projects:
            self.storage.create_project(
                ProjectCreate(employee_id=employee.id, **project.model_dump())
            )

        analysis = self.calculator.analyze_resume(resume)
        score = self._persist(employee.id, analysis)

        logger.info(
            "resume_processed",
            employee_id=employee.id,
            project_count=len(resume.projects),
            overall_score=score.overall_score,
            confidence=float(analysis.confidence),
        )
        return employee

    def submit_evaluation(self, evaluation: EvaluationInput) -> ExpertiseScore:
        """
        Record an evaluation and rewrite the employee's score from it.

        Raises:
            EntityNotFoundException: if the employee does not exist. Nothing is
                written in that case.
        """
        employee = self.storage.get_employee(evaluation.employee_id)
        if employee is None:
            raise EntityNotFoundException("Employee", evaluation.employee_id)

        record = EvaluationRecord(
            **evaluation.model_dump(),
            timestamp=datetime.now(timezone.utc),
        )
        history = list(employee.evaluation_data or []) + [record]
        self.storage.update_employee(employee.id, {"evaluation_data": history})

        analysis = self.calculator.analyze_evaluation(evaluation)

        if self.merge_policy is MergePolicy.WEIGHTED:
            prior = self.storage.get_expertise_score(employee.id)
            if prior is not None:
                analysis = self.calculator.combine_analyses(
                    [self._score_to_analysis(prior), analysis],
                    self.merge_weights,
                )

        score = self._persist(employee.id, analysis)

        logger.info(
            "evaluation_processed",
            employee_id=employee.id,
            evaluation_count=len(history),
            merge_policy=self.merge_policy.value,
            overall_score=score.overall_score,
        )
        return score

    def _persist(self, employee_id: str, analysis: AnalysisResult) -> ExpertiseScore:
        """Write an analysis as the employee's score, recomputing overall from the stored values."""
        dims = [float(v) for v in analysis.dimension_values()]
        return self.storage.create_or_update_expertise_score(
            ExpertiseScoreCreate(
                employee_id=employee_id,
                technical_skills=dims[0],
                leadership=dims[1],
                communication=dims[2],
                project_management=dims[3],
                innovation=dims[4],
                domain_knowledge=dims[5],
                overall_score=sum(dims) / len(dims),
                last_updated=datetime.now(timezone.utc),
            )
        )

    def _score_to_analysis(self, score: ExpertiseScore) -> AnalysisResult:
        return self.calculator.from_scores(
            technical_skills=score.technical_skills,
            leadership=score.leadership,
            communication=score.communication,
            project_management=score.project_management,
            innovation=score.innovation,
            domain_knowledge=score.domain_knowledge,
        )

    # ------------------------------------------------------------------
    # Read paths
    # ------------------------------------------------------------------

    def get_employee(self, employee_id: str) -> Employee:
        employee = self.storage.get_employee(employee_id)
        if employee is None:
            raise EntityNotFoundException("Employee", employee_id)
        return employee

    def list_employees(
        self,
        department: Optional[str] = None,
        min_experience_years: Optional[float] = None,
    ) -> List[Employee]:
        """All employees, optionally filtered by exact department and minimum tenure."""
        employees = self.storage.get_all_employees()
        if department and department != ALL_DEPARTMENTS:
            employees = [e for e in employees if e.department == department]
        if min_experience_years is not None:
            employees = [e for e in employees if e.experience_years >= min_experience_years]
        return employees

    def get_projects(self, employee_id: str) -> List[Project]:
        self.get_employee(employee_id)
        return self.storage.get_projects_by_employee_id(employee_id)

    def get_expertise_score(self, employee_id: str) -> ExpertiseScore:
        score = self.storage.get_expertise_score(employee_id)
        if score is None:
            raise EntityNotFoundException("Expertise score", employee_id)
        return score

    def get_evaluation_history(self, employee_id: str) -> List[EvaluationRecord]:
        return list(self.get_employee(employee_id).evaluation_data or [])

    def reanalyze_resume(self, employee_id: str) -> AnalysisResult:
        """
        Run the resume formula again on the employee's stored resume data.

        Read-only: the stored score is not touched.
        """
        employee = self.get_employee(employee_id)
        if not employee.resume_data:
            raise EntityNotFoundException("Resume data", employee_id)
        resume = ResumeInput.model_validate(employee.resume_data)
        return self.calculator.analyze_resume(resume)

    def build_insights(self, employee_id: str) -> InsightsResponse:
        """Interpret the stored score: performance level, per-dimension bands, recommendations."""
        self.get_employee(employee_id)
        score = self.get_expertise_score(employee_id)

        values = dict(zip(ExpertiseDimension, score.dimension_values()))
        return InsightsResponse(
            employee_id=employee_id,
            overall_score=score.overall_score,
            performance_level=interpret_overall_score(score.overall_score),
            dimensions=[
                DimensionInsight(dimension=dim, score=value, band=score_band(value))
                for dim, value in values.items()
            ],
            recommendations=generate_recommendations(
                score.technical_skills, score.leadership, score.communication
            ),
            last_updated=score.last_updated,
        )
