"""
Employee Router - Employee Expertise Cube
expertise_cube/routers/employees.py

Employee intake from resumes and per-employee reads.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from expertise_cube.core.dependencies import get_aggregator
from expertise_cube.models.analysis import AnalysisResponse, InsightsResponse
from expertise_cube.models.employee import (
    Employee,
    EvaluationRecord,
    ExpertiseScore,
    Project,
    ResumeInput,
)
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


@router.get(
    "/employees",
    response_model=List[Employee],
    summary="List employees",
    description="Returns all employees, optionally filtered by department and minimum experience.",
)
async def list_employees(
    department: Optional[str] = Query(None, description="Exact department; 'All Departments' disables the filter"),
    min_experience_years: Optional[float] = Query(None, alias="minExperienceYears", ge=0),
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> List[Employee]:
    return aggregator.list_employees(department, min_experience_years)


@router.post(
    "/employees/resume",
    response_model=Employee,
    summary="Create an employee from resume data",
    description="Validates the resume, creates the employee and projects, and stores the initial expertise score.",
)
async def create_employee_from_resume(
    resume: ResumeInput,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> Employee:
    employee = aggregator.submit_resume(resume)
    logger.info(f"Created employee {employee.id} from resume")
    return employee


@router.get(
    "/employees/{employee_id}",
    response_model=Employee,
    summary="Get employee by ID",
)
async def get_employee(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> Employee:
    return aggregator.get_employee(employee_id)


@router.get(
    "/employees/{employee_id}/projects",
    response_model=List[Project],
    summary="Get projects for an employee",
)
async def get_employee_projects(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> List[Project]:
    return aggregator.get_projects(employee_id)


@router.get(
    "/employees/{employee_id}/expertise",
    response_model=ExpertiseScore,
    summary="Get expertise score for an employee",
)
async def get_employee_expertise(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> ExpertiseScore:
    return aggregator.get_expertise_score(employee_id)


@router.get(
    "/employees/{employee_id}/insights",
    response_model=InsightsResponse,
    summary="Interpret an employee's expertise score",
    description="Performance level, per-dimension bands and development recommendations for the stored score.",
)
async def get_employee_insights(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> InsightsResponse:
    return aggregator.build_insights(employee_id)


@router.get(
    "/employees/{employee_id}/analysis",
    response_model=AnalysisResponse,
    summary="Re-analyze stored resume data",
    description="Runs the resume formula on the employee's stored resume data. Does not modify the stored score.",
)
async def get_employee_analysis(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> AnalysisResponse:
    return AnalysisResponse.from_result(aggregator.reanalyze_resume(employee_id))


@router.get(
    "/employees/{employee_id}/evaluations",
    response_model=List[EvaluationRecord],
    summary="Get evaluation history for an employee",
)
async def get_employee_evaluations(
    employee_id: str,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> List[EvaluationRecord]:
    return aggregator.get_evaluation_history(employee_id)
