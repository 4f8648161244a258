"""
Evaluation Router - Employee Expertise Cube
expertise_cube/routers/evaluations.py

360-degree evaluation intake.
"""

import logging

from fastapi import APIRouter, Depends

from expertise_cube.core.dependencies import get_aggregator
from expertise_cube.models.analysis import EvaluationAcceptedResponse
from expertise_cube.models.employee import EvaluationInput
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Evaluations"])


@router.post(
    "/evaluations",
    response_model=EvaluationAcceptedResponse,
    summary="Add a 360-degree evaluation",
    description=(
        "Appends the evaluation to the employee's history and rewrites the "
        "employee's expertise score. Returns 404 if the employee does not exist."
    ),
)
async def add_evaluation(
    evaluation: EvaluationInput,
    aggregator: ExpertiseScoreAggregator = Depends(get_aggregator),
) -> EvaluationAcceptedResponse:
    score = aggregator.submit_evaluation(evaluation)
    logger.info(f"Evaluation accepted for employee {evaluation.employee_id}")
    return EvaluationAcceptedResponse(expertise_score=score)
