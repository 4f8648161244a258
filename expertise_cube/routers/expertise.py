"""
Expertise Score Router - Employee Expertise Cube
expertise_cube/routers/expertise.py
"""

from typing import List

from fastapi import APIRouter, Depends

from expertise_cube.core.dependencies import get_storage
from expertise_cube.models.employee import ExpertiseScore
from expertise_cube.repositories.base import BaseStorage

router = APIRouter(tags=["Expertise Scores"])


@router.get(
    "/expertise-scores",
    response_model=List[ExpertiseScore],
    summary="Get all expertise scores",
    description="Every stored score record, for analytics views.",
)
async def get_all_expertise_scores(
    storage: BaseStorage = Depends(get_storage),
) -> List[ExpertiseScore]:
    return storage.get_all_expertise_scores()
