"""
Memory Storage - Employee Expertise Cube
expertise_cube/repositories/memory.py

Process-lifetime storage backed by dicts. Nothing survives a restart.
Records are copied on the way in and out so callers never share state
with the store.
"""

from typing import Any, Dict, List, Optional
from uuid import uuid4

import structlog

from expertise_cube.models.employee import (
    Employee,
    EmployeeCreate,
    ExpertiseScore,
    ExpertiseScoreCreate,
    Project,
    ProjectCreate,
)
from expertise_cube.repositories.base import BaseStorage

logger = structlog.get_logger(__name__)


class MemoryStorage(BaseStorage):
    """In-memory implementation of BaseStorage."""

    def __init__(self):
        self._employees: Dict[str, Employee] = {}
        self._projects: Dict[str, Project] = {}
        # Keyed by employee_id, not by score id
        self._expertise_scores: Dict[str, ExpertiseScore] = {}

    @staticmethod
    def _new_id() -> str:
        return str(uuid4())

    # Employee operations

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        employee = self._employees.get(employee_id)
        return employee.model_copy(deep=True) if employee else None

    def get_all_employees(self) -> List[Employee]:
        return [e.model_copy(deep=True) for e in self._employees.values()]

    def create_employee(self, employee: EmployeeCreate) -> Employee:
        record = Employee(id=self._new_id(), **employee.model_dump())
        self._employees[record.id] = record
        logger.debug("employee_created", employee_id=record.id)
        return record.model_copy(deep=True)

    def update_employee(self, employee_id: str, updates: Dict[str, Any]) -> Optional[Employee]:
        existing = self._employees.get(employee_id)
        if existing is None:
            return None

        merged = {**existing.model_dump(), **updates, "id": employee_id}
        updated = Employee.model_validate(merged)
        self._employees[employee_id] = updated
        logger.debug("employee_updated", employee_id=employee_id, fields=sorted(updates))
        return updated.model_copy(deep=True)

    # Project operations

    def get_projects_by_employee_id(self, employee_id: str) -> List[Project]:
        return [
            p.model_copy(deep=True)
            for p in self._projects.values()
            if p.employee_id == employee_id
        ]

    def create_project(self, project: ProjectCreate) -> Project:
        record = Project(id=self._new_id(), **project.model_dump())
        self._projects[record.id] = record
        return record.model_copy(deep=True)

    # Expertise score operations

    def get_expertise_score(self, employee_id: str) -> Optional[ExpertiseScore]:
        score = self._expertise_scores.get(employee_id)
        return score.model_copy(deep=True) if score else None

    def create_or_update_expertise_score(self, score: ExpertiseScoreCreate) -> ExpertiseScore:
        existing = self._expertise_scores.get(score.employee_id)
        score_id = existing.id if existing else self._new_id()

        data = score.model_dump()
        data["last_updated"] = self.normalize_timestamp(data["last_updated"])
        record = ExpertiseScore(id=score_id, **data)
        self._expertise_scores[score.employee_id] = record

        logger.debug(
            "expertise_score_stored",
            employee_id=score.employee_id,
            score_id=score_id,
            replaced=existing is not None,
        )
        return record.model_copy(deep=True)

    def get_all_expertise_scores(self) -> List[ExpertiseScore]:
        return [s.model_copy(deep=True) for s in self._expertise_scores.values()]
