"""
Base Storage - Employee Expertise Cube
expertise_cube/repositories/base.py

CRUD surface shared by every storage backend. The scoring and routing layers
depend only on this interface, so the in-memory store can be swapped for a
durable one without touching them.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from expertise_cube.models.employee import (
    Employee,
    EmployeeCreate,
    ExpertiseScore,
    ExpertiseScoreCreate,
    Project,
    ProjectCreate,
)


class BaseStorage(ABC):
    """Abstract storage for employees, projects and expertise scores."""

    # Employee operations

    @abstractmethod
    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Return the employee or None if unknown."""

    @abstractmethod
    def get_all_employees(self) -> List[Employee]:
        """Return every employee in insertion order."""

    @abstractmethod
    def create_employee(self, employee: EmployeeCreate) -> Employee:
        """Store a new employee under a freshly assigned id."""

    @abstractmethod
    def update_employee(self, employee_id: str, updates: Dict[str, Any]) -> Optional[Employee]:
        """
        Apply a partial update.

        Args:
            employee_id: Employee to update
            updates: snake_case field name -> new value

        Returns:
            Updated employee or None if unknown
        """

    # Project operations

    @abstractmethod
    def get_projects_by_employee_id(self, employee_id: str) -> List[Project]:
        """Return the employee's projects (empty list if none)."""

    @abstractmethod
    def create_project(self, project: ProjectCreate) -> Project:
        """Store a new project under a freshly assigned id."""

    # Expertise score operations

    @abstractmethod
    def get_expertise_score(self, employee_id: str) -> Optional[ExpertiseScore]:
        """Return the employee's score record or None."""

    @abstractmethod
    def create_or_update_expertise_score(self, score: ExpertiseScoreCreate) -> ExpertiseScore:
        """
        Insert or replace the score record keyed by employee_id.

        The record id is reused when the employee already has a score,
        otherwise a new one is generated.
        """

    @abstractmethod
    def get_all_expertise_scores(self) -> List[ExpertiseScore]:
        """Return every stored score record."""

    def normalize_timestamp(self, dt: Optional[datetime]) -> Optional[datetime]:
        """Ensure timestamp is UTC-aware."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
