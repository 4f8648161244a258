"""
Sample Data - Employee Expertise Cube
expertise_cube/repositories/seed.py

Populates a fresh store with one demo employee so the dashboard has
something to show on first start.
"""

from expertise_cube.models.employee import (
    Employee,
    EmployeeCreate,
    ExpertiseScoreCreate,
    ProjectCreate,
)
from expertise_cube.repositories.base import BaseStorage


def seed_sample_data(storage: BaseStorage) -> Employee:
    """Create the sample employee with two projects and a stored score."""
    employee = storage.create_employee(
        EmployeeCreate(
            name="John Smith",
            title="Senior Software Engineer",
            department="Engineering",
            location="San Francisco",
            experience_years=8,
            team_size=12,
            email="john.smith@company.com",
        )
    )

    storage.create_project(
        ProjectCreate(
            employee_id=employee.id,
            name="E-commerce Platform Redesign",
            description="Led frontend development team for complete platform redesign",
            duration="6 months",
            role="Lead Frontend Developer",
            technologies=["React", "TypeScript", "Node.js", "PostgreSQL"],
            impact="Increased user engagement by 35% and reduced load times by 50%",
        )
    )
    storage.create_project(
        ProjectCreate(
            employee_id=employee.id,
            name="API Microservices Migration",
            description="Migrated monolithic API to microservices architecture",
            duration="4 months",
            role="Technical Lead",
            technologies=["Python", "Docker", "Kubernetes", "MongoDB"],
            impact="Improved system scalability and reduced deployment times by 60%",
        )
    )

    storage.create_or_update_expertise_score(
        ExpertiseScoreCreate(
            employee_id=employee.id,
            technical_skills=8.5,
            leadership=7.2,
            communication=9.1,
            project_management=6.8,
            innovation=8.9,
            domain_knowledge=7.5,
            overall_score=8.0,
        )
    )
    return employee
