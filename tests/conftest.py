# tests/conftest.py

"""
Pytest Fixtures - Shared test configuration and payloads for models, scoring and API tests

Every API test gets an app built by create_app() around its own MemoryStorage,
so tests never see each other's employees.
"""

import pytest
from fastapi.testclient import TestClient

from expertise_cube.config import Settings
from expertise_cube.main import create_app
from expertise_cube.models.employee import EvaluationInput, ResumeInput
from expertise_cube.repositories.memory import MemoryStorage
from expertise_cube.scoring.expertise_calculator import ExpertiseCalculator
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator


# =============================================================================
# SETTINGS / STORAGE FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Settings isolated from any local .env, without sample data."""
    return Settings(_env_file=None, SEED_SAMPLE_DATA=False, LOG_FORMAT="console")


@pytest.fixture
def storage():
    """Empty in-memory store."""
    return MemoryStorage()


@pytest.fixture
def calculator():
    return ExpertiseCalculator()


@pytest.fixture
def aggregator(storage):
    """Aggregator with the default replace policy."""
    return ExpertiseScoreAggregator(storage)


# =============================================================================
# FASTAPI TEST CLIENT FIXTURES
# =============================================================================

@pytest.fixture
def client(storage, settings):
    """TestClient for an app bound to the test's own storage."""
    app = create_app(storage=storage, settings=settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """TestClient for an app that built and seeded its own store."""
    app = create_app(
        settings=Settings(_env_file=None, SEED_SAMPLE_DATA=True, LOG_FORMAT="console")
    )
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# RESUME FIXTURES
# =============================================================================

@pytest.fixture
def personal_info_data():
    return {
        "name": "Jane Doe",
        "title": "Software Engineer",
        "department": "Engineering",
        "location": "Berlin",
        "experienceYears": 8,
        "email": "jane.doe@example.com",
    }


@pytest.fixture
def lead_resume_data(personal_info_data):
    """8 years, one lead project with 5 technologies, two technical skills."""
    return {
        "personalInfo": personal_info_data,
        "projects": [
            {
                "name": "Checkout Rewrite",
                "duration": "6 months",
                "role": "Lead Developer",
                "technologies": ["React", "TypeScript", "Node.js", "Redis", "PostgreSQL"],
            }
        ],
        "skills": ["React", "AWS"],
        "achievements": [],
    }


@pytest.fixture
def minimal_resume_data(personal_info_data):
    """Only personal info; every list omitted."""
    return {"personalInfo": personal_info_data}


@pytest.fixture
def lead_resume(lead_resume_data):
    return ResumeInput.model_validate(lead_resume_data)


def make_evaluation_data(employee_id, **scores):
    """Evaluation payload with every dimension at 7 unless overridden."""
    data = {
        "employeeId": employee_id,
        "technicalSkills": 7,
        "leadership": 7,
        "communication": 7,
        "projectManagement": 7,
        "innovation": 7,
        "domainKnowledge": 7,
        "feedback": "Solid quarter",
        "evaluatorName": "Alex Reviewer",
    }
    data.update(scores)
    return data


@pytest.fixture
def evaluation_factory():
    """Build EvaluationInput models: evaluation_factory(employee_id, technicalSkills=9)."""
    def _make(employee_id="emp-1", **scores):
        return EvaluationInput.model_validate(make_evaluation_data(employee_id, **scores))
    return _make


@pytest.fixture
def evaluation_data_factory():
    """Build raw evaluation payloads for API tests."""
    return make_evaluation_data
