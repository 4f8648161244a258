# tests/test_expertise_service.py

"""
Expertise Score Aggregator Tests - resume intake, evaluation merging and read paths
"""

import pytest

from expertise_cube.core.exceptions import EntityNotFoundException
from expertise_cube.models.employee import EmployeeCreate, ExpertiseScoreCreate, ResumeInput
from expertise_cube.models.enumerations import ExpertiseDimension, MergePolicy, PerformanceLevel
from expertise_cube.services.expertise_service import ExpertiseScoreAggregator


def add_employee(storage, **overrides):
    data = dict(
        name="Jane Doe",
        title="Engineer",
        department="Engineering",
        location="Berlin",
        experience_years=4,
    )
    data.update(overrides)
    return storage.create_employee(EmployeeCreate(**data))


def store_uniform_score(storage, employee_id, value):
    return storage.create_or_update_expertise_score(
        ExpertiseScoreCreate(
            employee_id=employee_id,
            technical_skills=value,
            leadership=value,
            communication=value,
            project_management=value,
            innovation=value,
            domain_knowledge=value,
            overall_score=value,
        )
    )



# RESUME INTAKE


class TestSubmitResume:

    def test_creates_employee_projects_and_score(self, aggregator, storage, lead_resume):
        employee = aggregator.submit_resume(lead_resume)

        assert employee.name == "Jane Doe"
        assert employee.experience_years == 8
        assert employee.evaluation_data is None
        assert len(storage.get_projects_by_employee_id(employee.id)) == 1

        score = storage.get_expertise_score(employee.id)
        assert score.technical_skills == pytest.approx(4.5)
        assert score.overall_score == pytest.approx(sum(score.dimension_values()) / 6)

    def test_keeps_raw_resume_for_reanalysis(self, aggregator, lead_resume):
        employee = aggregator.submit_resume(lead_resume)
        assert employee.resume_data["personalInfo"]["name"] == "Jane Doe"
        assert employee.resume_data["skills"] == ["React", "AWS"]

    def test_project_fields_copied(self, aggregator, storage, lead_resume):
        employee = aggregator.submit_resume(lead_resume)
        project = storage.get_projects_by_employee_id(employee.id)[0]

        assert project.name == "Checkout Rewrite"
        assert project.role == "Lead Developer"
        assert project.employee_id == employee.id

    def test_resume_without_projects(self, aggregator, storage, minimal_resume_data):
        employee = aggregator.submit_resume(ResumeInput.model_validate(minimal_resume_data))
        assert storage.get_projects_by_employee_id(employee.id) == []
        assert storage.get_expertise_score(employee.id) is not None



# EVALUATION INTAKE


class TestSubmitEvaluation:

    def test_unknown_employee_writes_nothing(self, aggregator, storage, evaluation_factory):
        with pytest.raises(EntityNotFoundException) as exc_info:
            aggregator.submit_evaluation(evaluation_factory("missing"))

        assert exc_info.value.error_code == "EMPLOYEE_NOT_FOUND"
        assert storage.get_all_expertise_scores() == []
        assert storage.get_all_employees() == []

    def test_replaces_resume_score(self, aggregator, storage, lead_resume, evaluation_factory):
        employee = aggregator.submit_resume(lead_resume)
        before = storage.get_expertise_score(employee.id)

        score = aggregator.submit_evaluation(evaluation_factory(employee.id))

        assert score.id == before.id
        assert score.dimension_values() == [7.0] * 6
        assert score.overall_score == pytest.approx(7.0)

    def test_second_evaluation_fully_overwrites(self, aggregator, storage, evaluation_factory):
        employee = add_employee(storage)
        aggregator.submit_evaluation(evaluation_factory(employee.id, technicalSkills=10))
        aggregator.submit_evaluation(evaluation_factory(
            employee.id,
            technicalSkills=2, leadership=3, communication=4,
            projectManagement=5, innovation=6, domainKnowledge=7,
        ))

        score = storage.get_expertise_score(employee.id)
        assert score.dimension_values() == [2.0, 3.0, 4.0, 5.0, 6.0, 7.0]
        assert score.overall_score == pytest.approx(4.5)

    def test_appends_to_history(self, aggregator, storage, evaluation_factory):
        employee = add_employee(storage)
        aggregator.submit_evaluation(evaluation_factory(employee.id, evaluatorName="First"))
        aggregator.submit_evaluation(evaluation_factory(employee.id, evaluatorName="Second"))

        history = aggregator.get_evaluation_history(employee.id)
        assert [r.evaluator_name for r in history] == ["First", "Second"]
        assert all(r.timestamp.tzinfo is not None for r in history)

    def test_evaluation_without_prior_score(self, aggregator, storage, evaluation_factory):
        employee = add_employee(storage)
        score = aggregator.submit_evaluation(evaluation_factory(employee.id))
        assert score.employee_id == employee.id



# WEIGHTED MERGE POLICY


class TestWeightedPolicy:

    def test_default_weights(self, storage, evaluation_factory):
        aggregator = ExpertiseScoreAggregator(storage, merge_policy=MergePolicy.WEIGHTED)
        employee = add_employee(storage)
        store_uniform_score(storage, employee.id, 4.0)

        score = aggregator.submit_evaluation(evaluation_factory(
            employee.id,
            technicalSkills=8, leadership=8, communication=8,
            projectManagement=8, innovation=8, domainKnowledge=8,
        ))

        # 0.3 × 4 + 0.7 × 8
        assert score.technical_skills == pytest.approx(6.8)
        assert score.overall_score == pytest.approx(6.8)

    def test_custom_weights(self, storage, evaluation_factory):
        aggregator = ExpertiseScoreAggregator(
            storage, merge_policy=MergePolicy.WEIGHTED, merge_weights=[1, 1]
        )
        employee = add_employee(storage)
        store_uniform_score(storage, employee.id, 4.0)

        score = aggregator.submit_evaluation(evaluation_factory(
            employee.id,
            technicalSkills=8, leadership=8, communication=8,
            projectManagement=8, innovation=8, domainKnowledge=8,
        ))
        assert score.dimension_values() == pytest.approx([6.0] * 6)

    def test_no_prior_score_uses_evaluation(self, storage, evaluation_factory):
        aggregator = ExpertiseScoreAggregator(storage, merge_policy=MergePolicy.WEIGHTED)
        employee = add_employee(storage)

        score = aggregator.submit_evaluation(evaluation_factory(employee.id))
        assert score.dimension_values() == [7.0] * 6

    def test_policy_accepts_string(self, storage):
        aggregator = ExpertiseScoreAggregator(storage, merge_policy="weighted")
        assert aggregator.merge_policy is MergePolicy.WEIGHTED



# READ PATHS


class TestReadPaths:

    def test_get_employee_not_found(self, aggregator):
        with pytest.raises(EntityNotFoundException):
            aggregator.get_employee("missing")

    def test_projects_for_unknown_employee(self, aggregator):
        with pytest.raises(EntityNotFoundException):
            aggregator.get_projects("missing")

    def test_missing_score(self, aggregator, storage):
        employee = add_employee(storage)
        with pytest.raises(EntityNotFoundException) as exc_info:
            aggregator.get_expertise_score(employee.id)
        assert exc_info.value.error_code == "EXPERTISE_SCORE_NOT_FOUND"

    def test_history_empty_for_new_employee(self, aggregator, storage):
        employee = add_employee(storage)
        assert aggregator.get_evaluation_history(employee.id) == []


class TestListEmployees:

    @pytest.fixture
    def staff(self, storage):
        add_employee(storage, name="Eng Junior", department="Engineering", experience_years=2)
        add_employee(storage, name="Eng Senior", department="Engineering", experience_years=12)
        add_employee(storage, name="Sales Lead", department="Sales", experience_years=6)

    def test_no_filters(self, aggregator, staff):
        assert len(aggregator.list_employees()) == 3

    def test_department_filter(self, aggregator, staff):
        assert [e.name for e in aggregator.list_employees(department="Sales")] == ["Sales Lead"]

    def test_all_departments_disables_filter(self, aggregator, staff):
        assert len(aggregator.list_employees(department="All Departments")) == 3

    def test_minimum_experience(self, aggregator, staff):
        names = [e.name for e in aggregator.list_employees(min_experience_years=6)]
        assert names == ["Eng Senior", "Sales Lead"]

    def test_combined_filters(self, aggregator, staff):
        result = aggregator.list_employees(department="Engineering", min_experience_years=6)
        assert [e.name for e in result] == ["Eng Senior"]


class TestReanalyzeResume:

    def test_matches_intake_analysis(self, aggregator, calculator, lead_resume):
        employee = aggregator.submit_resume(lead_resume)
        result = aggregator.reanalyze_resume(employee.id)
        assert result == calculator.analyze_resume(lead_resume)

    def test_does_not_touch_stored_score(self, aggregator, storage, lead_resume, evaluation_factory):
        employee = aggregator.submit_resume(lead_resume)
        aggregator.submit_evaluation(evaluation_factory(employee.id))

        aggregator.reanalyze_resume(employee.id)
        assert storage.get_expertise_score(employee.id).dimension_values() == [7.0] * 6

    def test_without_resume_data(self, aggregator, storage):
        employee = add_employee(storage)
        with pytest.raises(EntityNotFoundException) as exc_info:
            aggregator.reanalyze_resume(employee.id)
        assert exc_info.value.error_code == "RESUME_DATA_NOT_FOUND"


class TestBuildInsights:

    def test_insights_from_stored_score(self, aggregator, storage, evaluation_factory):
        employee = add_employee(storage)
        aggregator.submit_evaluation(evaluation_factory(
            employee.id,
            technicalSkills=9, leadership=5, communication=9,
            projectManagement=8, innovation=8, domainKnowledge=9,
        ))

        insights = aggregator.build_insights(employee.id)

        assert insights.overall_score == pytest.approx(8.0)
        assert insights.performance_level is PerformanceLevel.ABOVE_AVERAGE
        assert [d.dimension for d in insights.dimensions] == list(ExpertiseDimension)
        assert insights.dimensions[1].band.value == "weak"
        assert len(insights.recommendations) == 3

    def test_insights_without_score(self, aggregator, storage):
        employee = add_employee(storage)
        with pytest.raises(EntityNotFoundException):
            aggregator.build_insights(employee.id)
