# expertise_cube/scoring/expertise_calculator.py
"""
Expertise Calculator
--------------------
Maps one input record to six dimension scores, an overall score, a
confidence value and a list of recommendations.

Resume formula (every dimension starts from the same tenure credit):
    base = min(experience_years × 0.3, 3.0)

    technical_skills   = base + Σ 0.2 × technologies
                              + 0.5 per lead/senior project
                              + 0.3 per technical skill keyword hit
    leadership         = base + 1.0 (≥5 yrs) + 1.0 (≥8 yrs)
                              + per project: 1.0 lead, 1.5 manager, 0.5 senior
    communication      = base + per project: 0.5 impact > 50 chars, 0.3 description > 100 chars
                              + 0.5 per presentation/training/workshop achievement
    project_management = base + 0.4 × projects
                              + per "N month" project: 0.5 (N ≥ 6) + 0.5 (N ≥ 12)
    innovation         = base + 0.5 per project with innovation wording
                              + 1.0 once if any skill names a modern technology
    domain_knowledge   = base + 0.2 × experience_years + 1.0 (title and department set)
                              + 0.5 (≥3 projects) + 0.5 (≥5 projects)

    Each dimension is capped at 10; overall = mean of the capped dimensions, capped at 10.
    confidence = 0.3 + 0.2 (≥2 projects) + 0.2 (≥4 projects)
                     + 0.1 (≥5 skills) + 0.1 (≥2 achievements), capped at 1.0

Evaluation scores pass through unchanged with a fixed confidence of 0.9.
"""
import structlog
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Sequence, Union

from expertise_cube.core.exceptions import ScoringUsageError
from expertise_cube.models.employee import EvaluationInput, PersonalInfo, ProjectRecord, ResumeInput
from expertise_cube.scoring import keywords
from expertise_cube.scoring.recommendations import generate_recommendations
from expertise_cube.scoring.utils import clamp, mean, normalize_weights, parse_leading_int, to_decimal

logger = structlog.get_logger(__name__)

MAX_SCORE = Decimal("10")
MAX_CONFIDENCE = Decimal("1.0")
EVALUATION_CONFIDENCE = Decimal("0.9")


@dataclass(frozen=True)
class ResumeWeights:
    """Tunable constants of the resume formula."""

    # Tenure credit shared by every dimension
    base_rate: Decimal = Decimal("0.3")
    base_cap: Decimal = Decimal("3.0")

    # Technical skills
    per_technology: Decimal = Decimal("0.2")
    seniority_role_bonus: Decimal = Decimal("0.5")
    tech_skill_bonus: Decimal = Decimal("0.3")

    # Leadership
    experience_tiers: tuple = ((5, Decimal("1.0")), (8, Decimal("1.0")))
    lead_role_bonus: Decimal = Decimal("1.0")
    manager_role_bonus: Decimal = Decimal("1.5")
    senior_role_bonus: Decimal = Decimal("0.5")

    # Communication
    impact_length_threshold: int = 50
    impact_bonus: Decimal = Decimal("0.5")
    description_length_threshold: int = 100
    description_bonus: Decimal = Decimal("0.3")
    communication_achievement_bonus: Decimal = Decimal("0.5")

    # Project management
    per_project: Decimal = Decimal("0.4")
    duration_tiers: tuple = ((6, Decimal("0.5")), (12, Decimal("0.5")))

    # Innovation
    innovation_project_bonus: Decimal = Decimal("0.5")
    modern_tech_bonus: Decimal = Decimal("1.0")

    # Domain knowledge
    per_experience_year: Decimal = Decimal("0.2")
    title_department_bonus: Decimal = Decimal("1.0")
    project_count_tiers: tuple = ((3, Decimal("0.5")), (5, Decimal("0.5")))

    # Confidence
    base_confidence: Decimal = Decimal("0.3")
    confidence_project_tiers: tuple = ((2, Decimal("0.2")), (4, Decimal("0.2")))
    confidence_skill_tier: tuple = (5, Decimal("0.1"))
    confidence_achievement_tier: tuple = (2, Decimal("0.1"))


DEFAULT_WEIGHTS = ResumeWeights()


@dataclass
class AnalysisResult:
    """Output of ExpertiseCalculator.analyze_*() and combine_analyses()."""
    technical_skills: Decimal    # [0, 10]
    leadership: Decimal          # [0, 10]
    communication: Decimal       # [0, 10]
    project_management: Decimal  # [0, 10]
    innovation: Decimal          # [0, 10]
    domain_knowledge: Decimal    # [0, 10]
    overall_score: Decimal       # mean of the six, [0, 10]
    confidence: Decimal          # [0, 1]
    recommendations: List[str] = field(default_factory=list)

    def dimension_values(self) -> List[Decimal]:
        return [
            self.technical_skills,
            self.leadership,
            self.communication,
            self.project_management,
            self.innovation,
            self.domain_knowledge,
        ]


def _tier_bonus(value, tiers) -> Decimal:
    """Sum of every (threshold, bonus) pair whose threshold value reaches."""
    return sum((bonus for threshold, bonus in tiers if value >= threshold), Decimal("0"))


class ExpertiseCalculator:
    """Calculate expertise dimension scores from resumes and evaluations."""

    def __init__(self, weights: ResumeWeights = DEFAULT_WEIGHTS):
        self.weights = weights

    # ------------------------------------------------------------------
    # Resume analysis
    # ------------------------------------------------------------------

    def analyze_resume(self, resume: ResumeInput) -> AnalysisResult:
        """
        Score a resume across the six dimensions.

        Args:
            resume: Validated resume payload.

        Returns:
            AnalysisResult with every dimension in [0, 10] and confidence in [0, 1].

        Examples:
            >>> calc = ExpertiseCalculator()
            >>> result = calc.analyze_resume(ResumeInput(
            ...     personal_info=PersonalInfo(name="A", title="Dev", department="Eng",
            ...                                location="NYC", experience_years=8),
            ...     projects=[ProjectRecord(name="P", role="Lead Developer",
            ...                             technologies=["a", "b", "c", "d", "e"])],
            ...     skills=["React", "AWS"],
            ... ))
            >>> float(result.technical_skills)
            4.5
        """
        w = self.weights
        info = resume.personal_info
        projects = resume.projects
        skills = resume.skills
        achievements = resume.achievements

        experience = to_decimal(info.experience_years)
        base = min(experience * w.base_rate, w.base_cap)

        technical = clamp(self._technical_score(projects, skills, base), max_val=MAX_SCORE)
        leadership = clamp(self._leadership_score(projects, experience, base), max_val=MAX_SCORE)
        communication = clamp(
            self._communication_score(projects, achievements, base), max_val=MAX_SCORE
        )
        project_mgmt = clamp(self._project_management_score(projects, base), max_val=MAX_SCORE)
        innovation = clamp(self._innovation_score(projects, skills, base), max_val=MAX_SCORE)
        domain = clamp(
            self._domain_knowledge_score(info, experience, len(projects), base),
            max_val=MAX_SCORE,
        )

        dimensions = [technical, leadership, communication, project_mgmt, innovation, domain]
        overall = clamp(mean(dimensions), max_val=MAX_SCORE)
        confidence = self._confidence(len(projects), len(skills), len(achievements))

        logger.debug(
            "resume_analyzed",
            project_count=len(projects),
            skill_count=len(skills),
            achievement_count=len(achievements),
            overall_score=float(overall),
            confidence=float(confidence),
        )

        return AnalysisResult(
            technical_skills=technical,
            leadership=leadership,
            communication=communication,
            project_management=project_mgmt,
            innovation=innovation,
            domain_knowledge=domain,
            overall_score=overall,
            confidence=confidence,
            recommendations=generate_recommendations(technical, leadership, communication),
        )

    def _technical_score(
        self, projects: Sequence[ProjectRecord], skills: Sequence[str], base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base
        for project in projects:
            score += w.per_technology * len(project.technologies or [])
            if keywords.contains_any(project.role, keywords.SENIORITY_ROLE_KEYWORDS):
                score += w.seniority_role_bonus

        tech_skill_count = sum(
            1 for skill in skills if keywords.contains_any(skill, keywords.TECH_SKILL_KEYWORDS)
        )
        return score + w.tech_skill_bonus * tech_skill_count

    def _leadership_score(
        self, projects: Sequence[ProjectRecord], experience: Decimal, base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base + _tier_bonus(experience, w.experience_tiers)
        for project in projects:
            if keywords.contains(project.role, keywords.LEAD_ROLE_KEYWORD):
                score += w.lead_role_bonus
            if keywords.contains(project.role, keywords.MANAGER_ROLE_KEYWORD):
                score += w.manager_role_bonus
            if keywords.contains(project.role, keywords.SENIOR_ROLE_KEYWORD):
                score += w.senior_role_bonus
        return score

    def _communication_score(
        self, projects: Sequence[ProjectRecord], achievements: Sequence[str], base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base
        for project in projects:
            if project.impact and len(project.impact) > w.impact_length_threshold:
                score += w.impact_bonus
            if project.description and len(project.description) > w.description_length_threshold:
                score += w.description_bonus

        comm_achievements = sum(
            1
            for achievement in achievements
            if keywords.contains_any(achievement, keywords.COMMUNICATION_ACHIEVEMENT_KEYWORDS)
        )
        return score + w.communication_achievement_bonus * comm_achievements

    def _project_management_score(
        self, projects: Sequence[ProjectRecord], base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base + w.per_project * len(projects)
        for project in projects:
            if not keywords.contains(project.duration, keywords.DURATION_MONTH_KEYWORD):
                continue
            months = parse_leading_int(project.duration)
            if months is None:
                continue
            score += _tier_bonus(months, w.duration_tiers)
        return score

    def _innovation_score(
        self, projects: Sequence[ProjectRecord], skills: Sequence[str], base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base
        for project in projects:
            if keywords.contains_any(
                project.description, keywords.INNOVATION_KEYWORDS
            ) or keywords.contains_any(project.impact, keywords.INNOVATION_KEYWORDS):
                score += w.innovation_project_bonus

        if any(keywords.contains_any(skill, keywords.MODERN_TECH_KEYWORDS) for skill in skills):
            score += w.modern_tech_bonus
        return score

    def _domain_knowledge_score(
        self, info: PersonalInfo, experience: Decimal, project_count: int, base: Decimal
    ) -> Decimal:
        w = self.weights
        score = base + experience * w.per_experience_year
        if info.title and info.department:
            score += w.title_department_bonus
        return score + _tier_bonus(project_count, w.project_count_tiers)

    def _confidence(self, project_count: int, skill_count: int, achievement_count: int) -> Decimal:
        w = self.weights
        confidence = w.base_confidence + _tier_bonus(project_count, w.confidence_project_tiers)
        confidence += _tier_bonus(skill_count, (w.confidence_skill_tier,))
        confidence += _tier_bonus(achievement_count, (w.confidence_achievement_tier,))
        return min(confidence, MAX_CONFIDENCE)

    # ------------------------------------------------------------------
    # Evaluation analysis
    # ------------------------------------------------------------------

    def analyze_evaluation(self, evaluation: EvaluationInput) -> AnalysisResult:
        """Pass an evaluator's 1-10 ratings through as an AnalysisResult."""
        dims = [
            to_decimal(evaluation.technical_skills),
            to_decimal(evaluation.leadership),
            to_decimal(evaluation.communication),
            to_decimal(evaluation.project_management),
            to_decimal(evaluation.innovation),
            to_decimal(evaluation.domain_knowledge),
        ]
        technical, leadership, communication, project_mgmt, innovation, domain = dims

        return AnalysisResult(
            technical_skills=technical,
            leadership=leadership,
            communication=communication,
            project_management=project_mgmt,
            innovation=innovation,
            domain_knowledge=domain,
            overall_score=mean(dims),
            confidence=EVALUATION_CONFIDENCE,
            recommendations=generate_recommendations(technical, leadership, communication),
        )

    # ------------------------------------------------------------------
    # Weighted merge
    # ------------------------------------------------------------------

    def combine_analyses(
        self,
        analyses: Sequence[AnalysisResult],
        weights: Sequence[Union[Decimal, float, int]],
    ) -> AnalysisResult:
        """
        Merge several analyses by normalized weighted sum.

        Dimensions and confidence are weighted sums; overall_score is the mean
        of the combined dimensions and recommendations are regenerated from
        them rather than merged from the inputs.

        Raises:
            ScoringUsageError: if the lists differ in length, are empty, or the
                weights do not have a positive total.
        """
        if len(analyses) != len(weights):
            raise ScoringUsageError(
                f"analyses and weights must have the same length, "
                f"got {len(analyses)} and {len(weights)}"
            )
        if not analyses:
            raise ScoringUsageError("combine_analyses requires at least one analysis")

        try:
            normalized = normalize_weights([to_decimal(w) for w in weights])
        except ValueError as e:
            raise ScoringUsageError(str(e)) from e

        def weighted(attr: str) -> Decimal:
            return sum(
                (getattr(a, attr) * nw for a, nw in zip(analyses, normalized)),
                Decimal("0"),
            )

        technical = weighted("technical_skills")
        leadership = weighted("leadership")
        communication = weighted("communication")
        project_mgmt = weighted("project_management")
        innovation = weighted("innovation")
        domain = weighted("domain_knowledge")
        dims = [technical, leadership, communication, project_mgmt, innovation, domain]

        return AnalysisResult(
            technical_skills=technical,
            leadership=leadership,
            communication=communication,
            project_management=project_mgmt,
            innovation=innovation,
            domain_knowledge=domain,
            overall_score=mean(dims),
            confidence=weighted("confidence"),
            recommendations=generate_recommendations(technical, leadership, communication),
        )

    @staticmethod
    def from_scores(
        technical_skills: float,
        leadership: float,
        communication: float,
        project_management: float,
        innovation: float,
        domain_knowledge: float,
        confidence: Optional[float] = None,
    ) -> AnalysisResult:
        """Rebuild an AnalysisResult from stored dimension values."""
        dims = [
            to_decimal(technical_skills),
            to_decimal(leadership),
            to_decimal(communication),
            to_decimal(project_management),
            to_decimal(innovation),
            to_decimal(domain_knowledge),
        ]
        return AnalysisResult(
            technical_skills=dims[0],
            leadership=dims[1],
            communication=dims[2],
            project_management=dims[3],
            innovation=dims[4],
            domain_knowledge=dims[5],
            overall_score=mean(dims),
            confidence=to_decimal(confidence) if confidence is not None else EVALUATION_CONFIDENCE,
            recommendations=generate_recommendations(dims[0], dims[1], dims[2]),
        )
