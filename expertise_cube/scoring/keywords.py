"""
Keyword Tables for Resume Analysis
expertise_cube/scoring/keywords.py

Every free-text heuristic in the resume formula matches against one of these
tables. Matching is a case-insensitive substring test: the candidate text is
lowercased and each keyword is checked with `in`, so short entries like "ai"
also match inside longer words.
"""

from __future__ import annotations

from typing import Iterable


# Skills that count toward technical skills (+0.3 per matching skill)
TECH_SKILL_KEYWORDS = frozenset([
    "javascript",
    "typescript",
    "react",
    "node",
    "python",
    "java",
    "aws",
    "docker",
    "kubernetes",
])

# Skills signalling adoption of modern technology (flat +1.0 to innovation)
MODERN_TECH_KEYWORDS = frozenset([
    "react",
    "vue",
    "angular",
    "kubernetes",
    "microservices",
    "ai",
    "ml",
])

# Project description/impact wording that signals innovation (+0.5 per project)
INNOVATION_KEYWORDS = frozenset([
    "new",
    "innovative",
    "created",
    "designed",
    "improved",
    "optimization",
])

# Achievements that demonstrate communication (+0.5 per achievement)
COMMUNICATION_ACHIEVEMENT_KEYWORDS = frozenset([
    "presentation",
    "training",
    "workshop",
])

# Role wording
LEAD_ROLE_KEYWORD = "lead"
SENIOR_ROLE_KEYWORD = "senior"
MANAGER_ROLE_KEYWORD = "manager"

# Seniority roles rewarded in technical skills
SENIORITY_ROLE_KEYWORDS = frozenset([LEAD_ROLE_KEYWORD, SENIOR_ROLE_KEYWORD])

# Duration text must mention months before its leading number is read
DURATION_MONTH_KEYWORD = "month"


def contains_any(text: str | None, keywords: Iterable[str]) -> bool:
    """Case-insensitive substring match of any keyword in text. None never matches."""
    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)


def contains(text: str | None, keyword: str) -> bool:
    return contains_any(text, (keyword,))
