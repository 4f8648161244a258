from enum import Enum

class ExpertiseDimension(str, Enum):
    TECHNICAL_SKILLS = "technical_skills"
    LEADERSHIP = "leadership"
    COMMUNICATION = "communication"
    PROJECT_MANAGEMENT = "project_management"
    INNOVATION = "innovation"
    DOMAIN_KNOWLEDGE = "domain_knowledge"

class PerformanceLevel(str, Enum):
    EXCELLENT = "Excellent"                    # overall >= 8.5
    ABOVE_AVERAGE = "Above Average"            # overall >= 7.5
    AVERAGE = "Average"                        # overall >= 6.5
    NEEDS_IMPROVEMENT = "Needs Improvement"

class ScoreBand(str, Enum):
    STRONG = "strong"      # >= 8
    MODERATE = "moderate"  # >= 6
    WEAK = "weak"

class MergePolicy(str, Enum):
    REPLACE = "replace"    # new evaluation overwrites the stored score
    WEIGHTED = "weighted"  # stored score and evaluation combined by configured weights
