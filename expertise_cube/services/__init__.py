"""
services/ - Score aggregation

Modules:
    expertise_service.py  - ExpertiseScoreAggregator: resume/evaluation intake and score reads
"""
