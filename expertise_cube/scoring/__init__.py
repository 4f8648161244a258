"""
scoring/ - Expertise Scoring Engine

Modules:
    keywords.py               - Keyword tables for free-text resume matching
    utils.py                  - Decimal utilities
    recommendations.py        - Recommendation messages, performance levels, score bands
    expertise_calculator.py   - Resume / evaluation analysis and weighted merge
"""
