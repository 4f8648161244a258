"""
models/ - Pydantic schemas

Modules:
    enumerations.py  - Dimension, performance level, score band and merge policy enums
    employee.py      - Resume/evaluation inputs and persisted employee, project and score records
    analysis.py      - API response models for analyses and insights
"""
