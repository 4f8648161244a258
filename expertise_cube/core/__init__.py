"""
Core Package - Employee Expertise Cube
expertise_cube/core/__init__.py

Core infrastructure: dependencies, exceptions, error handlers, logging.
"""

from expertise_cube.core.exceptions import (
    EntityNotFoundException,
    RepositoryException,
    ScoringUsageError,
)

__all__ = [
    # Exceptions
    "EntityNotFoundException",
    "RepositoryException",
    "ScoringUsageError",
]
