"""
Custom Exceptions - Employee Expertise Cube
expertise_cube/core/exceptions.py

Exception classes for storage lookups and scoring misuse.
"""


class RepositoryException(Exception):
    """Base exception for storage operations."""

    pass


class EntityNotFoundException(RepositoryException):
    """Entity not found in storage."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with ID {entity_id} not found")

    @property
    def error_code(self) -> str:
        return f"{self.entity_type.upper().replace(' ', '_')}_NOT_FOUND"


class ScoringUsageError(ValueError):
    """A scoring primitive was called with arguments it cannot work with.

    Raised for programmer errors such as mismatched analysis/weight lists,
    never for user-supplied data.
    """

    pass
