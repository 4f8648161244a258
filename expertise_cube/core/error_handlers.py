"""
Error Handlers - Employee Expertise Cube
expertise_cube/core/error_handlers.py

Maps request validation failures, missing entities and scoring misuse to
JSON error responses.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from expertise_cube.core.exceptions import EntityNotFoundException, ScoringUsageError

logger = logging.getLogger(__name__)


#  Validation Error Messages


FIELD_MESSAGES = {
    "personalInfo.name": {
        "missing": "Name is required",
        "string_too_short": "Name is required",
    },
    "personalInfo.title": {
        "missing": "Title is required",
        "string_too_short": "Title is required",
    },
    "personalInfo.department": {
        "missing": "Department is required",
        "string_too_short": "Department is required",
    },
    "personalInfo.location": {
        "missing": "Location is required",
        "string_too_short": "Location is required",
    },
    "personalInfo.experienceYears": {
        "missing": "Experience years is required",
        "less_than_equal": "Experience years must be between 0 and 50",
        "greater_than_equal": "Experience years must be between 0 and 50",
    },
    "personalInfo.email": {
        "value_error": "Invalid email address",
    },
    "employeeId": {
        "missing": "Employee ID is required",
        "string_too_short": "Employee ID is required",
    },
    "evaluatorName": {
        "missing": "Evaluator name is required",
        "string_too_short": "Evaluator name is required",
    },
}

# Evaluation dimensions share one message
for _dimension in (
    "technicalSkills", "leadership", "communication",
    "projectManagement", "innovation", "domainKnowledge",
):
    FIELD_MESSAGES[_dimension] = {
        "less_than_equal": f"{_dimension} must be between 1 and 10",
        "greater_than_equal": f"{_dimension} must be between 1 and 10",
    }

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "list_type": "Field '{field}' must be a list",
    "model_type": "Field '{field}' must be an object",
    "model_attributes_type": "Field '{field}' must be an object",
    "value_error": "Field '{field}' is invalid",
}


def get_validation_message(field: str, error_type: str) -> str:
    # Project entries: projects.0.name -> projects.*.name
    parts = field.split(".")
    generic = ".".join("*" if p.isdigit() else p for p in parts)
    if generic == "projects.*.name" and error_type in ("missing", "string_too_short"):
        return "Project name is required"

    if field in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[field]:
            if key in error_type:
                return FIELD_MESSAGES[field][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


#  Schemas


class ErrorResponse(BaseModel):
    error_code: str
    message: str
    details: Optional[dict] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def error_response(
    status_code: int,
    error_code: str,
    message: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    body = ErrorResponse(error_code=error_code, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


#  Handlers


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()

    if any("json_invalid" in err.get("type", "") for err in errors):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            "INVALID_REQUEST",
            "Malformed JSON request body",
        )

    details: List[Dict[str, str]] = []
    for err in errors:
        error_type = err.get("type", "")
        loc = err.get("loc", [])
        field = ".".join(str(l) for l in loc if l not in ("body", "query", "path"))
        details.append({
            "field": field,
            "message": get_validation_message(field, error_type),
            "type": error_type,
        })

    logger.info(
        "Validation failed on %s %s (%d errors)",
        request.method, request.url.path, len(details),
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Invalid data",
        {"errors": details},
    )


async def not_found_exception_handler(request: Request, exc: EntityNotFoundException):
    return error_response(
        status.HTTP_404_NOT_FOUND,
        exc.error_code,
        f"{exc.entity_type} not found",
        {"id": exc.entity_id},
    )


async def scoring_usage_exception_handler(request: Request, exc: ScoringUsageError):
    logger.error("Scoring misuse on %s: %s", request.url.path, exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "SCORING_USAGE_ERROR",
        "Internal scoring error",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(EntityNotFoundException, not_found_exception_handler)
    app.add_exception_handler(ScoringUsageError, scoring_usage_exception_handler)
