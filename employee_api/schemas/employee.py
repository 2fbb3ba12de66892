"""
Employee API: Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the API contract for the employee resource.
How:   The validation dependency builds EmployeePayload from the request body;
       the Store returns EmployeeResponse instances; FastAPI serializes them
       and generates the OpenAPI documentation from them.
"""

import re
from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Length limit shared with the String(255) columns on the employees table
MAX_FIELD_LENGTH = 255

# local@domain.tld, no whitespace, at least one dot in the domain
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

EMPLOYEE_FIELDS = ("name", "email", "position")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeePayload(BaseModel):
    """
    What:  Body accepted by POST / and PUT /{id}.
    How:   All three fields are required and stripped; unknown keys such as a
           client-supplied `id` are ignored.
    """
    name: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH, description="Full name")
    email: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH, description="Email address")
    position: str = Field(min_length=1, max_length=MAX_FIELD_LENGTH, description="Job title")

    model_config = {"str_strip_whitespace": True, "extra": "ignore"}

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        if not EMAIL_PATTERN.match(v):
            raise ValueError("must be a valid email address")
        return v


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    What:  Full representation of an employee.
    Who:   Returned by list, get-one, create, and update.
    """
    id: int = Field(description="Backend-assigned identifier")
    name: str
    email: str
    position: str

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Plain acknowledgment body, e.g. {"message": "Employee deleted"}."""
    message: str


class NotFoundResponse(BaseModel):
    """Body of the get-one 404: {"error": "Employee not found"}."""
    error: str


class ErrorResponse(BaseModel):
    """
    What:  Error format produced by the global exception handlers.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "server_error")
        message: Human-readable description
        details: Optional extra context (e.g., which fields failed validation)
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health for load balancers and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
