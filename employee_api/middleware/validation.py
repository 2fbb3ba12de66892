"""
Employee API: Employee Payload Validation
============================================

What:  Request-body validation that runs before the create and update handlers.
How:   A FastAPI dependency reads the raw JSON body, builds an EmployeePayload,
       and raises ValidationError (→ 400) on any problem. Because it is a
       dependency of the route, it resolves before the handler body runs, so a
       rejected request never reaches EmployeeService or EmployeeStore.
Who:   Attached with Depends() to POST / and PUT /{id} only.

Unlike the Starlette middleware in this package, this check is scoped to two
routes instead of every request.

Rules:
    - Body must be a JSON object
    - name, email, position: required strings, non-empty after stripping,
      at most 255 characters
    - email must look like local@domain.tld
    - Unknown keys (including a client-supplied id) are ignored
"""

import json
import logging
from typing import Any, Dict

import pydantic
from fastapi import Request

from employee_api.exceptions import ValidationError
from employee_api.schemas.employee import MAX_FIELD_LENGTH, EmployeePayload

logger = logging.getLogger(__name__)

# Pydantic error type → message shown to the client
_REASONS = {
    "missing": "is required",
    "string_type": "must be a string",
    "string_too_short": "must not be empty",
    "string_too_long": f"must be at most {MAX_FIELD_LENGTH} characters",
}


def _reason(error: Dict[str, Any]) -> str:
    reason = _REASONS.get(error["type"])
    if reason:
        return reason
    # Custom validators: "Value error, must be a valid email address"
    return error["msg"].removeprefix("Value error, ")


async def validate_employee_payload(request: Request) -> EmployeePayload:
    """
    Accept or reject the employee body of the current request.

    Returns:
        EmployeePayload with stripped values

    Raises:
        ValidationError: body is not a JSON object or a field rule failed;
                         `details.fields` maps each failing field to a reason
    """
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError(message="Request body must be a JSON object")

    if not isinstance(body, dict):
        raise ValidationError(message="Request body must be a JSON object")

    try:
        return EmployeePayload.model_validate(body)
    except pydantic.ValidationError as e:
        fields = {}
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "body"
            fields.setdefault(field, _reason(error))
        logger.info("Rejected employee payload: %s", fields)
        raise ValidationError(
            message="Invalid employee payload",
            context={"fields": fields},
        )
