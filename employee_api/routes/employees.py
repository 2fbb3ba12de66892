"""
Employee API: Employee Route Handlers
========================================

What:  The five CRUD endpoints for the employee resource.
How:   Each handler calls one EmployeeService method and maps the outcome to a
       status code and body. Handlers never catch exceptions; failures go to
       the global exception handlers registered in main.py.
Who:   Mounted by create_app() under settings.employees_prefix
       (default /api/employees).

Routes:
    GET    /        → 200 [Employee]
    GET    /{id}    → 200 Employee | 404 {"error": "Employee not found"}
    POST   /        → 201 Employee              (validated)
    PUT    /{id}    → 200 Employee              (validated)
    DELETE /{id}    → 200 {"message": "Employee deleted"}
"""

import logging
from typing import List, Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db_session
from employee_api.middleware.validation import validate_employee_payload
from employee_api.schemas.employee import (
    EmployeePayload,
    EmployeeResponse,
    ErrorResponse,
    MessageResponse,
    NotFoundResponse,
)
from employee_api.services.employee_service import EmployeeService
from employee_api.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


# ── Dependencies ──────────────────────────────────────────────────────────
def get_employee_store(db: AsyncSession = Depends(get_db_session)) -> EmployeeStore:
    return EmployeeStore(db)


def get_employee_service(
    store: EmployeeStore = Depends(get_employee_store),
) -> EmployeeService:
    return EmployeeService(store)


# ── Handlers ──────────────────────────────────────────────────────────────
@router.get(
    "/",
    response_model=List[EmployeeResponse],
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all employees",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    return await service.get_all_employees()


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found", "model": NotFoundResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a single employee by ID",
)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> Union[EmployeeResponse, JSONResponse]:
    """
    Returns the employee, or a 404 body when the Store reports no such row.

    The 404 is produced here (not by an exception handler) because the Store
    signals a missing row with None rather than raising.
    """
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": "Employee not found"},
        )
    return employee


@router.post(
    "/",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    payload: EmployeePayload = Depends(validate_employee_payload),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return await service.create_employee(payload)


@router.put(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Invalid payload", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Replace an employee's name, email and position",
)
async def update_employee(
    employee_id: int,
    payload: EmployeePayload = Depends(validate_employee_payload),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    # Reports success even if no row has this id (see EmployeeStore.update)
    return await service.update_employee(employee_id, payload)


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    await service.delete_employee(employee_id)
    return MessageResponse(message="Employee deleted")
