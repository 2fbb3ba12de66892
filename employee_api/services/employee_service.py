"""
Employee API: Employee Service (Record Service)
==================================================

What:  Business-rule boundary between the route handlers and EmployeeStore.
How:   Mirrors the Store one-to-one. The only rule it adds is the
       field-presence check on create, which runs before the Store is touched.
Who:   Called by the route handlers in routes/employees.py.

Error Handling Strategy:
    Nothing is caught here. ValidationError is raised for the presence rule;
    PersistenceError and results from the Store propagate unchanged.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from employee_api.exceptions import ValidationError
from employee_api.schemas.employee import EMPLOYEE_FIELDS, EmployeePayload, EmployeeResponse
from employee_api.services.employee_store import EmployeeStore

logger = logging.getLogger(__name__)

EmployeeData = Union[EmployeePayload, Mapping[str, Any]]


def _field(data: EmployeeData, name: str) -> Any:
    """Read one field from a payload model or a plain mapping."""
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)


class EmployeeService:
    """
    Record Service for the employee resource.

    Responsibilities:
        - get_all_employees(): pass-through to Store.list_all
        - get_employee_by_id(): pass-through; None means not found
        - create_employee(): presence rule, then Store.create
        - update_employee(): pass-through to Store.update (no presence rule)
        - delete_employee(): pass-through to Store.delete
    """

    def __init__(self, store: EmployeeStore):
        self.store = store

    async def get_all_employees(self) -> List[EmployeeResponse]:
        return await self.store.list_all()

    async def get_employee_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        return await self.store.get_by_id(employee_id)

    async def create_employee(self, data: EmployeeData) -> EmployeeResponse:
        """
        Create an employee after checking that every field is present.

        Raises:
            ValidationError: name, email or position is missing or empty
            PersistenceError: Store failure (propagated)
        """
        values = {name: _field(data, name) for name in EMPLOYEE_FIELDS}
        missing = [
            name for name, value in values.items()
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            logger.info("Rejected employee create; missing fields: %s", ", ".join(missing))
            raise ValidationError(
                message="All fields are required",
                context={"missing_fields": missing},
            )

        return await self.store.create(**values)

    async def update_employee(self, employee_id: int, data: EmployeeData) -> EmployeeResponse:
        return await self.store.update(
            employee_id,
            name=_field(data, "name"),
            email=_field(data, "email"),
            position=_field(data, "position"),
        )

    async def delete_employee(self, employee_id: int) -> Dict[str, Any]:
        return await self.store.delete(employee_id)
