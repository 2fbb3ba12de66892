"""
Employee API: Employee Store (Data Access)
=============================================

What:  The only component that talks to the relational backend.
How:   Each operation maps to exactly one SQL statement built with SQLAlchemy
       constructs, so every value is sent as a bound parameter and never
       spliced into statement text. Writes are committed here, inside the
       same try block as the statement, so a failed commit surfaces as
       PersistenceError before any response is produced. Driver failures
       are translated into PersistenceError; a missing row on get-one is
       returned as None.
Who:   Called by EmployeeService; constructed per request around the
       request's AsyncSession.

Statement Map:
    list_all()      → SELECT id, name, email, position FROM employees
    get_by_id(id)   → SELECT ... FROM employees WHERE id = :id
    create(...)     → INSERT INTO employees (name, email, position) VALUES (...)
    update(id, ...) → UPDATE employees SET name, email, position WHERE id = :id
    delete(id)      → DELETE FROM employees WHERE id = :id

Existence on update/delete:
    update() and delete() report success whether or not a row matched. A zero
    rowcount is logged as a warning so the case shows up in the logs.

Out-of-range ids:
    An id outside the column's INTEGER range matches nothing. No statement is
    issued for it: get_by_id returns None, update echoes, delete acknowledges.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.exceptions import PersistenceError
from employee_api.models.employee import MAX_EMPLOYEE_ID, MIN_EMPLOYEE_ID, Employee
from employee_api.schemas.employee import EmployeeResponse

logger = logging.getLogger(__name__)


def _id_in_range(employee_id: int) -> bool:
    return MIN_EMPLOYEE_ID <= employee_id <= MAX_EMPLOYEE_ID


class EmployeeStore:
    """
    Parameterized CRUD over the `employees` table.

    Error Handling Strategy:
        Every statement (and the commit after a write) runs inside a try
        block: SQLAlchemyError becomes PersistenceError with a generic message
        and a debug context (operation, error type, employee id).
        IntegrityError additionally sets `constraint_violation` in the context.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> List[EmployeeResponse]:
        """All rows in backend-native order; empty list on an empty table."""
        try:
            result = await self.session.execute(select(Employee))
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise self._persistence_error("list", e) from e

        return [EmployeeResponse.model_validate(row) for row in rows]

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        """
        Fetch one employee.

        Returns:
            EmployeeResponse, or None when no row has this id. `id` is the
            primary key so at most one row matches; the first is used.
        """
        if not _id_in_range(employee_id):
            return None

        try:
            result = await self.session.execute(
                select(Employee).where(Employee.id == employee_id)
            )
            row = result.scalars().first()
        except SQLAlchemyError as e:
            raise self._persistence_error("get", e, employee_id) from e

        if row is None:
            return None
        return EmployeeResponse.model_validate(row)

    async def create(self, name: str, email: str, position: str) -> EmployeeResponse:
        """
        Insert a row, commit, and return it with the backend-assigned id.

        Raises:
            PersistenceError: Constraint violation, backend failure, or a
                              failed commit
        """
        employee = Employee(name=name, email=email, position=position)
        try:
            self.session.add(employee)
            # Flush sends the INSERT and populates employee.id
            await self.session.flush()
            await self.session.commit()
        except SQLAlchemyError as e:
            raise self._persistence_error("create", e) from e

        logger.info("Employee %s created", employee.id)
        return EmployeeResponse(id=employee.id, name=name, email=email, position=position)

    async def update(
        self, employee_id: int, name: str, email: str, position: str
    ) -> EmployeeResponse:
        """
        Overwrite all three fields of one row and echo the inputs.

        The echo is returned even when no row matched `employee_id`.
        """
        echo = EmployeeResponse(id=employee_id, name=name, email=email, position=position)
        if not _id_in_range(employee_id):
            logger.warning("Update matched no employee with id %s", employee_id)
            return echo

        statement = (
            update(Employee)
            .where(Employee.id == employee_id)
            .values(name=name, email=email, position=position)
        )
        try:
            result = await self.session.execute(statement)
            matched = result.rowcount
            await self.session.commit()
        except SQLAlchemyError as e:
            raise self._persistence_error("update", e, employee_id) from e

        if matched == 0:
            logger.warning("Update matched no employee with id %s", employee_id)
        else:
            logger.info("Employee %s updated", employee_id)
        return echo

    async def delete(self, employee_id: int) -> Dict[str, Any]:
        """Hard-delete one row; acknowledges whether or not it existed."""
        ack = {"message": "Employee deleted successfully"}
        if not _id_in_range(employee_id):
            logger.warning("Delete matched no employee with id %s", employee_id)
            return ack

        try:
            result = await self.session.execute(
                delete(Employee).where(Employee.id == employee_id)
            )
            matched = result.rowcount
            await self.session.commit()
        except SQLAlchemyError as e:
            raise self._persistence_error("delete", e, employee_id) from e

        if matched == 0:
            logger.warning("Delete matched no employee with id %s", employee_id)
        else:
            logger.info("Employee %s deleted", employee_id)
        return ack

    @staticmethod
    def _persistence_error(
        operation: str,
        error: SQLAlchemyError,
        employee_id: Optional[int] = None,
    ) -> PersistenceError:
        context: Dict[str, Any] = {
            "operation": operation,
            "error_type": type(error).__name__,
        }
        if employee_id is not None:
            context["employee_id"] = employee_id
        if isinstance(error, IntegrityError):
            context["constraint_violation"] = True

        logger.error(
            "Database error during employee %s: %s", operation, str(error), exc_info=True
        )
        return PersistenceError(
            message="Could not complete the employee operation. Please try again later.",
            context=context,
        )
