"""
Employee API: Employee SQLAlchemy Model
==========================================

What:  ORM model representing the `employees` table.
How:   Inherits from the shared DeclarativeBase; `create_tables()` reads its
       metadata at startup.
Who:   Used by EmployeeStore to build parameterized SELECT/INSERT/UPDATE/DELETE
       statements.

Table Design:
    - id: Integer primary key assigned by the backend (SERIAL / AUTOINCREMENT),
      never supplied by the client and never changed after insert
    - name, email, position: required text, overwritten together on update
    - email carries no unique constraint

Id Range:
    `id` is a 32-bit signed INTEGER on PostgreSQL. The same bounds apply on
    SQLite so both backends agree. Ids outside [MIN_EMPLOYEE_ID,
    MAX_EMPLOYEE_ID] can never match a row and drivers reject them as
    statement parameters, so the Store treats them as missing.
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_api.database import Base

MIN_EMPLOYEE_ID = -(2 ** 31)
MAX_EMPLOYEE_ID = 2 ** 31 - 1


class Employee(Base):
    """
    Represents one employee row.

    Lifecycle:
        1. Inserted by EmployeeStore.create (id assigned by the backend)
        2. Overwritten in place by EmployeeStore.update (all three fields)
        3. Hard-deleted by EmployeeStore.delete
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    email: Mapped[str] = mapped_column(String(255), nullable=False)

    position: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, email='{self.email}')>"
