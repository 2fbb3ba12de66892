"""
Employee API: Application Package Initializer
================================================

What: Marks the `employee_api` directory as a Python package.
Who:  Imported by uvicorn (`employee_api.main:app`), pytest, and every module
      in the service via absolute imports (`from employee_api.config import settings`).

Architecture Note:
    Each request travels down four thin layers and back up:

    ┌─────────────────────────────────────┐
    │   Routes (Request Handlers)         │  ← HTTP status codes and bodies
    ├─────────────────────────────────────┤
    │   Validation (route dependency)     │  ← rejects bad payloads early
    ├─────────────────────────────────────┤
    │   EmployeeService (Record Service)  │  ← field-presence rule on create
    ├─────────────────────────────────────┤
    │   EmployeeStore (Store)             │  ← parameterized SQL, error mapping
    └─────────────────────────────────────┘

    Each layer depends only on the one below it.
"""

__version__ = "1.0.0"
