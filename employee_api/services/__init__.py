# Services package init
"""
Employee API: Services Layer
===============================

Service Inventory:
    - EmployeeStore:   parameterized SQL against the employees table
    - EmployeeService: Record Service (presence rule on create, else pass-through)

Both are constructed per request by the dependencies in routes/employees.py
around the request's AsyncSession, and hold no state between requests.
"""
