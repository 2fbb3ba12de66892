# Routes package init
"""
Employee API: API Routes Package
===================================

Route Inventory:
    - employees.py:  GET/POST   {prefix}/
                     GET/PUT/DELETE {prefix}/{id}
    - health.py:     GET /health

Routes stay thin: read the request, call EmployeeService, pick the status
code. Business rules live in services/.
"""
