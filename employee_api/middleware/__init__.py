# Middleware package init
"""
Employee API: Middleware Package
===================================

What:  Request processing that sits in front of the route handlers.

Contents:
    - access.py:      AccessMiddleware, request ID and access log (every request)
    - validation.py:  validate_employee_payload (POST / and PUT /{id} only,
                      attached as a route dependency)

Middleware Chain (every request):
    Request → [Access] → [CORS] → Route Handler
"""
