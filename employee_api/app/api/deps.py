"""
FastAPI dependencies shared by the v1 endpoints.
"""

from fastapi import Request

from employee_api.app.services.employee_service import EmployeeService


def get_employee_service(request: Request) -> EmployeeService:
    """Return the store owned by the running application."""
    return request.app.state.employee_service
