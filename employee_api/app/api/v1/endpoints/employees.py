"""
Employee endpoints for API v1.

CRUD routes over the in-memory employee store plus a lenient filter.
Every response is wrapped in the ``{"success": ..., ...}`` envelope;
failures are raised by ``EmployeeService`` and rendered by the global
exception handlers.

Path ids are taken as text and parsed here: an id that is not a
number matches no employee and yields 404 rather than a validation
error.  ``/filter`` is declared before ``/{employee_id}`` so it is not
captured by the id route.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import ValidationError

from employee_api.app.api.deps import get_employee_service
from employee_api.app.core.coercion import to_positive_int
from employee_api.app.core.errors import InvalidInput
from employee_api.app.schemas.employee import (
    EmployeeCreate,
    EmployeeListResponse,
    EmployeeMutationResponse,
    EmployeeResponse,
    EmployeeUpdate,
    MessageResponse,
)
from employee_api.app.services.employee_service import EmployeeService

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSE = {404: {"model": MessageResponse, "description": "Employee not found"}}


@router.get("", response_model=EmployeeListResponse, summary="Get all employees")
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeListResponse:
    """Return every employee in insertion order."""
    return EmployeeListResponse(data=service.list_employees())


@router.get(
    "/filter",
    response_model=EmployeeListResponse,
    summary="Filter employees by salary and year",
)
async def filter_employees(
    salary: Optional[str] = Query(None, description="Minimum salary (inclusive); ignored unless > 0"),
    year: Optional[str] = Query(None, description="Exact joining year; ignored unless > 1900"),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeListResponse:
    """Return employees matching the filters.

    Invalid or out-of-range values are ignored, so this always succeeds,
    possibly with an empty list.
    """
    return EmployeeListResponse(data=service.filter_employees(salary=salary, year=year))


@router.get(
    "/{employee_id}",
    response_model=EmployeeResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get employee by ID",
)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    return EmployeeResponse(data=service.get_employee(to_positive_int(employee_id)))


@router.post(
    "",
    response_model=EmployeeMutationResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse, "description": "Missing id/name or duplicate id"}},
    summary="Create a new employee",
)
async def create_employee(
    payload: Optional[EmployeeCreate] = None,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeMutationResponse:
    employee = service.create_employee(payload or EmployeeCreate())
    return EmployeeMutationResponse(message="Employee created", data=employee)


@router.put(
    "/{employee_id}",
    response_model=EmployeeMutationResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Update employee by ID",
)
async def update_employee(
    employee_id: str,
    payload: Any = Body(None, examples=[{"name": "Leena K", "salary": 48000}]),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeMutationResponse:
    """Partially update an employee; fields left out of the body are kept.

    The body is validated only once the employee is known to exist, so
    an unknown id is a 404 whatever the body looks like.
    """
    parsed_id = to_positive_int(employee_id)
    service.get_employee(parsed_id)
    try:
        changes = EmployeeUpdate.model_validate(payload if payload is not None else {})
    except ValidationError:
        logger.warning("Rejected update of employee %s with body %r", parsed_id, payload)
        raise InvalidInput("Invalid request body")
    employee = service.update_employee(parsed_id, changes)
    return EmployeeMutationResponse(message="Employee updated", data=employee)


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete employee by ID",
)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service),
) -> MessageResponse:
    parsed_id = to_positive_int(employee_id)
    service.delete_employee(parsed_id)
    return MessageResponse(success=True, message=f"Employee {parsed_id} deleted")
