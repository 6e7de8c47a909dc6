"""
Pydantic models for employee data.

``EmployeeRead`` is the shape of a stored record.  ``EmployeeCreate``
and ``EmployeeUpdate`` describe request bodies: they accept loosely
typed input and coerce ``salary`` and ``joiningYear`` to numbers, with
``None`` standing for "absent or not a number".  Identity and name
checks are left to ``EmployeeService`` so that missing fields produce
the API's own error envelope instead of a validation error.

Field names are snake_case in Python and camelCase on the wire
(``joining_year`` <-> ``joiningYear``).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.coercion import Number, to_number


class EmployeeRead(BaseModel):
    """Schema for reading an employee from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Leena"])
    salary: Number = Field(0, examples=[45000])
    joining_year: Optional[Number] = Field(None, alias="joiningYear", examples=[2022])


class EmployeeCreate(BaseModel):
    """Schema for creating an employee.

    ``id`` and ``name`` are required by the service; they are typed
    loosely here so that their absence is reported as
    ``"id and name required"`` rather than a schema error.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Any = Field(None, examples=[4])
    name: Any = Field(None, examples=["Priya"])
    salary: Optional[Number] = Field(None, examples=[52000])
    joining_year: Optional[Number] = Field(None, alias="joiningYear", examples=[2024])

    @field_validator("salary", "joining_year", mode="before")
    @classmethod
    def coerce_number(cls, v):
        return to_number(v)


class EmployeeUpdate(BaseModel):
    """Schema for updating an employee.

    All fields are optional; only fields present in the request body are
    applied (see ``model_fields_set``).
    """

    model_config = ConfigDict(populate_by_name=True)

    name: Any = Field(None, examples=["Leena K"])
    salary: Optional[Number] = Field(None, examples=[48000])
    joining_year: Optional[Number] = Field(None, alias="joiningYear", examples=[2022])

    @field_validator("salary", "joining_year", mode="before")
    @classmethod
    def coerce_number(cls, v):
        return to_number(v)


class EmployeeListResponse(BaseModel):
    success: bool = True
    data: List[EmployeeRead]


class EmployeeResponse(BaseModel):
    success: bool = True
    data: EmployeeRead


class EmployeeMutationResponse(BaseModel):
    """Envelope returned by create and update."""

    success: bool = True
    message: str
    data: EmployeeRead


class MessageResponse(BaseModel):
    """Envelope carrying only a message (deletions and all failures)."""

    success: bool
    message: str
