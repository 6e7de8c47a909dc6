"""
Error hierarchy for the employee store.

Every error carries the user-facing ``message`` and the HTTP status the
API layer answers with.  Handlers in ``api.error_handlers`` turn them
into the ``{"success": false, "message": ...}`` envelope.
"""

from typing import Any, Dict


class EmployeeError(Exception):
    """Base exception for all employee store failures."""

    http_status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class InvalidInput(EmployeeError):
    """Required fields are missing or malformed."""

    http_status = 400


class Conflict(EmployeeError):
    """An employee with the same id already exists."""

    http_status = 400


class NotFound(EmployeeError):
    """No employee has the requested id."""

    http_status = 404

    def __init__(self, message: str = "Employee not found") -> None:
        super().__init__(message)
