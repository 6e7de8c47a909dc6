"""Employee API client.

A thin wrapper around the Employee API's REST endpoints built on the
``requests`` library.  Every high-level method returns a tuple
``(data, error)``:

* on success ``data`` is the ``data`` member of the response envelope
  (the deletion message for :meth:`EmployeeAPI.delete_employee`) and
  ``error`` is ``None``;
* on failure ``data`` is ``None`` (an empty list for list operations)
  and ``error`` is a dictionary with keys ``status_code`` and
  ``message``.  Transport failures use ``status_code=None``.

Example::

    api = EmployeeAPI(base_url="http://localhost:5000")
    employees, error = api.filter_employees(salary=50000)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class EmployeeAPI:
    """Client for the employee endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "",
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:5000``.
            prefix: Path prefix the service mounts its routes under
                (``API_PREFIX`` on the server), e.g. ``/api/v1``.
            api_key: Optional API key.  If set, an ``Authorization``
                header with the value ``Bearer <api_key>`` is included in
                all requests.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Perform an HTTP request and unwrap the response envelope.

        Returns:
            A tuple ``(envelope, error)``.  ``envelope`` is the decoded
            JSON object on success.  A non-2xx status, an envelope with
            ``success: false`` or a transport failure yields ``error``.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        try:
            envelope = response.json() if response.content else {}
        except ValueError as exc:
            logger.error("API returned invalid JSON: %s", exc)
            return None, {"status_code": response.status_code, "message": "Invalid JSON response"}

        if not isinstance(envelope, dict) or not envelope.get("success", False):
            message = envelope.get("message") if isinstance(envelope, dict) else None
            return None, {"status_code": response.status_code, "message": message or "Request failed"}
        return envelope, None

    # ------------------------------------------------------------------
    # Employee operations
    # ------------------------------------------------------------------
    def list_employees(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all employees in insertion order."""
        envelope, error = self._request("GET", "/employees")
        if error:
            return [], error
        return envelope.get("data") or [], None

    def get_employee(self, employee_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single employee by ID."""
        envelope, error = self._request("GET", f"/employees/{employee_id}")
        if error:
            return None, error
        return envelope.get("data"), None

    def create_employee(
        self,
        employee_id: Any,
        name: Any,
        salary: Any = None,
        joining_year: Any = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create an employee.

        ``salary`` and ``joining_year`` are only sent when given, so the
        server applies its defaults (0 and ``null``).
        """
        payload: Dict[str, Any] = {"id": employee_id, "name": name}
        if salary is not None:
            payload["salary"] = salary
        if joining_year is not None:
            payload["joiningYear"] = joining_year
        envelope, error = self._request("POST", "/employees", json_body=payload)
        if error:
            return None, error
        return envelope.get("data"), None

    def update_employee(self, employee_id: Any, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Partially update an employee.

        Accepts ``name``, ``salary`` and ``joining_year`` keyword
        arguments; only the ones passed are sent.
        """
        payload: Dict[str, Any] = {}
        for key, value in fields.items():
            payload["joiningYear" if key == "joining_year" else key] = value
        envelope, error = self._request("PUT", f"/employees/{employee_id}", json_body=payload)
        if error:
            return None, error
        return envelope.get("data"), None

    def delete_employee(self, employee_id: Any) -> Tuple[Optional[str], Optional[Error]]:
        """Delete an employee and return the server's confirmation message."""
        envelope, error = self._request("DELETE", f"/employees/{employee_id}")
        if error:
            return None, error
        return envelope.get("message"), None

    def filter_employees(
        self, salary: Any = None, year: Any = None
    ) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve employees earning at least ``salary`` who joined in ``year``.

        Either filter may be omitted; the server ignores values it
        cannot use.
        """
        params = {}
        if salary is not None:
            params["salary"] = salary
        if year is not None:
            params["year"] = year
        envelope, error = self._request("GET", "/employees/filter", params=params or None)
        if error:
            return [], error
        return envelope.get("data") or [], None
