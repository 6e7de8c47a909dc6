"""
Business logic for employees.

``EmployeeService`` keeps the employee collection in memory.  Records
are stored in insertion order and identified by a caller-supplied
positive integer ``id``; no two records may share one.  Every method
hands out copies so the service remains the sole owner of its records.

The collection is guarded by a single lock.  FastAPI runs handlers on
an event loop and a thread pool, so mutations are serialized and reads
never see a half-applied change.

Numeric input is coerced by the request schemas (``None`` meaning
absent or not a number) and the service applies different fallbacks
depending on the operation:

* on create, a missing ``salary`` becomes 0 and a missing
  ``joiningYear`` becomes ``None``;
* on update, a missing or zero value keeps whatever the record had.
"""

import logging
import threading
from typing import Any, Iterable, List, Optional

from ..core.coercion import to_number, to_positive_int
from ..core.errors import Conflict, InvalidInput, NotFound
from ..schemas.employee import EmployeeCreate, EmployeeRead, EmployeeUpdate

logger = logging.getLogger(__name__)

SEED_EMPLOYEES = (
    {"id": 1, "name": "Leena", "salary": 45000, "joiningYear": 2022},
    {"id": 2, "name": "Rachana", "salary": 55000, "joiningYear": 2023},
    {"id": 3, "name": "Amit", "salary": 60000, "joiningYear": 2021},
)

# Year filter values at or below this are ignored.
MIN_FILTER_YEAR = 1900


class EmployeeService:
    """In-memory store of employee records."""

    def __init__(self, employees: Optional[Iterable[Any]] = None) -> None:
        self._employees: List[EmployeeRead] = []
        self._lock = threading.RLock()
        for item in employees or ():
            record = EmployeeRead.model_validate(item)
            if self._find(record.id) is not None:
                raise Conflict("Employee with this id already exists")
            self._employees.append(record)

    @classmethod
    def seeded(cls) -> "EmployeeService":
        """Return a service populated with the sample employees."""
        return cls(SEED_EMPLOYEES)

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def _index(self, employee_id: Optional[int]) -> Optional[int]:
        if employee_id is None:
            return None
        for index, employee in enumerate(self._employees):
            if employee.id == employee_id:
                return index
        return None

    def _find(self, employee_id: Optional[int]) -> Optional[EmployeeRead]:
        index = self._index(employee_id)
        return None if index is None else self._employees[index]

    def list_employees(self) -> List[EmployeeRead]:
        """Return every employee in insertion order."""
        with self._lock:
            return [employee.model_copy() for employee in self._employees]

    def get_employee(self, employee_id: Optional[int]) -> EmployeeRead:
        """Return the employee with ``employee_id``.

        ``None`` (an id that could not be parsed) never matches.

        Raises
        ------
        NotFound
            If no employee has that id.
        """
        with self._lock:
            employee = self._find(employee_id)
            if employee is None:
                raise NotFound()
            return employee.model_copy()

    def create_employee(self, data: EmployeeCreate) -> EmployeeRead:
        """Validate ``data`` and append a new employee.

        ``id`` must be a positive integer (numeric strings are accepted)
        and ``name`` a non-empty string.  ``salary`` defaults to 0 and
        ``joiningYear`` to ``None`` when absent or not numeric.

        Raises
        ------
        InvalidInput
            If ``id`` or ``name`` is missing or malformed.
        Conflict
            If an employee with the same id already exists.
        """
        if not data.id or not data.name:
            logger.warning("Rejected employee without id or name: %r", data.model_dump(by_alias=True))
            raise InvalidInput("id and name required")
        employee_id = to_positive_int(data.id)
        if employee_id is None:
            logger.warning("Rejected employee with malformed id %r", data.id)
            raise InvalidInput("id must be a positive integer")
        if not isinstance(data.name, str):
            logger.warning("Rejected employee %s with non-string name %r", employee_id, data.name)
            raise InvalidInput("name must be a string")

        with self._lock:
            if self._find(employee_id) is not None:
                logger.warning("Rejected duplicate employee id %s", employee_id)
                raise Conflict("Employee with this id already exists")
            employee = EmployeeRead(
                id=employee_id,
                name=data.name,
                salary=data.salary or 0,
                joining_year=data.joining_year or None,
            )
            self._employees.append(employee)
            logger.info("Created employee %s", employee_id)
            return employee.model_copy()

    def update_employee(self, employee_id: Optional[int], data: EmployeeUpdate) -> EmployeeRead:
        """Apply the fields present in ``data`` to an existing employee.

        Fields absent from the request body are left alone.  A supplied
        ``salary`` or ``joiningYear`` that is not a usable number keeps
        the current value instead of resetting it.

        Raises
        ------
        NotFound
            If no employee has ``employee_id``.
        InvalidInput
            If ``name`` is supplied but empty or not a string.
        """
        supplied = data.model_fields_set
        with self._lock:
            index = self._index(employee_id)
            if index is None:
                logger.warning("Update of unknown employee %s", employee_id)
                raise NotFound()

            changes = {}
            if "name" in supplied:
                if not data.name or not isinstance(data.name, str):
                    logger.warning("Rejected update of employee %s with name %r", employee_id, data.name)
                    raise InvalidInput("name must be a non-empty string")
                changes["name"] = data.name
            if "salary" in supplied and data.salary:
                changes["salary"] = data.salary
            if "joining_year" in supplied and data.joining_year:
                changes["joining_year"] = data.joining_year

            updated = self._employees[index].model_copy(update=changes)
            self._employees[index] = updated
            logger.info("Updated employee %s: %s", employee_id, sorted(changes))
            return updated.model_copy()

    def delete_employee(self, employee_id: Optional[int]) -> None:
        """Remove the employee with ``employee_id``.

        Raises
        ------
        NotFound
            If no employee has that id; the collection is unchanged.
        """
        with self._lock:
            index = self._index(employee_id)
            if index is None:
                logger.warning("Delete of unknown employee %s", employee_id)
                raise NotFound()
            del self._employees[index]
            logger.info("Deleted employee %s", employee_id)

    def filter_employees(self, salary: Any = None, year: Any = None) -> List[EmployeeRead]:
        """Return employees matching the optional salary and year filters.

        ``salary`` keeps employees earning at least that much; it only
        applies when it parses to a number greater than 0.  ``year``
        keeps employees who joined in exactly that year; it only applies
        when it parses to a number greater than 1900.  Anything else
        (missing, empty, non-numeric, out of range) means no filter on
        that field, so this never raises.
        """
        logger.debug("Filter called with raw query: salary=%r year=%r", salary, year)
        min_salary = to_number(salary) if salary is not None else None
        join_year = to_number(year) if year is not None else None

        with self._lock:
            result = list(self._employees)
        if min_salary is not None and min_salary > 0:
            result = [e for e in result if e.salary >= min_salary]
        if join_year is not None and join_year > MIN_FILTER_YEAR:
            result = [e for e in result if e.joining_year == join_year]
        return [employee.model_copy() for employee in result]
