"""
Unit tests for the in-memory employee store.
"""

import logging
import threading

import pytest

from employee_api.app.core.errors import Conflict, InvalidInput, NotFound
from employee_api.app.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_service import EmployeeService


def _ids(employees):
    return [e.id for e in employees]


def _create(service, **fields):
    return service.create_employee(EmployeeCreate.model_validate(fields))


def _update(service, employee_id, **fields):
    return service.update_employee(employee_id, EmployeeUpdate.model_validate(fields))


def test_seeded_store_has_three_employees_in_order(service):
    employees = service.list_employees()
    assert _ids(employees) == [1, 2, 3]
    assert employees[0].model_dump(by_alias=True) == {
        "id": 1, "name": "Leena", "salary": 45000, "joiningYear": 2022,
    }


def test_empty_store():
    assert EmployeeService().list_employees() == []


def test_duplicate_initial_records_rejected():
    with pytest.raises(Conflict):
        EmployeeService([{"id": 1, "name": "A"}, {"id": 1, "name": "B"}])


def test_get_employee(service):
    assert service.get_employee(2).name == "Rachana"


@pytest.mark.parametrize("missing_id", [99, 0, None])
def test_get_missing_employee(service, missing_id):
    with pytest.raises(NotFound) as exc_info:
        service.get_employee(missing_id)
    assert exc_info.value.message == "Employee not found"


def test_returned_records_are_copies(service):
    employee = service.get_employee(1)
    employee.name = "Changed"
    service.list_employees()[0].salary = 1
    assert service.get_employee(1).name == "Leena"
    assert service.get_employee(1).salary == 45000


def test_create_round_trip(service):
    created = _create(service, id=4, name="Priya", salary=52000, joiningYear=2024)
    assert created.model_dump(by_alias=True) == {
        "id": 4, "name": "Priya", "salary": 52000, "joiningYear": 2024,
    }
    assert service.get_employee(4) == created
    assert _ids(service.list_employees()) == [1, 2, 3, 4]


def test_create_defaults_salary_and_year(service):
    created = _create(service, id=5, name="Ravi")
    assert created.salary == 0
    assert created.joining_year is None


def test_create_coerces_numeric_strings(service):
    created = _create(service, id="6", name="Meera", salary="48000", joiningYear="2020")
    assert (created.id, created.salary, created.joining_year) == (6, 48000, 2020)


def test_create_falls_back_on_non_numeric_values(service):
    created = _create(service, id=7, name="Karan", salary="abc", joiningYear="soon")
    assert created.salary == 0
    assert created.joining_year is None


@pytest.mark.parametrize(
    "fields",
    [{}, {"name": "NoId"}, {"id": 8}, {"id": 8, "name": ""}, {"id": 0, "name": "Zero"}],
)
def test_create_requires_id_and_name(service, fields):
    with pytest.raises(InvalidInput) as exc_info:
        _create(service, **fields)
    assert exc_info.value.message == "id and name required"
    assert len(service) == 3


@pytest.mark.parametrize("bad_id", ["abc", -4, 2.5])
def test_create_rejects_malformed_id(service, bad_id):
    with pytest.raises(InvalidInput):
        _create(service, id=bad_id, name="Bad")
    assert len(service) == 3


def test_create_rejects_non_string_name(service):
    with pytest.raises(InvalidInput):
        _create(service, id=9, name=123)


def test_create_conflict_leaves_existing_record(service):
    before = service.get_employee(1)
    with pytest.raises(Conflict) as exc_info:
        _create(service, id=1, name="Impostor", salary=1)
    assert exc_info.value.message == "Employee with this id already exists"
    assert service.get_employee(1) == before
    assert len(service) == 3


def test_create_conflict_with_string_id(service):
    with pytest.raises(Conflict):
        _create(service, id="2", name="Again")


def test_update_changes_only_supplied_fields(service):
    updated = _update(service, 1, name="X")
    assert updated.name == "X"
    assert updated.salary == 45000
    assert updated.joining_year == 2022
    assert service.get_employee(1) == updated


def test_update_numeric_fields(service):
    updated = _update(service, 2, salary="58000", joiningYear=2024)
    assert (updated.name, updated.salary, updated.joining_year) == ("Rachana", 58000, 2024)


def test_update_keeps_values_that_are_not_numbers(service):
    updated = _update(service, 3, salary="abc", joiningYear="later")
    assert updated.salary == 60000
    assert updated.joining_year == 2021


def test_update_and_create_handle_bad_salary_differently(service):
    updated = _update(service, 1, salary="abc")
    created = _create(service, id=10, name="New", salary="abc")
    assert updated.salary == 45000
    assert created.salary == 0


def test_update_keeps_values_for_zero_and_null(service):
    updated = _update(service, 1, salary=0, joiningYear=None)
    assert updated.salary == 45000
    assert updated.joining_year == 2022


def test_update_with_empty_body_is_a_no_op(service):
    assert _update(service, 1) == service.get_employee(1)


def test_update_missing_employee(service):
    with pytest.raises(NotFound):
        _update(service, 42, name="Ghost")
    assert len(service) == 3


@pytest.mark.parametrize("bad_name", ["", None, 5])
def test_update_rejects_bad_name(service, bad_name):
    with pytest.raises(InvalidInput):
        _update(service, 1, name=bad_name)
    assert service.get_employee(1).name == "Leena"


def test_update_preserves_order(service):
    _update(service, 2, name="R")
    assert [e.name for e in service.list_employees()] == ["Leena", "R", "Amit"]


def test_delete_employee(service):
    service.delete_employee(2)
    assert _ids(service.list_employees()) == [1, 3]


def test_delete_missing_employee_leaves_collection(service):
    with pytest.raises(NotFound):
        service.delete_employee(99)
    assert len(service) == 3


def test_ids_stay_unique_across_creates_and_deletes(service):
    _create(service, id=4, name="D")
    service.delete_employee(1)
    _create(service, id=1, name="A again")
    with pytest.raises(Conflict):
        _create(service, id=4, name="D again")
    ids = _ids(service.list_employees())
    assert ids == [2, 3, 4, 1]
    assert len(ids) == len(set(ids))


def test_filter_by_salary_is_inclusive(service):
    assert _ids(service.filter_employees(salary="50000")) == [2, 3]
    assert _ids(service.filter_employees(salary="55000")) == [2, 3]


def test_filter_by_year_is_exact(service):
    assert _ids(service.filter_employees(year="2022")) == [1]
    assert service.filter_employees(year="2030") == []


def test_filter_combines_salary_and_year(service):
    assert _ids(service.filter_employees(salary="50000", year="2021")) == [3]
    assert service.filter_employees(salary="50000", year="2022") == []


@pytest.mark.parametrize(
    "salary, year",
    [
        (None, None),
        ("-5", None),
        ("0", None),
        ("", ""),
        ("abc", "xyz"),
        (None, "1800"),
        (None, "1900"),
        ("Infinity", None),
        ("５００００", "٢٠٢٢"),
    ],
)
def test_filter_ignores_unusable_values(service, salary, year):
    assert _ids(service.filter_employees(salary=salary, year=year)) == [1, 2, 3]


def test_filter_applies_valid_half_of_invalid_pair(service):
    assert _ids(service.filter_employees(salary="abc", year="2023")) == [2]


def test_filter_sees_live_collection_without_mutating_it(service):
    _create(service, id=4, name="Priya", salary=70000, joiningYear=2021)
    assert _ids(service.filter_employees(salary="50000", year="2021")) == [3, 4]
    assert len(service) == 4


def test_concurrent_creates_keep_ids_unique(service):
    errors = []

    def worker(offset):
        for employee_id in range(100, 150):
            try:
                _create(service, id=employee_id, name=f"w{offset}")
            except Conflict:
                errors.append(employee_id)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = _ids(service.list_employees())
    assert len(ids) == len(set(ids)) == 53
    assert len(errors) == 150


@pytest.mark.parametrize(
    "action",
    [
        lambda s: _create(s, id="abc", name="Bad"),
        lambda s: _create(s, id=9, name=123),
        lambda s: _create(s, name="NoId"),
        lambda s: _create(s, id=1, name="Dup"),
        lambda s: _update(s, 1, name=""),
        lambda s: _update(s, 42, name="Ghost"),
        lambda s: s.delete_employee(42),
    ],
)
def test_rejected_mutations_are_logged_as_warnings(service, caplog, action):
    caplog.set_level(logging.INFO, logger="employee_api")
    with pytest.raises((InvalidInput, Conflict, NotFound)):
        action(service)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert warnings[0].name == "employee_api.app.services.employee_service"


def test_successful_mutations_are_logged_as_info(service, caplog):
    caplog.set_level(logging.INFO, logger="employee_api")
    _create(service, id=4, name="D")
    _update(service, 4, salary=100)
    service.delete_employee(4)
    assert [r.levelno for r in caplog.records] == [logging.INFO] * 3
    assert [r.getMessage() for r in caplog.records][0] == "Created employee 4"
