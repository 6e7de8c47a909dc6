"""Shared fixtures: a seeded store and a fresh application per test."""

import pytest
from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.main import create_app
from employee_api.app.services.employee_service import EmployeeService


@pytest.fixture()
def service():
    return EmployeeService.seeded()


@pytest.fixture()
def app(service):
    return create_app(Settings(), service=service)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
