"""Shared fixtures: a seeded in‑memory store and an app built around it."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from employee_api.app.main import create_app
from employee_api.app.schemas.employee import Employee
from employee_api.app.services.employee_endpoint import EmployeeEndpoint
from employee_api.app.services.employee_store import InMemoryEmployeeStore


@pytest.fixture
def alice() -> Employee:
    return Employee(employee_id=1, employee_name="Alice", department_code="D1", salary=1000)


@pytest.fixture
def store(alice: Employee) -> InMemoryEmployeeStore:
    """Store holding a single employee, Alice, under id 1."""
    return InMemoryEmployeeStore(seed=[alice])


@pytest.fixture
def endpoint(store: InMemoryEmployeeStore) -> EmployeeEndpoint:
    return EmployeeEndpoint(store)


@pytest.fixture
def app(store: InMemoryEmployeeStore) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
