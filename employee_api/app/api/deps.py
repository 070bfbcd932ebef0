"""
FastAPI dependency providers.

The store is created once per application and kept on
``app.state.employee_store``; a fresh ``EmployeeEndpoint`` wraps it for
every request.  Override ``get_employee_endpoint`` through
``app.dependency_overrides`` to substitute a different collaborator.
"""

from fastapi import Request

from ..services.employee_endpoint import EmployeeEndpoint
from ..services.employee_store import EmployeeStore


def get_employee_store(request: Request) -> EmployeeStore:
    return request.app.state.employee_store


def get_employee_endpoint(request: Request) -> EmployeeEndpoint:
    return EmployeeEndpoint(get_employee_store(request))
