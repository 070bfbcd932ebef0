"""
Employee endpoints for API v1.

These routes are thin: each awaits the value produced by
``EmployeeEndpoint`` and renders it.  ``Found`` results become ``200``
responses carrying the employee, ``NotFound`` becomes a ``404``.
Creation answers ``201`` with a plain text confirmation.  Store
failures are left to the application level exception handlers.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from employee_api.app.api.deps import get_employee_endpoint
from employee_api.app.schemas.employee import Employee
from employee_api.app.schemas.envelope import Envelope, Found
from employee_api.app.services.employee_endpoint import EmployeeEndpoint


router = APIRouter()


def _unwrap(envelope: Envelope[Employee], employee_id: Optional[int]) -> Employee:
    if isinstance(envelope, Found):
        return envelope.value
    if employee_id is None:
        detail = "Employee not found: no employeeId given"
    else:
        detail = f"Employee {employee_id} not found"
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


@router.get("/employees", response_model=List[Employee])
async def get_all_employees(
    endpoint: EmployeeEndpoint = Depends(get_employee_endpoint),
) -> List[Employee]:
    """List all employees.

    Returns an empty list when the store holds no records.
    """
    return [employee async for employee in endpoint.list_all()]


@router.get("/employee/{employee_id}", response_model=Employee)
async def get_employee_by_id(
    employee_id: int,
    endpoint: EmployeeEndpoint = Depends(get_employee_endpoint),
) -> Employee:
    """Retrieve a single employee by ID.  Responds 404 if absent."""
    return _unwrap(await endpoint.get_by_id(employee_id), employee_id)


@router.post(
    "/saveEmployee",
    status_code=status.HTTP_201_CREATED,
    response_class=PlainTextResponse,
)
async def save_employee(
    employee: Employee,
    endpoint: EmployeeEndpoint = Depends(get_employee_endpoint),
) -> PlainTextResponse:
    """Create an employee.

    The store assigns the identifier, which is reported back in the
    response text, e.g. ``Employee created with Id: 3``.
    """
    message = await endpoint.create(employee)
    return PlainTextResponse(message, status_code=status.HTTP_201_CREATED)


@router.put("/updateEmployee", response_model=Employee)
async def update_employee(
    employee: Employee,
    endpoint: EmployeeEndpoint = Depends(get_employee_endpoint),
) -> Employee:
    """Update name, department code and salary of an existing employee.

    The identifier is taken from the request body.  Unknown identifiers
    are answered with 404; this route never creates records.
    """
    return _unwrap(await endpoint.update(employee), employee.employee_id)


@router.delete("/employee/{employee_id}", response_model=Employee)
async def delete_employee(
    employee_id: int,
    endpoint: EmployeeEndpoint = Depends(get_employee_endpoint),
) -> Employee:
    """Delete an employee and return the record as it was before deletion."""
    return _unwrap(await endpoint.delete(employee_id), employee_id)
