"""
Pydantic model for employee data.

A single ``Employee`` schema serves both as the request body and as the
response payload.  Field names are snake_case in Python; on the wire
they use the camelCase aliases (``employeeId``, ``employeeName``,
``departmentCode``) that existing clients send.  Both spellings are
accepted on input.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Employee(BaseModel):
    """An employee record.

    ``employee_id`` is left empty by clients creating a record; the
    store assigns it on save.
    """

    employee_id: Optional[int] = Field(None, alias="employeeId", examples=[1])
    employee_name: Optional[str] = Field(None, alias="employeeName", examples=["Alice"])
    department_code: Optional[str] = Field(None, alias="departmentCode", examples=["D1"])
    salary: Optional[float] = Field(None, examples=[1000.0])

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }
