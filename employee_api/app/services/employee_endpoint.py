"""
Request orchestration for the employee resource.

``EmployeeEndpoint`` turns incoming operations into calls on an
injected ``EmployeeStore`` and wraps single‑record results in an
``Envelope``.  Nothing here runs eagerly: every method returns a
coroutine or an async iterator, and the store is only touched once the
caller awaits or iterates it.  Chained operations (update, delete)
build their second store call from the resolved result of the first.

A missing identifier is an expected outcome and comes back as
``NOT_FOUND``.  Errors raised by the store are not caught here; they
propagate to whoever awaits the result.
"""

import logging
from typing import AsyncIterator

from ..schemas.employee import Employee
from ..schemas.envelope import NOT_FOUND, Envelope, Found
from .employee_store import EmployeeStore


logger = logging.getLogger(__name__)


class EmployeeEndpoint:
    """CRUD operations over an ``EmployeeStore``."""

    def __init__(self, store: EmployeeStore) -> None:
        self.store = store

    async def list_all(self) -> AsyncIterator[Employee]:
        """Yield every employee the store holds, in store order."""
        logger.debug("Listing employees")
        async for employee in self.store.find_all():
            yield employee

    async def get_by_id(self, employee_id: int) -> Envelope[Employee]:
        logger.debug("Looking up employee %s", employee_id)
        employee = await self.store.find_by_id(employee_id)
        if employee is None:
            logger.info("Employee %s not found", employee_id)
            return NOT_FOUND
        return Found(employee)

    async def create(self, employee: Employee) -> str:
        """Save a new employee and return a confirmation message.

        The message embeds the identifier assigned by the store.
        """
        saved = await self.store.save(employee)
        logger.info("Created employee %s", saved.employee_id)
        return f"Employee created with Id: {saved.employee_id}"

    async def update(self, employee: Employee) -> Envelope[Employee]:
        """Overwrite name, department code and salary of an existing employee.

        The record is fetched first and only saved if it exists, so an
        unknown identifier yields ``NOT_FOUND`` and never creates a new
        record.  The stored identifier is left untouched.
        """
        if employee.employee_id is None:
            logger.info("Update without employee id")
            return NOT_FOUND
        existing = await self.store.find_by_id(employee.employee_id)
        if existing is None:
            logger.info("Employee %s not found, nothing to update", employee.employee_id)
            return NOT_FOUND
        existing.department_code = employee.department_code
        existing.salary = employee.salary
        existing.employee_name = employee.employee_name
        updated = await self.store.save(existing)
        logger.info("Updated employee %s", updated.employee_id)
        return Found(updated)

    async def delete(self, employee_id: int) -> Envelope[Employee]:
        """Delete an employee and echo back the record as it was before deletion."""
        existing = await self.store.find_by_id(employee_id)
        if existing is None:
            logger.info("Employee %s not found, nothing to delete", employee_id)
            return NOT_FOUND
        await self.store.delete(existing)
        logger.info("Deleted employee %s", employee_id)
        return Found(existing)
