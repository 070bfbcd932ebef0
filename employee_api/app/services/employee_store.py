"""
Employee persistence contract and the in‑memory implementation.

``EmployeeStore`` is the collaborator the endpoint layer talks to.  Any
object offering these four asynchronous operations can be injected;
``InMemoryEmployeeStore`` is the default and ``SQLiteEmployeeStore``
(see ``sqlite_store``) persists to disk.  ``build_store`` picks one
from the application settings.

Stores hand out copies of their records, so a caller may mutate a
returned employee freely; nothing changes in the store until the
record is passed back to ``save``.
"""

import logging
from typing import AsyncIterator, Dict, Iterable, Optional, Protocol

from ..core.config import Settings
from ..schemas.employee import Employee


logger = logging.getLogger(__name__)


class EmployeeStore(Protocol):
    def find_all(self) -> AsyncIterator[Employee]:
        """Yield every stored employee."""
        ...

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""
        ...

    async def save(self, employee: Employee) -> Employee:
        """Insert or overwrite ``employee`` and return the stored record.

        An identifier is assigned when ``employee.employee_id`` is
        ``None``.
        """
        ...

    async def delete(self, employee: Employee) -> None:
        """Remove ``employee`` from the store."""
        ...


class InMemoryEmployeeStore:
    """Dictionary backed store, keyed by identifier.

    Identifiers are assigned from a counter starting at 1.  Saving a
    record that carries an identifier not yet in use stores it under
    that identifier and moves the counter past it.  ``find_all`` yields
    records in ascending identifier order.
    """

    def __init__(self, seed: Optional[Iterable[Employee]] = None) -> None:
        self._employees: Dict[int, Employee] = {}
        self._next_id = 1
        for employee in seed or ():
            self._put(employee)

    def _put(self, employee: Employee) -> Employee:
        stored = employee.model_copy()
        if stored.employee_id is None:
            stored.employee_id = self._next_id
        self._next_id = max(self._next_id, stored.employee_id + 1)
        self._employees[stored.employee_id] = stored
        return stored.model_copy()

    def count(self) -> int:
        return len(self._employees)

    async def find_all(self) -> AsyncIterator[Employee]:
        # Snapshot the keys so concurrent saves or deletes do not break iteration.
        for employee_id in sorted(self._employees):
            employee = self._employees.get(employee_id)
            if employee is not None:
                yield employee.model_copy()

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        employee = self._employees.get(employee_id)
        return employee.model_copy() if employee is not None else None

    async def save(self, employee: Employee) -> Employee:
        saved = self._put(employee)
        logger.debug("Stored employee %s", saved.employee_id)
        return saved

    async def delete(self, employee: Employee) -> None:
        if self._employees.pop(employee.employee_id, None) is not None:
            logger.debug("Removed employee %s", employee.employee_id)


def build_store(settings: Settings) -> EmployeeStore:
    """Create the store selected by ``settings.store_backend``.

    Raises ``ValueError`` for an unknown backend name.
    """
    backend = settings.store_backend.lower()
    if backend == "memory":
        return InMemoryEmployeeStore()
    if backend == "sqlite":
        from .sqlite_store import SQLiteEmployeeStore

        return SQLiteEmployeeStore(settings.database_url)
    raise ValueError(f"Unknown store backend: {settings.store_backend!r}")
