"""
SQLite backed employee store.

Each operation opens its own connection through ``core.db`` and runs in
the threadpool, keeping blocking sqlite calls off the event loop.
Database errors are re‑raised as ``StoreError``.
"""

import logging
import sqlite3
from typing import AsyncIterator, List, Optional

from fastapi.concurrency import run_in_threadpool

from ..core.db import get_cursor, init_db
from ..core.exceptions import StoreError
from ..schemas.employee import Employee


logger = logging.getLogger(__name__)

_COLUMNS = "employee_id, employee_name, department_code, salary"

# SQLite INTEGER is a signed 64-bit value.
_MIN_ID = -(2 ** 63)
_MAX_ID = 2 ** 63 - 1


def _storable_id(employee_id: Optional[int]) -> bool:
    return employee_id is not None and _MIN_ID <= employee_id <= _MAX_ID


def _row_to_employee(row: sqlite3.Row) -> Employee:
    return Employee(
        employee_id=row["employee_id"],
        employee_name=row["employee_name"],
        department_code=row["department_code"],
        salary=row["salary"],
    )


class SQLiteEmployeeStore:
    """Employee store persisting into the ``employees`` table."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path
        try:
            init_db(db_path)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot initialise employee database: {e}") from e

    def _select_all(self) -> List[Employee]:
        with get_cursor(self.db_path) as cursor:
            rows = cursor.execute(
                f"SELECT {_COLUMNS} FROM employees ORDER BY employee_id"
            ).fetchall()
        return [_row_to_employee(row) for row in rows]

    def _select_one(self, employee_id: int) -> Optional[Employee]:
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE employee_id = ?",
                (employee_id,),
            ).fetchone()
        return _row_to_employee(row) if row else None

    def _upsert(self, employee: Employee) -> Employee:
        with get_cursor(self.db_path) as cursor:
            if employee.employee_id is None:
                cursor.execute(
                    "INSERT INTO employees (employee_name, department_code, salary) VALUES (?, ?, ?)",
                    (employee.employee_name, employee.department_code, employee.salary),
                )
                employee_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT INTO employees (employee_id, employee_name, department_code, salary)
                    VALUES (?, ?, ?, ?)
                    ON CONFLICT(employee_id) DO UPDATE SET
                        employee_name = excluded.employee_name,
                        department_code = excluded.department_code,
                        salary = excluded.salary
                    """,
                    (
                        employee.employee_id,
                        employee.employee_name,
                        employee.department_code,
                        employee.salary,
                    ),
                )
                employee_id = employee.employee_id
        return employee.model_copy(update={"employee_id": employee_id})

    def _remove(self, employee_id: int) -> None:
        with get_cursor(self.db_path) as cursor:
            cursor.execute("DELETE FROM employees WHERE employee_id = ?", (employee_id,))

    async def find_all(self) -> AsyncIterator[Employee]:
        try:
            employees = await run_in_threadpool(self._select_all)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot list employees: {e}") from e
        for employee in employees:
            yield employee

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        if not _storable_id(employee_id):
            # No row can carry an identifier outside the INTEGER range.
            return None
        try:
            return await run_in_threadpool(self._select_one, employee_id)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot read employee {employee_id}: {e}") from e

    async def save(self, employee: Employee) -> Employee:
        try:
            saved = await run_in_threadpool(self._upsert, employee)
        except (sqlite3.Error, OverflowError) as e:
            raise StoreError(f"Cannot save employee: {e}") from e
        logger.debug("Stored employee %s", saved.employee_id)
        return saved

    async def delete(self, employee: Employee) -> None:
        if not _storable_id(employee.employee_id):
            return
        try:
            await run_in_threadpool(self._remove, employee.employee_id)
        except sqlite3.Error as e:
            raise StoreError(f"Cannot delete employee {employee.employee_id}: {e}") from e
