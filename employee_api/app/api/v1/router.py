"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified prefix.
The employee router defines its own paths (``/employees``,
``/employee/{id}``, ``/saveEmployee``, ``/updateEmployee``) so it is
included without a prefix.
"""

from fastapi import APIRouter

from .endpoints import employees, info

router = APIRouter()

router.include_router(employees.router, tags=["employees"])
router.include_router(info.router, prefix="/info", tags=["info"])
