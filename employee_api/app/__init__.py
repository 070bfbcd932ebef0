"""
Application package initializer.

This package contains the ASGI entrypoint for the Employee API and its
submodules.  Persistence lives behind the ``EmployeeStore`` protocol in
``services``, request orchestration in ``EmployeeEndpoint`` and the
HTTP mapping in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
