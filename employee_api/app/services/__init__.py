"""
Service layer abstraction.

``EmployeeEndpoint`` orchestrates requests against an injected
``EmployeeStore``.  Store implementations (in‑memory and SQLite) can be
swapped without changing the API handlers.
"""
