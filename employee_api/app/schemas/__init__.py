"""
Pydantic schema definitions for API payloads.

``employee`` holds the wire representation of an employee record and
``envelope`` the found/not‑found result wrapper returned by the
endpoint layer.
"""
