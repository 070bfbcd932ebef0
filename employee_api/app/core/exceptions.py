"""Exceptions shared between the store implementations and the app."""


class StoreError(Exception):
    """Raised when the employee store cannot complete an operation.

    Absence of a record is not an error and never raises this; it is
    reported as ``NotFound`` by the endpoint layer.
    """
