"""Exceptions raised by the report query layer."""

from __future__ import annotations


class ReportsQueryError(Exception):
    pass


class MalformedFilter(ReportsQueryError):
    """Filter string is not a JSON object of string arrays."""


class ValidationError(ReportsQueryError):
    """Caller-supplied parameter rejected before any SQL is assembled."""


class UnknownColumn(ValidationError):
    def __init__(self, column: str) -> None:
        super().__init__(f"Unknown report column: {column!r}")
        self.column = column


class InvalidParameter(ValidationError):
    def __init__(self, name: str, value: object, reason: str) -> None:
        super().__init__(f"Invalid {name}={value!r}: {reason}")
        self.name = name
        self.value = value


class QueryExecutionFault(ReportsQueryError):
    """The store rejected or failed to run an assembled query."""

    def __init__(self, sql: str, cause: BaseException) -> None:
        super().__init__(f"Query failed: {type(cause).__name__}: {cause}")
        self.sql = sql
