"""Validation failures raised by the assertion functions.

Every rejection is one of four kinds, each with a stable numeric code so
callers can tell them apart without parsing messages:

    44001  invalid schema name
    44002  invalid object name
    44003  string is not simple SQL name
    44004  string is not qualified SQL name
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The closed set of validation failure kinds."""

    INVALID_SCHEMA_NAME = 44001
    INVALID_OBJECT_NAME = 44002
    NOT_SIMPLE_SQL_NAME = 44003
    NOT_QUALIFIED_SQL_NAME = 44004

    @property
    def code(self) -> int:
        return self.value


class AssertionFailure(ValueError):
    """Base class for rejected input.

    Attributes:
        kind: The ErrorKind of the failure.
        code: Stable numeric identifier of the failure kind.
        value: The rejected input, unchanged (may be None).
    """

    kind: ErrorKind
    message: str

    def __init__(self, value: str | None = None):
        self.value = value
        super().__init__(self.message)

    @property
    def code(self) -> int:
        return self.kind.code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidSchemaName(AssertionFailure):
    kind = ErrorKind.INVALID_SCHEMA_NAME
    message = "invalid schema name"


class InvalidObjectName(AssertionFailure):
    kind = ErrorKind.INVALID_OBJECT_NAME
    message = "invalid object name"


class NotSimpleSqlName(AssertionFailure):
    kind = ErrorKind.NOT_SIMPLE_SQL_NAME
    message = "string is not simple SQL name"


class NotQualifiedSqlName(AssertionFailure):
    kind = ErrorKind.NOT_QUALIFIED_SQL_NAME
    message = "string is not qualified SQL name"


_ERRORS_BY_KIND: dict[ErrorKind, type[AssertionFailure]] = {
    cls.kind: cls for cls in (InvalidSchemaName, InvalidObjectName, NotSimpleSqlName, NotQualifiedSqlName)
}


def error_for(kind: ErrorKind) -> type[AssertionFailure]:
    """Return the exception class raised for a failure kind."""
    return _ERRORS_BY_KIND[kind]


class UnterminatedQuoteError(Exception):
    """A quoted run reached the end of the buffer without a closing quote.

    Raised by the quote scanner; name parsers translate it into the
    validation failure appropriate for their caller.
    """

    def __init__(self, buffer: str, start: int):
        self.buffer = buffer
        self.start = start
        super().__init__(f"Unterminated quoted identifier starting at offset {start - 1}: {buffer!r}")


class InternalError(RuntimeError):
    """A routine was called in a way its contract does not allow.

    Signals a programming error in the caller. Never raised for bad user
    input, which always produces an AssertionFailure.
    """
