"""Input assertions for dynamically built SQL.

Each check takes one untrusted string and either returns it unchanged or
raises one of the four AssertionFailure subclasses. The returned value is
always the caller's original string, never a rewritten one.

Example:
    from dbms_assert_tools import qualified_sql_name, enquote_literal

    table = qualified_sql_name(user_supplied_table)
    sql = f"SELECT * FROM {table} WHERE name = {enquote_literal(user_supplied_name)}"
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Union

from dbms_assert_tools.core.catalog import Catalog
from dbms_assert_tools.core.errors import (
    AssertionFailure,
    ErrorKind,
    InvalidObjectName,
    InvalidSchemaName,
    NotQualifiedSqlName,
    NotSimpleSqlName,
)
from dbms_assert_tools.core.names import is_simple_name, parse_qualified_name, try_parse_qualified_name
from dbms_assert_tools.core.sql_utils import enquote_literal, enquote_name

logger = logging.getLogger(__name__)

__all__ = [
    "Accepted",
    "Rejected",
    "ValidationOutcome",
    "check",
    "enquote_literal",
    "enquote_name",
    "noop",
    "object_name",
    "qualified_sql_name",
    "schema_name",
    "simple_sql_name",
]


def _reject(error: type[AssertionFailure], value: str | None) -> AssertionFailure:
    logger.debug("Rejected %r: [%d] %s", value, error.kind.code, error.message)
    return error(value)


def noop(value: str | None) -> str | None:
    """Return ``value`` without any checking.

    For input that has already been validated elsewhere.
    """
    return value


def qualified_sql_name(value: str | None) -> str:
    """Verify that ``value`` is a qualified SQL name such as ``schema."Table"``.

    Raises:
        NotQualifiedSqlName: If value is None, empty or not a well-formed
            (possibly dotted) name.
    """
    if not value:
        raise _reject(NotQualifiedSqlName, value)
    try:
        parse_qualified_name(value)
    except NotQualifiedSqlName as e:
        raise _reject(NotQualifiedSqlName, value) from e
    return value


def simple_sql_name(value: str | None) -> str:
    """Verify that ``value`` is a single, unqualified SQL name.

    Raises:
        NotSimpleSqlName: If value is None, empty, contains characters
            other than letters, digits and underscore outside quotes, or
            has unpaired quotes inside a quoted name.
    """
    if not value or not is_simple_name(value):
        raise _reject(NotSimpleSqlName, value)
    return value


def schema_name(value: str | None, catalog: Catalog) -> str:
    """Verify that ``value`` names an existing schema the current user may use.

    Raises:
        InvalidSchemaName: If value is None, empty, not exactly one name,
            names no schema in the catalog, or the current user lacks
            USAGE on it.
    """
    if not value:
        raise _reject(InvalidSchemaName, value)

    name = try_parse_qualified_name(value)
    if name is None or len(name) != 1:
        raise _reject(InvalidSchemaName, value)

    schema = catalog.resolve_schema(name[0])
    if schema is None:
        raise _reject(InvalidSchemaName, value)

    user = catalog.current_user()
    if not catalog.has_usage_privilege(schema, user):
        logger.debug("User %r lacks USAGE on schema %r", user, schema.name)
        raise _reject(InvalidSchemaName, value)

    return value


def object_name(value: str | None, catalog: Catalog) -> str:
    """Verify that ``value`` is the qualified name of an existing object.

    Raises:
        InvalidObjectName: If value is None, empty, not a well-formed
            qualified name, or cannot be resolved in the catalog.
    """
    if not value:
        raise _reject(InvalidObjectName, value)

    name = try_parse_qualified_name(value)
    if not name or catalog.resolve_object(name) is None:
        raise _reject(InvalidObjectName, value)

    return value


@dataclass(frozen=True)
class Accepted:
    """A check passed; ``value`` is the original input."""

    value: str | None


@dataclass(frozen=True)
class Rejected:
    """A check failed with the given kind."""

    kind: ErrorKind
    value: str | None = None

    @property
    def code(self) -> int:
        return self.kind.code


ValidationOutcome = Union[Accepted, Rejected]


def check(func: Callable[..., str | None], value: str | None, **kwargs) -> ValidationOutcome:
    """Run an assertion and return its outcome instead of raising.

    Example:
        >>> check(simple_sql_name, "emp-1")
        Rejected(kind=<ErrorKind.NOT_SIMPLE_SQL_NAME: 44003>, value='emp-1')
    """
    try:
        return Accepted(func(value, **kwargs))
    except AssertionFailure as e:
        return Rejected(e.kind, value)
