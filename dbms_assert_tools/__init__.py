"""dbms-assert-tools: input assertions for dynamically built SQL."""

__version__ = "0.1.0"

from dbms_assert_tools.core import (
    AssertionFailure,
    ErrorKind,
    InMemoryCatalog,
    InvalidObjectName,
    InvalidSchemaName,
    NotQualifiedSqlName,
    NotSimpleSqlName,
    QualifiedName,
    check,
    enquote_literal,
    enquote_name,
    noop,
    object_name,
    parse_qualified_name,
    qualified_sql_name,
    schema_name,
    simple_sql_name,
)

__all__ = [
    "__version__",
    "AssertionFailure",
    "ErrorKind",
    "InMemoryCatalog",
    "InvalidObjectName",
    "InvalidSchemaName",
    "NotQualifiedSqlName",
    "NotSimpleSqlName",
    "QualifiedName",
    "check",
    "enquote_literal",
    "enquote_name",
    "noop",
    "object_name",
    "parse_qualified_name",
    "qualified_sql_name",
    "schema_name",
    "simple_sql_name",
]
