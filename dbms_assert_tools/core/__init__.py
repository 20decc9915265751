"""Core functionality for dbms-assert-tools."""

from dbms_assert_tools.core.assertions import (
    Accepted,
    Rejected,
    ValidationOutcome,
    check,
    noop,
    object_name,
    qualified_sql_name,
    schema_name,
    simple_sql_name,
)
from dbms_assert_tools.core.catalog import (
    Catalog,
    InMemoryCatalog,
    ObjectHandle,
    SchemaHandle,
)
from dbms_assert_tools.core.dialect import (
    DEFAULT_DIALECT,
    Dialect,
    DuckDBDialect,
    PostgreSQLDialect,
)
from dbms_assert_tools.core.errors import (
    AssertionFailure,
    ErrorKind,
    InternalError,
    InvalidObjectName,
    InvalidSchemaName,
    NotQualifiedSqlName,
    NotSimpleSqlName,
    UnterminatedQuoteError,
    error_for,
)
from dbms_assert_tools.core.names import (
    NamePart,
    QualifiedName,
    is_simple_name,
    parse_qualified_name,
    scan_quoted,
    try_parse_qualified_name,
)
from dbms_assert_tools.core.sql_utils import (
    enquote_literal,
    enquote_literal_or_null,
    enquote_name,
    quote_identifier,
)

__all__ = [
    # Assertions
    "Accepted",
    "Rejected",
    "ValidationOutcome",
    "check",
    "noop",
    "object_name",
    "qualified_sql_name",
    "schema_name",
    "simple_sql_name",
    # Catalog
    "Catalog",
    "InMemoryCatalog",
    "ObjectHandle",
    "SchemaHandle",
    # Dialect
    "DEFAULT_DIALECT",
    "Dialect",
    "DuckDBDialect",
    "PostgreSQLDialect",
    # Errors
    "AssertionFailure",
    "ErrorKind",
    "InternalError",
    "InvalidObjectName",
    "InvalidSchemaName",
    "NotQualifiedSqlName",
    "NotSimpleSqlName",
    "UnterminatedQuoteError",
    "error_for",
    # Names
    "NamePart",
    "QualifiedName",
    "is_simple_name",
    "parse_qualified_name",
    "scan_quoted",
    "try_parse_qualified_name",
    # Quoting
    "enquote_literal",
    "enquote_literal_or_null",
    "enquote_name",
    "quote_identifier",
]
