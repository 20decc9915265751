"""Dialect-specific identifier rules.

A dialect decides whether an identifier has to be quoted to survive the
host's lexer unchanged, and how unquoted identifiers are case-folded.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol

from dbms_assert_tools.core.names import QUOTE, NamePart

if TYPE_CHECKING:
    import duckdb

# Identifiers that never need quoting, apart from keywords
_SAFE_IDENT_RE = re.compile(r"[a-z_][a-z0-9_]*")

# PostgreSQL keywords that are not UNRESERVED (reserved, type/function
# name and column name categories). These must be quoted as identifiers.
# fmt: off
POSTGRES_KEYWORDS = frozenset(
    {
        # reserved
        "all", "analyse", "analyze", "and", "any", "array", "as", "asc",
        "asymmetric", "both", "case", "cast", "check", "collate", "column",
        "constraint", "create", "current_catalog", "current_date",
        "current_role", "current_time", "current_timestamp", "current_user",
        "default", "deferrable", "desc", "distinct", "do", "else", "end",
        "except", "false", "fetch", "for", "foreign", "from", "grant", "group",
        "having", "in", "initially", "intersect", "into", "lateral", "leading",
        "limit", "localtime", "localtimestamp", "not", "null", "offset", "on",
        "only", "or", "order", "placing", "primary", "references", "returning",
        "select", "session_user", "some", "symmetric", "system_user", "table",
        "then", "to", "trailing", "true", "union", "unique", "user", "using",
        "variadic", "when", "where", "window", "with",
        # type_func_name
        "authorization", "binary", "collation", "concurrently", "cross",
        "current_schema", "freeze", "full", "ilike", "inner", "is", "isnull",
        "join", "left", "like", "natural", "notnull", "outer", "overlaps",
        "right", "similar", "tablesample", "verbose",
        # col_name
        "between", "bigint", "bit", "boolean", "char", "character", "coalesce",
        "dec", "decimal", "exists", "extract", "float", "greatest", "grouping",
        "inout", "int", "integer", "interval", "least", "national", "nchar",
        "none", "normalize", "nullif", "numeric", "out", "overlay", "position",
        "precision", "real", "row", "setof", "smallint", "substring", "time",
        "timestamp", "treat", "trim", "values", "varchar", "xmlattributes",
        "xmlconcat", "xmlelement", "xmlexists", "xmlforest", "xmlnamespaces",
        "xmlparse", "xmlpi", "xmlroot", "xmlserialize", "xmltable",
    }
)
# fmt: on


class Dialect(Protocol):
    """Identifier quoting and case-folding rules of a SQL host."""

    name: str

    def quote_identifier_if_needed(self, text: str) -> str: ...

    def fold_case(self, text: str) -> str: ...

    def normalize(self, part: NamePart) -> str: ...


class PostgreSQLDialect:
    """PostgreSQL identifier rules.

    Unquoted identifiers fold to lower case, so only names made of
    lowercase letters, digits and underscore (not starting with a digit)
    that are not keywords can be left unquoted.
    """

    name = "postgresql"

    def __init__(self, keywords: frozenset[str] | None = None):
        self.keywords = POSTGRES_KEYWORDS if keywords is None else keywords

    def needs_quoting(self, text: str) -> bool:
        return not _SAFE_IDENT_RE.fullmatch(text) or text in self.keywords

    def quote_identifier_if_needed(self, text: str) -> str:
        """Quote ``text`` only if it would not otherwise read back unchanged."""
        if not self.needs_quoting(text):
            return text
        escaped = text.replace(QUOTE, QUOTE * 2)
        return f"{QUOTE}{escaped}{QUOTE}"

    def fold_case(self, text: str) -> str:
        return text.lower()

    def normalize(self, part: NamePart) -> str:
        """Return the catalog spelling of a parsed name part."""
        return part.text if part.was_quoted else self.fold_case(part.text)


class DuckDBDialect(PostgreSQLDialect):
    """DuckDB identifier rules.

    DuckDB shares PostgreSQL's lexer. Its catalog lookups ignore case, so
    ``normalize`` is only used for display.
    """

    name = "duckdb"

    @classmethod
    def from_connection(cls, conn: duckdb.DuckDBPyConnection) -> DuckDBDialect:
        """Build a dialect using the keyword list of a live DuckDB connection."""
        rows = conn.execute(
            "SELECT keyword_name FROM duckdb_keywords() WHERE keyword_category <> 'unreserved'"
        ).fetchall()
        return cls(frozenset(row[0].lower() for row in rows))


DEFAULT_DIALECT = PostgreSQLDialect()
