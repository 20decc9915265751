"""SQL quoting functions for safe statement construction."""

from __future__ import annotations

from dbms_assert_tools.core.dialect import DEFAULT_DIALECT, Dialect
from dbms_assert_tools.core.names import QUOTE, QualifiedName

LITERAL_QUOTE = "'"


def enquote_literal(value: str) -> str:
    """Quote a string as a SQL literal.

    The value is wrapped in single quotes and every embedded single quote
    is doubled. Nothing else is escaped: backslashes and control
    characters are passed through as standard SQL string syntax expects.

    Args:
        value: The string to quote (e.g., "O'Brien").

    Returns:
        The quoted literal (e.g., "'O''Brien'").

    Raises:
        TypeError: If value is not a string.
    """
    if not isinstance(value, str):
        raise TypeError(f"enquote_literal expects a str, got {type(value).__name__}")
    escaped = value.replace(LITERAL_QUOTE, LITERAL_QUOTE * 2)
    return f"{LITERAL_QUOTE}{escaped}{LITERAL_QUOTE}"


def enquote_literal_or_null(value: str | None) -> str:
    """Like enquote_literal, but render None as the NULL keyword."""
    if value is None:
        return "NULL"
    return enquote_literal(value)


def enquote_name(value: str, fold_case: bool = True, dialect: Dialect | None = None) -> str:
    """Quote an identifier the way the host dialect requires.

    The dialect first decides whether quotes are needed at all; names that
    already read back unchanged are returned as they are. If ``fold_case``
    is set, the result is then case-folded.

    Args:
        value: The identifier to quote.
        fold_case: Case-fold the result after quoting. Default True.
        dialect: Dialect rules to apply. Defaults to PostgreSQL.

    Returns:
        The identifier, ready to embed in SQL.

    Example:
        >>> enquote_name("Employees")
        '"employees"'
        >>> enquote_name("Employees", fold_case=False)
        '"Employees"'
    """
    dialect = dialect or DEFAULT_DIALECT
    name = dialect.quote_identifier_if_needed(value)
    if fold_case:
        name = dialect.fold_case(name)
    return name


def quote_identifier(name: str | QualifiedName) -> str:
    """Double-quote an identifier unconditionally.

    A plain string is treated as one identifier, dots included. A parsed
    QualifiedName has each of its parts quoted and joined with dots.

    Each component is double-quoted with any embedded double quotes escaped
    by doubling them (standard SQL quoting).

    Raises:
        ValueError: If the name is empty.
    """
    if isinstance(name, QualifiedName):
        if not name:
            raise ValueError("Identifier name cannot be empty")
        return ".".join(quote_identifier(part.text) for part in name)

    if not name:
        raise ValueError("Identifier name cannot be empty")
    escaped = name.replace(QUOTE, QUOTE * 2)
    return f"{QUOTE}{escaped}{QUOTE}"
