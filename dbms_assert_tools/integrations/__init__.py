"""Database integrations for dbms-assert-tools."""

from dbms_assert_tools.integrations import duckdb

__all__ = [
    "duckdb",
]
