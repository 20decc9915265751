"""
DuckDB Integration for dbms-assert-tools

Validates names against a DuckDB catalog and exposes the assertion
functions as DuckDB SQL functions.

Example:
    import duckdb
    from dbms_assert_tools import schema_name
    from dbms_assert_tools.integrations.duckdb import DuckDBCatalog, register_assert_functions

    conn = duckdb.connect()
    schema_name("main", catalog=DuckDBCatalog(conn))

    register_assert_functions(conn)
    conn.execute("SELECT dbms_assert_enquote_literal('O''Brien')").fetchone()
"""

from dbms_assert_tools.integrations.duckdb.catalog import DuckDBCatalog
from dbms_assert_tools.integrations.duckdb.udf import (
    FUNCTION_NAMES,
    register_assert_functions,
    unregister_assert_functions,
)

__all__ = [
    "DuckDBCatalog",
    "FUNCTION_NAMES",
    "register_assert_functions",
    "unregister_assert_functions",
]
