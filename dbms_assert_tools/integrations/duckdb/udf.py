"""
DuckDB UDF Registration

Exposes the assertion functions as SQL functions in DuckDB, so that SQL
scripts building dynamic statements can validate names in place.

Example:
    import duckdb
    from dbms_assert_tools.integrations.duckdb import register_assert_functions

    conn = duckdb.connect()
    register_assert_functions(conn)

    conn.execute("SELECT dbms_assert_qualified_sql_name('main.orders')").fetchone()
"""

import duckdb

from dbms_assert_tools.core import assertions
from dbms_assert_tools.core.catalog import Catalog
from dbms_assert_tools.core.dialect import DuckDBDialect
from dbms_assert_tools.core.sql_utils import enquote_literal, enquote_name
from dbms_assert_tools.integrations.duckdb.catalog import DuckDBCatalog

FUNCTION_NAMES = (
    "dbms_assert_enquote_literal",
    "dbms_assert_enquote_name",
    "dbms_assert_noop",
    "dbms_assert_qualified_sql_name",
    "dbms_assert_simple_sql_name",
    "dbms_assert_schema_name",
    "dbms_assert_object_name",
)


def register_assert_functions(
    conn: duckdb.DuckDBPyConnection,
    catalog: Catalog | None = None,
) -> None:
    """
    Register the assertion functions in a DuckDB connection.

    Args:
        conn: DuckDB connection.
        catalog: Catalog used by dbms_assert_schema_name and
            dbms_assert_object_name. Defaults to a DuckDBCatalog on a
            cursor of ``conn``.

    SQL Usage:
        dbms_assert_enquote_literal(str VARCHAR) -> VARCHAR
        dbms_assert_enquote_name(str VARCHAR, fold_case BOOLEAN) -> VARCHAR
        dbms_assert_noop(str VARCHAR) -> VARCHAR
        dbms_assert_qualified_sql_name(str VARCHAR) -> VARCHAR
        dbms_assert_simple_sql_name(str VARCHAR) -> VARCHAR
        dbms_assert_schema_name(str VARCHAR) -> VARCHAR
        dbms_assert_object_name(str VARCHAR) -> VARCHAR

        The checking functions return their argument unchanged, or fail the
        query with an error carrying the failure code (e.g. "[44004] string
        is not qualified SQL name"). NULL is rejected by every check.
    """
    if catalog is None:
        catalog = DuckDBCatalog(conn.cursor())
    dialect = DuckDBDialect.from_connection(conn)

    # Wrappers with type hints for DuckDB type inference
    def enquote_literal_wrapper(value: str) -> str:
        return enquote_literal(value)

    def enquote_name_wrapper(value: str, fold_case: bool) -> str:
        return enquote_name(value, fold_case=fold_case, dialect=dialect)

    def noop_wrapper(value: str) -> str:
        return assertions.noop(value)

    def qualified_sql_name_wrapper(value: str) -> str:
        return assertions.qualified_sql_name(value)

    def simple_sql_name_wrapper(value: str) -> str:
        return assertions.simple_sql_name(value)

    def schema_name_wrapper(value: str) -> str:
        return assertions.schema_name(value, catalog=catalog)

    def object_name_wrapper(value: str) -> str:
        return assertions.object_name(value, catalog=catalog)

    # NULL in, NULL out
    conn.create_function("dbms_assert_enquote_literal", enquote_literal_wrapper)
    conn.create_function("dbms_assert_enquote_name", enquote_name_wrapper)
    conn.create_function("dbms_assert_noop", noop_wrapper)

    # Checks must see NULL to reject it
    checks = {
        "dbms_assert_qualified_sql_name": qualified_sql_name_wrapper,
        "dbms_assert_simple_sql_name": simple_sql_name_wrapper,
        "dbms_assert_schema_name": schema_name_wrapper,
        "dbms_assert_object_name": object_name_wrapper,
    }
    for name, func in checks.items():
        conn.create_function(name, func, null_handling="special", side_effects=True)


def unregister_assert_functions(conn: duckdb.DuckDBPyConnection) -> None:
    """
    Unregister the assertion functions from a DuckDB connection.

    Functions that were never registered are skipped.

    Args:
        conn: DuckDB connection.
    """
    for name in FUNCTION_NAMES:
        try:
            conn.remove_function(name)
        except duckdb.Error:
            pass  # Function may not exist
