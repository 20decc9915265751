"""Example of using dbms_assert_tools programmatically (non-CLI)."""

import duckdb

from dbms_assert_tools import (
    AssertionFailure,
    check,
    enquote_literal,
    object_name,
    qualified_sql_name,
    simple_sql_name,
)
from dbms_assert_tools.integrations.duckdb import DuckDBCatalog, register_assert_functions

# Method 1: Validate pieces before building SQL
print("=" * 60)
print("Method 1: Validating untrusted input")
print("=" * 60)

for candidate in ['sales."Order Lines"', "orders; DROP TABLE users", "emp_1", "emp-1"]:
    try:
        qualified_sql_name(candidate)
        print(f"✓ {candidate!r} is a qualified SQL name")
    except AssertionFailure as e:
        print(f"✗ {candidate!r}: {e}")

print(check(simple_sql_name, "emp-1"))
name = enquote_literal("O'Brien")
print(f"SELECT * FROM t WHERE name = {name}")


# Method 2: Check names against a DuckDB catalog
print("\n" + "=" * 60)
print("Method 2: Checking names against a DuckDB catalog")
print("=" * 60)

with duckdb.connect() as con:
    con.execute("CREATE SCHEMA sales")
    con.execute("CREATE TABLE sales.orders (id INTEGER, customer VARCHAR)")

    catalog = DuckDBCatalog(con)
    table = object_name("sales.orders", catalog=catalog)
    print(con.sql(f"SELECT count(*) AS n FROM {table}").fetchone())

    # Method 3: The same checks as SQL functions
    register_assert_functions(con, catalog=catalog)
    print(con.sql("SELECT dbms_assert_enquote_literal('it''s'), dbms_assert_simple_sql_name('emp_1')").fetchone())
