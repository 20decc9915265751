"""DuckDB-backed catalog for the schema and object name checks.

Resolves names against ``information_schema`` of a live connection. DuckDB
identifiers are case-insensitive, quoted or not, so all comparisons are
made on lower-cased names. Values are always bound as parameters.

Example:
    import duckdb
    from dbms_assert_tools import object_name
    from dbms_assert_tools.integrations.duckdb import DuckDBCatalog

    conn = duckdb.connect()
    conn.execute("CREATE TABLE orders (id INTEGER)")
    object_name("main.orders", catalog=DuckDBCatalog(conn))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

import duckdb

from dbms_assert_tools.core.catalog import MAX_OBJECT_NAME_PARTS, ObjectHandle, SchemaHandle
from dbms_assert_tools.core.names import NamePart, QualifiedName

logger = logging.getLogger(__name__)

_SCHEMA_SQL = """
    SELECT catalog_name, schema_name
    FROM information_schema.schemata
    WHERE catalog_name = current_database() AND lower(schema_name) = lower(?)
"""

# Unqualified names: temporary objects first, then the current schema
_OBJECT_1_SQL = """
    SELECT table_catalog, table_schema, table_name, table_type
    FROM information_schema.tables
    WHERE lower(table_name) = lower(?)
      AND (table_catalog = 'temp'
           OR (table_catalog = current_database() AND table_schema = current_schema()))
    ORDER BY table_catalog = 'temp' DESC
    LIMIT 1
"""

# Two parts: schema.object in the current database, else database.object
_OBJECT_2_SQL = """
    SELECT table_catalog, table_schema, table_name, table_type
    FROM information_schema.tables
    WHERE lower(table_name) = lower($name)
      AND ((table_catalog = current_database() AND lower(table_schema) = lower($prefix))
           OR (lower(table_catalog) = lower($prefix) AND table_schema = 'main'))
    ORDER BY table_catalog = current_database() DESC
    LIMIT 1
"""

_OBJECT_3_SQL = """
    SELECT table_catalog, table_schema, table_name, table_type
    FROM information_schema.tables
    WHERE lower(table_catalog) = lower(?)
      AND lower(table_schema) = lower(?)
      AND lower(table_name) = lower(?)
    LIMIT 1
"""

_TABLE_KINDS = {
    "BASE TABLE": "table",
    "LOCAL TEMPORARY": "table",
    "VIEW": "view",
}


class DuckDBCatalog:
    """Catalog answering lookups from a DuckDB connection.

    Args:
        conn: DuckDB connection to query.
        usable_schemas: Schemas the caller may use. DuckDB has no
            privilege system, so None (the default) allows every schema.
        user: Name reported as the current user.
    """

    def __init__(
        self,
        conn: duckdb.DuckDBPyConnection,
        usable_schemas: Iterable[str] | None = None,
        user: str | None = None,
    ):
        self.conn = conn
        self.usable_schemas = None if usable_schemas is None else {s.lower() for s in usable_schemas}
        self.user = user

    def current_user(self) -> str | None:
        return self.user

    def resolve_schema(self, name: NamePart) -> SchemaHandle | None:
        row = self.conn.execute(_SCHEMA_SQL, [name.text]).fetchone()
        if row is None:
            logger.debug("Schema %r not found", name.text)
            return None
        database, schema = row
        return SchemaHandle(schema, database)

    def has_usage_privilege(self, schema: SchemaHandle, user: str | None) -> bool:
        if self.usable_schemas is None:
            return True
        return schema.name.lower() in self.usable_schemas

    def resolve_object(self, name: QualifiedName) -> ObjectHandle | None:
        texts = name.texts
        if not texts or len(texts) > MAX_OBJECT_NAME_PARTS:
            return None

        if len(texts) == 1:
            row = self.conn.execute(_OBJECT_1_SQL, texts).fetchone()
        elif len(texts) == 2:
            row = self.conn.execute(_OBJECT_2_SQL, {"prefix": texts[0], "name": texts[1]}).fetchone()
        else:
            row = self.conn.execute(_OBJECT_3_SQL, texts).fetchone()

        if row is None:
            logger.debug("Relation %r not found", str(name))
            return None

        database, schema, relname, table_type = row
        kind = _TABLE_KINDS.get(table_type, table_type.lower())
        return ObjectHandle(SchemaHandle(schema, database), relname, kind)
