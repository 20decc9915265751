"""Catalog lookups used by the schema and object name checks.

The checks only need to know whether a parsed name refers to an existing
schema or object, and whether the current user may use a schema. Any
object implementing the Catalog protocol can answer that; this module
ships an in-memory implementation, and the DuckDB integration provides
one backed by a live connection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from dbms_assert_tools.core.dialect import DEFAULT_DIALECT, Dialect
from dbms_assert_tools.core.names import NamePart, QualifiedName

logger = logging.getLogger(__name__)

# [database.]schema.object
MAX_OBJECT_NAME_PARTS = 3


@dataclass(frozen=True)
class SchemaHandle:
    """A schema found in the catalog."""

    name: str
    database: str | None = None


@dataclass(frozen=True)
class ObjectHandle:
    """A relation (table, view, ...) found in the catalog."""

    schema: SchemaHandle
    name: str
    kind: str = "table"


class Catalog(Protocol):
    """Lookup and authorization service of a SQL host.

    Lookups return None when the entity does not exist; they raise only
    for infrastructure failures.
    """

    def resolve_schema(self, name: NamePart) -> SchemaHandle | None: ...

    def resolve_object(self, name: QualifiedName) -> ObjectHandle | None: ...

    def has_usage_privilege(self, schema: SchemaHandle, user: str | None) -> bool: ...

    def current_user(self) -> str | None: ...


@dataclass
class InMemoryCatalog:
    """A catalog held in plain dictionaries.

    Names are stored in their catalog spelling (already case-folded for
    PostgreSQL). Grants map a schema name to the users allowed to use it;
    a schema without an entry in ``grants`` is usable by everyone.

    Example:
        >>> from dbms_assert_tools.core.names import parse_qualified_name
        >>> catalog = InMemoryCatalog(database="app", user="alice")
        >>> catalog.add_object("public", "orders")
        >>> catalog.resolve_object(parse_qualified_name("Orders"))
        ObjectHandle(schema=SchemaHandle(name='public', database='app'), name='orders', kind='table')
    """

    database: str = "postgres"
    user: str | None = None
    search_path: list[str] = field(default_factory=lambda: ["public"])
    dialect: Dialect = DEFAULT_DIALECT
    schemas: set[str] = field(default_factory=set)
    objects: dict[tuple[str, str], str] = field(default_factory=dict)
    grants: dict[str, set[str]] = field(default_factory=dict)

    def add_schema(self, schema: str, users: Iterable[str] | None = None) -> None:
        """Register a schema; ``users`` restricts USAGE to the given users."""
        self.schemas.add(schema)
        if users is not None:
            self.grants[schema] = set(users)

    def add_object(self, schema: str, name: str, kind: str = "table") -> None:
        """Register a relation, creating its schema if needed."""
        self.schemas.add(schema)
        self.objects[(schema, name)] = kind

    def current_user(self) -> str | None:
        return self.user

    def resolve_schema(self, name: NamePart) -> SchemaHandle | None:
        schema = self.dialect.normalize(name)
        if schema not in self.schemas:
            logger.debug("Schema %r not found", schema)
            return None
        return SchemaHandle(schema, self.database)

    def has_usage_privilege(self, schema: SchemaHandle, user: str | None) -> bool:
        allowed = self.grants.get(schema.name)
        return allowed is None or user in allowed

    def resolve_object(self, name: QualifiedName) -> ObjectHandle | None:
        if not name or len(name) > MAX_OBJECT_NAME_PARTS:
            return None

        spelled = [self.dialect.normalize(part) for part in name]
        if len(spelled) == MAX_OBJECT_NAME_PARTS:
            database, schema, relname = spelled
            if database != self.database:
                logger.debug("Cross-database reference %r not supported", database)
                return None
            candidates = [schema]
        elif len(spelled) == 2:
            schema, relname = spelled
            candidates = [schema]
        else:
            (relname,) = spelled
            candidates = list(self.search_path)

        for schema in candidates:
            kind = self.objects.get((schema, relname))
            if kind is not None:
                return ObjectHandle(SchemaHandle(schema, self.database), relname, kind)

        logger.debug("Relation %r not found in %s", relname, candidates)
        return None
