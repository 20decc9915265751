"""Tests for the in-memory catalog."""

from dbms_assert_tools.core.catalog import InMemoryCatalog, ObjectHandle, SchemaHandle
from dbms_assert_tools.core.names import NamePart, parse_qualified_name


class TestInMemoryCatalog:
    """Tests for InMemoryCatalog."""

    def test_add_object_creates_schema(self):
        """Registering an object registers its schema."""
        catalog = InMemoryCatalog()
        catalog.add_object("sales", "orders")
        assert catalog.resolve_schema(NamePart("sales")) == SchemaHandle("sales", "postgres")

    def test_resolve_object_returns_handle(self):
        """Should describe the resolved relation."""
        catalog = InMemoryCatalog(database="app")
        catalog.add_object("sales", "v_orders", kind="view")
        handle = catalog.resolve_object(parse_qualified_name("sales.v_orders"))
        assert handle == ObjectHandle(SchemaHandle("sales", "app"), "v_orders", "view")

    def test_unquoted_name_resolves_on_search_path(self):
        """An unquoted mixed-case name folds and resolves through public."""
        catalog = InMemoryCatalog(database="app", user="alice")
        catalog.add_object("public", "orders")
        handle = catalog.resolve_object(parse_qualified_name("Orders"))
        assert handle == ObjectHandle(SchemaHandle("public", "app"), "orders", "table")

    def test_search_path_order(self):
        """The first schema on the search path wins."""
        catalog = InMemoryCatalog(search_path=["a", "b"])
        catalog.add_object("b", "t")
        catalog.add_object("a", "t")
        assert catalog.resolve_object(parse_qualified_name("t")).schema.name == "a"

    def test_empty_name_does_not_resolve(self):
        """A name with no parts resolves to nothing."""
        assert InMemoryCatalog().resolve_object(parse_qualified_name("")) is None

    def test_ungranted_schema_usable_by_everyone(self):
        """Schemas without grants are usable by any user, including none."""
        catalog = InMemoryCatalog()
        catalog.add_schema("public")
        handle = catalog.resolve_schema(NamePart("public"))
        assert catalog.has_usage_privilege(handle, None)
        assert catalog.has_usage_privilege(handle, "anyone")

    def test_granted_schema(self):
        """Grants restrict usage to the listed users."""
        catalog = InMemoryCatalog()
        catalog.add_schema("hr", users=["bob"])
        handle = catalog.resolve_schema(NamePart("hr"))
        assert catalog.has_usage_privilege(handle, "bob")
        assert not catalog.has_usage_privilege(handle, "alice")
        assert not catalog.has_usage_privilege(handle, None)
