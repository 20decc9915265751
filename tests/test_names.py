"""Tests for the names module."""

import pytest

from dbms_assert_tools.core.errors import InternalError, NotQualifiedSqlName, UnterminatedQuoteError
from dbms_assert_tools.core.names import (
    NamePart,
    QualifiedName,
    is_simple_name,
    parse_qualified_name,
    scan_quoted,
    try_parse_qualified_name,
)


class TestScanQuoted:
    """Tests for scan_quoted function."""

    def test_simple_run(self):
        """Should find the closing quote of a plain run."""
        assert scan_quoted('"abc"', 1) == (4, "abc")

    def test_collapses_doubled_quotes(self):
        """Should collapse a doubled quote into one."""
        assert scan_quoted('"ab""cd"', 1) == (7, 'ab"cd')

    def test_only_doubled_quotes(self):
        """Should handle a run made only of an escaped quote."""
        assert scan_quoted('""""', 1) == (3, '"')

    def test_empty_run(self):
        """Should return empty text for adjacent quotes at the end."""
        assert scan_quoted('""', 1) == (1, "")

    def test_stops_at_first_unpaired_quote(self):
        """Should stop at the first quote not followed by another quote."""
        assert scan_quoted('"a".b', 1) == (2, "a")

    def test_custom_quote_character(self):
        """Should honour a different quote character."""
        assert scan_quoted("'O''Brien'", 1, quote="'") == (9, "O'Brien")

    def test_does_not_modify_input(self):
        """Should leave the caller's buffer untouched."""
        buffer = '"a""b"'
        scan_quoted(buffer, 1)
        assert buffer == '"a""b"'

    def test_unterminated_raises(self):
        """Should raise UnterminatedQuoteError when no closing quote exists."""
        with pytest.raises(UnterminatedQuoteError):
            scan_quoted('"abc', 1)

    def test_trailing_doubled_quote_is_unterminated(self):
        """A doubled quote at the end does not close the run."""
        with pytest.raises(UnterminatedQuoteError):
            scan_quoted('"abc""', 1)

    def test_offset_out_of_range_is_internal_error(self):
        """Should raise InternalError for an offset outside the buffer."""
        with pytest.raises(InternalError):
            scan_quoted('"abc"', 10)
        with pytest.raises(InternalError):
            scan_quoted('"abc"', -1)

    def test_bad_quote_argument_is_internal_error(self):
        """Should raise InternalError for a multi-character quote."""
        with pytest.raises(InternalError):
            scan_quoted('"abc"', 1, quote='""')

    def test_internal_error_is_not_a_validation_failure(self):
        """InternalError must not be confused with rejected input."""
        assert not issubclass(InternalError, ValueError)


class TestParseQualifiedName:
    """Tests for parse_qualified_name function."""

    def test_single_name(self):
        """Should parse a single unquoted name."""
        name = parse_qualified_name("employees")
        assert name.parts == (NamePart("employees"),)

    def test_schema_qualified_name(self):
        """Should split schema.table into two parts."""
        assert parse_qualified_name("schema.table").texts == ["schema", "table"]

    def test_three_parts(self):
        """Should split catalog.schema.table into three parts."""
        assert parse_qualified_name("db.sales.orders").texts == ["db", "sales", "orders"]

    def test_quoted_part(self):
        """Should keep case and spaces inside quotes."""
        name = parse_qualified_name('"My Table"')
        assert name.parts == (NamePart("My Table", was_quoted=True),)

    def test_quoted_part_with_dot(self):
        """A dot inside quotes is part of the name."""
        assert parse_qualified_name('public."a.b"').texts == ["public", "a.b"]

    def test_quoted_part_with_doubled_quotes(self):
        """Should collapse doubled quotes in quoted parts."""
        name = parse_qualified_name('"ab""cd".x')
        assert name[0] == NamePart('ab"cd', was_quoted=True)
        assert name[1] == NamePart("x")

    def test_whitespace_around_parts_and_dots(self):
        """Should allow whitespace around parts and dots."""
        assert parse_qualified_name("  schema . table  ").texts == ["schema", "table"]

    def test_tabs_and_newlines(self):
        """Should treat tabs and newlines as whitespace."""
        assert parse_qualified_name("\tschema\n.\r\ntable\f").texts == ["schema", "table"]

    def test_empty_string_has_no_parts(self):
        """Empty input is the empty qualified name."""
        name = parse_qualified_name("")
        assert len(name) == 0
        assert not name

    def test_whitespace_only_has_no_parts(self):
        """Whitespace-only input is also the empty qualified name."""
        assert len(parse_qualified_name("   ")) == 0

    def test_digits_and_underscores(self):
        """Should accept digits and underscores, including leading."""
        assert parse_qualified_name("_t1.2nd").texts == ["_t1", "2nd"]

    def test_mixed_quoted_and_unquoted(self):
        """Should record which parts were quoted."""
        name = parse_qualified_name('sales."Order Lines"')
        assert [part.was_quoted for part in name] == [False, True]

    @pytest.mark.parametrize(
        "raw",
        [
            "schema..table",
            "schema.",
            "schema. ",
            ".table",
            "My Table",
            "table;drop",
            "a-b",
            "a.b c",
            '"unterminated',
            '"ab"cd"',
            '"a"b',
            "tabé",
            "(x)",
            '""',
            'a.""',
        ],
    )
    def test_rejects_malformed_names(self, raw):
        """Should raise NotQualifiedSqlName for malformed input."""
        with pytest.raises(NotQualifiedSqlName):
            parse_qualified_name(raw)

    def test_unterminated_quote_is_chained(self):
        """The scanner failure should be kept as the cause."""
        with pytest.raises(NotQualifiedSqlName) as exc_info:
            parse_qualified_name('schema."open')
        assert isinstance(exc_info.value.__cause__, UnterminatedQuoteError)

    def test_rejection_keeps_value(self):
        """The exception should carry the rejected input."""
        with pytest.raises(NotQualifiedSqlName) as exc_info:
            parse_qualified_name("a..b")
        assert exc_info.value.value == "a..b"


class TestTryParseQualifiedName:
    """Tests for try_parse_qualified_name function."""

    def test_returns_name(self):
        """Should return the parsed name for valid input."""
        assert try_parse_qualified_name("a.b").texts == ["a", "b"]

    def test_returns_none_for_malformed(self):
        """Should return None instead of raising."""
        assert try_parse_qualified_name("a..b") is None


class TestQualifiedName:
    """Tests for the QualifiedName and NamePart types."""

    def test_str_requotes_quoted_parts(self):
        """Should render quoted parts with quotes doubled again."""
        name = parse_qualified_name('  sales . "Order ""X"""  ')
        assert str(name) == 'sales."Order ""X"""'

    def test_namepart_sql_unquoted(self):
        """Unquoted parts render as-is."""
        assert NamePart("orders").sql() == "orders"

    def test_is_immutable(self):
        """Parsed names are frozen."""
        part = NamePart("a")
        with pytest.raises(AttributeError):
            part.text = "b"

    def test_iteration_and_indexing(self):
        """Should support len, iteration and indexing."""
        name = QualifiedName((NamePart("a"), NamePart("b")))
        assert len(name) == 2
        assert [p.text for p in name] == ["a", "b"]
        assert name[-1].text == "b"


class TestIsSimpleName:
    """Tests for is_simple_name function."""

    @pytest.mark.parametrize("text", ["emp_1", "EMP", "_", "1abc", "a1_B2"])
    def test_accepts_unquoted_names(self, text):
        """Should accept ASCII letters, digits and underscore."""
        assert is_simple_name(text)

    @pytest.mark.parametrize("text", ["emp-1", "a.b", "a b", "a;", "café", "a'b", ""])
    def test_rejects_unquoted_names(self, text):
        """Should reject any other character, and the empty string."""
        assert not is_simple_name(text)

    @pytest.mark.parametrize("text", ['"My Table"', '"ab""cd"', '"a.b"', '""', '""""', '"x-y;z"'])
    def test_accepts_quoted_names(self, text):
        """Should accept quoted names whose inner quotes are doubled."""
        assert is_simple_name(text)

    @pytest.mark.parametrize("text", ['"ab"cd"', '"abc', '"', '"""', '"a"b', 'a"b"', '"a"""b"'])
    def test_rejects_quoted_names(self, text):
        """Should reject unpaired or missing quotes."""
        assert not is_simple_name(text)
