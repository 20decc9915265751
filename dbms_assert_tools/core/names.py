"""Lexical parsing of SQL names.

Three routines share the same quoting rules:

- scan_quoted: find the end of a quoted run, collapsing doubled quotes.
- parse_qualified_name: split a dotted name such as ``schema."My Table"``
  into its parts.
- is_simple_name: check that a string is exactly one name, with no
  qualification.

Only ASCII letters, digits and underscore are accepted in unquoted names.
National characters have to be quoted.
"""

from __future__ import annotations

import string
from collections.abc import Iterator
from dataclasses import dataclass

from dbms_assert_tools.core.errors import InternalError, NotQualifiedSqlName, UnterminatedQuoteError

QUOTE = '"'

# C locale isspace(): space, \t, \n, \v, \f, \r
WHITESPACE = frozenset(" \t\n\v\f\r")
NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")


@dataclass(frozen=True)
class NamePart:
    """One segment of a (possibly qualified) SQL name.

    For quoted parts, ``text`` is the logical value with doubled quotes
    already collapsed.
    """

    text: str
    was_quoted: bool = False

    def sql(self, quote: str = QUOTE) -> str:
        """Render the part back as SQL text."""
        if not self.was_quoted:
            return self.text
        escaped = self.text.replace(quote, quote * 2)
        return f"{quote}{escaped}{quote}"


@dataclass(frozen=True)
class QualifiedName:
    """An ordered sequence of name parts, left to right (``db.schema.table``).

    An empty sequence is the empty qualified name, produced for empty or
    whitespace-only input.
    """

    parts: tuple[NamePart, ...] = ()

    def __len__(self) -> int:
        return len(self.parts)

    def __iter__(self) -> Iterator[NamePart]:
        return iter(self.parts)

    def __getitem__(self, index: int) -> NamePart:
        return self.parts[index]

    def __bool__(self) -> bool:
        return bool(self.parts)

    def __str__(self) -> str:
        return ".".join(part.sql() for part in self.parts)

    @property
    def texts(self) -> list[str]:
        return [part.text for part in self.parts]


def is_name_char(char: str) -> bool:
    """True for ASCII letters, digits and underscore."""
    return char in NAME_CHARS


def scan_quoted(buffer: str, start: int, quote: str = QUOTE) -> tuple[int, str]:
    """Find the closing quote of a quoted run.

    Args:
        buffer: Text containing the quoted run.
        start: Offset immediately after the opening quote.
        quote: The quote character.

    Returns:
        ``(end, text)`` where ``end`` is the offset of the terminating quote
        and ``text`` is the content between the quotes with every doubled
        quote collapsed into one.

    Raises:
        UnterminatedQuoteError: If the buffer ends before the run is closed.
        InternalError: If ``start`` is out of range or ``quote`` is not a
            single character.
    """
    if len(quote) != 1:
        raise InternalError(f"Quote must be a single character, got {quote!r}")
    if not 0 <= start <= len(buffer):
        raise InternalError(f"Scan offset {start} outside buffer of length {len(buffer)}")

    chunks = []
    pos = start
    while True:
        end = buffer.find(quote, pos)
        if end == -1:
            raise UnterminatedQuoteError(buffer, start)
        chunks.append(buffer[pos:end])
        if buffer[end + 1 : end + 2] != quote:
            return end, "".join(chunks)
        # Doubled quote: keep one, continue after the pair
        chunks.append(quote)
        pos = end + 2


def _skip_whitespace(raw: str, pos: int) -> int:
    while pos < len(raw) and raw[pos] in WHITESPACE:
        pos += 1
    return pos


def parse_qualified_name(raw: str) -> QualifiedName:
    """Split a possibly qualified, possibly quoted SQL name into parts.

    Parts are separated by ``.``; whitespace is allowed around parts and
    dots but never inside an unquoted part. Quoted parts keep their case
    and may contain any character; a doubled quote stands for one quote.

    Args:
        raw: The name to parse.

    Returns:
        The parsed QualifiedName. Empty or whitespace-only input yields the
        empty name (no parts).

    Raises:
        NotQualifiedSqlName: If the input is not a well-formed name.

    Example:
        >>> parse_qualified_name('public."My Table"').texts
        ['public', 'My Table']
    """
    parts: list[NamePart] = []
    pos = _skip_whitespace(raw, 0)
    if pos == len(raw):
        return QualifiedName()

    while True:
        if raw[pos] == QUOTE:
            try:
                end, text = scan_quoted(raw, pos + 1)
            except UnterminatedQuoteError as e:
                raise NotQualifiedSqlName(raw) from e
            if not text:
                # zero-length quoted part
                raise NotQualifiedSqlName(raw)
            parts.append(NamePart(text, was_quoted=True))
            pos = end + 1
        else:
            begin = pos
            while pos < len(raw) and raw[pos] != "." and raw[pos] not in WHITESPACE:
                if not is_name_char(raw[pos]):
                    raise NotQualifiedSqlName(raw)
                pos += 1
            if pos == begin:
                # empty unquoted part, e.g. "a..b" or ".a"
                raise NotQualifiedSqlName(raw)
            parts.append(NamePart(raw[begin:pos]))

        pos = _skip_whitespace(raw, pos)
        if pos == len(raw):
            return QualifiedName(tuple(parts))
        if raw[pos] != ".":
            raise NotQualifiedSqlName(raw)
        pos = _skip_whitespace(raw, pos + 1)
        if pos == len(raw):
            # trailing dot
            raise NotQualifiedSqlName(raw)


def try_parse_qualified_name(raw: str) -> QualifiedName | None:
    """Like parse_qualified_name, but return None for malformed input."""
    try:
        return parse_qualified_name(raw)
    except NotQualifiedSqlName:
        return None


def is_simple_name(text: str) -> bool:
    """Check that ``text`` is exactly one SQL name.

    A quoted name must start and end with a double quote and may contain
    quotes only as doubled pairs. An unquoted name must be non-empty and
    consist of ASCII letters, digits and underscore. Dots are never
    accepted outside quotes.
    """
    if not text:
        return False

    if text[0] != QUOTE:
        return all(is_name_char(c) for c in text)

    if len(text) < 2 or text[-1] != QUOTE:
        return False
    body = text[1:-1]
    i = 0
    while i < len(body):
        if body[i] == QUOTE:
            if body[i + 1 : i + 2] != QUOTE:
                return False
            i += 2
        else:
            i += 1
    return True
