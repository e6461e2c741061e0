import pytest

from _rpsllex.tokenizer.combinators import (
    exactly,
    keyword,
    line_terminator,
    literal,
    one_of,
    optional,
    repeated,
    sequence,
    separated,
)
from _rpsllex.tokenizer.cursor import Cursor
from _rpsllex.tokenizer.errors import TokenizationError


@pytest.mark.parametrize(
    "inp_str, remaining", [("foo foo foo", ""), ("foo foo foobar", "bar")]
)
def test_combinators(inp_str, remaining):
    cursor = Cursor(inp_str)

    repeated(one_of(literal("foo"), literal(" ")))(cursor)

    assert cursor.remaining == remaining


def test_sequence_rewinds_on_failure():
    cursor = Cursor("foo\nbaz")
    with pytest.raises(TokenizationError):
        sequence(literal("foo"), literal("\n"), literal("bar"))(cursor)
    assert (cursor.pos, cursor.line, cursor.column) == (0, 1, 0)


def test_one_of_reports_all_errors():
    cursor = Cursor("baz")
    with pytest.raises(TokenizationError, match="(?s)one of.*'foo'.*'bar'"):
        one_of(literal("foo"), literal("bar"))(cursor)
    assert cursor.pos == 0


def test_one_of_takes_first_match():
    cursor = Cursor("foobar")
    one_of(literal("foo"), literal("foobar"))(cursor)
    assert cursor.remaining == "bar"


def test_optional():
    cursor = Cursor("foobar")
    optional(literal("bar"))(cursor)
    assert cursor.pos == 0
    optional(literal("foo"))(cursor)
    assert cursor.remaining == "bar"


def test_separated():
    cursor = Cursor("a,a,a,b")
    separated(literal("a"), literal(","))(cursor)
    assert cursor.remaining == ",b"


@pytest.mark.parametrize(
    "text, remaining",
    [("to AS1", " AS1"), ("TO AS1", " AS1"), ("to", ""), ("to,", ",")],
)
def test_keyword(text, remaining):
    cursor = Cursor(text)
    keyword("to")(cursor)
    assert cursor.remaining == remaining


@pytest.mark.parametrize("text", ["tomato", "to-be", "t"])
def test_keyword_is_not_prefix(text):
    cursor = Cursor(text)
    with pytest.raises(TokenizationError):
        keyword("to")(cursor)
    assert cursor.pos == 0


@pytest.mark.parametrize(
    "text, matches", [("1234", True), ("123", False), ("12345", False)]
)
def test_exactly(text, matches):
    cursor = Cursor(text)
    if matches:
        exactly(4, "0123456789", "digits")(cursor)
        assert cursor.at_end
    else:
        with pytest.raises(TokenizationError):
            exactly(4, "0123456789", "digits")(cursor)
        assert cursor.pos == 0


@pytest.mark.parametrize(
    "text, remaining",
    [("\nx", "x"), ("\r\nx", "x"), ("\rx", "x"), ("\x0bx", "x"), ("\n\n", "\n")],
)
def test_line_terminator(text, remaining):
    cursor = Cursor(text)
    line_terminator(cursor)
    assert cursor.remaining == remaining


@pytest.mark.parametrize("text", ["x", " \n", ""])
def test_line_terminator_missing(text):
    cursor = Cursor(text)
    with pytest.raises(TokenizationError):
        line_terminator(cursor)
    assert cursor.pos == 0
