from wcwidth import wcwidth

from _rpsllex.tokenizer.errors import TokenizationError

ALPHA_LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
ALPHA_UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHA = ALPHA_LOWERCASE + ALPHA_UPPERCASE
DIGITS = "0123456789"
HEX_DIGITS = DIGITS + "ABCDEFabcdef"
ALPHANUMERIC = ALPHA + DIGITS
WHITESPACE = " \t\x85\xa0"
NEWLINE = "\n\v\f\r"

# Characters that can start a continuation line.
CONTINUATION_MARKERS = " \t+"
COMMENT = "#"

# Any character that may be part of a word, such as a name or number.
# Used for checking that a fixed word is not just the prefix of a longer one.
WORD = ALPHANUMERIC + "-_"


def display_width(char):
    """
    The number of columns the character takes up when displayed, ie. 2 for
    wide characters like "😀", 0 for combining characters and 1 for
    other characters. Non-printable characters such as tab are given width
    1.
    """
    width = wcwidth(char)
    if width < 0:
        return 1
    return width


def expect_end_of_value(cursor):
    """
    Check that the cursor is at the end of a value, that is at whitespace,
    a comment, a newline or the end of input.

    :raises TokenizationError: if there are more characters in the value.
    """
    if cursor.at_end or cursor.peek_in(WHITESPACE + NEWLINE + COMMENT):
        return
    raise TokenizationError(
        f"Expected end of value at {cursor.position} got {cursor.peek()!r}"
    )
