"""
A matcher is a function that takes a Cursor and reads some grammar from it
without emitting tokens. If the grammar is not found, the matcher raises a
TokenizationError. Matchers made by the combinators below wind the cursor back
to where they started before raising, so that alternatives can be tried.

Matcher combinator is any function which returns a matcher.
"""

from _rpsllex.tokenizer.common import NEWLINE, WHITESPACE, WORD
from _rpsllex.tokenizer.errors import TokenizationError


def sequence(*matchers):
    """
    Combinator for matchers.

    :param matchers: List of matchers.
    :returns: A matcher that applies each of the matchers in order.
    """

    def sequence_matcher(cursor):
        mark = cursor.mark()
        try:
            for matcher in matchers:
                matcher(cursor)
        except TokenizationError:
            cursor.reset(mark)
            raise

    return sequence_matcher


def one_of(*matchers):
    """
    Combinator for matchers.

    :param matchers: List of matchers.
    :returns: A matcher that applies the first matcher in matchers that
        succeeds.
    """

    def one_of_matcher(cursor):
        errors = []
        for matcher in matchers:
            mark = cursor.mark()
            try:
                matcher(cursor)
                return
            except TokenizationError as err:
                cursor.reset(mark)
                errors.append(str(err))

        raise TokenizationError(
            "Tokenization failed, due to one of\n*" + ("\n*".join(errors))
        )

    return one_of_matcher


def optional(matcher):
    """
    Combinator for matchers.

    :returns: Matcher that applies the matcher zero or one time.
    """

    def optional_matcher(cursor):
        mark = cursor.mark()
        try:
            matcher(cursor)
        except TokenizationError:
            cursor.reset(mark)

    return optional_matcher


def repeated(matcher):
    """
    Combinator for matchers.

    :returns: Matcher that applies the matcher zero or more times, until it
        fails.
    """

    def repeated_matcher(cursor):
        while True:
            mark = cursor.mark()
            try:
                matcher(cursor)
            except TokenizationError:
                cursor.reset(mark)
                return
            if cursor.pos == mark[0]:
                return

    return repeated_matcher


def separated(item, separator):
    """
    Combinator for lists, ie. separated(number, literal(",")) matches
    "1,2,3".
    """
    return sequence(item, repeated(sequence(separator, item)))


def run_of(valid, description):
    """
    Matcher combinator for one or more characters in valid.

    :param description: What is being matched, used in error messages.
    """

    def run_matcher(cursor):
        if not cursor.accept_run(valid):
            raise TokenizationError(
                f"Expected {description} at {cursor.position} got {cursor.peek()!r}"
            )

    return run_matcher


def run_except(invalid, description):
    """
    Matcher combinator for one or more characters not in invalid.
    """

    def run_except_matcher(cursor):
        if not cursor.accept_except_run(invalid):
            raise TokenizationError(
                f"Expected {description} at {cursor.position} got {cursor.peek()!r}"
            )

    return run_except_matcher


def exactly(count, valid, description):
    """
    Matcher combinator for exactly count characters in valid, not followed
    by another character in valid.
    """

    def exactly_matcher(cursor):
        mark = cursor.mark()
        for _ in range(count):
            if not cursor.accept(valid):
                cursor.reset(mark)
                raise TokenizationError(
                    f"Expected {count} {description} at {cursor.position}"
                )
        if cursor.peek_in(valid):
            cursor.reset(mark)
            raise TokenizationError(
                f"Expected exactly {count} {description} at {cursor.position}"
            )

    return exactly_matcher


def literal(word):
    """
    Matcher combinator for a fixed word, compared case-sensitively.
    """

    def literal_matcher(cursor):
        if not cursor.accept_word(word):
            raise TokenizationError(
                f"Expected {word!r} at {cursor.position} got {cursor.peek()!r}"
            )

    return literal_matcher


def keyword(word, word_characters=WORD):
    """
    Matcher combinator for a case-insensitive keyword which must not be the
    prefix of a longer word, ie. keyword("to") matches "TO AS1" but not
    "tomato".

    :param word_characters: Characters that would continue the word.
    """

    def keyword_matcher(cursor):
        mark = cursor.mark()
        if not cursor.accept_word(word, casefold=True) or cursor.peek_in(
            word_characters
        ):
            cursor.reset(mark)
            raise TokenizationError(f"Expected keyword {word!r} at {cursor.position}")

    return keyword_matcher


whitespace = run_of(WHITESPACE, "whitespace")


def optional_whitespace(cursor):
    cursor.accept_run(WHITESPACE)


def line_terminator(cursor):
    """
    Matches one line terminator, where "\\r\\n" counts as one.
    """
    if cursor.accept("\r"):
        cursor.accept("\n")
    elif not cursor.accept(NEWLINE):
        raise TokenizationError(
            f"Expected end of line at {cursor.position} got {cursor.peek()!r}"
        )
