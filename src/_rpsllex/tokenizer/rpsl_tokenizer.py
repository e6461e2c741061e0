import warnings
from dataclasses import dataclass
from typing import Callable

from _rpsllex.tokenizer.combinators import line_terminator
from _rpsllex.tokenizer.common import (
    COMMENT,
    CONTINUATION_MARKERS,
    NEWLINE,
    WHITESPACE,
)
from _rpsllex.tokenizer.cursor import Cursor
from _rpsllex.tokenizer.errors import TokenizationError, UnconsumedInputWarning
from _rpsllex.tokenizer.object_classes import object_classes
from _rpsllex.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class ClassDispatch:
    """
    Looking for the object class keyword at the start of an object.
    """

    objects_seen: int = 0


@dataclass(frozen=True)
class AttributeDispatch:
    """
    At the end of an attribute value, looking for the next attribute
    or continuation line.

    continuation is the value lexer for continuation lines, that is the
    value lexer of the last attribute.
    """

    object_class: TokenKind
    continuation: Callable


@dataclass(frozen=True)
class ValueLex:
    object_class: TokenKind
    value_lexer: Callable


@dataclass(frozen=True)
class Illegal:
    error: TokenizationError


@dataclass(frozen=True)
class Done:
    pass


def tokenize_end_of_line(cursor):
    """
    Read trailing whitespace, a trailing comment and the line
    terminator, without emitting any tokens.

    :raises TokenizationError: if anything else is left on the line.
    """
    cursor.accept_run(WHITESPACE)
    cursor.ignore()
    if cursor.peek() == COMMENT:
        cursor.accept_except_run(NEWLINE)
        cursor.ignore()

    if not cursor.at_end:
        line_terminator(cursor)
    cursor.ignore()


def tokenize_separator(cursor):
    """
    Read the colon after a class or attribute keyword and the whitespace
    following it.
    """
    if not cursor.accept(":"):
        raise TokenizationError(
            f"Expected ':' at {cursor.position} got {cursor.peek()!r}"
        )
    cursor.accept_run(WHITESPACE)
    cursor.ignore()


def by_keyword_length(kinds):
    return sorted(kinds, key=lambda kind: len(kind.keyword), reverse=True)


class RpslTokenizer:
    """
    The rpsl tokenizer is an iterator of tokens for a single rpsl object.

    >>> tokens = RpslTokenizer("mntner: EXAMPLE-MNT\\n")
    >>> [str(t.kind) for t in tokens]
    ['MAINTAINER', 'NIC_HANDLE', 'EOF']

    Tokenization ends with a TokenKind.EOF token or, if the input is
    malformed, with a TokenKind.ILLEGAL token containing the rest of the
    offending line. After that the iterator is exhausted.

    The tokenizer is a state machine where each call to step() does one
    transition and emits zero or more tokens:

        ClassDispatch -> ValueLex -> AttributeDispatch -> ValueLex -> ...

    until Done. Tokens are only produced when asked for, so abandoning a
    tokenizer half way is simply to stop iterating.
    """

    def __init__(self, text, name="<string>"):
        """
        :param text: The rpsl object as a string.
        :param name: Name of the input, used in warnings.
        """
        self.name = name
        self.cursor = Cursor(text)
        self.state = ClassDispatch()
        self.error = None
        self.steps = {
            ClassDispatch: self.tokenize_object_class,
            AttributeDispatch: self.tokenize_attribute,
            ValueLex: self.tokenize_value,
            Illegal: self.tokenize_illegal,
        }

    def __iter__(self):
        return self

    def __next__(self):
        while not self.cursor.tokens:
            if isinstance(self.state, Done):
                raise StopIteration
            self.state = self.step(self.state)
        return self.cursor.tokens.popleft()

    def next_token(self):
        """
        :returns: The next token, or None when tokenization has ended.
        """
        return next(self, None)

    def step(self, state):
        """
        Do one transition of the state machine.

        :returns: The next state.
        """
        return self.steps[type(state)](state)

    def tokenize_object_class(self, state):
        # A single object is tokenized per input.
        if state.objects_seen > 0:
            return self.tokenize_end_of_input()

        for kind in by_keyword_length(TokenKind.object_classes()):
            if self.cursor.accept_word(kind.keyword, casefold=True):
                self.cursor.emit(kind)
                try:
                    tokenize_separator(self.cursor)
                except TokenizationError as err:
                    return Illegal(err)
                return ValueLex(kind, object_classes[kind].value_lexer)

        return self.tokenize_end_of_input()

    def tokenize_value(self, state):
        try:
            state.value_lexer(self.cursor)
        except TokenizationError as err:
            return Illegal(err)
        return AttributeDispatch(state.object_class, state.value_lexer)

    def tokenize_attribute(self, state):
        cursor = self.cursor
        try:
            tokenize_end_of_line(cursor)
        except TokenizationError as err:
            return Illegal(err)

        if cursor.accept(CONTINUATION_MARKERS):
            cursor.emit(TokenKind.CONTINUATION)
            cursor.accept_run(WHITESPACE)
            cursor.ignore()
            # Blank continuation lines carry no value.
            if cursor.at_end or cursor.peek_in(NEWLINE + COMMENT):
                return AttributeDispatch(state.object_class, state.continuation)
            return ValueLex(state.object_class, state.continuation)

        object_class = object_classes[state.object_class]
        for kind, value_lexer in object_class.attributes_by_length():
            if cursor.accept_word(kind.keyword, casefold=True):
                cursor.emit(kind)
                try:
                    tokenize_separator(cursor)
                except TokenizationError as err:
                    return Illegal(err)
                return ValueLex(state.object_class, value_lexer)

        return ClassDispatch(objects_seen=1)

    def tokenize_illegal(self, state):
        """
        Emit the rest of the line as a TokenKind.ILLEGAL token and stop.
        """
        self.error = state.error
        self.cursor.accept_except_run(NEWLINE)
        self.cursor.emit(TokenKind.ILLEGAL)
        return Done()

    def tokenize_end_of_input(self):
        remaining = self.cursor.remaining
        if remaining.strip():
            warnings.warn(
                f"{self.name}: stopped tokenizing at line {self.cursor.line}, "
                f"ignoring the remaining {len(remaining)} characters",
                UnconsumedInputWarning,
            )
        self.cursor.emit(TokenKind.EOF)
        return Done()
