from collections import deque

from _rpsllex.tokenizer.common import display_width
from _rpsllex.tokenizer.token import Token
from _rpsllex.tokenizer.token_kind import TokenKind

# Returned by Cursor.advance and Cursor.peek when there is no more input.
EOF = ""


class Cursor:
    """
    Scanning position in the rpsl text together with the tokens
    emitted so far.

    The text between start and pos is the pending token. Characters are read
    with advance() (or accept and friends) which moves pos, and the pending
    text is either turned into a token with emit() or dropped with ignore().

    >>> cursor = Cursor("AS701\\n")
    >>> cursor.accept_word("AS")
    True
    >>> cursor.accept_run("0123456789")
    True
    >>> cursor.emit(TokenKind.AS_NUMBER)
    >>> token = cursor.tokens.popleft()
    >>> token.literal, token.line, token.column
    ('AS701', 1, 5)

    """

    def __init__(self, text):
        """
        :param text: The rpsl text to scan.
        """
        self.text = text
        self.start = 0
        self.pos = 0
        self.line = 1
        self.column = 0
        self.last_width = 0
        self.tokens = deque()
        self._previous = (self.line, self.column)

    @property
    def at_end(self):
        return self.pos >= len(self.text)

    @property
    def remaining(self):
        return self.text[self.pos :]

    @property
    def position(self):
        return f"line {self.line}, column {self.column}"

    def advance(self):
        """
        Read the next character.

        :returns: The character read or EOF if at the end of the text.
        """
        self._previous = (self.line, self.column)
        if self.at_end:
            self.last_width = 0
            return EOF

        char = self.text[self.pos]
        self.pos += 1
        self.last_width = 1
        if char == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += display_width(char)
        return char

    def back_up(self):
        """
        Undo the last advance(). Only one character can be put back
        between two calls to advance().
        """
        self.pos -= self.last_width
        self.last_width = 0
        self.line, self.column = self._previous

    def peek(self):
        if self.at_end:
            return EOF
        return self.text[self.pos]

    def peek_in(self, valid):
        """
        :returns: Whether the next character is one of the characters in
            valid. Always False at the end of the text.
        """
        char = self.peek()
        return char != EOF and char in valid

    def accept(self, valid):
        char = self.advance()
        if char != EOF and char in valid:
            return True
        self.back_up()
        return False

    def accept_except(self, invalid):
        char = self.advance()
        if char != EOF and char not in invalid:
            return True
        self.back_up()
        return False

    def accept_run(self, valid):
        """
        Read as many characters in valid as possible.

        :returns: Whether at least one character was read.
        """
        accepted = False
        while self.accept(valid):
            accepted = True
        return accepted

    def accept_except_run(self, invalid):
        """
        Read as many characters not in invalid as possible.

        :returns: Whether at least one character was read.
        """
        accepted = False
        while self.accept_except(invalid):
            accepted = True
        return accepted

    def accept_word(self, word, casefold=False):
        """
        Read the given word if the text continues with it.

        :param casefold: Whether to compare case-insensitively.
        :returns: Whether the word was read.
        """
        candidate = self.text[self.pos : self.pos + len(word)]
        if casefold:
            matches = candidate.lower() == word.lower()
        else:
            matches = candidate == word
        if not matches:
            return False
        for _ in word:
            self.advance()
        return True

    def mark(self):
        """
        :returns: A snapshot of the scanning position which can be
            given to reset().
        """
        return (self.pos, self.line, self.column, self._previous)

    def reset(self, mark):
        self.pos, self.line, self.column, self._previous = mark
        self.last_width = 0

    def emit(self, kind):
        """
        Create a token of the given kind for the pending text, queue it and
        start a new pending token.
        """
        if kind == TokenKind.EOF:
            token = Token(kind, "", 0, 0)
        else:
            token = Token(kind, self.text[self.start : self.pos], self.line, self.column)
        self.tokens.append(token)
        self.start = self.pos

    def ignore(self):
        self.start = self.pos
