from dataclasses import dataclass

from _rpsllex.tokenizer.token_kind import TokenKind


@dataclass(frozen=True)
class Token:
    """
    A token in an rpsl object.

    literal is the exact text matched, line is 1-based and column is the
    display column of the last character of the token, ie. the total
    display width of its line up to and including the token. Wide
    characters, such as most emoji, take up two columns.

    The TokenKind.EOF token has an empty literal and line and column 0.
    """

    kind: TokenKind
    literal: str
    line: int
    column: int

    def __str__(self):
        return f"{self.kind}({self.literal!r}) at {self.line}:{self.column}"
