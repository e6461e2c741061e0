"""
In this module, a value lexer is a function that takes a Cursor positioned at
the start of an attribute value, reads the value and emits the tokens for it.
If the value is malformed, the function raises a TokenizationError. The
RpslTokenizer catches it and ends tokenization with a single
TokenKind.ILLEGAL token, so callers iterating over tokens never see the
exception.

Value lexers are built from matchers (see combinators), which only read
input. Matchers wind the cursor back to where they started when they fail, as
the policy grammar requires trying alternatives (eg. "AS1" or "AS-SET").

RPSL is line oriented: an object is a class line followed by attribute
lines, where a line starting with whitespace or '+' continues the value of
the attribute before it. Only the first object of the input is tokenized.
"""

from .errors import TokenizationError, UnconsumedInputWarning
from .rpsl_tokenizer import RpslTokenizer
from .token import Token
from .token_kind import TokenKind

__all__ = [
    "RpslTokenizer",
    "Token",
    "TokenKind",
    "TokenizationError",
    "UnconsumedInputWarning",
]
