import rpsllex.version
from _rpsllex.reading import lazy_tokenize, tokenize
from _rpsllex.tokenizer import (
    RpslTokenizer,
    Token,
    TokenizationError,
    TokenKind,
    UnconsumedInputWarning,
)

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = rpsllex.version.version

__all__ = [
    "RpslTokenizer",
    "Token",
    "TokenKind",
    "TokenizationError",
    "UnconsumedInputWarning",
    "lazy_tokenize",
    "tokenize",
]
