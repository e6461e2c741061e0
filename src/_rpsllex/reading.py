import pathlib
from contextlib import contextmanager

import _rpsllex.tokenizer as rpsltok


def tokenize(filelike):
    """
    Tokenizes an rpsl object and returns the list of tokens,
    ie. tokens = tokenize("/my/mntner.rpsl")

    The last token is either of kind TokenKind.EOF or, if the object
    is malformed, TokenKind.ILLEGAL.
    """
    with lazy_tokenize(filelike) as tokens:
        return list(tokens)


def read_text(stream):
    """
    Read all of the stream, decoding it as utf-8 if given a byte stream.
    """
    text = stream.read()
    if hasattr(text, "decode"):
        text = text.decode("utf-8")
    return text


@contextmanager
def lazy_tokenize(filelike):
    """
    Context manager giving an iterator of the tokens in the rpsl object in
    filelike.

    :param filelike: Either a path to a file or an open text or byte stream.
    """
    stream = filelike
    did_open = False
    if isinstance(filelike, (str, pathlib.Path)):
        did_open = True
        stream = open(filelike, "rb")

    try:
        name = str(getattr(stream, "name", "<stream>"))
        yield rpsltok.RpslTokenizer(read_text(stream), name=name)
    finally:
        if did_open:
            stream.close()
