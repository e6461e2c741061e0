import io

import pytest

import rpsllex
from rpsllex import TokenKind, UnconsumedInputWarning, lazy_tokenize, tokenize

MAINTAINER = "mntner: EXAMPLE-MNT\ndescr: 😀 smile\nsource: TEST\n"

EXPECTED = [
    (TokenKind.MAINTAINER, "mntner"),
    (TokenKind.NIC_HANDLE, "EXAMPLE-MNT"),
    (TokenKind.DESCRIPTION, "descr"),
    (TokenKind.STRING, "😀 smile"),
    (TokenKind.REGISTRY_SOURCE, "source"),
    (TokenKind.REGISTRY_NAME, "TEST"),
    (TokenKind.EOF, ""),
]


def kinds_and_literals(tokens):
    return [(t.kind, t.literal) for t in tokens]


def test_tokenize_path(tmp_path):
    test_file = tmp_path / "example.rpsl"
    test_file.write_text(MAINTAINER, encoding="utf-8")

    assert kinds_and_literals(tokenize(test_file)) == EXPECTED
    assert kinds_and_literals(tokenize(str(test_file))) == EXPECTED


def test_tokenize_text_stream():
    assert kinds_and_literals(tokenize(io.StringIO(MAINTAINER))) == EXPECTED


def test_tokenize_byte_stream():
    stream = io.BytesIO(MAINTAINER.encode("utf-8"))
    assert kinds_and_literals(tokenize(stream)) == EXPECTED


def test_tokenize_does_not_close_given_stream():
    stream = io.StringIO(MAINTAINER)
    tokenize(stream)
    assert not stream.closed


def test_lazy_tokenize(tmp_path):
    test_file = tmp_path / "example.rpsl"
    test_file.write_text(MAINTAINER, encoding="utf-8")

    with lazy_tokenize(test_file) as tokens:
        assert tokens.name == str(test_file)
        assert next(tokens).kind == TokenKind.MAINTAINER
        assert next(tokens).literal == "EXAMPLE-MNT"


def test_lazy_tokenize_warns_with_file_name(tmp_path):
    test_file = tmp_path / "two-objects.rpsl"
    test_file.write_text("mntner: A-MNT\n\nmntner: B-MNT\n", encoding="utf-8")

    with pytest.warns(UnconsumedInputWarning, match="two-objects.rpsl"):
        tokens = tokenize(test_file)
    assert [t.kind for t in tokens] == [
        TokenKind.MAINTAINER,
        TokenKind.NIC_HANDLE,
        TokenKind.EOF,
    ]


def test_illegal_file(tmp_path):
    test_file = tmp_path / "illegal.rpsl"
    test_file.write_text("aut-num: as1\n", encoding="utf-8")

    assert kinds_and_literals(tokenize(test_file)) == [
        (TokenKind.AUT_NUM, "aut-num"),
        (TokenKind.ILLEGAL, "as1"),
    ]


def test_version():
    assert isinstance(rpsllex.__version__, str)
