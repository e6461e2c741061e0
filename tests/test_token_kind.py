import pytest

from _rpsllex.tokenizer.errors import MissingKeywordError
from _rpsllex.tokenizer.token import Token
from _rpsllex.tokenizer.token_kind import TokenKind, check_keyword_table


@pytest.mark.parametrize(
    "kind, keyword",
    [
        (TokenKind.MAINTAINER, "mntner"),
        (TokenKind.AUT_NUM, "aut-num"),
        (TokenKind.ROUTER, "inet-rtr"),
        (TokenKind.ADMIN_CONTACT, "admin-c"),
        (TokenKind.FAX, "fax-no"),
        (TokenKind.CHANGED_AT_AND_BY, "changed"),
        (TokenKind.MP_IMPORT, "mp-import"),
        (TokenKind.PGP_KEY, "PGPKey-"),
        (TokenKind.CRYPT_PASSWORD, "CRYPT-PW"),
        (TokenKind.MD5_PASSWORD, "MD5-pw"),
        (TokenKind.MAIL_FROM_PASSWORD, "MAIL-FROM"),
        (TokenKind.NO_AUTH, "NONE"),
    ],
)
def test_keyword(kind, keyword):
    assert kind.keyword == keyword


@pytest.mark.parametrize("expected_kind, keyword", TokenKind.keywords().items())
def test_from_keyword(expected_kind, keyword):
    assert TokenKind.from_keyword(keyword) == expected_kind
    assert TokenKind.from_keyword(keyword.upper()) == expected_kind


def test_from_unknown_keyword():
    assert TokenKind.from_keyword("org") is None


@pytest.mark.parametrize(
    "kind",
    TokenKind.object_classes()
    + TokenKind.attributes()
    + TokenKind.authentication_methods(),
)
def test_dispatched_kinds_have_keywords(kind):
    assert kind.keyword


def test_class_and_attribute_keywords_are_lowercase():
    for kind in TokenKind.object_classes() + TokenKind.attributes():
        assert kind.keyword == kind.keyword.lower()


@pytest.mark.parametrize(
    "kind", [TokenKind.EOF, TokenKind.ILLEGAL, TokenKind.STRING, TokenKind.DATE]
)
def test_missing_keyword_is_an_error(kind):
    with pytest.raises(MissingKeywordError):
        kind.keyword  # noqa: B018


def test_keyword_table_is_complete():
    check_keyword_table()


def test_token_str():
    token = Token(TokenKind.AS_NUMBER, "AS701", 3, 14)
    assert str(token) == "AS_NUMBER('AS701') at 3:14"
