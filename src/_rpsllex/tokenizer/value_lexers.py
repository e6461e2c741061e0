"""
Value lexers read the value of an attribute, starting right after the colon
and the whitespace following it, and emit the tokens for it. They stop at
the end of the value, so trailing whitespace, comments and the newline are
left for the tokenizer.

If the value does not match the expected grammar, the value lexer raises
TokenizationError.
"""

from _rpsllex.tokenizer.combinators import (
    exactly,
    literal,
    optional,
    optional_whitespace,
    run_except,
    run_of,
    sequence,
    whitespace,
)
from _rpsllex.tokenizer.common import (
    ALPHA,
    ALPHANUMERIC,
    DIGITS,
    HEX_DIGITS,
    NEWLINE,
    WHITESPACE,
    WORD,
    expect_end_of_value,
)
from _rpsllex.tokenizer.errors import TokenizationError
from _rpsllex.tokenizer.token_kind import TokenKind

EMAIL_DOMAIN = ALPHANUMERIC + ".-_:"
CRYPT_ALPHABET = ALPHANUMERIC + "./"
MD5_SALT_LENGTH = 8


def match_nic_handle(cursor):
    # NIC handles must begin with a letter
    if not cursor.accept(ALPHA):
        raise TokenizationError(
            f"Expected NIC handle at {cursor.position} got {cursor.peek()!r}"
        )
    cursor.accept_run(WORD)


def match_email(cursor):
    """
    Matches "local-part@domain". Only the characters are checked, validating
    the address is left to whoever consumes the tokens.
    """
    sequence(
        run_except(WHITESPACE + NEWLINE + "@", "email local part"),
        literal("@"),
        run_of(EMAIL_DOMAIN, "email domain"),
    )(cursor)


def match_as_number(cursor):
    """
    Matches an autonomous system number, eg. "AS701".
    """
    mark = cursor.mark()
    sequence(literal("AS"), run_of(DIGITS, "AS number digits"))(cursor)
    if cursor.peek_in(WORD):
        cursor.reset(mark)
        raise TokenizationError(f"Malformed AS number at {cursor.position}")


def match_as_set_name(cursor):
    """
    Matches an autonomous system set name, eg. "AS-EXAMPLE". The name
    must end with a letter or digit, so "AS-12-" does not match.
    """
    mark = cursor.mark()
    if (
        not cursor.accept_word("AS-")
        or not cursor.accept_run(WORD)
        or cursor.text[cursor.pos - 1] not in ALPHANUMERIC
    ):
        cursor.reset(mark)
        raise TokenizationError(f"Malformed AS set name at {cursor.position}")


match_telephone = sequence(
    literal("+"),
    run_of(DIGITS, "country code"),
    whitespace,
    run_of(DIGITS, "area code"),
    whitespace,
    run_of(DIGITS, "telephone number"),
    whitespace,
    run_of(DIGITS, "telephone number"),
    optional(
        sequence(
            optional_whitespace,
            literal("ext."),
            optional_whitespace,
            run_of(DIGITS, "extension"),
        )
    ),
)

match_date = exactly(8, DIGITS, "digits of date (YYYYMMDD)")


def lex_free_form(cursor):
    cursor.accept_except_run(NEWLINE)
    if cursor.pos > cursor.start:
        cursor.emit(TokenKind.STRING)


def lex_registry_name(cursor):
    cursor.accept_except_run(NEWLINE)
    if cursor.pos > cursor.start:
        cursor.emit(TokenKind.REGISTRY_NAME)


def lex_nic_handle(cursor):
    match_nic_handle(cursor)
    cursor.emit(TokenKind.NIC_HANDLE)


def lex_nic_handles(cursor):
    """
    Lex a comma separated list of NIC handles, eg. "OTHER1-MNT, OTHER2-MNT",
    emitting one TokenKind.NIC_HANDLE per handle.
    """
    lex_nic_handle(cursor)
    while True:
        mark = cursor.mark()
        cursor.accept_run(WHITESPACE)
        if not cursor.accept(","):
            cursor.reset(mark)
            return
        cursor.accept_run(WHITESPACE)
        cursor.ignore()
        lex_nic_handle(cursor)


def lex_email(cursor):
    match_email(cursor)
    cursor.emit(TokenKind.EMAIL_ADDRESS)


def lex_email_and_date(cursor):
    """
    Lex the value of the changed attribute, eg. "noc@example.net 20240101",
    emitting TokenKind.EMAIL_ADDRESS followed by TokenKind.DATE. The date
    can be left out.
    """
    lex_email(cursor)
    mark = cursor.mark()
    if cursor.accept_run(WHITESPACE) and cursor.peek_in(DIGITS):
        cursor.ignore()
        match_date(cursor)
        expect_end_of_value(cursor)
        cursor.emit(TokenKind.DATE)
    else:
        cursor.reset(mark)


def lex_telephone(cursor):
    match_telephone(cursor)
    expect_end_of_value(cursor)
    cursor.emit(TokenKind.TELEPHONE)


def lex_as_number(cursor):
    match_as_number(cursor)
    expect_end_of_value(cursor)
    cursor.emit(TokenKind.AS_NUMBER)


def lex_as_set_name(cursor):
    match_as_set_name(cursor)
    expect_end_of_value(cursor)
    cursor.emit(TokenKind.AS_SET_NAME)


def match_md5_password(cursor):
    """
    Matches an md5 crypt digest, ie. "$1$<salt>$<hash>" where the salt is at
    most 8 characters.
    """
    literal("$1$")(cursor)
    for _ in range(MD5_SALT_LENGTH):
        if not cursor.accept(CRYPT_ALPHABET):
            break
    literal("$")(cursor)
    run_of(CRYPT_ALPHABET, "md5 digest")(cursor)


authentication_matchers = {
    TokenKind.PGP_KEY: exactly(8, HEX_DIGITS, "hex digits of PGP key"),
    TokenKind.CRYPT_PASSWORD: exactly(13, CRYPT_ALPHABET, "crypt password characters"),
    TokenKind.MD5_PASSWORD: match_md5_password,
    TokenKind.MAIL_FROM_PASSWORD: match_email,
    TokenKind.NO_AUTH: lambda cursor: None,
}


def lex_authentication(cursor):
    """
    Lex the value of the auth attribute. The method is given by its prefix,
    eg. "PGPKey-80F238C6" or "CRYPT-PW LEuuhsBJNFV0Q", and is emitted as
    a token of that method's kind. The literal of the token is the key,
    password or address following the prefix, except for
    TokenKind.NO_AUTH where it is "NONE".
    """
    methods = sorted(
        TokenKind.authentication_methods(), key=lambda k: len(k.keyword), reverse=True
    )
    for kind in methods:
        if not cursor.accept_word(kind.keyword):
            continue
        if kind == TokenKind.PGP_KEY:
            cursor.ignore()
        elif kind != TokenKind.NO_AUTH:
            whitespace(cursor)
            cursor.ignore()
        authentication_matchers[kind](cursor)
        expect_end_of_value(cursor)
        cursor.emit(kind)
        return

    raise TokenizationError(
        f"Unknown authentication method at {cursor.position} got {cursor.peek()!r}"
    )
