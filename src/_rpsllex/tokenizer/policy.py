"""
Lexers for the routing policy attributes import, export, mp-import and
mp-export. A policy is emitted as a single token spanning the whole
expression, eg. the value of

    export: to AS174 announce AS-SETTEST

is emitted as Token(TokenKind.EXPORT_POLICY, "to AS174 announce AS-SETTEST",
...). The multi-protocol variants additionally allow an address family
clause, ie. "afi ipv6.unicast".

Long policies are usually folded over several lines:

    export: to AS174
            announce AS-SETTEST

so wherever two elements are separated by whitespace, a line fold (a line
terminator followed by a continuation marker) is accepted as well. The
folded policy is still one token, and its literal contains the fold.
"""

from _rpsllex.tokenizer.combinators import (
    keyword,
    line_terminator,
    literal,
    one_of,
    optional,
    optional_whitespace,
    repeated,
    run_except,
    run_of,
    sequence,
    separated,
    whitespace,
)
from _rpsllex.tokenizer.common import (
    ALPHANUMERIC,
    COMMENT,
    CONTINUATION_MARKERS,
    NEWLINE,
    WORD,
    expect_end_of_value,
)
from _rpsllex.tokenizer.errors import TokenizationError
from _rpsllex.tokenizer.token_kind import TokenKind
from _rpsllex.tokenizer.value_lexers import match_as_number, match_as_set_name

# Longest first, so that "ipv4" does not shadow "ipv4.unicast".
ADDRESS_FAMILIES = (
    "ipv4.unicast",
    "ipv4.multicast",
    "ipv6.unicast",
    "ipv6.multicast",
    "ipv4",
    "ipv6",
)


def comment(cursor):
    literal(COMMENT)(cursor)
    cursor.accept_except_run(NEWLINE)


def continuation_marker(cursor):
    if not cursor.accept(CONTINUATION_MARKERS):
        raise TokenizationError(
            f"Expected continuation line at {cursor.position} got {cursor.peek()!r}"
        )


line_fold = sequence(
    optional_whitespace,
    optional(comment),
    line_terminator,
    continuation_marker,
    optional_whitespace,
)

# Whitespace between two elements of a policy. The line fold is tried first
# as whitespace alone would stop at the line terminator.
gap = one_of(line_fold, whitespace)
optional_gap = optional(gap)

name = run_of(WORD, "name")

protocol_clause = sequence(
    keyword("protocol"),
    gap,
    name,
    optional(sequence(gap, keyword("into"), gap, name)),
)

address_family = one_of(
    *[keyword(afi, word_characters=WORD + ".") for afi in ADDRESS_FAMILIES]
)

comma = sequence(optional_gap, literal(","), optional_gap)

afi_clause = sequence(
    keyword("afi"),
    gap,
    separated(address_family, comma),
)

action_item = sequence(
    run_of(ALPHANUMERIC + ".-_", "action name"),
    optional_whitespace,
    literal("="),
    optional_whitespace,
    run_except(";" + NEWLINE, "action value"),
    literal(";"),
)

action_clause = sequence(
    keyword("action"),
    gap,
    separated(action_item, optional_gap),
)

as_item = one_of(match_as_number, match_as_set_name)

as_list = separated(as_item, one_of(comma, gap))

any_or_as_list = one_of(keyword("ANY"), as_list)


def policy(peer_keyword, peer, filter_keyword, multi_protocol=False):
    """
    Matcher combinator for a policy expression.

    :param peer_keyword: "to" for exports, "from" for imports.
    :param peer: Matcher for the peer following peer_keyword.
    :param filter_keyword: "announce" for exports, "accept" for imports.
    :param multi_protocol: Whether an afi clause is allowed.
    """
    clauses = [optional(sequence(protocol_clause, gap))]
    if multi_protocol:
        clauses.append(optional(sequence(afi_clause, gap)))
    clauses += [
        keyword(peer_keyword),
        gap,
        peer,
        gap,
        repeated(sequence(action_clause, gap)),
        keyword(filter_keyword),
        gap,
        any_or_as_list,
    ]
    return sequence(*clauses)


match_export = policy("to", match_as_number, "announce")
match_import = policy("from", as_item, "accept")
match_mp_export = policy("to", match_as_number, "announce", multi_protocol=True)
match_mp_import = policy("from", as_item, "accept", multi_protocol=True)


def policy_lexer(matcher, kind):
    """
    :returns: A value lexer emitting one token of the given kind for
        the policy expression matched by matcher.
    """

    match_value = sequence(matcher, expect_end_of_value)

    def lex_policy(cursor):
        match_value(cursor)
        cursor.emit(kind)

    return lex_policy


lex_export = policy_lexer(match_export, TokenKind.EXPORT_POLICY)
lex_import = policy_lexer(match_import, TokenKind.IMPORT_POLICY)
lex_mp_export = policy_lexer(match_mp_export, TokenKind.MP_EXPORT_POLICY)
lex_mp_import = policy_lexer(match_mp_import, TokenKind.MP_IMPORT_POLICY)
