class TokenizationError(Exception):
    """
    A value lexer will throw a TokenizationError if the expected value
    is not found at the current position of the cursor. The tokenizer
    turns it into a single TokenKind.ILLEGAL token, so it is never seen
    by someone iterating over tokens.
    """

    pass


class MissingKeywordError(LookupError):
    """
    Thrown when looking up the keyword of a TokenKind that has no entry
    in the keyword table. This is a programming error and does not
    depend on the input.
    """

    pass


class UnconsumedInputWarning(UserWarning):
    """
    Warned when tokenization ends while there is still input left,
    for instance a second object or an attribute not valid for the
    object class.
    """

    pass
