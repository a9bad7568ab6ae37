"""Errors raised while tokenizing argument vectors."""


class MalformedArguments(ValueError):
    """The argument vector breaks one of the lexical rules.

    Raised when a lone hyphen ("-") is followed by further arguments, or when
    a double hyphen introduces a key shorter than two characters. Either case
    aborts the parse; there is no recovery.
    """
