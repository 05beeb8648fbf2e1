# src/monkey/errors.py
"""Exceptions raised by the outer surfaces (CLI, checks).

The lexer itself never raises while scanning: bad input comes back as
``ILLEGAL`` tokens and it is up to the consumer to decide what to do.
"""

from typing import List

from .monkey_token import Token


class MonkeyError(Exception):
    """Base class for monkey-lexer errors."""


class IllegalTokenError(MonkeyError):
    """Raised when a scan produced one or more ``ILLEGAL`` tokens."""
    def __init__(self, tokens: List[Token]):
        self.tokens = list(tokens)
        chars = ", ".join(repr(t.literal) for t in self.tokens)
        super().__init__(f"Illegal characters in source: {chars}")
