# src/monkey/monkey_token.py
"""Token types, the Token value and the keyword table."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenType(str, Enum):
    """Closed set of lexical categories."""

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"
    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self):
        return self.value


# Module-level aliases so callers can `from .monkey_token import *`
ILLEGAL = TokenType.ILLEGAL
EOF = TokenType.EOF
IDENT = TokenType.IDENT
INT = TokenType.INT
ASSIGN = TokenType.ASSIGN
PLUS = TokenType.PLUS
MINUS = TokenType.MINUS
BANG = TokenType.BANG
ASTERISK = TokenType.ASTERISK
SLASH = TokenType.SLASH
LT = TokenType.LT
GT = TokenType.GT
EQ = TokenType.EQ
NOT_EQ = TokenType.NOT_EQ
COMMA = TokenType.COMMA
SEMICOLON = TokenType.SEMICOLON
LPAREN = TokenType.LPAREN
RPAREN = TokenType.RPAREN
LBRACE = TokenType.LBRACE
RBRACE = TokenType.RBRACE
FUNCTION = TokenType.FUNCTION
LET = TokenType.LET
TRUE = TokenType.TRUE
FALSE = TokenType.FALSE
IF = TokenType.IF
ELSE = TokenType.ELSE
RETURN = TokenType.RETURN


@dataclass(frozen=True)
class Token:
    type: TokenType
    literal: str

    def __repr__(self):
        return f"Token(type={self.type.name}, literal={self.literal!r})"


KEYWORDS = MappingProxyType({
    "fn": FUNCTION,
    "let": LET,
    "true": TRUE,
    "false": FALSE,
    "if": IF,
    "else": ELSE,
    "return": RETURN,
})


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword type for *ident*, or ``IDENT`` if it is not reserved."""
    return KEYWORDS.get(ident, IDENT)


__all__ = [
    "TokenType", "Token", "KEYWORDS", "lookup_ident",
    "ILLEGAL", "EOF", "IDENT", "INT",
    "ASSIGN", "PLUS", "MINUS", "BANG", "ASTERISK", "SLASH", "LT", "GT",
    "EQ", "NOT_EQ",
    "COMMA", "SEMICOLON", "LPAREN", "RPAREN", "LBRACE", "RBRACE",
    "FUNCTION", "LET", "TRUE", "FALSE", "IF", "ELSE", "RETURN",
]
