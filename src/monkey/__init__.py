"""Monkey lexer: a hand-written scanner for the Monkey scripting language."""

__version__ = "0.1.0"

from .monkey_token import Token, TokenType, KEYWORDS, lookup_ident
from .lexer import Lexer, tokenize, check_source
from .parser import Parser

__all__ = [
    "Token", "TokenType", "KEYWORDS", "lookup_ident",
    "Lexer", "tokenize", "check_source",
    "Parser",
]
