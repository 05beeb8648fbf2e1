# src/monkey/lexer.py
import logging

from .errors import IllegalTokenError
from .monkey_token import *

logger = logging.getLogger("monkey.lexer")

# Current-character value once the input is exhausted
EOF_CHAR = ""

_WHITESPACE = (' ', '\t', '\n', '\r')

_SINGLE_CHAR_TOKENS = {
    ';': SEMICOLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    ',': COMMA,
    '+': PLUS,
    '-': MINUS,
    '/': SLASH,
    '*': ASTERISK,
    '<': LT,
    '>': GT,
}


class Lexer:
    """Pull-based scanner over an in-memory source string.

    Each call to ``next_token`` returns exactly one token and leaves ``ch``
    on the first character after it. Only ASCII is classified; anything
    outside the known character sets comes back as an ``ILLEGAL`` token.
    """

    def __init__(self, source_code):
        if not isinstance(source_code, str):
            raise TypeError(
                f"Lexer expects source text as str, got {type(source_code).__name__}"
            )
        self.input = source_code
        self.position = 0       # index of ch
        self.read_position = 0  # index of the next character to read
        self.ch = EOF_CHAR
        self.read_char()

    def read_char(self):
        if self.read_position >= len(self.input):
            self.ch = EOF_CHAR
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return EOF_CHAR
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        if self.ch == '=':
            if self.peek_char() == '=':
                ch = self.ch
                self.read_char()
                tok = Token(EQ, ch + self.ch)
            else:
                tok = Token(ASSIGN, self.ch)
        elif self.ch == '!':
            if self.peek_char() == '=':
                ch = self.ch
                self.read_char()
                tok = Token(NOT_EQ, ch + self.ch)
            else:
                tok = Token(BANG, self.ch)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch)
        elif self.ch == EOF_CHAR:
            # Sticky: no advance, so every later call lands here again
            return Token(EOF, "")
        elif self.is_letter(self.ch):
            # read_identifier leaves ch past the token already
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number())
        else:
            logger.debug("Illegal character %r at index %d", self.ch, self.position)
            tok = Token(ILLEGAL, self.ch)

        self.read_char()
        return tok

    def read_identifier(self):
        # Continuation uses is_letter only: "x1" scans as IDENT "x", INT "1"
        start_position = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    @staticmethod
    def is_letter(char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    @staticmethod
    def is_digit(char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in _WHITESPACE:
            self.read_char()


def tokenize(source_code):
    """Scan *source_code* and return every token up to and including ``EOF``."""
    lexer = Lexer(source_code)
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == EOF:
            return tokens


def check_source(source_code):
    """Scan *source_code* and raise ``IllegalTokenError`` if anything was not recognized.

    Returns the token list otherwise.
    """
    tokens = tokenize(source_code)
    illegal = [tok for tok in tokens if tok.type == ILLEGAL]
    if illegal:
        raise IllegalTokenError(illegal)
    return tokens
