# src/monkey/parser.py
import logging

from .config import config
from .monkey_ast import Program
from .monkey_token import *

logger = logging.getLogger("monkey.parser")


class Parser:
    """Program entry point over a Lexer with a two-token window.

    No grammar rules are defined yet; ``parse_program`` returns an empty
    Program. ``cur_token`` and ``peek_token`` are filled on construction.
    """

    def __init__(self, lexer):
        self.lexer = lexer
        self.errors = []
        self.cur_token = None
        self.peek_token = None

        # Read two tokens so cur_token and peek_token are both set
        self.next_token()
        self.next_token()

    def _log(self, message, *args):
        if config.should_log("debug"):
            logger.debug(message, *args)

    def next_token(self):
        self.cur_token = self.peek_token
        self.peek_token = self.lexer.next_token()
        self._log("cur=%r peek=%r", self.cur_token, self.peek_token)

    def cur_token_is(self, token_type):
        return self.cur_token is not None and self.cur_token.type == token_type

    def peek_token_is(self, token_type):
        return self.peek_token is not None and self.peek_token.type == token_type

    def parse_program(self):
        program = Program()
        self._log("parse_program: %r", program)
        return program
