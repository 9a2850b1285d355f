"""Main parser entry point for Monkey.

This module defines the :class:`Parser` class, which owns the parser state:
the lexer it pulls tokens from, the current and peek tokens, the prefix and
infix handler registries used by the Pratt loop, and the list of accumulated
error messages. The parsing routines themselves are split across
:mod:`monkeylang.parser.expressions` and :mod:`monkeylang.parser.statements`.

Parsing never raises on malformed input. Each failed expectation records a
message on :attr:`Parser.errors` and the enclosing routine gives up on the
current node, so that a single pass can surface several errors.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import logging
from typing import Callable, Optional

from monkeylang import ast
from monkeylang.lexer import Lexer
from monkeylang.tokens import Token, TokenType

from . import expressions as _expr
from . import statements as _stmt
from .expressions import Precedence, PRECEDENCES

logger = logging.getLogger(__name__)

PrefixParseFn = Callable[["Parser"], Optional[ast.Expression]]
InfixParseFn = Callable[["Parser", ast.Expression], Optional[ast.Expression]]


class Parser:
    """Monkey Pratt parser."""

    def __init__(self, lexer: Lexer):
        """
        Initialize the parser and prime the current and peek tokens.

        Parameters:
            lexer (Lexer): The lexer supplying tokens.
        """
        self.lexer = lexer
        self.errors: list[str] = []

        self.prefix_parse_fns: dict[TokenType, PrefixParseFn] = dict(_expr.PREFIX_PARSE_FNS)
        self.infix_parse_fns: dict[TokenType, InfixParseFn] = dict(_expr.INFIX_PARSE_FNS)

        self.curr_token: Token = self.lexer.next_token()
        self.peek_token: Token = self.lexer.next_token()

    def next_token(self) -> None:
        """
        Shift the peek token into the current slot and pull a new peek token.
        """
        self.curr_token = self.peek_token
        self.peek_token = self.lexer.next_token()

    def curr_token_is(self, token_type: TokenType) -> bool:
        return self.curr_token.type == token_type

    def peek_token_is(self, token_type: TokenType) -> bool:
        return self.peek_token.type == token_type

    def expect_peek(self, token_type: TokenType) -> bool:
        """
        Advance if the peek token matches the expected type.

        Parameters:
            token_type (TokenType): The expected token type.

        Returns:
            bool: True if the token matched and was consumed. On a mismatch an
            error is recorded and the parser does not advance.
        """
        if self.peek_token_is(token_type):
            self.next_token()
            return True
        self.peek_error(token_type)
        return False

    # Error reporting
    def add_error(self, message: str) -> None:
        logger.debug("parse error: %s", message)
        self.errors.append(message)

    def peek_error(self, token_type: TokenType) -> None:
        self.add_error(
            f"expected next token to be {token_type}, "
            f"got {self.peek_token.type} instead"
        )

    def no_prefix_parse_fn_error(self, token_type: TokenType) -> None:
        self.add_error(f"no prefix parse function for {token_type} found")

    # Precedence lookup
    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.type, Precedence.LOWEST)

    def curr_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.curr_token.type, Precedence.LOWEST)

    # Expression wrappers
    def expression(self, precedence: Precedence) -> Optional[ast.Expression]:
        """
        Parse an expression binding tighter than ``precedence``.
        """
        return _expr.parse_expression(self, precedence)

    def expression_list(self, end: TokenType) -> Optional[list[ast.Expression]]:
        """
        Parse a comma-separated list of expressions closed by ``end``.
        """
        return _expr.parse_expression_list(self, end)

    # Statement wrappers
    def statement(self) -> Optional[ast.Statement]:
        """
        Parse a single statement.
        """
        return _stmt.parse_statement(self)

    def block(self) -> ast.BlockStatement:
        """
        Parse a block of statements enclosed in braces.
        """
        return _stmt.parse_block(self)

    def parse_program(self) -> ast.Program:
        """
        Parse the full input into a Program. Check :attr:`errors` afterwards.
        """
        program = ast.Program()
        while not self.curr_token_is(TokenType.EOF):
            stmt = self.statement()
            if stmt is not None:
                program.statements.append(stmt)
            self.next_token()
        return program


def parse_program(lexer: Lexer) -> tuple[ast.Program, list[str]]:
    """
    Parse everything ``lexer`` produces.

    Returns:
        tuple: The (possibly partial) Program and the list of parse errors.
    """
    parser = Parser(lexer)
    program = parser.parse_program()
    return program, parser.errors
