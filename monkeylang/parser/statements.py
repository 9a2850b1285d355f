"""Statement parsing utilities for Monkey.

These functions operate on a :class:`monkeylang.parser.parser.Parser` and
handle the statement forms of the language: ``let`` bindings, ``return``
statements, bare expression statements and brace-delimited blocks.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING, Optional

from monkeylang import ast
from monkeylang.tokens import TokenType

from .expressions import Precedence

if TYPE_CHECKING:
    from monkeylang.parser import Parser


def parse_statement(parser: 'Parser') -> Optional[ast.Statement]:
    """
    Parse a single statement, dispatching on the current token.

    Args:
        parser: The parser instance.

    Returns:
        The statement node, or None if it could not be parsed.
    """
    tok_type = parser.curr_token.type
    if tok_type == TokenType.LET:
        return parse_let_statement(parser)
    elif tok_type == TokenType.RETURN:
        return parse_return_statement(parser)
    return parse_expression_statement(parser)


def parse_let_statement(parser: 'Parser') -> Optional[ast.Statement]:
    """
    Parse a ``let`` binding.

    Syntax:
        let <identifier> = <expression>;

    Args:
        parser: The parser instance.

    Returns:
        ast.LetStatement, or None if the name or ``=`` is missing.
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.IDENT):
        return None
    name = ast.Identifier(parser.curr_token, parser.curr_token.literal)

    if not parser.expect_peek(TokenType.ASSIGN):
        return None

    parser.next_token()
    value = parser.expression(Precedence.LOWEST)

    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()

    if value is None:
        return None
    return ast.LetStatement(tok, name, value)


def parse_return_statement(parser: 'Parser') -> ast.Statement:
    """
    Parse a ``return`` statement. The returned expression is optional.

    Syntax:
        return [<expression>];

    Args:
        parser: The parser instance.

    Returns:
        ast.ReturnStatement
    """
    tok = parser.curr_token
    # bare return before "}" or end of input
    if parser.peek_token_is(TokenType.RBRACE) or parser.peek_token_is(TokenType.EOF):
        return ast.ReturnStatement(tok, None)
    parser.next_token()

    value = None
    if not parser.curr_token_is(TokenType.SEMICOLON):
        value = parser.expression(Precedence.LOWEST)
        if parser.peek_token_is(TokenType.SEMICOLON):
            parser.next_token()

    return ast.ReturnStatement(tok, value)


def parse_expression_statement(parser: 'Parser') -> Optional[ast.Statement]:
    """
    Parse an expression used as a statement. The trailing semicolon is optional.
    """
    tok = parser.curr_token
    expression = parser.expression(Precedence.LOWEST)

    if parser.peek_token_is(TokenType.SEMICOLON):
        parser.next_token()

    if expression is None:
        return None
    return ast.ExpressionStatement(tok, expression)


def parse_block(parser: 'Parser') -> ast.BlockStatement:
    """
    Parse a block of statements enclosed in braces.

    Syntax:
        { <statement>* }

    The current token is the opening brace on entry and the closing brace
    (or EOF for an unterminated block) on return.

    Args:
        parser: The parser instance.

    Returns:
        ast.BlockStatement
    """
    block = ast.BlockStatement(parser.curr_token)
    parser.next_token()

    while not parser.curr_token_is(TokenType.RBRACE) and not parser.curr_token_is(TokenType.EOF):
        stmt = parser.statement()
        if stmt is not None:
            block.statements.append(stmt)
        parser.next_token()

    return block
