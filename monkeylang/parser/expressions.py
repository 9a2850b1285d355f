"""Expression parsing utilities for Monkey.

These functions operate on a :class:`monkeylang.parser.parser.Parser` and
implement top-down operator precedence (Pratt) parsing. Every token kind that
can start an expression has a prefix handler in :data:`PREFIX_PARSE_FNS`;
every token kind that can continue one has an infix handler in
:data:`INFIX_PARSE_FNS` and a binding power in :data:`PRECEDENCES`.

Handlers are entered with the parser's current token on the token they are
registered for and return with the current token on the last token of the
expression they built.


File: expressions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Optional

from monkeylang import ast
from monkeylang.tokens import TokenType

if TYPE_CHECKING:
    from monkeylang.parser import Parser

INT64_MAX = 2**63 - 1


class Precedence(IntEnum):
    """
    Binding power of operators, lowest first.
    """
    LOWEST = 1
    EQUALS = 2       # ==
    LESSGREATER = 3  # > or <
    SUM = 4          # +
    PRODUCT = 5      # *
    PREFIX = 6       # -X or !X
    CALL = 7         # myFunction(X)
    INDEX = 8        # array[index]


PRECEDENCES: dict[TokenType, Precedence] = {
    TokenType.EQ: Precedence.EQUALS,
    TokenType.NOT_EQ: Precedence.EQUALS,
    TokenType.LT: Precedence.LESSGREATER,
    TokenType.GT: Precedence.LESSGREATER,
    TokenType.PLUS: Precedence.SUM,
    TokenType.MINUS: Precedence.SUM,
    TokenType.SLASH: Precedence.PRODUCT,
    TokenType.ASTERISK: Precedence.PRODUCT,
    TokenType.LPAREN: Precedence.CALL,
    TokenType.LBRACKET: Precedence.INDEX,
}


# ---- Entry point ----

def parse_expression(parser: 'Parser', precedence: Precedence) -> Optional[ast.Expression]:
    """Parse an expression whose operators bind tighter than ``precedence``."""
    prefix = parser.prefix_parse_fns.get(parser.curr_token.type)
    if prefix is None:
        parser.no_prefix_parse_fn_error(parser.curr_token.type)
        return None
    left = prefix(parser)

    while not parser.peek_token_is(TokenType.SEMICOLON) and precedence < parser.peek_precedence():
        infix = parser.infix_parse_fns.get(parser.peek_token.type)
        if infix is None or left is None:
            return left
        parser.next_token()
        left = infix(parser, left)

    return left


def parse_expression_list(parser: 'Parser', end: TokenType) -> Optional[list[ast.Expression]]:
    """Parse comma-separated expressions up to ``end``, as in call arguments or array elements."""
    items: list[ast.Expression] = []

    if parser.peek_token_is(end):
        parser.next_token()
        return items

    parser.next_token()
    item = parser.expression(Precedence.LOWEST)
    if item is None:
        return None
    items.append(item)

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        parser.next_token()
        item = parser.expression(Precedence.LOWEST)
        if item is None:
            return None
        items.append(item)

    if not parser.expect_peek(end):
        return None
    return items


# ---- Prefix handlers ----

def parse_identifier(parser: 'Parser') -> ast.Expression:
    tok = parser.curr_token
    return ast.Identifier(tok, tok.literal)


def parse_integer_literal(parser: 'Parser') -> Optional[ast.Expression]:
    """Parse an integer literal, rejecting values that do not fit in 64 bits."""
    tok = parser.curr_token
    try:
        value = int(tok.literal)
    except ValueError:
        value = None
    if value is None or value > INT64_MAX:
        parser.add_error(f"could not parse {tok.literal} as integer")
        return None
    return ast.IntegerLiteral(tok, value)


def parse_boolean(parser: 'Parser') -> ast.Expression:
    tok = parser.curr_token
    return ast.BooleanLiteral(tok, tok.type == TokenType.TRUE)


def parse_string_literal(parser: 'Parser') -> ast.Expression:
    tok = parser.curr_token
    return ast.StringLiteral(tok, tok.literal)


def parse_prefix_expression(parser: 'Parser') -> Optional[ast.Expression]:
    """Parse ``!x`` or ``-x``; the operand binds at PREFIX precedence."""
    tok = parser.curr_token
    parser.next_token()
    right = parser.expression(Precedence.PREFIX)
    if right is None:
        return None
    return ast.PrefixExpression(tok, tok.literal, right)


def parse_grouped_expression(parser: 'Parser') -> Optional[ast.Expression]:
    """Parse a parenthesized expression. The parentheses leave no node behind."""
    parser.next_token()
    expr = parser.expression(Precedence.LOWEST)
    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return expr


def parse_if_expression(parser: 'Parser') -> Optional[ast.Expression]:
    """
    Parse a conditional expression.

    Syntax:
        if (<condition>) { <block> } [else { <block> }]
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None

    parser.next_token()
    condition = parser.expression(Precedence.LOWEST)
    if condition is None:
        return None

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    if not parser.expect_peek(TokenType.LBRACE):
        return None
    consequence = parser.block()

    alternative = None
    if parser.peek_token_is(TokenType.ELSE):
        parser.next_token()
        if not parser.expect_peek(TokenType.LBRACE):
            return None
        alternative = parser.block()

    return ast.IfExpression(tok, condition, consequence, alternative)


def parse_function_parameters(parser: 'Parser') -> Optional[list[ast.Identifier]]:
    """Parse ``(a, b, c)`` into identifiers; the current token is the opening paren."""
    identifiers: list[ast.Identifier] = []

    if parser.peek_token_is(TokenType.RPAREN):
        parser.next_token()
        return identifiers

    if not parser.expect_peek(TokenType.IDENT):
        return None
    identifiers.append(ast.Identifier(parser.curr_token, parser.curr_token.literal))

    while parser.peek_token_is(TokenType.COMMA):
        parser.next_token()
        if not parser.expect_peek(TokenType.IDENT):
            return None
        identifiers.append(ast.Identifier(parser.curr_token, parser.curr_token.literal))

    if not parser.expect_peek(TokenType.RPAREN):
        return None
    return identifiers


def parse_function_literal(parser: 'Parser') -> Optional[ast.Expression]:
    """
    Parse a function literal.

    Syntax:
        fn(<params>) { <block> }
    """
    tok = parser.curr_token
    if not parser.expect_peek(TokenType.LPAREN):
        return None

    parameters = parse_function_parameters(parser)
    if parameters is None:
        return None

    if not parser.expect_peek(TokenType.LBRACE):
        return None
    body = parser.block()

    return ast.FunctionLiteral(tok, parameters, body)


def parse_array_literal(parser: 'Parser') -> Optional[ast.Expression]:
    tok = parser.curr_token
    elements = parser.expression_list(TokenType.RBRACKET)
    if elements is None:
        return None
    return ast.ArrayLiteral(tok, elements)


def parse_hash_literal(parser: 'Parser') -> Optional[ast.Expression]:
    """
    Parse a hash literal.

    Syntax:
        { <key>: <value>, ... }
    """
    tok = parser.curr_token
    pairs: list[tuple[ast.Expression, ast.Expression]] = []

    while not parser.peek_token_is(TokenType.RBRACE):
        parser.next_token()
        key = parser.expression(Precedence.LOWEST)
        if key is None:
            return None
        if not parser.expect_peek(TokenType.COLON):
            return None

        parser.next_token()
        value = parser.expression(Precedence.LOWEST)
        if value is None:
            return None
        pairs.append((key, value))

        if not parser.peek_token_is(TokenType.RBRACE) and not parser.expect_peek(TokenType.COMMA):
            return None

    if not parser.expect_peek(TokenType.RBRACE):
        return None
    return ast.HashLiteral(tok, pairs)


# ---- Infix handlers ----

def parse_infix_expression(parser: 'Parser', left: ast.Expression) -> Optional[ast.Expression]:
    """Parse a binary operator. The right operand binds at the operator's own precedence."""
    tok = parser.curr_token
    precedence = parser.curr_precedence()
    parser.next_token()
    right = parser.expression(precedence)
    if right is None:
        return None
    return ast.InfixExpression(tok, left, tok.literal, right)


def parse_call_expression(parser: 'Parser', function: ast.Expression) -> Optional[ast.Expression]:
    tok = parser.curr_token
    arguments = parser.expression_list(TokenType.RPAREN)
    if arguments is None:
        return None
    return ast.CallExpression(tok, function, arguments)


def parse_index_expression(parser: 'Parser', left: ast.Expression) -> Optional[ast.Expression]:
    tok = parser.curr_token
    parser.next_token()
    index = parser.expression(Precedence.LOWEST)
    if index is None:
        return None
    if not parser.expect_peek(TokenType.RBRACKET):
        return None
    return ast.IndexExpression(tok, left, index)


PREFIX_PARSE_FNS = {
    TokenType.IDENT: parse_identifier,
    TokenType.INT: parse_integer_literal,
    TokenType.STRING: parse_string_literal,
    TokenType.TRUE: parse_boolean,
    TokenType.FALSE: parse_boolean,
    TokenType.BANG: parse_prefix_expression,
    TokenType.MINUS: parse_prefix_expression,
    TokenType.LPAREN: parse_grouped_expression,
    TokenType.IF: parse_if_expression,
    TokenType.FUNCTION: parse_function_literal,
    TokenType.LBRACKET: parse_array_literal,
    TokenType.LBRACE: parse_hash_literal,
}

INFIX_PARSE_FNS = {
    TokenType.PLUS: parse_infix_expression,
    TokenType.MINUS: parse_infix_expression,
    TokenType.SLASH: parse_infix_expression,
    TokenType.ASTERISK: parse_infix_expression,
    TokenType.EQ: parse_infix_expression,
    TokenType.NOT_EQ: parse_infix_expression,
    TokenType.LT: parse_infix_expression,
    TokenType.GT: parse_infix_expression,
    TokenType.LPAREN: parse_call_expression,
    TokenType.LBRACKET: parse_index_expression,
}
