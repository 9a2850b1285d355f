"""Token definitions for Monkey.

Every token produced by the lexer carries a :class:`TokenType` drawn from a
closed set and the literal slice of source text that produced it. Keywords are
recognized by looking identifiers up in :data:`KEYWORDS` after they have been
scanned.


File: tokens.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class TokenType(str, Enum):
    """
    Enumeration of token kinds.
    """

    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers + literals
    IDENT = "IDENT"
    INT = "INT"
    STRING = "STRING"

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
    COLON = ":"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"

    def __str__(self) -> str:
        """
        Return the kind name, e.g. ``ASSIGN`` rather than ``=``.
        """
        return self.name


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
}


def lookup_ident(ident: str) -> TokenType:
    """
    Return the keyword kind for ``ident``, or ``IDENT`` if it is not a keyword.
    """
    return KEYWORDS.get(ident, TokenType.IDENT)


class Token:
    """
    Represents a lexical token with a type and literal.
    """
    def __init__(self, type_: TokenType, literal: str):
        """
        Initialize a new token.

        Parameters:
            type_ (TokenType): The token type.
            literal (str): The source text that produced the token.
        """
        self.type = type_
        self.literal = literal

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.literal == other.literal

    def __hash__(self) -> int:
        return hash((self.type, self.literal))

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.literal!r})"


__all__ = ["TokenType", "Token", "KEYWORDS", "lookup_ident"]
