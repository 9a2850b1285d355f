"""Lexer for Monkey.

The lexer performs a single pass over the source text with one character of
lookahead. It keeps a read cursor made of ``position`` (the character under
examination), ``read_position`` (the next character) and ``ch`` (the current
character, or ``NUL`` once the input is exhausted).

Each call to :meth:`Lexer.next_token` skips whitespace and then dispatches on
the current character. Two-character operators (``==`` and ``!=``) are found
by peeking one character ahead. Identifiers and integers are read as maximal
runs; identifiers are checked against the keyword table afterwards. The lexer
never raises: anything it does not recognize becomes an ``ILLEGAL`` token and
the parser reports it.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

from typing import Iterator

from monkeylang.tokens import Token, TokenType, lookup_ident

NUL = "\0"

SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}


def is_letter(ch: str) -> bool:
    """
    Return True if ``ch`` may appear in an identifier.
    """
    return ch == "_" or ch.isalpha()


def is_digit(ch: str) -> bool:
    """
    Return True if ``ch`` is an ASCII decimal digit.
    """
    return "0" <= ch <= "9"


class Lexer:
    """
    Single-pass scanner turning source text into tokens.
    """

    def __init__(self, source: str):
        """
        Initialize the lexer and load the first character.

        Parameters:
            source (str): The source code to scan.
        """
        self.input = source
        self.position = 0
        self.read_position = 0
        self.ch = NUL
        self.read_char()

    def read_char(self) -> None:
        """
        Advance the cursor by one character.
        """
        if self.read_position >= len(self.input):
            self.ch = NUL
        else:
            self.ch = self.input[self.read_position]
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> str:
        """
        Return the character after the current one without consuming it.
        """
        if self.read_position >= len(self.input):
            return NUL
        return self.input[self.read_position]

    def skip_whitespace(self) -> None:
        """
        Consume whitespace until the next significant character.
        """
        while self.ch != NUL and self.ch.isspace():
            self.read_char()

    def read_identifier(self) -> str:
        """
        Read a maximal run of letters and underscores.
        """
        start = self.position
        while is_letter(self.ch):
            self.read_char()
        return self.input[start:self.position]

    def read_number(self) -> str:
        """
        Read a maximal run of decimal digits.
        """
        start = self.position
        while is_digit(self.ch):
            self.read_char()
        return self.input[start:self.position]

    def read_string(self) -> str:
        """
        Read the contents of a string literal, leaving the cursor on the closing quote.

        An unterminated string runs to the end of the input.
        """
        start = self.position + 1
        while True:
            self.read_char()
            if self.ch == '"' or self.ch == NUL:
                break
        return self.input[start:self.position]

    def next_token(self) -> Token:
        """
        Scan and return the next token. Returns ``EOF`` tokens forever once
        the input is exhausted.
        """
        self.skip_whitespace()
        ch = self.ch

        if ch == "=":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(TokenType.EQ, ch + self.ch)
            else:
                tok = Token(TokenType.ASSIGN, ch)
        elif ch == "!":
            if self.peek_char() == "=":
                self.read_char()
                tok = Token(TokenType.NOT_EQ, ch + self.ch)
            else:
                tok = Token(TokenType.BANG, ch)
        elif ch == '"':
            tok = Token(TokenType.STRING, self.read_string())
        elif ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif ch == NUL and self.position >= len(self.input):
            return Token(TokenType.EOF, "")
        elif is_letter(ch):
            literal = self.read_identifier()
            # read_identifier() has already moved past the last letter
            return Token(lookup_ident(literal), literal)
        elif is_digit(ch):
            return Token(TokenType.INT, self.read_number())
        else:
            tok = Token(TokenType.ILLEGAL, ch)

        self.read_char()
        return tok

    def __iter__(self) -> Iterator[Token]:
        """
        Yield tokens up to and including the first ``EOF``.
        """
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens ending with ``EOF``.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances.
    """
    return list(Lexer(code))
