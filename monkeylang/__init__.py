"""Monkey language interpreter.

The pipeline runs lexer -> Pratt parser -> tree-walk evaluator:

    >>> from monkeylang import Interpreter
    >>> Interpreter().run("let add = fn(a, b) { a + b }; add(2, 3);").inspect()
    '5'
"""

from monkeylang.environment import Environment
from monkeylang.evaluator import Interpreter, evaluate, evaluate_program
from monkeylang.exceptions import ParseError
from monkeylang.lexer import Lexer, tokenize
from monkeylang.parser import Parser, parse_program

__all__ = [
    "Environment",
    "Interpreter",
    "Lexer",
    "ParseError",
    "Parser",
    "evaluate",
    "evaluate_program",
    "parse_program",
    "tokenize",
]
