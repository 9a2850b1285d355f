"""
Utility functions shared across Monkey Language tests.
"""
from monkeylang import ast
from monkeylang.environment import Environment
from monkeylang.evaluator import evaluate
from monkeylang.lexer import Lexer
from monkeylang.objects import Object
from monkeylang.parser import Parser


def parse_source(source: str) -> ast.Program:
    """
    Parse source code and return the Program, failing on parse errors.
    """
    parser = Parser(Lexer(source))
    program = parser.parse_program()
    assert parser.errors == [], f"parser had errors: {parser.errors}"
    return program


def parse_errors(source: str) -> list[str]:
    """
    Parse source code and return the collected parse errors.
    """
    parser = Parser(Lexer(source))
    parser.parse_program()
    return parser.errors


def eval_source(source: str, env: Environment | None = None) -> Object:
    """
    Parse and evaluate source code in a fresh (or given) environment.
    """
    program = parse_source(source)
    return evaluate(program, env if env is not None else Environment())
