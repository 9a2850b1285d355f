"""Evaluator.

This is a tree-walk evaluator over the AST produced by the parser. It supports
integer and boolean arithmetic, strings, arrays and hashes, ``let`` bindings,
conditionals, first-class functions with lexical closures, early ``return``
and a small set of builtins.

1. Execution Model
:func:`evaluate` dispatches on the node type and recurses into children. The
AST is never modified. The only mutable collaborator is the
:class:`~monkeylang.environment.Environment`: ``let`` binds in the current
scope and each function call evaluates its body in a fresh scope whose outer
scope is the one the function was defined in.

2. Return Propagation
``return`` wraps its value in a ``ReturnValue``. Blocks stop at the first
``ReturnValue`` and hand it up unchanged so it can escape nested ``if``
bodies; only a function call or the top-level program unwraps it.

3. Error Handling
Runtime failures (unknown identifiers, type mismatches, calling a
non-function...) produce ``Error`` values rather than exceptions. An ``Error``
short-circuits the enclosing expression, block and program in the same way a
``ReturnValue`` does, and surfaces as the result of a function call.

4. Integer Semantics
Integers are signed 64-bit. Arithmetic wraps on overflow, division truncates
toward zero and dividing by zero yields ``Error("division by zero")``.


File: evaluator.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
import sys
from typing import Optional

from monkeylang import ast
from monkeylang.builtins import BUILTINS
from monkeylang.environment import Environment
from monkeylang.exceptions import ParseError
from monkeylang.lexer import Lexer
from monkeylang.objects import (
    FALSE,
    NULL,
    TRUE,
    Array,
    Builtin,
    Error,
    Function,
    Hash,
    Hashable,
    HashPair,
    Integer,
    Object,
    ObjectType,
    ReturnValue,
    String,
    is_error,
    is_truthy,
    native_bool_to_boolean,
)
from monkeylang.parser import Parser

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
UINT64_RANGE = 2**64

# each Monkey call costs roughly a dozen Python frames
RECURSION_LIMIT = 10_000


def wrap_int64(value: int) -> int:
    """
    Reduce ``value`` to a signed 64-bit integer with two's complement wrapping.
    """
    value = (value - INT64_MIN) % UINT64_RANGE
    return value + INT64_MIN


def new_error(message: str) -> Error:
    logger.debug("runtime error: %s", message)
    return Error(message)


def raise_recursion_limit(limit: int = RECURSION_LIMIT) -> None:
    """
    Raise the interpreter's recursion limit to ``limit`` if it is currently lower.
    """
    if sys.getrecursionlimit() < limit:
        sys.setrecursionlimit(limit)


def evaluate_program(program: ast.Program, env: Environment) -> Object:
    """
    Evaluate a top-level program, reporting exhaustion of the Python stack as an
    ``Error`` value instead of raising ``RecursionError``.
    """
    try:
        return evaluate(program, env)
    except RecursionError:
        return new_error("maximum recursion depth exceeded")


def evaluate(node: ast.Node, env: Environment) -> Object:
    """
    Recursively evaluate ``node`` in ``env`` and return its value.

    Parameters:
        node (ast.Node): A program, statement or expression node.
        env (Environment): The scope to evaluate in.

    Returns:
        Object: The resulting value. Language-level failures are returned as
        ``Error`` values.

    Raises:
        TypeError: If ``node`` is not a known AST node.
    """
    match node:
        # Statements
        case ast.Program():
            return eval_program(node, env)
        case ast.BlockStatement():
            return eval_block_statement(node, env)
        case ast.ExpressionStatement():
            return evaluate(node.expression, env)
        case ast.LetStatement():
            value = evaluate(node.value, env)
            if is_error(value):
                return value
            env.set(node.name.value, value)
            return NULL
        case ast.ReturnStatement():
            if node.return_value is None:
                return ReturnValue(NULL)
            value = evaluate(node.return_value, env)
            if is_error(value):
                return value
            return ReturnValue(value)

        # Literals
        case ast.IntegerLiteral():
            return Integer(node.value)
        case ast.BooleanLiteral():
            return native_bool_to_boolean(node.value)
        case ast.StringLiteral():
            return String(node.value)
        case ast.ArrayLiteral():
            elements = eval_expressions(node.elements, env)
            if len(elements) == 1 and is_error(elements[0]):
                return elements[0]
            return Array(elements)
        case ast.HashLiteral():
            return eval_hash_literal(node, env)
        case ast.FunctionLiteral():
            return Function(node.parameters, node.body, env)

        # Variables
        case ast.Identifier():
            return eval_identifier(node, env)

        # Operators
        case ast.PrefixExpression():
            right = evaluate(node.right, env)
            if is_error(right):
                return right
            return eval_prefix_expression(node.operator, right)
        case ast.InfixExpression():
            left = evaluate(node.left, env)
            if is_error(left):
                return left
            right = evaluate(node.right, env)
            if is_error(right):
                return right
            return eval_infix_expression(node.operator, left, right)
        case ast.IndexExpression():
            left = evaluate(node.left, env)
            if is_error(left):
                return left
            index = evaluate(node.index, env)
            if is_error(index):
                return index
            return eval_index_expression(left, index)

        # Control flow
        case ast.IfExpression():
            return eval_if_expression(node, env)
        case ast.CallExpression():
            function = evaluate(node.function, env)
            if is_error(function):
                return function
            args = eval_expressions(node.arguments, env)
            if len(args) == 1 and is_error(args[0]):
                return args[0]
            return apply_function(function, args)

    raise TypeError(f"Unknown AST node: {type(node).__name__}")


def eval_program(program: ast.Program, env: Environment) -> Object:
    """
    Evaluate top-level statements, unwrapping a ``return`` and stopping at the first error.
    """
    result: Object = NULL
    for stmt in program.statements:
        result = evaluate(stmt, env)
        if isinstance(result, ReturnValue):
            return result.value
        if isinstance(result, Error):
            return result
    return result


def eval_block_statement(block: ast.BlockStatement, env: Environment) -> Object:
    """
    Evaluate a block. A ``ReturnValue`` or ``Error`` is handed up still wrapped.
    """
    result: Object = NULL
    for stmt in block.statements:
        result = evaluate(stmt, env)
        if result.type() in (ObjectType.RETURN_VALUE, ObjectType.ERROR):
            return result
    return result


def eval_expressions(exprs: list[ast.Expression], env: Environment) -> list[Object]:
    """
    Evaluate ``exprs`` left to right. On the first error, return a list holding only that error.
    """
    result = []
    for expr in exprs:
        evaluated = evaluate(expr, env)
        if is_error(evaluated):
            return [evaluated]
        result.append(evaluated)
    return result


def eval_identifier(node: ast.Identifier, env: Environment) -> Object:
    value = env.get(node.value)
    if value is not None:
        return value
    builtin = BUILTINS.get(node.value)
    if builtin is not None:
        return builtin
    return new_error(f"identifier not found: {node.value}")


def eval_prefix_expression(operator: str, right: Object) -> Object:
    match operator:
        case "!":
            return FALSE if is_truthy(right) else TRUE
        case "-":
            if not isinstance(right, Integer):
                return new_error(f"unknown operator: -{right.type()}")
            return Integer(wrap_int64(-right.value))
        case _:
            return new_error(f"unknown operator: {operator}{right.type()}")


def eval_infix_expression(operator: str, left: Object, right: Object) -> Object:
    if isinstance(left, Integer) and isinstance(right, Integer):
        return eval_integer_infix_expression(operator, left, right)
    if left.type() != right.type():
        return new_error(f"type mismatch: {left.type()} {operator} {right.type()}")
    if isinstance(left, String) and isinstance(right, String):
        return eval_string_infix_expression(operator, left, right)
    # booleans and NULL are singletons, so identity is equality
    if operator == "==":
        return native_bool_to_boolean(left is right)
    if operator == "!=":
        return native_bool_to_boolean(left is not right)
    return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")


def eval_integer_infix_expression(operator: str, left: Integer, right: Integer) -> Object:
    lhs = left.value
    rhs = right.value
    match operator:
        # Arithmetic
        case "+":
            return Integer(wrap_int64(lhs + rhs))
        case "-":
            return Integer(wrap_int64(lhs - rhs))
        case "*":
            return Integer(wrap_int64(lhs * rhs))
        case "/":
            if rhs == 0:
                return new_error("division by zero")
            quotient = abs(lhs) // abs(rhs)
            if (lhs < 0) != (rhs < 0):
                quotient = -quotient
            return Integer(wrap_int64(quotient))
        # Comparison
        case "<":
            return native_bool_to_boolean(lhs < rhs)
        case ">":
            return native_bool_to_boolean(lhs > rhs)
        case "==":
            return native_bool_to_boolean(lhs == rhs)
        case "!=":
            return native_bool_to_boolean(lhs != rhs)
        case _:
            return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")


def eval_string_infix_expression(operator: str, left: String, right: String) -> Object:
    match operator:
        case "+":
            return String(left.value + right.value)
        case "==":
            return native_bool_to_boolean(left.value == right.value)
        case "!=":
            return native_bool_to_boolean(left.value != right.value)
        case _:
            return new_error(f"unknown operator: {left.type()} {operator} {right.type()}")


def eval_if_expression(node: ast.IfExpression, env: Environment) -> Object:
    condition = evaluate(node.condition, env)
    if is_error(condition):
        return condition
    if is_truthy(condition):
        return evaluate(node.consequence, env)
    if node.alternative is not None:
        return evaluate(node.alternative, env)
    return NULL


def eval_hash_literal(node: ast.HashLiteral, env: Environment) -> Object:
    pairs: dict = {}
    for key_node, value_node in node.pairs:
        key = evaluate(key_node, env)
        if is_error(key):
            return key
        if not isinstance(key, Hashable):
            return new_error(f"unusable as hash key: {key.type()}")

        value = evaluate(value_node, env)
        if is_error(value):
            return value

        pairs[key.hash_key()] = HashPair(key, value)
    return Hash(pairs)


def eval_index_expression(left: Object, index: Object) -> Object:
    if isinstance(left, Array) and isinstance(index, Integer):
        elements = left.elements
        if not 0 <= index.value < len(elements):
            return NULL
        return elements[index.value]
    if isinstance(left, Hash):
        if not isinstance(index, Hashable):
            return new_error(f"unusable as hash key: {index.type()}")
        pair = left.pairs.get(index.hash_key())
        return pair.value if pair is not None else NULL
    return new_error(f"index operator not supported: {left.type()}")


def apply_function(fn: Object, args: list[Object]) -> Object:
    """
    Call a user function or builtin with already-evaluated arguments.
    """
    if isinstance(fn, Function):
        if len(args) != len(fn.parameters):
            return new_error(
                f"wrong number of arguments: expected {len(fn.parameters)}, got {len(args)}"
            )
        call_env = Environment.enclosed(fn.env)
        for param, arg in zip(fn.parameters, args):
            call_env.set(param.value, arg)
        evaluated = evaluate(fn.body, call_env)
        if isinstance(evaluated, ReturnValue):
            return evaluated.value
        return evaluated

    if isinstance(fn, Builtin):
        return fn.fn(*args)

    return new_error(f"not a function: {fn.type()}")


class Interpreter:
    """
    Convenience front end tying lexer, parser and evaluator to one persistent environment.
    """

    def __init__(self, env: Optional[Environment] = None):
        self.env = env if env is not None else Environment()

    def parse(self, source: str) -> ast.Program:
        """
        Parse ``source``.

        Raises:
            ParseError: If the parser recorded any errors.
        """
        parser = Parser(Lexer(source))
        program = parser.parse_program()
        if parser.errors:
            raise ParseError(parser.errors)
        return program

    def run(self, source: str) -> Object:
        """
        Parse and evaluate ``source`` in this interpreter's environment.
        """
        program = self.parse(source)
        logger.debug("evaluating: %s", program.string())
        return evaluate_program(program, self.env)


__all__ = [
    "evaluate",
    "evaluate_program",
    "raise_recursion_limit",
    "apply_function",
    "wrap_int64",
    "Interpreter",
]
