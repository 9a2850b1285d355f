"""Abstract syntax tree for Monkey.

Nodes fall into two families, statements and expressions, which share the
:class:`Node` capabilities ``token_literal()`` and ``string()``. ``string()``
renders the node back to source form with every operator application fully
parenthesized, so that ``str(program)`` is both a debugging aid and valid
input to the parser.

Nodes are dataclasses. The token that produced a node is kept for error
messages but excluded from equality, so two trees parsed from equivalent
source compare equal.


File: ast.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from dataclasses import dataclass, field
from typing import Optional

from monkeylang.tokens import Token


class Node:
    """Base class for every AST node."""

    token: Token

    def token_literal(self) -> str:
        """
        Return the literal of the token that produced this node.
        """
        return self.token.literal

    def string(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.string()


class Statement(Node):
    """Marker base for statement nodes."""


class Expression(Node):
    """Marker base for expression nodes."""


# ---- Expressions ----

@dataclass(eq=True)
class Identifier(Expression):
    token: Token = field(compare=False, repr=False)
    value: str

    def string(self) -> str:
        return self.value


@dataclass(eq=True)
class IntegerLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    value: int

    def string(self) -> str:
        return self.token.literal


@dataclass(eq=True)
class BooleanLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    value: bool

    def string(self) -> str:
        return self.token.literal


@dataclass(eq=True)
class StringLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    value: str

    def string(self) -> str:
        return f'"{self.value}"'


@dataclass(eq=True)
class PrefixExpression(Expression):
    token: Token = field(compare=False, repr=False)
    operator: str
    right: Expression

    def string(self) -> str:
        return f"({self.operator}{self.right.string()})"


@dataclass(eq=True)
class InfixExpression(Expression):
    token: Token = field(compare=False, repr=False)
    left: Expression
    operator: str
    right: Expression

    def string(self) -> str:
        return f"({self.left.string()} {self.operator} {self.right.string()})"


@dataclass(eq=True)
class IfExpression(Expression):
    token: Token = field(compare=False, repr=False)
    condition: Expression
    consequence: "BlockStatement"
    alternative: Optional["BlockStatement"] = None

    def string(self) -> str:
        out = f"if{self.condition.string()} {self.consequence.string()}"
        if self.alternative is not None:
            out += f"else {self.alternative.string()}"
        return out


@dataclass(eq=True)
class FunctionLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    parameters: list[Identifier]
    body: "BlockStatement"

    def string(self) -> str:
        params = ", ".join(p.string() for p in self.parameters)
        return f"{self.token_literal()}({params}){self.body.string()}"


@dataclass(eq=True)
class CallExpression(Expression):
    token: Token = field(compare=False, repr=False)
    function: Expression
    arguments: list[Expression]

    def string(self) -> str:
        args = ", ".join(a.string() for a in self.arguments)
        return f"{self.function.string()}({args})"


@dataclass(eq=True)
class ArrayLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    elements: list[Expression]

    def string(self) -> str:
        return "[" + ", ".join(e.string() for e in self.elements) + "]"


@dataclass(eq=True)
class IndexExpression(Expression):
    token: Token = field(compare=False, repr=False)
    left: Expression
    index: Expression

    def string(self) -> str:
        return f"({self.left.string()}[{self.index.string()}])"


@dataclass(eq=True)
class HashLiteral(Expression):
    token: Token = field(compare=False, repr=False)
    pairs: list[tuple[Expression, Expression]]

    def string(self) -> str:
        pairs = ", ".join(f"{k.string()}:{v.string()}" for k, v in self.pairs)
        return "{" + pairs + "}"


# ---- Statements ----

@dataclass(eq=True)
class LetStatement(Statement):
    token: Token = field(compare=False, repr=False)
    name: Identifier
    value: Optional[Expression] = None

    def string(self) -> str:
        value = self.value.string() if self.value is not None else ""
        return f"{self.token_literal()} {self.name.string()} = {value};"


@dataclass(eq=True)
class ReturnStatement(Statement):
    token: Token = field(compare=False, repr=False)
    return_value: Optional[Expression] = None

    def string(self) -> str:
        value = self.return_value.string() if self.return_value is not None else ""
        return f"{self.token_literal()} {value};"


@dataclass(eq=True)
class ExpressionStatement(Statement):
    token: Token = field(compare=False, repr=False)
    expression: Optional[Expression] = None

    def string(self) -> str:
        return self.expression.string() if self.expression is not None else ""


@dataclass(eq=True)
class BlockStatement(Statement):
    token: Token = field(compare=False, repr=False)
    statements: list[Statement] = field(default_factory=list)

    def string(self) -> str:
        return "".join(s.string() for s in self.statements)


@dataclass(eq=True)
class Program(Node):
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""

    def string(self) -> str:
        return "".join(s.string() for s in self.statements)
