"""Runtime values for Monkey.

Every value the evaluator produces is an :class:`Object` with a ``type()``
drawn from :class:`ObjectType` and an ``inspect()`` rendering used by the
REPL. ``NULL``, ``TRUE`` and ``FALSE`` are canonical singletons: the
evaluator never builds another ``Null`` or ``Boolean``, so identity stands in
for equality on booleans.

Integers, booleans and strings are hashable and produce a :class:`HashKey`
of ``(type, 64-bit unsigned value)``. Strings hash with 64-bit FNV-1a over
their UTF-8 bytes.


File: objects.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable, NamedTuple

if TYPE_CHECKING:
    from monkeylang import ast
    from monkeylang.environment import Environment

UINT64_MASK = 0xFFFFFFFFFFFFFFFF
FNV_OFFSET_BASIS_64 = 0xCBF29CE484222325
FNV_PRIME_64 = 0x100000001B3


class ObjectType(str, Enum):
    """
    Enumeration of runtime value types.
    """

    INTEGER = "INTEGER"
    BOOLEAN = "BOOLEAN"
    NULL = "NULL"
    RETURN_VALUE = "RETURN_VALUE"
    ERROR = "ERROR"
    FUNCTION = "FUNCTION"
    STRING = "STRING"
    BUILTIN = "BUILTIN"
    ARRAY = "ARRAY"
    HASH = "HASH"

    def __str__(self) -> str:
        return self.value


def fnv1a_64(data: bytes) -> int:
    """
    Return the 64-bit FNV-1a hash of ``data``.
    """
    h = FNV_OFFSET_BASIS_64
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME_64) & UINT64_MASK
    return h


class HashKey(NamedTuple):
    """Key under which a hashable value is stored in a Hash."""
    type: ObjectType
    value: int


class Object:
    """Base class for runtime values."""

    def type(self) -> ObjectType:
        raise NotImplementedError

    def inspect(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inspect()!r})"


class Hashable(Object):
    """Values that may be used as hash keys."""

    def hash_key(self) -> HashKey:
        raise NotImplementedError


class Integer(Hashable):
    def __init__(self, value: int):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.INTEGER

    def inspect(self) -> str:
        return str(self.value)

    def hash_key(self) -> HashKey:
        return HashKey(self.type(), self.value & UINT64_MASK)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Integer):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.hash_key())


class Boolean(Hashable):
    def __init__(self, value: bool):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.BOOLEAN

    def inspect(self) -> str:
        return "true" if self.value else "false"

    def hash_key(self) -> HashKey:
        return HashKey(self.type(), 1 if self.value else 0)


class Null(Object):
    def type(self) -> ObjectType:
        return ObjectType.NULL

    def inspect(self) -> str:
        return "null"


class String(Hashable):
    def __init__(self, value: str):
        self.value = value
        self._hash_key: HashKey | None = None

    def type(self) -> ObjectType:
        return ObjectType.STRING

    def inspect(self) -> str:
        return self.value

    def hash_key(self) -> HashKey:
        # strings are immutable, so the key is computed once
        if self._hash_key is None:
            self._hash_key = HashKey(self.type(), fnv1a_64(self.value.encode("utf-8")))
        return self._hash_key

    def __eq__(self, other) -> bool:
        if not isinstance(other, String):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.hash_key())


class ReturnValue(Object):
    """Wraps the value of a ``return`` while it propagates to the enclosing call."""

    def __init__(self, value: Object):
        self.value = value

    def type(self) -> ObjectType:
        return ObjectType.RETURN_VALUE

    def inspect(self) -> str:
        return self.value.inspect()


class Error(Object):
    def __init__(self, message: str):
        self.message = message

    def type(self) -> ObjectType:
        return ObjectType.ERROR

    def inspect(self) -> str:
        return f"ERROR: {self.message}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Error):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)


class Function(Object):
    """A closure: parameters and body plus the environment it was defined in."""

    def __init__(self, parameters: list[ast.Identifier], body: ast.BlockStatement, env: Environment):
        self.parameters = parameters
        self.body = body
        self.env = env

    def type(self) -> ObjectType:
        return ObjectType.FUNCTION

    def inspect(self) -> str:
        params = ", ".join(p.string() for p in self.parameters)
        return f"fn({params}) {{\n{self.body.string()}\n}}"

    def __repr__(self) -> str:
        params = ", ".join(p.string() for p in self.parameters)
        return f"Function(fn({params}))"


BuiltinFunction = Callable[..., Object]


class Builtin(Object):
    def __init__(self, fn: BuiltinFunction, name: str = ""):
        self.fn = fn
        self.name = name

    def type(self) -> ObjectType:
        return ObjectType.BUILTIN

    def inspect(self) -> str:
        return "builtin function"


class Array(Object):
    def __init__(self, elements: list[Object]):
        self.elements = elements

    def type(self) -> ObjectType:
        return ObjectType.ARRAY

    def inspect(self) -> str:
        return "[" + ",".join(e.inspect() for e in self.elements) + "]"


class HashPair(NamedTuple):
    key: Object
    value: Object


class Hash(Object):
    def __init__(self, pairs: dict[HashKey, HashPair]):
        self.pairs = pairs

    def type(self) -> ObjectType:
        return ObjectType.HASH

    def inspect(self) -> str:
        pairs = ", ".join(
            f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()
        )
        return "{" + pairs + "}"


NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(value: bool) -> Boolean:
    """
    Return the canonical Boolean singleton for ``value``.
    """
    return TRUE if value else FALSE


def is_error(obj: Object | None) -> bool:
    return obj is not None and obj.type() == ObjectType.ERROR


def is_truthy(obj: Object) -> bool:
    """
    Only ``NULL`` and ``FALSE`` are falsy.
    """
    if isinstance(obj, Boolean):
        return obj.value
    return obj is not NULL
