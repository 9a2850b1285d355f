"""Built-in functions for Monkey.

Builtins are consulted after the environment chain misses, so a ``let``
binding with the same name shadows them. Each builtin receives evaluated
arguments and returns a runtime value; misuse is reported as an ``Error``
value, never raised.


File: builtins.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from monkeylang.objects import (
    NULL,
    Array,
    Builtin,
    Error,
    Integer,
    Object,
    ObjectType,
    String,
)


def _wrong_arg_count(got: int, want: int) -> Error:
    return Error(f"wrong number of arguments. got={got}, want={want}")


def _len(*args: Object) -> Object:
    if len(args) != 1:
        return _wrong_arg_count(len(args), 1)
    arg = args[0]
    if isinstance(arg, String):
        return Integer(len(arg.value))
    if isinstance(arg, Array):
        return Integer(len(arg.elements))
    return Error(f"argument to `len` not supported, got {arg.type()}")


def _array_arg(name: str, args: tuple[Object, ...], want: int):
    """Validate the argument count and that the first argument is an Array."""
    if len(args) != want:
        return _wrong_arg_count(len(args), want)
    if args[0].type() != ObjectType.ARRAY:
        return Error(f"argument to `{name}` must be ARRAY, got {args[0].type()}")
    return None


def _first(*args: Object) -> Object:
    err = _array_arg("first", args, 1)
    if err is not None:
        return err
    elements = args[0].elements
    return elements[0] if elements else NULL


def _last(*args: Object) -> Object:
    err = _array_arg("last", args, 1)
    if err is not None:
        return err
    elements = args[0].elements
    return elements[-1] if elements else NULL


def _rest(*args: Object) -> Object:
    err = _array_arg("rest", args, 1)
    if err is not None:
        return err
    elements = args[0].elements
    if not elements:
        return NULL
    return Array(list(elements[1:]))


def _push(*args: Object) -> Object:
    err = _array_arg("push", args, 2)
    if err is not None:
        return err
    return Array([*args[0].elements, args[1]])


def _puts(*args: Object) -> Object:
    for arg in args:
        print(arg.inspect())
    return NULL


BUILTINS: dict[str, Builtin] = {
    name: Builtin(fn, name)
    for name, fn in (
        ("len", _len),
        ("first", _first),
        ("last", _last),
        ("rest", _rest),
        ("push", _push),
        ("puts", _puts),
    )
}
