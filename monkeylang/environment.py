"""Lexical environments for Monkey.

An :class:`Environment` maps names to values and optionally points at an
enclosing environment. Lookups walk outward through the chain; ``let`` only
ever binds in the innermost scope. Function values keep a reference to the
environment they were defined in, so a function bound into that same
environment forms a reference cycle; Python's garbage collector reclaims
such cycles.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from __future__ import annotations

from typing import Optional

from monkeylang.objects import Object


class Environment:
    """A scope in the environment chain."""

    def __init__(self, outer: Optional[Environment] = None):
        self.store: dict[str, Object] = {}
        self.outer = outer

    @classmethod
    def enclosed(cls, outer: Environment) -> Environment:
        """
        Create a child scope of ``outer``, as used for a function call.
        """
        return cls(outer)

    def get(self, name: str) -> Optional[Object]:
        """
        Look ``name`` up in this scope and then in each enclosing scope.

        Returns:
            The bound value, or None if no scope binds the name.
        """
        env: Optional[Environment] = self
        while env is not None:
            if name in env.store:
                return env.store[name]
            env = env.outer
        return None

    def set(self, name: str, value: Object) -> Object:
        """
        Bind ``name`` in this scope, shadowing any outer binding.
        """
        self.store[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"Environment(names={sorted(self.store)}, depth={depth})"
