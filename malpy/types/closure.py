"""User-defined function values created by `fn*`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from malpy import SExpression, LispValue
from malpy.errors import InvalidArgs
from malpy.types.symbol import Symbol

if TYPE_CHECKING:
    from malpy.types.environment import Environment


class Closure:
    """A first-class function with formal parameters, body, and captured env.

    The environment is held by reference, so later `def!` into the defining
    scope is visible when the closure runs.
    """

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: SExpression, env: Environment):
        self.params: tuple[Symbol, ...] = tuple(params)
        self.body: SExpression = body
        self.env: Environment = env

    def bind(self, args: list[LispValue]) -> Environment:
        """
        Create one child frame of the captured environment with each parameter
        bound to its matching argument.
        """
        if len(args) != len(self.params):
            raise InvalidArgs(
                f"function expects {len(self.params)} argument(s), got {len(args)}"
            )
        frame = self.env.create_child()
        for name, value in zip(self.params, args):
            frame.define(name, value)
        return frame

    def __repr__(self) -> str:
        return "#<function>"
