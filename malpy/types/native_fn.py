from __future__ import annotations

from typing import Callable

from malpy import LispValue


# Calling convention shared by every native: (env, evaluated args) -> value
NativeCallable = Callable[..., LispValue]


class NativeFunction:
    """First-class reference to a function from the native registry."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: NativeCallable):
        self.name = name
        self.fn = fn

    def __call__(self, env, args: list[LispValue]) -> LispValue:
        return self.fn(env, args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NativeFunction) and self.name == other.name and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"#<native {self.name}>"
