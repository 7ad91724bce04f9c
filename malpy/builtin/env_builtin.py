"""Native functions for the malpy runtime environment.

This module defines integer arithmetic, comparisons, and list construction and
predicates, plus the registry that seeds a root Environment. Every native is
called as fn(env, args) with already-evaluated arguments and must not keep a
reference to `args` after returning.
"""
from __future__ import annotations

from typing import Callable

from malpy import LispValue
from malpy.errors import InvalidArgs, NotAList, NotANumber
from malpy.types.environment import Environment, NativeRegistry
from malpy.types.sequences import HashMap, Vector

INT64_MASK = (1 << 64) - 1
INT64_SIGN = 1 << 63


def wrap_int64(n: int) -> int:
    """Reduce `n` to the signed 64-bit range, wrapping like two's complement."""
    n &= INT64_MASK
    return n - (1 << 64) if n & INT64_SIGN else n


def is_integer(value: LispValue) -> bool:
    # bool is a subclass of int but is never a number here
    return isinstance(value, int) and not isinstance(value, bool)


def to_int(value: LispValue) -> int:
    if not is_integer(value):
        raise NotANumber()
    return value


def _check_arity(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        raise InvalidArgs(f"{name} requires exactly {n} argument(s), got {len(args)}")


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    total = 0
    for x in args:
        total += to_int(x)
    return wrap_int64(total)


def sub(env: Environment, args: list[LispValue]) -> int:
    """(- x) negates; (- x y z ...) is x minus the sum of the rest."""
    if not args:
        raise InvalidArgs("- requires at least 1 argument")
    nums = [to_int(x) for x in args]
    if len(nums) == 1:
        return wrap_int64(-nums[0])
    return wrap_int64(nums[0] - sum(nums[1:]))


def mul(env: Environment, args: list[LispValue]) -> int:
    result = 1
    for x in args:
        result *= to_int(x)
    return wrap_int64(result)


# -------------------------------
# Equality and comparison
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality: tags must match, sequences compare element-wise."""
    if a is b:
        return True
    if type(a) != type(b):
        return False
    if isinstance(a, (list, Vector, HashMap)):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    return a == b


def equals(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("=", args, 2)
    return is_equal(args[0], args[1])


def _comparison(name: str, op: Callable[[int, int], bool]):
    def compare(env: Environment, args: list[LispValue]) -> bool:
        _check_arity(name, args, 2)
        return op(to_int(args[0]), to_int(args[1]))

    compare.__name__ = f"compare_{name}"
    return compare


lt = _comparison("<", lambda a, b: a < b)
lte = _comparison("<=", lambda a, b: a <= b)
gt = _comparison(">", lambda a, b: a > b)
gte = _comparison(">=", lambda a, b: a >= b)


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    return list(args)


def is_list(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("list?", args, 1)
    return isinstance(args[0], list)


def _as_list(name: str, value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise NotAList(f"{name} requires a list argument")
    return value


def is_empty(env: Environment, args: list[LispValue]) -> bool:
    _check_arity("empty?", args, 1)
    return not _as_list("empty?", args[0])


def count(env: Environment, args: list[LispValue]) -> int:
    _check_arity("count", args, 1)
    return len(_as_list("count", args[0]))


# -------------------------------
# Registration
# -------------------------------
NATIVE_FUNCTIONS: dict[str, Callable[..., LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "=": equals,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "list": list_builtin,
    "list?": is_list,
    "empty?": is_empty,
    "count": count,
}


def default_registry() -> NativeRegistry:
    """Registry holding every native function defined in this module."""
    return NativeRegistry(NATIVE_FUNCTIONS)


def create_global_env() -> Environment:
    """Return a fresh root Environment seeded with the default natives."""
    return Environment.create_root(default_registry())
