"""Printer: renders values back into the surface syntax read by the reader."""

from __future__ import annotations

from malpy import LispValue
from malpy.types.closure import Closure
from malpy.types.native_fn import NativeFunction
from malpy.types.nil import NilType
from malpy.types.sequences import HashMap, Vector
from malpy.types.symbol import Symbol


def escape_string(s: str) -> str:
    # backslash first so the other escapes are not doubled
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")


def _join(items, readably: bool) -> str:
    return " ".join(pr_str(x, readably) for x in items)


def pr_str(obj: LispValue, readably: bool = True) -> str:
    """Return the printed form of `obj`.

    With `readably` set, strings are quoted and escaped so the output reads
    back as the same value; otherwise their raw text is used.
    """
    if isinstance(obj, NilType):
        return "nil"
    # bool before int: True is an int in Python
    if obj is True:
        return "true"
    if obj is False:
        return "false"
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, str):
        return f'"{escape_string(obj)}"' if readably else obj
    if isinstance(obj, Symbol):
        return obj.id
    if isinstance(obj, list):
        return f"({_join(obj, readably)})"
    if isinstance(obj, Vector):
        return f"[{_join(obj, readably)}]"
    if isinstance(obj, HashMap):
        return f"{{{_join(obj, readably)}}}"
    if isinstance(obj, Closure):
        return "#<function>"
    if isinstance(obj, NativeFunction):
        return f"#<native {obj.name}>"
    return repr(obj)
