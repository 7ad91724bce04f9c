"""Runtime environment for malpy.

An Environment is one frame of the lexical scope chain: it stores bindings of
Symbols to evaluated values and links to its enclosing frame via `outer`.
Every frame in a chain shares one NativeRegistry, consulted only when a name
is bound nowhere in the chain.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator, Mapping, Optional

from malpy import LispValue
from malpy.errors import SymbolNotFound
from malpy.types.native_fn import NativeCallable, NativeFunction
from malpy.types.symbol import Symbol


class NativeRegistry:
    """Read-only table of native functions, keyed by name."""

    __slots__ = ("_functions",)

    def __init__(self, functions: Mapping[str, NativeCallable] | None = None):
        self._functions: dict[str, NativeFunction] = {}
        for name, fn in (functions or {}).items():
            self._functions[name] = NativeFunction(name, fn)

    def get(self, name: str) -> Optional[NativeFunction]:
        return self._functions.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def __iter__(self) -> Iterator[str]:
        return iter(self._functions)

    def __len__(self) -> int:
        return len(self._functions)


class Environment:
    """Hierarchical mapping from Symbols to values with a native fallback."""

    __slots__ = ("vars", "outer", "natives")

    def __init__(
        self,
        outer: Optional[Environment] = None,
        natives: Optional[NativeRegistry] = None,
    ):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        if natives is None:
            natives = outer.natives if outer is not None else NativeRegistry()
        self.natives: NativeRegistry = natives

    @classmethod
    def create_root(cls, natives: Optional[NativeRegistry] = None) -> Environment:
        """Return a frame with no bindings and no parent."""
        return cls(None, natives)

    def create_child(self) -> Environment:
        """Return an empty frame whose parent is this frame."""
        return Environment(outer=self)

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, overwriting any previous binding."""
        self.vars[name] = value

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Order of resolution:
        1) this frame, then each enclosing frame in order
        2) the native registry, yielding a NativeFunction reference
        Raises SymbolNotFound if neither resolves.
        """
        env = self.find(name)
        if env is not None:
            return env.vars[name]
        native = self.natives.get(name.id)
        if native is not None:
            return native
        raise SymbolNotFound(name.id)

    def depth(self) -> int:
        n = 0
        env = self.outer
        while env is not None:
            n += 1
            env = env.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame_buf:
                env._write_vars(frame_buf)
                chain.append(frame_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
