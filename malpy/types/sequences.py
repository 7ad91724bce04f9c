"""Tagged sequence values read from `[...]` and `{...}` literals.

Lists are plain Python lists. Vectors and maps need their own tags so that
`[1 2]` and `(1 2)` stay distinguishable, and both hold an immutable tuple.
A map keeps its alternating key/value items exactly as read; pairing and
key validation are not performed.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from malpy import LispValue


class _TaggedSequence:
    __slots__ = ("items",)

    def __init__(self, items: Iterable[LispValue] = ()):
        self.items: tuple[LispValue, ...] = tuple(items)

    def __iter__(self) -> Iterator[LispValue]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index):
        return self.items[index]

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.items == other.items

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.items))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.items)!r})"


class Vector(_TaggedSequence):
    __slots__ = ()


class HashMap(_TaggedSequence):
    __slots__ = ()
