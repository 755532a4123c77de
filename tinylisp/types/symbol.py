from __future__ import annotations
import sys


def _fold(name: str) -> str:
    # one character in, one character out: "ß" stays "ß" rather than becoming "SS"
    out = []
    for c in name:
        u = c.upper()
        out.append(u if len(u) == 1 else c)
    return "".join(out)


class Symbol:
    """Case-insensitive identifier.

    `id` holds the interned upper-case form used for equality and hashing,
    `name` keeps the spelling the reader saw so it can be printed back.
    """

    __slots__ = ("id", "name")

    def __init__(self, name: str):
        self.name = name
        self.id = sys.intern(_fold(name))

    def __eq__(self, other) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


T = Symbol("T")
NIL = Symbol("NIL")
