from __future__ import annotations

from tinylisp.types.symbol import NIL


class NilType:
    """The unique false/empty value."""

    __slots__ = ()

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_nil(value) -> bool:
    """True for Nil itself and for a symbol spelled NIL (any case) found in data."""
    return value is Nil or value == NIL
