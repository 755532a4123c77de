"""Canonical printed form of Lisp values."""

from __future__ import annotations

from tinylisp import LispValue
from tinylisp.types.errors import LispNestingTooDeep
from tinylisp.types.nil import NilType
from tinylisp.types.symbol import Symbol, T, NIL


def to_lisp_string(value: LispValue) -> str:
    """Render `value` the way the reader would read it back.

    Nil and any spelling of nil print as NIL, any spelling of t prints as T,
    other symbols keep their original spelling.
    """
    try:
        return _to_string(value)
    except RecursionError as ex:
        raise LispNestingTooDeep("Value nested too deeply to print") from ex


def _to_string(value: LispValue) -> str:
    match value:
        case NilType():
            return "NIL"
        case Symbol():
            if value == T:
                return "T"
            if value == NIL:
                return "NIL"
            return value.name
        case bool():
            # bools are ints in Python but never Lisp values
            return "T" if value else "NIL"
        case int():
            return str(value)
        case list():
            return "(" + " ".join(_to_string(v) for v in value) + ")"
        case _:
            return str(value)
