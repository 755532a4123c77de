"""Function designators.

A function is not a distinct value kind. Both `defun` and `lambda` produce a
plain list shaped `[formals, body-form, body-form, ...]` where `formals` is a
list of Symbols. These helpers build and take apart that shape.
"""

from __future__ import annotations

from tinylisp import LispValue, SExpression
from tinylisp.types.errors import LispMalformedForm
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol, T


def check_formals(formals: SExpression, where: str) -> list[Symbol]:
    """Validate a formals list; `()` and `nil` both mean no parameters."""
    if is_nil(formals):
        return []
    if not isinstance(formals, list):
        raise LispMalformedForm(f"{where}: formals must be a list of symbols, got {formals!r}")
    for f in formals:
        if not isinstance(f, Symbol) or f == T or is_nil(f):
            raise LispMalformedForm(f"{where}: invalid formal parameter {f!r}")
    if len(set(formals)) != len(formals):
        raise LispMalformedForm(f"{where}: duplicate formal parameter")
    return list(formals)


def make_function(formals: list[Symbol], body: list[SExpression]) -> list[LispValue]:
    return [formals, *body]


def is_function(value: LispValue) -> bool:
    """True if `value` has the `[formals, body...]` shape."""
    if not isinstance(value, list) or len(value) < 2:
        return False
    formals = value[0]
    if is_nil(formals):
        return True
    return isinstance(formals, list) and all(isinstance(f, Symbol) for f in formals)


def split_function(value: list[LispValue]) -> tuple[list[Symbol], list[SExpression]]:
    formals = value[0]
    return ([] if is_nil(formals) else formals), value[1:]
