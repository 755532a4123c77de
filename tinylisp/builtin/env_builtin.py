"""Built-in functions for the tinylisp runtime.

This module defines integer arithmetic, comparison, list processing and
predicates. Every primitive receives already-evaluated arguments and returns a
new value; no primitive mutates a list it was given. Primitives are looked up
by name before the global tier, so they cannot be redefined.
"""
from __future__ import annotations

import math
from typing import Callable

from tinylisp import LispValue
from tinylisp.printer import to_lisp_string
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispDivisionByZero, LispTypeError
from tinylisp.types.nil import Nil, is_nil
from tinylisp.types.symbol import Symbol, T

Builtin = Callable[[Environment, list[LispValue]], LispValue]


def _truth(flag: bool) -> LispValue:
    return T if flag else Nil


def _expect_args(name: str, args: list[LispValue], n: int) -> None:
    if len(args) != n:
        plural = "argument" if n == 1 else "arguments"
        raise LispArityError(f"{name} expects {n} {plural}, got {len(args)}")


def _is_int(x: LispValue) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def _ints(name: str, args: list[LispValue]) -> list[int]:
    for a in args:
        if not _is_int(a):
            raise LispTypeError(f"{name} expects integers, got {to_lisp_string(a)}")
    return args


def _trunc_div(n: int, d: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(n) // abs(d)
    return q if (n < 0) == (d < 0) else -q


def _list_arg(name: str, x: LispValue) -> list[LispValue] | None:
    """Return the list behind `x`, None for Nil; anything else is a type error."""
    if is_nil(x):
        return None
    if not isinstance(x, list):
        raise LispTypeError(f"{name} expects a list, got {to_lisp_string(x)}")
    return x


# -------------------------------
# Lists
# -------------------------------
def car(env: Environment, args: list[LispValue]) -> LispValue:
    """Return the first element of a list; Nil for Nil or the empty list."""
    _expect_args("car", args, 1)
    xs = _list_arg("car", args[0])
    return xs[0] if xs else Nil


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    """Return all but the first element; Nil for Nil, empty or single-element lists."""
    _expect_args("cdr", args, 1)
    xs = _list_arg("cdr", args[0])
    if not xs or len(xs) == 1:
        return Nil
    return xs[1:]


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """Construct a new list by prepending head to tail.

    - If tail is Nil, returns a single-element list [head].
    - If tail is a list, returns a new list [head] + tail (non-destructive).
    - Otherwise returns the two-element list [head, tail]; there is no
      separate pair type.
    """
    _expect_args("cons", args, 2)
    head, tail = args
    if is_nil(tail):
        return [head]
    if isinstance(tail, list):
        return [head, *tail]
    return [head, tail]


def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Construct a list from the provided arguments; Nil when there are none."""
    return list(args) if args else Nil


def is_equal(a: LispValue, b: LispValue) -> bool:
    """Deep structural equality; symbols compare case-insensitively."""
    if is_nil(a) or is_nil(b):
        return is_nil(a) and is_nil(b)
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return a == b
    if _is_int(a) and _is_int(b):
        return a == b
    return False


def eq(env: Environment, args: list[LispValue]) -> LispValue:
    """T for two Nils, equal symbols or equal integers. Lists are never eq."""
    _expect_args("eq", args, 2)
    a, b = args
    if isinstance(a, list) or isinstance(b, list):
        return Nil
    return _truth(is_equal(a, b))


def equal(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_args("equal", args, 2)
    return _truth(is_equal(*args))


def elem(env: Environment, args: list[LispValue]) -> LispValue:
    """(elem x xs) -> T if some element of xs is equal to x."""
    _expect_args("elem", args, 2)
    item, xs = args
    if not isinstance(xs, list):
        return Nil
    return _truth(any(is_equal(item, x) for x in xs))


# -------------------------------
# Predicates
# -------------------------------
def _predicate(name: str, test: Callable[[LispValue], bool]) -> Builtin:
    def pred(env: Environment, args: list[LispValue]) -> LispValue:
        _expect_args(name, args, 1)
        return _truth(test(args[0]))
    pred.__name__ = name
    return pred


atom = _predicate("atom", lambda x: not isinstance(x, list))
null = _predicate("null", is_nil)
listp = _predicate("listp", lambda x: isinstance(x, list))
# No separate string kind: symbolp and stringp are the same test
symbolp = _predicate("symbolp", lambda x: isinstance(x, Symbol))
stringp = _predicate("stringp", lambda x: isinstance(x, Symbol))
numberp = _predicate("numberp", _is_int)


def zerop(env: Environment, args: list[LispValue]) -> LispValue:
    _expect_args("zerop", args, 1)
    (n,) = _ints("zerop", args)
    return _truth(n == 0)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> int:
    """Return the sum of all arguments; 0 with none."""
    return sum(_ints("+", args))


def sub(env: Environment, args: list[LispValue]) -> int:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LispArityError("- requires at least 1 argument")
    first, *rest = _ints("-", args)
    if not rest:
        return -first
    for x in rest:
        first -= x
    return first


def mul(env: Environment, args: list[LispValue]) -> int:
    """Return the product of all arguments; 1 with none."""
    return math.prod(_ints("*", args))


def div(env: Environment, args: list[LispValue]) -> int:
    """Divide left-to-right, truncating toward zero at each step."""
    if len(args) < 2:
        raise LispArityError("/ requires at least 2 arguments")
    result, *rest = _ints("/", args)
    for x in rest:
        if x == 0:
            raise LispDivisionByZero("Division by zero")
        result = _trunc_div(result, x)
    return result


def mod(env: Environment, args: list[LispValue]) -> int:
    """(mod n d): remainder of truncating division, sign follows n."""
    _expect_args("mod", args, 2)
    n, d = _ints("mod", args)
    if d == 0:
        raise LispDivisionByZero("Modulo by zero")
    return n - d * _trunc_div(n, d)


def floor(env: Environment, args: list[LispValue]) -> int:
    """(floor x) or (floor n d).

    One argument: integers pass through, and a symbol spelled as a decimal
    number (the reader has no float syntax) is floored. Two arguments: integer
    division truncating toward zero, not a true floor.
    """
    if len(args) == 1:
        x = args[0]
        if _is_int(x):
            return x
        if isinstance(x, Symbol):
            try:
                f = float(x.name)
            except ValueError:
                f = math.nan
            if math.isfinite(f):
                return math.floor(f)
        raise LispTypeError(f"floor expects a number, got {to_lisp_string(x)}")
    if len(args) == 2:
        n, d = _ints("floor", args)
        if d == 0:
            raise LispDivisionByZero("Division by zero")
        return _trunc_div(n, d)
    raise LispArityError(f"floor expects 1 or 2 arguments, got {len(args)}")


def one_plus(env: Environment, args: list[LispValue]) -> int:
    _expect_args("1+", args, 1)
    return _ints("1+", args)[0] + 1


def one_minus(env: Environment, args: list[LispValue]) -> int:
    _expect_args("1-", args, 1)
    return _ints("1-", args)[0] - 1


def _comparison(name: str, test: Callable[[int, int], bool]) -> Builtin:
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        _expect_args(name, args, 2)
        a, b = _ints(name, args)
        return _truth(test(a, b))
    compare.__name__ = name
    return compare


lt = _comparison("<", lambda a, b: a < b)
gt = _comparison(">", lambda a, b: a > b)
num_equals = _comparison("=", lambda a, b: a == b)


# -------------------------------
# I/O
# -------------------------------
def print_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    """Print the canonical form of the single argument and return it unchanged."""
    _expect_args("print", args, 1)
    print(to_lisp_string(args[0]))
    return args[0]


BUILTINS: dict[Symbol, Builtin] = {
    Symbol("car"): car,
    Symbol("cdr"): cdr,
    Symbol("cons"): cons,
    Symbol("eq"): eq,
    Symbol("equal"): equal,
    Symbol("atom"): atom,
    Symbol("null"): null,
    Symbol("listp"): listp,
    Symbol("symbolp"): symbolp,
    Symbol("stringp"): stringp,
    Symbol("numberp"): numberp,
    Symbol("zerop"): zerop,
    Symbol("print"): print_builtin,
    Symbol("+"): add,
    Symbol("-"): sub,
    Symbol("*"): mul,
    Symbol("/"): div,
    Symbol("<"): lt,
    Symbol(">"): gt,
    Symbol("="): num_equals,
    Symbol("1+"): one_plus,
    Symbol("1-"): one_minus,
    Symbol("mod"): mod,
    Symbol("floor"): floor,
    Symbol("list"): list_builtin,
    Symbol("elem"): elem,
}
