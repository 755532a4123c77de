"""Core evaluator for the tinylisp interpreter.

`evaluate` is the public entry point; `evaluate0` is the recursive worker that
special forms and the application engine call back into. There is no tail-call
optimisation: every Lisp call nests Python frames, and running out of host
stack surfaces as LispRecursionError.
"""

from __future__ import annotations

from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispInvalidOperator, LispRecursionError
from tinylisp.types.nil import Nil, NilType
from tinylisp.types.symbol import Symbol, T, NIL
from tinylisp.evaluation.apply import apply
from tinylisp.evaluation.special_forms import SPECIAL_FORMS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, translating host stack exhaustion."""
    try:
        return evaluate0(expr, env)
    except RecursionError as ex:
        raise LispRecursionError("Maximum recursion depth exceeded") from ex


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case NilType():
            return Nil

        case Symbol():
            if expr == T:
                return T
            if expr == NIL:
                return Nil
            # Unbound symbols evaluate to themselves
            return env.lookup(expr, expr)

        case []:
            return Nil

        case [Symbol() as head, *tail]:
            form = SPECIAL_FORMS.get(head)
            if form is not None:
                return form(tail, env, evaluate0)
            args = [evaluate0(arg, env) for arg in tail]
            return apply(head, args, env, evaluate0)

        case [head, *_]:
            raise LispInvalidOperator(f"Invalid operator {head!r}: must be a symbol")

    # --- Atoms return as-is ---
    return expr
