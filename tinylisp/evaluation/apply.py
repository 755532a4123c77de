"""Application engine for tinylisp.

Functions are applied by name. A primitive of that name wins; otherwise the
name must be bound in the global tier to a `[formals, body...]` designator.
The call environment is always a snapshot of the global tier plus the
parameter bindings, never the caller's local tier, so function bodies see
only their own parameters and globals.
"""

from __future__ import annotations

from tinylisp import LispValue, EvaluatorFn
from tinylisp.builtin.env_builtin import BUILTINS
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispUnknownFunction
from tinylisp.types.function import is_function, split_function
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol


def apply_function(
    fn: list[LispValue],
    args: list[LispValue],
    global_env: Environment,
    evaluate_fn: EvaluatorFn,
    name: Symbol | None = None,
) -> LispValue:
    """Apply a function designator to already-evaluated arguments."""
    formals, body = split_function(fn)
    if len(args) != len(formals):
        label = name if name is not None else "lambda"
        raise LispArityError(
            f"{label} expects {len(formals)} argument(s), got {len(args)}"
        )
    call_env = global_env.root.extend(dict(zip(formals, args)))
    result: LispValue = Nil
    for form in body:
        result = evaluate_fn(form, call_env)
    return result


def apply(
    name: Symbol,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply the function called `name` to already-evaluated `args`."""
    builtin = BUILTINS.get(name)
    if builtin is not None:
        return builtin(env, args)

    fn = env.root.vars.get(name)
    if fn is None or not is_function(fn):
        raise LispUnknownFunction(f"Unknown function: {name}")
    return apply_function(fn, args, env.root, evaluate_fn, name)
