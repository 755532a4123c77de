import logging

from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.errors import LispArityError, LispMalformedForm
from tinylisp.types.environment import Environment
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol, T

logger = logging.getLogger(__name__)


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(setq var expr): `expr` is evaluated against the global tier, not `env`."""
    if len(tail) != 2:
        raise LispArityError("setq requires exactly 2 arguments: (setq var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol) or var_sym == T or is_nil(var_sym):
        raise LispMalformedForm(f"setq first argument must be a non-reserved symbol, got {var_sym!r}")

    global_env = env.root
    value = evaluate_fn(val_expr, global_env)
    global_env.define(var_sym, value)
    logger.debug("setq %s", var_sym)
    return value
