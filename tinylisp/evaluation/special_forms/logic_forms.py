from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError
from tinylisp.types.nil import Nil, is_nil
from tinylisp.types.symbol import T


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns Nil at the
    first Nil. Otherwise (including with zero operands) returns T.
    """
    for expr in tail:
        if is_nil(evaluate_fn(expr, env)):
            return Nil
    return T


def or_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical OR special form.

    (or a b c ...) evaluates each operand left-to-right and returns T at the
    first non-Nil value. Otherwise (including with zero operands) returns Nil.
    """
    for expr in tail:
        if not is_nil(evaluate_fn(expr, env)):
            return T
    return Nil


def not_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise LispArityError("not expects exactly 1 argument")
    return T if is_nil(evaluate_fn(tail[0], env)) else Nil
