from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise LispArityError("quote expects exactly 1 argument")
    return tail[0]
