from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError
from tinylisp.types.nil import Nil, is_nil


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise LispArityError("if expects (if condition then [else])")

    if not is_nil(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return Nil
