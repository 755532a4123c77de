from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.errors import LispArityError
from tinylisp.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(eval expr): evaluate `expr`, then evaluate the result again as code."""
    if len(tail) != 1:
        raise LispArityError("eval expects exactly one argument")
    code = evaluate_fn(tail[0], env)
    return evaluate_fn(code, env)
