from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil


def eval_sequence(
    forms: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate `forms` in order and return the last value (Nil when empty)."""
    result: LispValue = Nil
    for e in forms:
        result = evaluate_fn(e, env)
    return result
