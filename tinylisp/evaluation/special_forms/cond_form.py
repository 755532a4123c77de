"""Special form: cond, the multi-branch conditional."""

from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispMalformedForm
from tinylisp.types.nil import Nil, is_nil
from tinylisp.evaluation.special_forms.sequence import eval_sequence


def cond_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(cond (test form...) ...)

    Tests are evaluated strictly left to right; the first non-Nil one selects
    its clause, whose remaining forms are evaluated in order. A clause with no
    forms yields Nil. No matching clause yields Nil.
    """
    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise LispMalformedForm(f"cond: each clause must be a non-empty list, got {clause!r}")
        test, *body = clause
        if not is_nil(evaluate_fn(test, env)):
            return eval_sequence(body, env, evaluate_fn)
    return Nil
