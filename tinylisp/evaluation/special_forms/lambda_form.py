from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError
from tinylisp.types.function import check_formals, make_function


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params) body...)
    Returns the designator [formals, body...] unevaluated. Nothing is captured
    from `env`; the value only becomes callable once bound to a global name.
    """
    if len(tail) < 2:
        raise LispArityError("lambda requires a parameter list and at least one body form")

    params, *body = tail
    return make_function(check_formals(params, "lambda"), body)
