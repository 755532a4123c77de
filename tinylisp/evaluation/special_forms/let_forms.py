"""Special forms: let (parallel binding) and let* (sequential binding).

Both build a local tier that is a snapshot of the caller's environment
overlaid with the new bindings, then evaluate the body in it.
"""

from tinylisp import SExpression, LispValue, EvaluatorFn
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispMalformedForm
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol
from tinylisp.evaluation.special_forms.sequence import eval_sequence


def _bindings(form: str, form_bindings: SExpression) -> list[tuple[Symbol, SExpression]]:
    if is_nil(form_bindings):
        return []
    if not isinstance(form_bindings, list):
        raise LispMalformedForm(f"{form}: first argument must be a list of bindings")
    pairs = []
    for b in form_bindings:
        if not isinstance(b, list) or len(b) != 2:
            raise LispMalformedForm(f"{form}: each binding must be a pair (var val), got {b!r}")
        if not isinstance(b[0], Symbol):
            raise LispMalformedForm(f"{form}: variable name must be a symbol, got {b[0]!r}")
        pairs.append((b[0], b[1]))
    return pairs


def let_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(let ((var val) ...) body...)

    Every init expression sees the caller's environment only; none of the new
    bindings are visible until the body runs.
    """
    if len(tail) < 2:
        raise LispArityError("let expects ((var val)...) and a body")
    pairs = _bindings("let", tail[0])
    values = {name: evaluate_fn(expr, env) for name, expr in pairs}
    return eval_sequence(tail[1:], env.extend(values), evaluate_fn)


def let_star_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(let* ((var val) ...) body...)

    Each init expression sees the bindings made before it in the same let*.
    """
    if len(tail) < 2:
        raise LispArityError("let* expects ((var val)...) and a body")
    pairs = _bindings("let*", tail[0])
    local = env.extend({})
    for name, expr in pairs:
        local.define(name, evaluate_fn(expr, local))
    return eval_sequence(tail[1:], local, evaluate_fn)
