import logging

from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.builtin.env_builtin import BUILTINS
from tinylisp.types.errors import LispArityError, LispMalformedForm
from tinylisp.types.environment import Environment
from tinylisp.types.function import check_formals, make_function
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol, T

logger = logging.getLogger(__name__)


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (formals...) body...)
    Stores [formals, body...] under `name` in the global tier and returns `name`.
    Everything is validated before the global tier is touched.
    """
    if len(tail) < 3:
        raise LispArityError("defun requires a name, a parameter list and at least one body form")

    name, params, *body = tail
    if not isinstance(name, Symbol) or name == T or is_nil(name):
        raise LispMalformedForm(f"defun: invalid function name {name!r}")
    formals = check_formals(params, f"defun {name}")

    if name in BUILTINS:
        logger.warning("defun %s is shadowed by the primitive of the same name", name)
    env.root.define(name, make_function(formals, body))
    logger.debug("defun %s (%s)", name, " ".join(str(f) for f in formals))
    return name
