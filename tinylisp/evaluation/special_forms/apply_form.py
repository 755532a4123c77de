from tinylisp import EvaluatorFn
from tinylisp import SExpression, LispValue
from tinylisp.types.environment import Environment
from tinylisp.types.errors import LispArityError, LispNotCallable
from tinylisp.types.nil import is_nil
from tinylisp.types.symbol import Symbol, T
from tinylisp.evaluation.apply import apply as apply_engine


def apply_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (apply fn args)
    `fn` must evaluate to a symbol naming a primitive or a global function;
    a lambda designator is not accepted. `args` is evaluated once and its
    elements are passed through without further evaluation. Nil means no
    arguments, and a non-list atom is passed as the single argument.
    """
    if len(tail) != 2:
        raise LispArityError(
            "apply expects exactly two arguments: function and argument list"
        )

    fn_expr, args_expr = tail

    fn_val = evaluate_fn(fn_expr, env)
    if not isinstance(fn_val, Symbol) or fn_val == T or is_nil(fn_val):
        raise LispNotCallable(f"apply expects a function name, got {fn_val!r}")

    args_val = evaluate_fn(args_expr, env)
    if is_nil(args_val):
        args = []
    elif isinstance(args_val, list):
        args = list(args_val)
    else:
        args = [args_val]

    return apply_engine(fn_val, args, env, evaluate_fn)
