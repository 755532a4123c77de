# Core type aliases for the tinylisp data model.
# Values are plain Python objects: int for integers, list for lists, Symbol for
# identifiers and the Nil singleton. There is no cons cell type.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code for evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
