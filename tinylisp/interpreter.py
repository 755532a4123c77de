from __future__ import annotations

import logging
import sys
import threading

from tinylisp import LispValue
from tinylisp import config
from tinylisp.reader.parser import read, read_all
from tinylisp.printer import to_lisp_string
from tinylisp.types.nil import Nil
from tinylisp.types.environment import Environment
from tinylisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads, evaluates and prints tinylisp expressions against one global
    Environment that persists across calls.

    Each top-level expression is a unit of failure: if it raises, the global
    tier is restored to what it was before that expression started. Calls are
    serialised so only one evaluation touches the global tier at a time.
    """

    def __init__(self, prelude: str | None = None, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()
        self._lock = threading.RLock()

        limit = config.get_recursion_limit()
        if sys.getrecursionlimit() < limit:
            sys.setrecursionlimit(limit)

        if prelude:
            self.eval_prelude(prelude)

    def _evaluate_top(self, expr) -> LispValue:
        saved = self.env.checkpoint()
        try:
            return evaluate(expr, self.env)
        except Exception:
            logger.debug("evaluation failed, restoring %d global binding(s)", len(saved))
            self.env.restore(saved)
            raise

    def eval(self, code: str) -> LispValue:
        """Read exactly one expression from `code` and evaluate it."""
        with self._lock:
            return self._evaluate_top(read(code))

    def eval_prelude(self, code: str) -> LispValue:
        """Evaluate every expression in `code` in order; returns the last value."""
        result: LispValue = Nil
        with self._lock:
            for expr in read_all(code):
                result = self._evaluate_top(expr)
        return result

    def eval_to_string(self, code: str) -> str:
        return to_lisp_string(self.eval(code))
