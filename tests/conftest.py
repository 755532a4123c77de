import pytest

from tinylisp.interpreter import Interpreter
from tinylisp.reader.parser import read
from tinylisp.types.environment import Environment
from tinylisp.evaluation.evaluator import evaluate


@pytest.fixture
def env():
    """Fresh, empty global environment."""
    return Environment()


@pytest.fixture
def interp():
    """Fresh interpreter with an empty global environment."""
    return Interpreter()


@pytest.fixture
def run(env):
    """Read and evaluate each source line in order against `env`; return the last value."""
    def _run(*sources):
        result = None
        for source in sources:
            result = evaluate(read(source), env)
        return result
    return _run
