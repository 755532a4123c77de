import pytest

from tinylisp.types.environment import Environment
from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol, T
from tinylisp.printer import to_lisp_string
from tinylisp.builtin.env_builtin import BUILTINS


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "NIL"),
        (T, "T"),
        (Symbol("t"), "T"),
        (Symbol("nil"), "NIL"),
        (Symbol("Nil"), "NIL"),
        (Symbol("Hello"), "Hello"),
        (42, "42"),
        (-7, "-7"),
        ([], "()"),
        ([Symbol("a"), 1, [Symbol("b"), Nil]], "(a 1 (b NIL))"),
        ([Symbol("A"), Symbol("B"), Symbol("."), Symbol("C")], "(A B . C)"),
        ([[], [[]]], "(() (()))"),
    ]
)
def test_to_lisp_string(value, expected):
    assert to_lisp_string(value) == expected


def test_print_outputs_and_returns_argument(capsys):
    pr = BUILTINS[Symbol("print")]
    value = [Symbol("alpha"), 42, Nil]
    ret = pr(Environment(), [value])
    out = capsys.readouterr().out
    assert out == "(alpha 42 NIL)\n"
    assert ret is value


def test_print_from_lisp(run, capsys):
    assert run("(print '(a b))") == [Symbol("a"), Symbol("b")]
    assert capsys.readouterr().out == "(a b)\n"
