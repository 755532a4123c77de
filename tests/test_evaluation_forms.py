import pytest

from tinylisp.types.nil import Nil
from tinylisp.types.symbol import Symbol, T
from tinylisp.types.errors import LispArityError, LispMalformedForm
from tinylisp.printer import to_lisp_string


def _str(value):
    return to_lisp_string(value)


# ------------------ quote ------------------

def test_quote_returns_operand_unevaluated(run):
    assert _str(run("(setq a 1)", "'(a (b c))")) == "(a (b c))"


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(run, source):
    with pytest.raises(LispArityError):
        run(source)


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond (nil 1)(t 2)(t 3))", "2"),
        ("(cond (nil 1))", "NIL"),
        ("(cond)", "NIL"),
        ("(cond ((= 1 1)))", "NIL"),
        ("(cond ((eq 'a 'b) 1) ((eq 'a 'a) 2 3 4))", "4"),
        ("(cond ('nil 1) (t 2))", "2"),
    ]
)
def test_cond(run, source, expected):
    assert _str(run(source)) == expected


def test_cond_stops_at_first_true_clause(run, capsys):
    run("(cond ((print nil) 1) ((print t) 2) ((print 'never) 3))")
    assert capsys.readouterr().out == "NIL\nT\n"


@pytest.mark.parametrize("source", ["(cond ())", "(cond a)", "(cond (nil 1) 5)"])
def test_cond_malformed_clause(run, source):
    with pytest.raises(LispMalformedForm):
        run(source)


# ------------------ defun / setq ------------------

def test_defun_returns_name_and_stores_designator(run, env):
    name = run("(defun Square (x) (* x x))")
    assert name == Symbol("square")
    assert _str(name) == "Square"
    assert _str(env.lookup(Symbol("square"))) == "((x) (* x x))"
    assert run("(square 7)") == 49


def test_defun_with_several_body_forms_returns_last(run, capsys):
    run("(defun noisy (x) (print x) (1+ x))")
    assert run("(noisy 1)") == 2
    assert capsys.readouterr().out == "1\n"


def test_defun_with_no_parameters(run):
    run("(defun answer () 42)")
    assert run("(answer)") == 42


def test_defun_overwrites(run):
    run("(defun f (x) 1)")
    run("(defun f (x) 2)")
    assert run("(f 0)") == 2


@pytest.mark.parametrize(
    "source,error",
    [
        ("(defun f (x))", LispArityError),
        ("(defun f)", LispArityError),
        ("(defun (f) (x) x)", LispMalformedForm),
        ("(defun nil (x) x)", LispMalformedForm),
        ("(defun t (x) x)", LispMalformedForm),
        ("(defun f x x)", LispMalformedForm),
        ("(defun f (x 1) x)", LispMalformedForm),
        ("(defun f (x x) x)", LispMalformedForm),
    ]
)
def test_defun_errors(run, env, source, error):
    with pytest.raises(error):
        run(source)
    assert len(env) == 0


def test_setq_returns_value_and_binds_globally(run, env):
    assert _str(run("(setq a '(a b c))")) == "(a b c)"
    assert _str(env.lookup(Symbol("A"))) == "(a b c)"


def test_setq_evaluates_against_global_tier(run):
    run("(setq y 'global-y)")
    # y is let-bound, but setq's value expression only sees the global y
    assert _str(run("(let ((y 'local-y)) (setq x y))")) == "global-y"


@pytest.mark.parametrize(
    "source,error",
    [
        ("(setq a)", LispArityError),
        ("(setq a 1 2)", LispArityError),
        ("(setq 1 2)", LispMalformedForm),
        ("(setq t 2)", LispMalformedForm),
        ("(setq nil 2)", LispMalformedForm),
    ]
)
def test_setq_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ eval ------------------

def test_eval_evaluates_twice(run):
    run("(setq lst '(a b c))")
    assert _str(run("(eval (list 'car 'lst))")) == "a"
    assert run("(eval '(+ 1 2))") == 3
    assert run("(eval 5)") == 5


def test_eval_uses_local_environment(run):
    assert run("(let ((x 10)) (eval '(+ x 1)))") == 11


def test_eval_arity(run):
    with pytest.raises(LispArityError):
        run("(eval 1 2)")


# ------------------ and / or / not ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and)", "T"),
        ("(and 1 2 3)", "T"),
        ("(and 1 nil 3)", "NIL"),
        ("(or)", "NIL"),
        ("(or nil nil)", "NIL"),
        ("(or nil 5)", "T"),
        ("(not nil)", "T"),
        ("(not 0)", "NIL"),
        ("(not '())", "NIL"),
    ]
)
def test_logic_forms(run, source, expected):
    assert _str(run(source)) == expected


def test_and_or_short_circuit(run, capsys):
    run("(and (print 1) nil (print 2))")
    run("(or nil (print 3) (print 4))")
    assert capsys.readouterr().out == "1\n3\n"


def test_not_arity(run):
    with pytest.raises(LispArityError):
        run("(not 1 2)")


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if t 1 2)", 1),
        ("(if nil 1 2)", 2),
        ("(if (< 1 2) 'yes)", Symbol("yes")),
        ("(if (> 1 2) 'yes)", Nil),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize("source", ["(if t)", "(if t 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(LispArityError):
        run(source)


# ------------------ let / let* ------------------

def test_let_binds_in_parallel(run):
    run("(setq x 1)")
    # y sees the outer x, not the x being bound alongside it
    assert _str(run("(let ((x 10) (y x)) (list x y))")) == "(10 1)"


def test_let_star_binds_sequentially(run):
    run("(setq x 1)")
    assert _str(run("(let* ((x 10) (y x)) (list x y))")) == "(10 10)"


def test_let_body_returns_last_form(run):
    assert run("(let ((a 1)) (+ a 1) (+ a 2))") == 3


def test_let_with_no_bindings(run):
    assert run("(let () 7)") == 7
    assert run("(let* nil 8)") == 8


def test_let_does_not_leak_bindings(run, env):
    run("(let ((z 1)) z)")
    assert Symbol("z") not in env
    assert run("z") == Symbol("z")


@pytest.mark.parametrize(
    "source,error",
    [
        ("(let ((x 1)))", LispArityError),
        ("(let* ((x 1)))", LispArityError),
        ("(let (x) x)", LispMalformedForm),
        ("(let ((x)) x)", LispMalformedForm),
        ("(let ((x 1 2)) x)", LispMalformedForm),
        ("(let* ((1 2)) 1)", LispMalformedForm),
        ("(let x x)", LispMalformedForm),
    ]
)
def test_let_errors(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ lambda ------------------

def test_lambda_returns_designator(run):
    value = run("(lambda (x y) (+ x y) (* x y))")
    assert _str(value) == "((x y) (+ x y) (* x y))"


def test_lambda_does_not_evaluate_operands(run):
    # (x) would be an unknown function call if the formals were evaluated
    assert _str(run("(lambda (x) (undefined-fn x))")) == "((x) (undefined-fn x))"


def test_lambda_bound_with_setq_is_callable_by_name(run):
    run("(setq sq (lambda (x) (* x x)))")
    assert run("(sq 4)") == 16


@pytest.mark.parametrize("source", ["(lambda (x 1) x)", "(lambda x x)"])
def test_lambda_malformed(run, source):
    with pytest.raises(LispMalformedForm):
        run(source)


def test_lambda_needs_a_body(run):
    with pytest.raises(LispArityError):
        run("(lambda (x))")


def test_user_function_arity(run):
    run("(defun two (a b) a)")
    with pytest.raises(LispArityError):
        run("(two 1)")
    with pytest.raises(LispArityError):
        run("(two 1 2 3)")
    assert run("(two 1 2)") == 1


def test_truthy_symbol_is_returned(run):
    assert run("(and 1)") is T
