from decimal import Decimal

import pytest

from protolisp.errors import (
    ArityMismatch,
    DivisionByZero,
    InvalidForm,
    NotInvokable,
    Redefinition,
    UndefinedFunction,
    UndefinedVariable,
)
from protolisp.evaluation.evaluator import evaluate
from protolisp.evaluation.forms import (
    Call,
    DefFunction,
    DefVariable,
    Do,
    MethodCall,
    ObjectLiteral,
    SetVariable,
    classify,
)
from protolisp.reader.ast import Atom, Variable
from protolisp.reader.parser import parse
from protolisp.types.tag import Tag
from protolisp.types.values import NULL, Function, Primitive


def num(value) -> Primitive:
    return Primitive(Decimal(value))


# ------------------ Literals and variables ------------------

def test_atoms_evaluate_to_tags(env):
    assert evaluate(Atom("ok"), env) == Primitive(Tag("ok"))
    assert str(evaluate(Atom("ok"), env)) == ":ok"


def test_null_is_predefined(env):
    assert evaluate(Variable("null"), env) is NULL


def test_undefined_variable(env):
    with pytest.raises(UndefinedVariable):
        evaluate(Variable("nope"), env)


def test_builtins_are_functions(env):
    for name in "+-*/":
        assert isinstance(evaluate(Variable(name), env), Function)


def test_evaluate_rejects_non_ast(env):
    with pytest.raises(TypeError):
        evaluate(42, env)


# ------------------ Classification ------------------

@pytest.mark.parametrize(
    "source,form_type",
    [
        ("(do 1 2)", Do),
        ("(def x 1)", DefVariable),
        ("(def (f a b) a)", DefFunction),
        ("(set! x 2)", SetVariable),
        ("(object)", ObjectLiteral),
        ("(object Point)", ObjectLiteral),
        ("(.x p)", MethodCall),
        ("(+ 1 2)", Call),
    ]
)
def test_classify(source, form_type):
    assert isinstance(classify(parse(source)), form_type)


def test_classify_def_function_parameters():
    form = classify(parse("(def (f a b) (+ a b))"))
    assert form.name == "f"
    assert form.parameters == ("a", "b")


@pytest.mark.parametrize(
    "source",
    [
        "(def x)",
        "(def x 1 2)",
        "(def 1 2)",
        "(def :x 2)",
        "(def (f 1) 2)",
        "(def (f a a) a)",
        "(def ((g) a) 1)",
        "(set! x)",
        "(set! 1 2)",
        "(set! (x) 2)",
        "(.x)",
        "((f) 1)",
    ]
)
def test_invalid_forms(interp, source):
    with pytest.raises(InvalidForm):
        interp.eval(source)


# ------------------ do ------------------

def test_do_returns_last_value(interp):
    assert interp.eval("(do 1 2 3)") == num(3)


def test_empty_do_is_null(interp):
    assert interp.eval("(do)") is NULL


def test_do_scope_does_not_leak(interp):
    assert interp.eval("(do (def y 1) y)") == num(1)
    with pytest.raises(UndefinedVariable):
        interp.eval("y")


def test_do_may_shadow_outer_definitions(interp):
    interp.eval("(def x 1)")
    assert interp.eval("(do (def x 2) x)") == num(2)
    assert interp.eval("x") == num(1)


def test_scope_survives_errors(interp):
    with pytest.raises(DivisionByZero):
        interp.eval("(do (def q 1) (/ 1 0))")
    with pytest.raises(UndefinedVariable):
        interp.eval("q")
    interp.eval("(def q 2)")
    assert interp.eval("q") == num(2)


# ------------------ def ------------------

def test_def_variable(interp):
    assert interp.eval("(def x 5)") == num(5)
    assert interp.eval("x") == num(5)


def test_def_redefinition_in_same_frame(interp):
    interp.eval("(def x 5)")
    with pytest.raises(Redefinition):
        interp.eval("(def x 6)")
    with pytest.raises(Redefinition):
        interp.eval("(def (x) 6)")
    assert interp.eval("x") == num(5)


def test_def_function_and_call(interp):
    fn = interp.eval("(def (inc n) (+ n 1))")
    assert isinstance(fn, Function)
    assert fn.name == "inc"
    assert interp.eval("(inc 4)") == num(5)


@pytest.mark.parametrize("call", ["(inc)", "(inc 1 2)"])
def test_def_function_arity(interp, call):
    interp.eval("(def (inc n) (+ n 1))")
    with pytest.raises(ArityMismatch):
        interp.eval(call)


def test_zero_parameter_function(interp):
    interp.eval("(def (answer) 42)")
    assert interp.eval("(answer)") == num(42)


def test_functions_are_lexically_scoped(interp):
    interp.eval("(def k 10)")
    interp.eval("(def (addk n) (+ n k))")
    assert interp.eval("(addk 1)") == num(11)
    # the caller's bindings are not visible to the body
    assert interp.eval("(do (def k 99) (addk 1))") == num(11)


def test_closure_over_block_scope(interp):
    interp.eval("(def adder (do (def base 5) (def (add n) (+ n base))))")
    assert interp.eval("(adder 1)") == num(6)
    with pytest.raises(UndefinedVariable):
        interp.eval("base")


def test_parameters_do_not_leak(interp):
    interp.eval("(def (id v) v)")
    interp.eval("(id 3)")
    with pytest.raises(UndefinedVariable):
        interp.eval("v")


def test_definitions_inside_a_body_stay_local(interp):
    interp.eval("(def (f n) (do (def doubled (* 2 n)) doubled))")
    assert interp.eval("(f 4)") == num(8)
    # a second call gets a fresh frame, so no Redefinition
    assert interp.eval("(f 5)") == num(10)


def test_functions_are_values(interp):
    interp.eval("(def (twice n) (* 2 n))")
    interp.eval("(def again twice)")
    assert interp.eval("(again 21)") == num(42)


def test_unbounded_recursion_exhausts_the_stack(interp):
    interp.eval("(def (loop n) (loop n))")
    with pytest.raises(RecursionError):
        interp.eval("(loop 1)")


# ------------------ set! ------------------

def test_set_rebinds(interp):
    interp.eval("(def x 1)")
    assert interp.eval("(set! x 2)") == num(2)
    assert interp.eval("x") == num(2)


def test_set_undefined_variable(interp):
    with pytest.raises(UndefinedVariable):
        interp.eval("(set! z 1)")


def test_set_binds_in_the_current_frame(interp):
    interp.eval("(def x 1)")
    assert interp.eval("(do (set! x 2) x)") == num(2)
    assert interp.eval("x") == num(1)


def test_set_value_sees_old_binding(interp):
    interp.eval("(def x 1)")
    interp.eval("(set! x (+ x 1))")
    assert interp.eval("x") == num(2)


# ------------------ calls ------------------

def test_undefined_function(interp):
    with pytest.raises(UndefinedFunction):
        interp.eval("(nope 1)")


def test_not_invokable(interp):
    interp.eval("(def v 1)")
    with pytest.raises(NotInvokable):
        interp.eval("(v)")


def test_callee_checked_before_arguments(interp):
    # the argument would fail with UndefinedVariable if it were evaluated first
    with pytest.raises(UndefinedFunction):
        interp.eval("(nope missing)")


def test_arguments_evaluate_left_to_right(interp):
    interp.eval("(def box (object (x 0)))")
    assert interp.eval("(+ (.x= box 1) (.x= box 2))") == num(3)
    assert interp.eval("(.x box)") == num(2)


def test_resolution_is_idempotent(interp):
    interp.eval("(def x 7)")
    assert interp.eval("x") == interp.eval("x")
    interp.eval("(def (f) 1)")
    assert interp.eval("f") is interp.eval("f")
