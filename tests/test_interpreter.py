from decimal import Decimal

import pytest

from protolisp import errors
from protolisp.errors import ParseError, ProtoLispError
from protolisp.interpreter import Interpreter
from protolisp.reader.parser import parse
from protolisp.types.tag import Tag
from protolisp.types.values import NULL, Function, Method, Object, Primitive


def num(value) -> Primitive:
    return Primitive(Decimal(value))


def test_eval_returns_last_value(interp):
    assert interp.eval("(def x 1) (def y 2) (+ x y)") == num(3)


def test_eval_of_empty_source_is_null(interp):
    assert interp.eval("") is NULL
    assert interp.eval("; only a comment") is NULL


def test_definitions_persist_between_calls(interp):
    interp.eval("(def (square n) (* n n))")
    assert interp.eval("(square 12)") == num(144)


def test_evaluate_accepts_ast(interp):
    assert interp.evaluate(parse("(* 6 7)")) == num(42)


def test_prelude():
    interp = Interpreter(prelude="(def (square n) (* n n)) (def ten 10)")
    assert interp.eval("(square ten)") == num(100)


def test_load(tmp_path, interp):
    source = tmp_path / "point.pl"
    source.write_text(
        "; a point with a method\n"
        "(def point (object (x 3) (y 4) ((.sum) (+ x y))))\n"
        "(.sum point)\n",
        encoding="utf-8",
    )
    assert interp.load(source) == num(7)
    assert isinstance(interp.eval("point"), Object)


def test_parse_errors_propagate(interp):
    with pytest.raises(ParseError):
        interp.eval("(+ 1")


def test_interpreters_are_independent():
    first, second = Interpreter(), Interpreter()
    first.eval("(def x 1)")
    with pytest.raises(errors.UndefinedVariable):
        second.eval("x")
    assert first.eval("Object") is not second.eval("Object")


@pytest.mark.parametrize(
    "name",
    [
        "UndefinedVariable",
        "UndefinedFunction",
        "Redefinition",
        "ArityMismatch",
        "InvalidForm",
        "InvalidMemberDefinition",
        "MethodNotFound",
        "NotAnObject",
        "NotInvokable",
        "TypeMismatch",
        "DivisionByZero",
    ]
)
def test_error_taxonomy(name):
    error = getattr(errors, name)
    assert issubclass(error, errors.EvaluateError)
    assert issubclass(error, ProtoLispError)
    assert not issubclass(ParseError, errors.EvaluateError)


@pytest.mark.parametrize(
    "value,text",
    [
        (num("1E+1"), "10"),
        (num("-2.50"), "-2.50"),
        (Primitive(Tag("ok")), ":ok"),
        (NULL, "null"),
    ]
)
def test_primitive_str(value, text):
    assert str(value) == text


def test_function_and_object_str(interp):
    assert str(interp.eval("+")) == "<function +>"
    assert str(interp.eval("(def (f) 1)")) == "<function f>"
    obj = interp.eval("(object ((.m) 1))")
    assert str(obj.env.resolve(".m")) == "<method .m>"
    assert str(interp.eval("Object")) == "<object Object>"


def test_method_without_receiver_uses_its_owner(interp):
    obj = interp.eval("(object (n 3) ((.me) this))")
    method = obj.env.resolve(".me")
    assert isinstance(method, Method)
    assert method.invoke([]) is obj
    other = interp.eval("(object)")
    assert method.invoke([], other) is other


def test_builtin_function_invoke():
    plus = Interpreter().env.resolve("+")
    assert isinstance(plus, Function)
    assert plus.invoke([num(1), num(2)]) == num(3)
