"""Core evaluator for the protolisp interpreter.

Evaluation threads an explicit Environment through every call: blocks,
function calls and method calls each evaluate in a frame of their own, so
no shared "current scope" is ever swapped or restored.
"""

from __future__ import annotations

from protolisp.errors import UndefinedVariable
from protolisp.evaluation.apply import call_function, call_method
from protolisp.evaluation.forms import Call, MethodCall, classify
from protolisp.evaluation.special_forms import SPECIAL_FORMS
from protolisp.reader.ast import Ast, Atom, Function, Number, Variable
from protolisp.types.environment import Environment
from protolisp.types.values import Primitive, RuntimeValue, atom


def evaluate(expr: Ast, env: Environment) -> RuntimeValue:
    match expr:
        case Number(value=value):
            return Primitive(value)
        case Atom(name=name):
            return atom(name)
        case Variable(name=name):
            value = env.resolve(name)
            if value is None:
                raise UndefinedVariable(f"Undefined variable {name}.")
            return value
        case Function():
            form = classify(expr)
            if isinstance(form, Call):
                return call_function(form, env, evaluate)
            if isinstance(form, MethodCall):
                return call_method(form, env, evaluate)
            return SPECIAL_FORMS[type(form)](form, env, evaluate)
    raise TypeError(f"Cannot evaluate {expr!r}, expected an AST node")
