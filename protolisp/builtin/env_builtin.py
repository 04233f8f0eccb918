"""Registration of the builtin bindings every root environment starts with."""
from __future__ import annotations

from protolisp.builtin.arithmetic import add, div, mul, sub
from protolisp.evaluation.objects import new_object
from protolisp.types.environment import Environment
from protolisp.types.values import NULL, Function


def register(env: Environment) -> None:
    """Register null, the arithmetic builtins and the root Object into `env`."""
    env.define("null", NULL)
    for name, definition in (("+", add), ("-", sub), ("*", mul), ("/", div)):
        env.define(name, Function(name, definition))
    env.define("Object", new_object("Object", env))
