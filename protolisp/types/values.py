"""Runtime values produced and consumed by the evaluator.

Three variants exist:
- Primitive: a decimal number, an atom Tag, or None for null.
- Function: a named callable over a list of runtime values.
- Object: an optional name plus the Environment holding its members.

Functions and objects compare by identity; primitives compare by payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Union

from protolisp.types.environment import Environment
from protolisp.types.tag import Tag


@dataclass(frozen=True)
class Primitive:
    value: Union[Decimal, Tag, None]

    def __str__(self) -> str:
        if self.value is None:
            return "null"
        if isinstance(self.value, Decimal):
            # plain notation, never 1E+1
            return f"{self.value:f}"
        return str(self.value)


@dataclass(frozen=True, eq=False)
class Function:
    name: str
    definition: Callable[[list], "RuntimeValue"]

    def invoke(self, arguments: list[RuntimeValue]) -> RuntimeValue:
        return self.definition(list(arguments))

    def __str__(self) -> str:
        return f"<function {self.name}>"


@dataclass(frozen=True, eq=False)
class Method(Function):
    """A function declared as an object member.

    The definition takes the receiver first; when invoked without an
    explicit receiver the declaring object plays that role.
    """
    definition: Callable[["RuntimeValue", list], "RuntimeValue"]
    owner: "Object"

    def invoke(self, arguments: list[RuntimeValue], receiver: Optional[RuntimeValue] = None) -> RuntimeValue:
        return self.definition(self.owner if receiver is None else receiver, list(arguments))

    def __str__(self) -> str:
        return f"<method {self.name}>"


@dataclass(frozen=True, eq=False)
class Object:
    name: Optional[str]
    env: Environment

    def __str__(self) -> str:
        return f"<object {self.name}>" if self.name else "<object>"


RuntimeValue = Union[Primitive, Function, Object]

NULL = Primitive(None)


def atom(name: str) -> Primitive:
    return Primitive(Tag(name))


def boolean(flag: bool) -> Primitive:
    return atom("true") if flag else atom("false")
