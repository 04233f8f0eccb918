"""Syntax tree produced by the reader.

Four immutable node kinds: number literals, atom literals, variable
references, and function forms. A Function with an empty name is the
anonymous ``((.method params) body)`` pair used inside object literals.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Number:
    value: Decimal

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Atom:
    name: str

    def __str__(self) -> str:
        return f":{self.name}"


@dataclass(frozen=True)
class Variable:
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Function:
    name: str
    arguments: tuple = ()

    def __post_init__(self):
        # callers may hand in a list; keep nodes hashable and immutable
        object.__setattr__(self, "arguments", tuple(self.arguments))

    def __str__(self) -> str:
        parts = [self.name] if self.name else []
        parts.extend(str(a) for a in self.arguments)
        return f"({' '.join(parts)})"


Ast = Union[Number, Atom, Variable, Function]
