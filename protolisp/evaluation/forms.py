"""Classification of Function nodes into a closed set of form variants.

The reader yields one generic Function node for every parenthesised form.
`classify` inspects the head name and the argument shapes of a single node
(children stay raw AST) and returns one of:

    Do, DefVariable, DefFunction, SetVariable, ObjectLiteral, MethodCall, Call

Shape errors are reported here: InvalidForm for special forms and method
calls, InvalidMemberDefinition for object members.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from protolisp.errors import InvalidForm, InvalidMemberDefinition
from protolisp.reader.ast import Ast, Function, Variable


@dataclass(frozen=True)
class Do:
    body: tuple


@dataclass(frozen=True)
class DefVariable:
    name: str
    value: Ast


@dataclass(frozen=True)
class DefFunction:
    name: str
    parameters: tuple
    body: Ast


@dataclass(frozen=True)
class SetVariable:
    name: str
    value: Ast


@dataclass(frozen=True)
class FieldMember:
    name: str
    value: Ast


@dataclass(frozen=True)
class MethodMember:
    name: str
    parameters: tuple
    body: Ast


@dataclass(frozen=True)
class ObjectLiteral:
    name: Optional[str]
    members: tuple


@dataclass(frozen=True)
class MethodCall:
    name: str
    receiver: Ast
    arguments: tuple


@dataclass(frozen=True)
class Call:
    name: str
    arguments: tuple


Form = Union[Do, DefVariable, DefFunction, SetVariable, ObjectLiteral, MethodCall, Call]


def is_method_name(name: str) -> bool:
    return name.startswith(".")


def _parameter_names(declaration: Function, error: type) -> tuple:
    names = []
    for parameter in declaration.arguments:
        if not isinstance(parameter, Variable):
            raise error(f"Invalid parameter {parameter} in {declaration}, expected a name.")
        names.append(parameter.name)
    if len(set(names)) != len(names):
        raise error(f"Duplicate parameter name in {declaration}.")
    return tuple(names)


def classify_do(node: Function) -> Do:
    return Do(node.arguments)


def classify_def(node: Function) -> Union[DefVariable, DefFunction]:
    """
    (def <name> <value>)
    (def (<name> [parameters]) <body>)
    """
    if len(node.arguments) != 2:
        raise InvalidForm("Builtin function def requires exactly 2 arguments.")
    target, value = node.arguments
    if isinstance(target, Variable):
        return DefVariable(target.name, value)
    if isinstance(target, Function) and target.name:
        return DefFunction(target.name, _parameter_names(target, InvalidForm), value)
    raise InvalidForm(f"Invalid variable/function form {target} for builtin function def.")


def classify_set(node: Function) -> SetVariable:
    """
    (set! <name> <value>)
    """
    if len(node.arguments) != 2:
        raise InvalidForm("Builtin function set! requires exactly 2 arguments.")
    target, value = node.arguments
    if not isinstance(target, Variable):
        raise InvalidForm(f"Invalid variable form {target} for builtin function set!.")
    return SetVariable(target.name, value)


def classify_member(member: Ast) -> Union[FieldMember, MethodMember]:
    if isinstance(member, Function) and member.name:
        # field: (<name> <value>)
        if len(member.arguments) != 1 or is_method_name(member.name):
            raise InvalidMemberDefinition(f"Invalid field definition {member}, expected (<name> <value>).")
        return FieldMember(member.name, member.arguments[0])
    if isinstance(member, Function):
        # method: ((<.name> [parameters]) <body>), read as ("" (<.name> ...) <body>)
        if len(member.arguments) != 2:
            raise InvalidMemberDefinition(f"Invalid method definition {member}, expected a declaration and a body.")
        declaration, body = member.arguments
        if not isinstance(declaration, Function) or not is_method_name(declaration.name):
            raise InvalidMemberDefinition(f"Invalid method declaration {declaration}, expected (<.name> [parameters]).")
        return MethodMember(declaration.name, _parameter_names(declaration, InvalidMemberDefinition), body)
    raise InvalidMemberDefinition(f"Invalid member definition {member}.")


def classify_object(node: Function) -> ObjectLiteral:
    """
    (object)
    (object <Name>)
    (object [(<name> <value>)] [((<.name> [parameters]) <body>)])
    """
    arguments = node.arguments
    if not arguments:
        return ObjectLiteral(None, ())
    if len(arguments) == 1 and isinstance(arguments[0], Variable):
        return ObjectLiteral(arguments[0].name, ())
    return ObjectLiteral(None, tuple(classify_member(m) for m in arguments))


def classify_method_call(node: Function) -> MethodCall:
    if not node.arguments:
        raise InvalidForm(f"Method call {node.name} requires a receiver.")
    receiver, *arguments = node.arguments
    return MethodCall(node.name, receiver, tuple(arguments))


SPECIAL_FORM_NAMES = {
    "do": classify_do,
    "def": classify_def,
    "set!": classify_set,
    "object": classify_object,
}


def classify(node: Function) -> Form:
    """Map a Function node onto its form variant."""
    special = SPECIAL_FORM_NAMES.get(node.name)
    if special is not None:
        return special(node)
    if not node.name:
        raise InvalidForm(f"Anonymous form {node} is only valid as an object method declaration.")
    if is_method_name(node.name):
        return classify_method_call(node)
    return Call(node.name, node.arguments)
