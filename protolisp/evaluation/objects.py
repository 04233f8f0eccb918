"""Prototype-based object model.

Every object owns an Environment whose parent is the environment active
when the object was created. The reserved binding `prototype` links an
object to its prototype; member lookup walks that chain explicitly.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from protolisp.errors import ArityMismatch
from protolisp.types.environment import Environment
from protolisp.types.values import NULL, Function, Method, Object, RuntimeValue, boolean

logger = logging.getLogger(__name__)

PROTOTYPE = "prototype"
THIS = "this"


def expect_arity(name: str, arguments: list[RuntimeValue], count: int) -> None:
    if len(arguments) != count:
        raise ArityMismatch(f"{name} expects {count} arguments, received {len(arguments)}.")


def prototype_chain(obj: RuntimeValue) -> Iterator[Object]:
    """Yield `obj` and each object reached through `prototype` links.

    Stops at the first non-object prototype and never revisits an object,
    so a cyclic chain terminates.
    """
    seen: set[int] = set()
    current: Optional[RuntimeValue] = obj
    while isinstance(current, Object) and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.env.resolve(PROTOTYPE, current_only=True)


def lookup_member(receiver: Object, name: str) -> Optional[RuntimeValue]:
    """Own members first, then prototypes, then the receiver's scope chain."""
    for holder in prototype_chain(receiver):
        value = holder.env.resolve(name, current_only=True)
        if value is not None:
            if holder is not receiver:
                logger.debug("member %s of %s delegated to %s", name, receiver, holder)
            return value
    return receiver.env.resolve(name, current_only=False)


def is_instance(receiver: RuntimeValue, prototype: RuntimeValue) -> bool:
    if not isinstance(prototype, Object):
        return False
    chain = prototype_chain(receiver)
    next(chain, None)  # the receiver itself is not its own prototype
    return any(link is prototype for link in chain)


def new_object(name: Optional[str], parent: Environment) -> Object:
    """Create an object carrying the members every object has.

    `.prototype` and `.prototype=` read and write the object's own
    `prototype` binding; `.instance?` tests the receiver's prototype chain.
    """
    obj = Object(name, Environment(parent))

    def get_prototype(arguments: list[RuntimeValue]) -> RuntimeValue:
        expect_arity(".prototype", arguments, 0)
        value = obj.env.resolve(PROTOTYPE, current_only=True)
        return NULL if value is None else value

    def set_prototype(arguments: list[RuntimeValue]) -> RuntimeValue:
        expect_arity(".prototype=", arguments, 1)
        obj.env.define(PROTOTYPE, arguments[0])
        return arguments[0]

    def instance_of(receiver: RuntimeValue, arguments: list[RuntimeValue]) -> RuntimeValue:
        expect_arity(".instance?", arguments, 1)
        return boolean(is_instance(receiver, arguments[0]))

    obj.env.define(".prototype", Function(".prototype", get_prototype))
    obj.env.define(".prototype=", Function(".prototype=", set_prototype))
    obj.env.define(".instance?", Method(".instance?", instance_of, obj))
    return obj


def define_field(obj: Object, field: str, value: RuntimeValue) -> None:
    """Bind `field` and synthesize its `.field` getter and `.field=` setter."""
    obj.env.define(field, value)

    def getter(arguments: list[RuntimeValue]) -> RuntimeValue:
        expect_arity(f".{field}", arguments, 0)
        current = obj.env.resolve(field, current_only=True)
        if current is None:
            raise AssertionError(f"Field {field} vanished from {obj}.")
        return current

    def setter(arguments: list[RuntimeValue]) -> RuntimeValue:
        expect_arity(f".{field}=", arguments, 1)
        obj.env.define(field, arguments[0])
        return arguments[0]

    obj.env.define(f".{field}", Function(f".{field}", getter))
    obj.env.define(f".{field}=", Function(f".{field}=", setter))
