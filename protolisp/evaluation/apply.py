"""Application engine: ordinary function calls and method calls.

Arguments are evaluated left to right after the callee has been resolved.
Method calls pass the receiver to Method values so that `this` names the
object the call was made on, wherever in the prototype chain the method
was found.
"""

from protolisp import EvaluatorFn
from protolisp.errors import MethodNotFound, NotAnObject, NotInvokable, UndefinedFunction
from protolisp.evaluation.forms import Call, MethodCall
from protolisp.evaluation.objects import lookup_member
from protolisp.types.environment import Environment
from protolisp.types.values import Function, Method, Object, RuntimeValue


def call_function(form: Call, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """(<name> [arguments])"""
    value = env.resolve(form.name)
    if value is None:
        raise UndefinedFunction(f"Undefined function {form.name}.")
    if not isinstance(value, Function):
        raise NotInvokable(f"RuntimeValue {value} ({type(value).__name__}) is not an invokable function.")
    arguments = [evaluate_fn(argument, env) for argument in form.arguments]
    return value.invoke(arguments)


def call_method(form: MethodCall, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """(<.name> <receiver> [arguments])"""
    receiver = evaluate_fn(form.receiver, env)
    if not isinstance(receiver, Object):
        raise NotAnObject(f"Method {form.name} must be called on an object, received {receiver}.")
    member = lookup_member(receiver, form.name)
    if member is None:
        raise MethodNotFound(f"Method {form.name} not found in {receiver}.")
    if not isinstance(member, Function):
        raise NotInvokable(f"Member {form.name} of {receiver} is not an invokable function.")
    arguments = [evaluate_fn(argument, env) for argument in form.arguments]
    if isinstance(member, Method):
        return member.invoke(arguments, receiver)
    return member.invoke(arguments)
