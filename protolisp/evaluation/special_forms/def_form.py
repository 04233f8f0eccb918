import logging

from protolisp import EvaluatorFn
from protolisp.errors import ArityMismatch, Redefinition
from protolisp.evaluation.forms import DefFunction, DefVariable
from protolisp.types.environment import Environment
from protolisp.types.values import Function, RuntimeValue

logger = logging.getLogger(__name__)


def _check_unbound(name: str, env: Environment) -> None:
    # only the current frame counts; shadowing an outer binding is allowed
    if name in env:
        raise Redefinition(f"Redefined identifier {name}.")


def def_variable_form(form: DefVariable, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """
    (def <name> <value>)
    """
    _check_unbound(form.name, env)
    value = evaluate_fn(form.value, env)
    env.define(form.name, value)
    return value


def def_function_form(form: DefFunction, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """
    (def (<name> [parameters]) <body>)
    The function closes over `env`; each call gets its own child frame of it.
    """
    _check_unbound(form.name, env)
    parameters = form.parameters
    body = form.body

    def definition(arguments: list[RuntimeValue]) -> RuntimeValue:
        if len(arguments) != len(parameters):
            raise ArityMismatch(
                f"{form.name} expects {len(parameters)} arguments, received {len(arguments)}."
            )
        frame = Environment(env)
        for parameter, argument in zip(parameters, arguments):
            frame.define(parameter, argument)
        return evaluate_fn(body, frame)

    function = Function(form.name, definition)
    env.define(form.name, function)
    logger.debug("defined function %s/%d", form.name, len(parameters))
    return function
