from protolisp import EvaluatorFn
from protolisp.errors import UndefinedVariable
from protolisp.evaluation.forms import SetVariable
from protolisp.types.environment import Environment
from protolisp.types.values import RuntimeValue


def set_form(form: SetVariable, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """
    (set! <name> <value>)
    The name must be bound somewhere in the chain. The new value is bound in
    the current frame, shadowing rather than mutating an outer binding; object
    state is changed through its setters instead.
    """
    if env.resolve(form.name) is None:
        raise UndefinedVariable(f"Undefined variable {form.name}.")
    value = evaluate_fn(form.value, env)
    env.define(form.name, value)
    return value
