from protolisp import EvaluatorFn
from protolisp.evaluation.forms import Do
from protolisp.types.environment import Environment
from protolisp.types.values import NULL, RuntimeValue


def do_form(form: Do, env: Environment, evaluate_fn: EvaluatorFn) -> RuntimeValue:
    """
    (do [expressions])
    Evaluates the expressions in a fresh child scope and returns the last value,
    or null for an empty block. Definitions made inside do not leak out.
    """
    scope = Environment(env)
    result: RuntimeValue = NULL
    for expression in form.body:
        result = evaluate_fn(expression, scope)
    return result
