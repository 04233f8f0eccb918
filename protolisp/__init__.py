# Core type aliases for protolisp.
#
# Syntax trees live in protolisp.reader.ast and runtime values in
# protolisp.types.values; this module only names the shapes shared between
# the evaluator and the special-form handlers, so it must not import either.

from typing import Callable

# Evaluator function type: (ast, environment) -> runtime value, passed to
# special-form handlers and the application engine.
EvaluatorFn = Callable[..., "RuntimeValue"]

__version__ = "0.1.0"
