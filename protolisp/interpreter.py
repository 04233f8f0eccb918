from __future__ import annotations

import logging
from pathlib import Path

from protolisp.builtin.env_builtin import register
from protolisp.evaluation.evaluator import evaluate
from protolisp.reader.ast import Ast
from protolisp.reader.parser import TokenStream, lex
from protolisp.types.environment import Environment
from protolisp.types.values import NULL, RuntimeValue

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates protolisp code against one root environment.
    Definitions persist across calls; an Interpreter is not meant to be
    shared between threads.
    """
    def __init__(self, prelude: str | None = None):
        self.env: Environment = Environment()
        register(self.env)
        if prelude:
            self.eval_prelude(prelude)

    def evaluate(self, ast: Ast) -> RuntimeValue:
        return evaluate(ast, self.env)

    def eval_prelude(self, code: str) -> None:
        """Evaluate a string of code for its definitions only."""
        stream = TokenStream(lex(code))
        while (expr := stream.parse_expr()) is not None:
            self.evaluate(expr)

    def eval(self, code: str) -> RuntimeValue:
        """Evaluate every expression in `code`; returns the last value, null if none."""
        stream = TokenStream(lex(code))
        result: RuntimeValue = NULL
        while (expr := stream.parse_expr()) is not None:
            result = self.evaluate(expr)
        return result

    def load(self, path: str | Path) -> RuntimeValue:
        path = Path(path)
        logger.debug("loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
