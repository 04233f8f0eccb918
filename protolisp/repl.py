"""
Interactive read-eval-print loop for protolisp.

    protolisp [files...] [--no-repl]

Files are evaluated in order before the prompt appears. Input continues
across lines until its parentheses balance; errors are reported and the
session carries on. End of input (Ctrl-D) leaves the loop.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from protolisp import config
from protolisp.errors import ProtoLispError
from protolisp.interpreter import Interpreter
from protolisp.reader.parser import lex

logger = logging.getLogger(__name__)

PROMPT = "> "
CONTINUATION = ". "

parser = argparse.ArgumentParser(
    prog="protolisp",
    description="Interpreter for a small Lisp with prototype-based objects.",
)
parser.add_argument("files", nargs="*", help="source files to evaluate before the prompt")
parser.add_argument("--no-repl", action="store_true", help="exit after evaluating the files")


def depth(source: str) -> int:
    """Open-minus-close parenthesis count, ignoring comments."""
    level = 0
    for tok_type, _ in lex(source):
        if tok_type == "lparen":
            level += 1
        elif tok_type == "rparen":
            level -= 1
    return level


def report(error: BaseException, out: TextIO) -> None:
    if isinstance(error, RecursionError):
        print("error: maximum recursion depth exceeded", file=out)
    else:
        print(f"error: {type(error).__name__}: {error}", file=out)


def run_repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> None:
    buffer = ""
    while True:
        stdout.write(CONTINUATION if buffer else PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            stdout.write("\n")
            break
        buffer += line
        if depth(buffer) > 0:
            continue
        source, buffer = buffer, ""
        if not source.strip():
            continue
        try:
            result = interp.eval(source)
        except (ProtoLispError, RecursionError) as e:
            report(e, stderr)
        else:
            print(result, file=stdout)


def main(argv: Optional[list[str]] = None) -> int:
    args = parser.parse_args(argv)
    logging.basicConfig(level=config.get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    try:
        for path in [*config.get_prelude_files(), *args.files]:
            interp.load(path)
    except (ProtoLispError, RecursionError) as e:
        report(e, sys.stderr)
        return 1
    except OSError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if not args.no_repl:
        run_repl(interp, sys.stdin, sys.stdout, sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
