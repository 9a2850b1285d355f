"""Read-eval-print loop for Monkey.

:func:`start` reads one line at a time from ``stdin``, evaluates it against a
single environment that persists for the whole session, and writes either the
parser errors or the inspected result to ``stdout``. A host exception raised
while handling one line is reported and the session carries on with the next.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import logging
from typing import TextIO

from monkeylang.environment import Environment
from monkeylang.evaluator import evaluate_program, raise_recursion_limit
from monkeylang.lexer import Lexer
from monkeylang.parser import Parser

logger = logging.getLogger(__name__)

PROMPT = ">> "


def print_parser_errors(out: TextIO, errors: list[str]) -> None:
    for msg in errors:
        out.write(f"\t{msg}\n")


def start(stdin: TextIO, stdout: TextIO) -> None:
    """
    Run the REPL until ``stdin`` is exhausted.
    """
    raise_recursion_limit()
    env = Environment()
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return

        try:
            parser = Parser(Lexer(line))
            program = parser.parse_program()
            if parser.errors:
                print_parser_errors(stdout, parser.errors)
                continue

            logger.debug("evaluating: %s", program.string())
            evaluated = evaluate_program(program, env)
            stdout.write(evaluated.inspect())
            stdout.write("\n")
        except Exception as e:
            logger.debug("line failed", exc_info=True)
            stdout.write(f"{type(e).__name__}: {e}\n")
