"""
Monkey Language Interpreter

This is the main entry point for the Monkey language interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into tokens.
3. The Parser builds a Program from the tokens, collecting any syntax errors.
4. The Evaluator walks the Program and produces a value.

Set the MONKEYDEBUG environment variable to log the token stream and the
parsed program before evaluation.
"""
import logging
import os
import sys

from monkeylang import repl
from monkeylang.evaluator import Interpreter, raise_recursion_limit
from monkeylang.exceptions import ParseError
from monkeylang.lexer import tokenize
from monkeylang.objects import NULL, is_error

logger = logging.getLogger("monkey")


def print_usage():
    """
    Print usage.
    """
    print()
    print("Monkey Language Interpreter")
    print()
    print("Usage:")
    print("    monkey <script.mk>")
    print()
    print("Arguments:")
    print("    <script.mk>")
    print("        Path to a Monkey source file to execute. The value of the last")
    print("        statement is printed unless it is null.")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def configure_logging():
    """
    Configure logging, switching to DEBUG when MONKEYDEBUG is set.
    """
    level = logging.DEBUG if os.environ.get("MONKEYDEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run_script(script_name: str) -> int:
    """
    Run a Monkey script and return the process exit code.
    """
    with open(script_name, "r", encoding="utf-8") as f:
        code = f.read()

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tokens: %s", tokenize(code))

    interpreter = Interpreter()
    try:
        result = interpreter.run(code)
    except ParseError as e:
        print(f"{type(e).__name__}: parsing {script_name} failed")
        repl.print_parser_errors(sys.stdout, e.errors)
        return 1

    if is_error(result):
        print(result.inspect())
        return 1
    if result is not NULL:
        print(result.inspect())
    return 0


def run_repl():
    """
    Run the interactive REPL
    """
    print("Monkey Language Interpreter - REPL")
    print("Press Ctrl-D to leave.")
    try:
        repl.start(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        print("\nInterrupted.")
    print()


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    if argv is None:
        argv = sys.argv
    configure_logging()
    raise_recursion_limit()

    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
