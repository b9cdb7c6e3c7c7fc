"""Session control for the Lox interpreter.

A `Session` ties the pipeline together for one user: it scans and parses
source text, reports every lexical and syntax error it finds, and runs the
resulting statements on an interpreter it owns for its whole lifetime.
Bindings therefore persist from one `run` call to the next, which is what
the interactive shell relies on. Sessions never share an environment.

Errors are written to the `err` sink and recorded in `errors`; the flags
`had_error` (lexical or syntax error) and `had_runtime_error` decide the
process exit status in script mode.
"""

from __future__ import annotations

import sys
from typing import IO, List, Optional

from termcolor import colored

from .ast import Stmt
from .errors import LoxError, LoxRuntimeError
from .interpreter import Interpreter, SessionMode
from .parser import parse
from .scanner import scan

# Exit statuses, following the BSD sysexits convention.
EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATAERR = 65
EXIT_NOINPUT = 66
EXIT_SOFTWARE = 70


class Session:
    def __init__(self, out: Optional[IO[str]] = None, err: Optional[IO[str]] = None,
                 mode: SessionMode = SessionMode.SCRIPT, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.interpreter = Interpreter(out=out, debug_level=debug_level, debug_file=debug_file)
        self.err = err
        self.mode = mode
        self.errors: List[LoxError] = []
        self.had_error = False
        self.had_runtime_error = False

    def report(self, error: LoxError):
        """Print a diagnostic for `error` and remember it."""
        self.errors.append(error)
        if isinstance(error, LoxRuntimeError):
            self.had_runtime_error = True
        else:
            self.had_error = True
        err = self.err if self.err is not None else sys.stderr
        print(colored("error:", "red", attrs=["bold"]), str(error), file=err)

    def reset_errors(self):
        """Forget earlier errors; called between lines of an interactive session."""
        self.errors = []
        self.had_error = False
        self.had_runtime_error = False

    def parse(self, source: str) -> Optional[List[Stmt]]:
        """Scan and parse `source`. Returns None if any error was reported."""
        tokens, lex_errors = scan(source)
        statements, parse_errors = parse(tokens)
        # report in source order
        for error in sorted(lex_errors + parse_errors, key=lambda e: e.line):
            self.report(error)
        if lex_errors or parse_errors:
            return None
        return statements

    def execute(self, statements: List[Stmt]) -> bool:
        try:
            self.interpreter.interpret(statements, self.mode)
        except LoxRuntimeError as e:
            self.report(e)
            return False
        return True

    def run(self, source: str) -> bool:
        """Run `source`; returns False if it could not be parsed or failed at runtime."""
        statements = self.parse(source)
        if statements is None:
            return False
        return self.execute(statements)

    @property
    def exit_status(self) -> int:
        if self.had_error:
            return EXIT_DATAERR
        if self.had_runtime_error:
            return EXIT_SOFTWARE
        return EXIT_OK

    def close(self):
        self.interpreter.close()


def run_program(source: str, out: Optional[IO[str]] = None, debug_level: int = 0) -> Interpreter:
    """Convenience function to scan, parse and run a Lox program from a string.

    Unlike `Session.run`, errors are not reported but raised: the first
    lexical or syntax error if the source does not parse, otherwise any
    runtime error. Returns the interpreter so callers can inspect its
    environment.
    """
    tokens, lex_errors = scan(source)
    statements, parse_errors = parse(tokens)
    if lex_errors or parse_errors:
        raise min(lex_errors + parse_errors, key=lambda e: e.line)
    interpreter = Interpreter(out=out, debug_level=debug_level)
    try:
        interpreter.interpret(statements)
    finally:
        interpreter.close()
    return interpreter
