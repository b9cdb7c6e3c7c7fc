# Lox language package
# This package provides a scanner, parser and tree-walking interpreter for Lox.
from .errors import LexError, LoxError, LoxRuntimeError, ParseError
from .interpreter import Interpreter, SessionMode
from .parser import parse
from .scanner import scan
from .session import Session, run_program
from .types import Value

__all__ = [
    'scan',
    'parse',
    'run_program',
    'Interpreter',
    'Session',
    'SessionMode',
    'Value',
    'LoxError',
    'LexError',
    'ParseError',
    'LoxRuntimeError',
]
