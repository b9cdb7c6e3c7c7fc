"""Tree-walking interpreter for the Lox language.

The interpreter implements both AST visitor interfaces: statements are
executed for their effect on the environment and the output sink, and
expressions are evaluated to `Value`s. Execution is a single linear pass
over the statement list; there are no control-flow constructs.

Operator semantics:

* `+` adds two numbers or concatenates two strings.
* `-`, `*` and `/` require numbers and follow IEEE-754 (dividing by zero
  yields an infinity or NaN rather than an error).
* `>`, `>=`, `<` and `<=` require numbers and produce booleans.
* `==` and `!=` accept any operands and compare by variant and value.
* Unary `-` requires a number; `!` negates the operand's truthiness.

Any other operand combination raises `LoxRuntimeError`.
"""

from __future__ import annotations

import enum
import math
import sys
from typing import IO, Iterable, Optional

from .ast import (
    Assign, Binary, Expr, Expression, ExprVisitor, Literal, Print, Stmt,
    StmtVisitor, Unary, Var, Variable,
)
from .environment import Environment
from .errors import LoxRuntimeError
from .printer import AstPrinter
from .tokens import Token, TokenType
from .types import NIL, Value


class SessionMode(enum.Enum):
    SCRIPT = 'script'
    INTERACTIVE = 'interactive'


class Interpreter(ExprVisitor, StmtVisitor):
    """Executes Lox statements against one global environment."""
    def __init__(self, out: Optional[IO[str]] = None, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.environment = Environment()
        self.out = out
        self.mode = SessionMode.SCRIPT
        self.debug_level = debug_level
        self.debug_fp = open(debug_file, 'w', encoding='utf-8') if debug_level > 0 else None
        self.printer = AstPrinter()

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg, file=sys.stderr)

    def close(self):
        if self.debug_fp:
            self.debug_fp.close()
            self.debug_fp = None

    def write(self, text: str):
        # resolved at write time so that output capture sees it
        out = self.out if self.out is not None else sys.stdout
        out.write(text + '\n')

    # Public API
    def interpret(self, statements: Iterable[Stmt], mode: SessionMode = SessionMode.SCRIPT):
        """Execute `statements` in order.

        A runtime error stops the remaining statements and propagates to the
        caller. Bindings made by statements that already ran are kept.
        """
        self.mode = mode
        for stmt in statements:
            try:
                self.execute(stmt)
            except RecursionError:
                raise LoxRuntimeError(first_token(stmt), 'maximum recursion depth exceeded') from None

    def execute(self, stmt: Stmt) -> Value:
        if self.debug_level >= 1:
            self.debug(f"exec {self.printer.print(stmt)}")
        return stmt.accept(self)

    def evaluate(self, expr: Expr) -> Value:
        value = expr.accept(self)
        if self.debug_level >= 3:
            self.debug(f"eval {self.printer.print(expr)} -> {value}")
        return value

    # Statements
    def visit_expression_stmt(self, stmt: Expression) -> Value:
        value = self.evaluate(stmt.expression)
        if self.mode == SessionMode.INTERACTIVE:
            self.write(str(value) if value is not None else 'nil')
        return value

    def visit_print_stmt(self, stmt: Print) -> Value:
        value = self.evaluate(stmt.expression)
        self.write(str(value))
        return value

    def visit_var_stmt(self, stmt: Var) -> Value:
        value = self.evaluate(stmt.initializer) if stmt.initializer is not None else NIL
        self.environment.define(stmt.name.lexeme, value)
        if self.debug_level >= 2:
            self.debug(f"define {stmt.name.lexeme}: {value.type_name} = {value}")
        return value

    # Expressions
    def visit_literal_expr(self, expr: Literal) -> Value:
        return expr.value

    def visit_variable_expr(self, expr: Variable) -> Value:
        return self.environment.get(expr.name)

    def visit_assign_expr(self, expr: Assign) -> Value:
        value = self.evaluate(expr.value)
        self.environment.assign(expr.name, value)
        if self.debug_level >= 2:
            self.debug(f"assign {expr.name.lexeme}: {value.type_name} = {value}")
        return value

    def visit_unary_expr(self, expr: Unary) -> Value:
        right = self.evaluate(expr.right)
        op = expr.operator.type
        if op == TokenType.MINUS:
            self.check_number_operand(expr.operator, right)
            return Value.number(-right.as_number())
        if op == TokenType.BANG:
            return Value.boolean(not right.is_truthy())
        raise LoxRuntimeError(expr.operator, f"unknown unary operator '{expr.operator.lexeme}'")

    def visit_binary_expr(self, expr: Binary) -> Value:
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        return self.apply_binary_op(expr.operator, left, right)

    def apply_binary_op(self, operator: Token, a: Value, b: Value) -> Value:
        op = operator.type
        if op == TokenType.PLUS:
            if a.is_number and b.is_number:
                return Value.number(a.as_number() + b.as_number())
            if a.is_string and b.is_string:
                return Value.string(a.payload + b.payload)
            raise LoxRuntimeError(operator, f"operands of '{operator.lexeme}' must be two numbers or two strings")
        if op == TokenType.EQUAL_EQUAL:
            return Value.boolean(a.equals(b))
        if op == TokenType.BANG_EQUAL:
            return Value.boolean(not a.equals(b))

        self.check_number_operands(operator, a, b)
        x, y = a.as_number(), b.as_number()
        if op == TokenType.MINUS:
            return Value.number(x - y)
        if op == TokenType.STAR:
            return Value.number(x * y)
        if op == TokenType.SLASH:
            return Value.number(divide(x, y))
        if op == TokenType.GREATER:
            return Value.boolean(x > y)
        if op == TokenType.GREATER_EQUAL:
            return Value.boolean(x >= y)
        if op == TokenType.LESS:
            return Value.boolean(x < y)
        if op == TokenType.LESS_EQUAL:
            return Value.boolean(x <= y)
        raise LoxRuntimeError(operator, f"unknown binary operator '{operator.lexeme}'")

    @staticmethod
    def check_number_operand(operator: Token, operand: Value):
        if not operand.is_number:
            raise LoxRuntimeError(operator, f"operand of '{operator.lexeme}' must be a number")

    @staticmethod
    def check_number_operands(operator: Token, a: Value, b: Value):
        if not (a.is_number and b.is_number):
            raise LoxRuntimeError(operator, f"operands of '{operator.lexeme}' must be numbers")


def divide(x: float, y: float) -> float:
    """IEEE-754 division: a zero divisor gives an infinity or NaN."""
    if y == 0.0:
        if x == 0.0 or math.isnan(x):
            return math.nan
        # the sign of a zero divisor decides the sign of the infinity
        negative = (math.copysign(1.0, x) < 0) != (math.copysign(1.0, y) < 0)
        return -math.inf if negative else math.inf
    return x / y


def first_token(node) -> Optional[Token]:
    """Return the leftmost token of a statement or expression, if it has one."""
    while True:
        if isinstance(node, (Expression, Print)):
            node = node.expression
        elif isinstance(node, Binary):
            # literals carry no token
            if isinstance(node.left, Literal):
                return node.operator
            node = node.left
        elif isinstance(node, Unary):
            return node.operator
        elif isinstance(node, (Var, Variable, Assign)):
            return node.name
        else:
            return None
