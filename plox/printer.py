"""Render parsed programs back to text.

Binary and unary expressions are fully parenthesised so that the printed
form shows how the parser grouped the operands, e.g. `1 + 2 * 3` prints
as `(1 + (2 * 3))`.
"""

from __future__ import annotations

from typing import Iterable

from .ast import (
    Assign, Binary, Expr, Expression, ExprVisitor, Literal, Print, Stmt,
    StmtVisitor, Unary, Var, Variable,
)


class AstPrinter(ExprVisitor, StmtVisitor):
    def print(self, node) -> str:
        return node.accept(self)

    def visit_binary_expr(self, expr: Binary) -> str:
        return f"({expr.left.accept(self)} {expr.operator.lexeme} {expr.right.accept(self)})"

    def visit_unary_expr(self, expr: Unary) -> str:
        return f"({expr.operator.lexeme}{expr.right.accept(self)})"

    def visit_literal_expr(self, expr: Literal) -> str:
        return str(expr.value)

    def visit_variable_expr(self, expr: Variable) -> str:
        return expr.name.lexeme

    def visit_assign_expr(self, expr: Assign) -> str:
        return f"{expr.name.lexeme} = {expr.value.accept(self)}"

    def visit_expression_stmt(self, stmt: Expression) -> str:
        return f"{stmt.expression.accept(self)};"

    def visit_print_stmt(self, stmt: Print) -> str:
        return f"print {stmt.expression.accept(self)};"

    def visit_var_stmt(self, stmt: Var) -> str:
        if stmt.initializer is None:
            return f"var {stmt.name.lexeme};"
        return f"var {stmt.name.lexeme} = {stmt.initializer.accept(self)};"


def print_program(statements: Iterable[Stmt]) -> str:
    printer = AstPrinter()
    return '\n'.join(printer.print(stmt) for stmt in statements)


def print_expr(expr: Expr) -> str:
    return AstPrinter().print(expr)
