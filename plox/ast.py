"""Abstract Syntax Tree (AST) definitions for the Lox language.

The parser produces these nodes and the interpreter (and the AST printer)
consume them. The set of node kinds is closed: consumers implement
`ExprVisitor` / `StmtVisitor`, which declare one abstract method per kind,
and each node routes itself to the matching method through `accept`. A
visitor that forgets a kind cannot be instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from .tokens import Token
from .types import Value


class ExprVisitor(ABC):
    @abstractmethod
    def visit_binary_expr(self, expr: 'Binary') -> Any: ...

    @abstractmethod
    def visit_unary_expr(self, expr: 'Unary') -> Any: ...

    @abstractmethod
    def visit_literal_expr(self, expr: 'Literal') -> Any: ...

    @abstractmethod
    def visit_variable_expr(self, expr: 'Variable') -> Any: ...

    @abstractmethod
    def visit_assign_expr(self, expr: 'Assign') -> Any: ...


class StmtVisitor(ABC):
    @abstractmethod
    def visit_expression_stmt(self, stmt: 'Expression') -> Any: ...

    @abstractmethod
    def visit_print_stmt(self, stmt: 'Print') -> Any: ...

    @abstractmethod
    def visit_var_stmt(self, stmt: 'Var') -> Any: ...


class Expr:
    """Base class for all expression nodes."""
    def accept(self, visitor: ExprVisitor) -> Any:
        raise NotImplementedError


class Stmt:
    """Base class for all statement nodes."""
    def accept(self, visitor: StmtVisitor) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Value

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_variable_expr(self)


@dataclass(frozen=True)
class Assign(Expr):
    name: Token
    value: Expr

    def accept(self, visitor: ExprVisitor) -> Any:
        return visitor.visit_assign_expr(self)


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None

    def accept(self, visitor: StmtVisitor) -> Any:
        return visitor.visit_var_stmt(self)
