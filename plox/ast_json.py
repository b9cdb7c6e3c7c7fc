"""JSON serialization/deserialization for the Lox AST.

This module converts between parsed programs (lists of statements) and
plain Python dict/list structures suitable for JSON encoding. It supports
a full round-trip for every node type, for tokens and for values.

Decoding checks node categories: a statement slot only accepts statement
nodes and an expression slot only expression nodes. Anything else, a
missing child included, raises ValueError.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .ast import Assign, Binary, Expr, Expression, Literal, Print, Stmt, Unary, Var, Variable
from .tokens import Token, TokenType
from .types import Value, ValueKind


def token_to_obj(token: Token) -> Dict[str, Any]:
    return {"type": token.type.name, "lexeme": token.lexeme, "literal": token.literal, "line": token.line}


def token_from_obj(o: Dict[str, Any]) -> Token:
    return Token(TokenType[o["type"]], o["lexeme"], o.get("literal"), int(o["line"]))


def value_to_obj(value: Value) -> Dict[str, Any]:
    return {"kind": value.kind.value, "value": value.payload}


def value_from_obj(o: Dict[str, Any]) -> Value:
    kind = ValueKind(o["kind"])
    if kind == ValueKind.NIL:
        return Value.nil()
    if kind == ValueKind.STRING:
        return Value.string(o["value"])
    if kind == ValueKind.NUMBER:
        return Value.number(o["value"])
    if kind == ValueKind.INTEGER:
        return Value.integer(o["value"])
    return Value.boolean(bool(o["value"]))


def ast_to_obj(node: Any) -> Any:
    if node is None:
        return None
    if isinstance(node, list):
        return [ast_to_obj(n) for n in node]

    # Statements
    if isinstance(node, Expression):
        return {"type": "Expression", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Print):
        return {"type": "Print", "expression": ast_to_obj(node.expression)}
    if isinstance(node, Var):
        return {"type": "Var", "name": token_to_obj(node.name), "initializer": ast_to_obj(node.initializer)}

    # Expressions
    if isinstance(node, Binary):
        return {
            "type": "Binary",
            "left": ast_to_obj(node.left),
            "operator": token_to_obj(node.operator),
            "right": ast_to_obj(node.right),
        }
    if isinstance(node, Unary):
        return {"type": "Unary", "operator": token_to_obj(node.operator), "right": ast_to_obj(node.right)}
    if isinstance(node, Literal):
        return {"type": "Literal", "value": value_to_obj(node.value)}
    if isinstance(node, Variable):
        return {"type": "Variable", "name": token_to_obj(node.name)}
    if isinstance(node, Assign):
        return {"type": "Assign", "name": token_to_obj(node.name), "value": ast_to_obj(node.value)}

    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def node_type(obj: Any, category: str) -> str:
    if not isinstance(obj, dict):
        raise ValueError(f"expected {category} node, got {type(obj).__name__}")
    return obj.get("type")


def stmt_from_obj(obj: Any) -> Stmt:
    """Decode a statement node; expression nodes are rejected."""
    t = node_type(obj, "statement")
    if t == "Expression":
        return Expression(expr_from_obj(obj.get("expression")))
    if t == "Print":
        return Print(expr_from_obj(obj.get("expression")))
    if t == "Var":
        initializer = obj.get("initializer")
        return Var(token_from_obj(obj["name"]), expr_from_obj(initializer) if initializer is not None else None)
    raise ValueError(f"Unknown statement node type: {t}")


def expr_from_obj(obj: Any) -> Expr:
    """Decode an expression node; statement nodes are rejected."""
    t = node_type(obj, "expression")
    if t == "Binary":
        return Binary(expr_from_obj(obj.get("left")), token_from_obj(obj["operator"]), expr_from_obj(obj.get("right")))
    if t == "Unary":
        return Unary(token_from_obj(obj["operator"]), expr_from_obj(obj.get("right")))
    if t == "Literal":
        return Literal(value_from_obj(obj["value"]))
    if t == "Variable":
        return Variable(token_from_obj(obj["name"]))
    if t == "Assign":
        return Assign(token_from_obj(obj["name"]), expr_from_obj(obj.get("value")))
    raise ValueError(f"Unknown expression node type: {t}")


def program_to_obj(statements: List[Stmt]) -> Dict[str, Any]:
    return {"type": "Program", "body": ast_to_obj(list(statements))}


def program_from_obj(obj: Any) -> List[Stmt]:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Invalid program object")
    body = obj.get("body")
    if not isinstance(body, list):
        raise ValueError("Program body must be a list of statements")
    return [stmt_from_obj(o) for o in body]
