"""Recursive-descent parser for the Lox language.

The parser consumes the token sequence produced by the scanner, with one
token of lookahead, and builds a list of statements. Each grammar rule is a
method; the binary precedence levels are loops that fold left-associative
`Binary` nodes, while unary prefix operators nest through recursion:

    program     → declaration* EOF
    declaration → "var" IDENTIFIER ( "=" expression )? ";" | statement
    statement   → "print" expression ";" | expression ";"
    expression  → assignment
    assignment  → IDENTIFIER "=" assignment | equality
    equality    → comparison ( ( "!=" | "==" ) comparison )*
    comparison  → term ( ( ">" | ">=" | "<" | "<=" ) term )*
    term        → factor ( ( "-" | "+" ) factor )*
    factor      → unary ( ( "/" | "*" ) unary )*
    unary       → ( "!" | "-" ) unary | primary
    primary     → NUMBER | STRING | "true" | "false" | "nil"
                | IDENTIFIER | "(" expression ")"

Syntax errors never escape `parse`: each one is recorded in
`Parser.errors` and the parser resynchronises at the next statement
boundary, so a single malformed statement does not hide errors in the
statements that follow it.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from .ast import Assign, Binary, Expr, Expression, Literal, Print, Stmt, Unary, Var, Variable
from .errors import ParseError
from .tokens import Token, TokenType
from .types import NIL, Value


# Expression nesting allowed before the parser gives up. Every level costs
# several Python frames, so this stays well below the interpreter's
# recursion limit.
MAX_DEPTH = 80

# Tokens that begin a statement; used to resynchronise after an error.
STATEMENT_STARTS = {
    TokenType.CLASS,
    TokenType.FUN,
    TokenType.VAR,
    TokenType.FOR,
    TokenType.IF,
    TokenType.WHILE,
    TokenType.PRINT,
    TokenType.RETURN,
}


class Parser:
    def __init__(self, tokens: List[Token]):
        if not tokens or tokens[-1].type != TokenType.EOF:
            last_line = tokens[-1].line if tokens else 1
            tokens = list(tokens) + [Token(TokenType.EOF, '', None, last_line)]
        self.tokens = tokens
        self.current = 0
        self.depth = 0
        self.errors: List[ParseError] = []

    def parse(self) -> List[Stmt]:
        statements: List[Stmt] = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # Token helpers
    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[self.current - 1]

    def is_at_end(self) -> bool:
        return self.peek().type == TokenType.EOF

    def check(self, token_type: TokenType) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == token_type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def match(self, *token_types: TokenType) -> bool:
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type: TokenType, message: str) -> Token:
        if self.check(token_type):
            return self.advance()
        raise ParseError(self.peek(), message)

    def synchronize(self):
        """Discard tokens until the start of the next statement."""
        self.advance()
        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return
            if self.peek().type in STATEMENT_STARTS:
                return
            self.advance()

    # Statements
    def declaration(self) -> Optional[Stmt]:
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError as e:
            self.errors.append(e)
            self.synchronize()
            return None

    def var_declaration(self) -> Stmt:
        name = self.consume(TokenType.IDENTIFIER, 'expect variable name')
        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()
        self.consume(TokenType.SEMICOLON, "expect ';' after variable declaration")
        return Var(name, initializer)

    def statement(self) -> Stmt:
        if self.match(TokenType.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def print_statement(self) -> Stmt:
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "expect ';' after value")
        return Print(value)

    def expression_statement(self) -> Stmt:
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "expect ';' after expression")
        return Expression(expr)

    # Expressions
    def expression(self) -> Expr:
        return self.assignment()

    def enter(self):
        if self.depth >= MAX_DEPTH:
            raise ParseError(self.peek(), 'expression nesting too deep')
        self.depth += 1

    def assignment(self) -> Expr:
        self.enter()
        try:
            expr = self.equality()
            if self.match(TokenType.EQUAL):
                equals = self.previous()
                value = self.assignment()
                if isinstance(expr, Variable):
                    return Assign(expr.name, value)
                # reported without unwinding; the parser is not confused
                self.errors.append(ParseError(equals, 'invalid assignment target'))
            return expr
        finally:
            self.depth -= 1

    def equality(self) -> Expr:
        expr = self.comparison()
        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = Binary(expr, operator, right)
        return expr

    def comparison(self) -> Expr:
        expr = self.term()
        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            right = self.term()
            expr = Binary(expr, operator, right)
        return expr

    def term(self) -> Expr:
        expr = self.factor()
        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = Binary(expr, operator, right)
        return expr

    def factor(self) -> Expr:
        expr = self.unary()
        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = Binary(expr, operator, right)
        return expr

    def unary(self) -> Expr:
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            self.enter()
            try:
                right = self.unary()
            finally:
                self.depth -= 1
            return Unary(operator, right)
        return self.primary()

    def primary(self) -> Expr:
        if self.match(TokenType.FALSE):
            return Literal(Value.boolean(False))
        if self.match(TokenType.TRUE):
            return Literal(Value.boolean(True))
        if self.match(TokenType.NIL):
            return Literal(NIL)
        if self.match(TokenType.NUMBER):
            return Literal(Value.number(self.previous().literal))
        if self.match(TokenType.STRING):
            return Literal(Value.string(self.previous().literal))
        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())
        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "expect ')' after expression")
            return expr
        raise ParseError(self.peek(), 'expect expression')


class ParseResult(NamedTuple):
    statements: List[Stmt]
    errors: List[ParseError]


def parse(tokens: List[Token]) -> ParseResult:
    """Parse a whole program, collecting every syntax error found."""
    parser = Parser(tokens)
    statements = parser.parse()
    return ParseResult(statements, parser.errors)


def parse_expression(tokens: List[Token]) -> Expr:
    """Parse a single expression; raises ParseError on malformed input."""
    parser = Parser(tokens)
    expr = parser.expression()
    if not parser.is_at_end():
        raise ParseError(parser.peek(), 'expect end of expression')
    return expr
