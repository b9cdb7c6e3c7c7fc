from typing import Optional

from plox.tokens import Token, TokenType


class LoxError(Exception):
    """Base class for every error the language reports to its user."""
    def __init__(self, line: int, message: str):
        super().__init__(message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


class LexError(LoxError):
    """Unexpected character or unterminated string found while scanning."""


class ParseError(LoxError):
    """A construct the grammar expected was not found at `token`."""
    def __init__(self, token: Token, message: str):
        super().__init__(token.line, message)
        self.token = token

    @property
    def where(self) -> str:
        if self.token.type == TokenType.EOF:
            return 'at end'
        return f"at '{self.token.lexeme}'"

    def __str__(self) -> str:
        return f"[line {self.line}] Error {self.where}: {self.message}"


class LoxRuntimeError(LoxError):
    """Raised while evaluating a program, e.g. on an operand type mismatch."""
    def __init__(self, token: Optional[Token], message: str):
        super().__init__(token.line if token is not None else 0, message)
        self.token = token

    def __str__(self) -> str:
        return f"[line {self.line}] RuntimeError: {self.message}"
