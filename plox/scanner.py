"""Lexical analysis for the Lox language.

The scanner turns raw source text into the token sequence consumed by the
parser. It makes a single left-to-right pass over the source, keeping a
`start` cursor at the beginning of the current lexeme and a `current`
cursor at the next unread character.

Lexical errors do not stop the scan: each one is recorded in
`Scanner.errors` together with its line, the offending input is skipped,
and scanning resumes so that later errors in the same source are reported
too. The returned token list always ends with a single EOF token.
"""

from __future__ import annotations

from typing import Any, List, NamedTuple

from .errors import LexError
from .tokens import KEYWORDS, Token, TokenType


SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# operator -> (kind when followed by '=', kind otherwise)
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG_EQUAL, TokenType.BANG),
    '=': (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    '>': (TokenType.GREATER_EQUAL, TokenType.GREATER),
    '<': (TokenType.LESS_EQUAL, TokenType.LESS),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return c.isalpha()


def is_alphanumeric(c: str) -> bool:
    return c.isalpha() or is_digit(c) or c == '_'


class Scanner:
    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = []
        self.errors: List[LexError] = []
        self.start = 0
        self.current = 0
        self.line = 1

    def scan_tokens(self) -> List[Token]:
        while not self.is_at_end():
            # beginning of the next lexeme
            self.start = self.current
            self.scan_token()
        self.tokens.append(Token(TokenType.EOF, '', None, self.line))
        return self.tokens

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        c = self.source[self.current]
        self.current += 1
        return c

    def match(self, expected: str) -> bool:
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def add_token(self, token_type: TokenType, literal: Any = None):
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, lexeme, literal, self.line))

    def error(self, message: str):
        self.errors.append(LexError(self.line, message))

    def scan_token(self):
        c = self.advance()
        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            with_equal, without = EQUAL_SUFFIX_TOKENS[c]
            self.add_token(with_equal if self.match('=') else without)
        elif c == '/':
            if self.match('/'):
                # a comment runs until the end of the line
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in (' ', '\r', '\t'):
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.error(f"unexpected character {c!r}")

    def string(self):
        while self.peek() != '"' and not self.is_at_end():
            c = self.advance()
            if c == '\n':
                self.line += 1
            elif c == '\\' and self.peek() == '"':
                # an escaped quote does not close the literal
                self.advance()
        if self.is_at_end():
            self.error('unterminated string')
            return
        self.advance()  # closing quote
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self):
        while is_digit(self.peek()):
            self.advance()
        # a trailing dot with no digit after it is not part of the number
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()
            while is_digit(self.peek()):
                self.advance()
        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self):
        while is_alphanumeric(self.peek()):
            self.advance()
        text = self.source[self.start:self.current]
        token_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
        if token_type == TokenType.TRUE:
            self.add_token(token_type, True)
        elif token_type == TokenType.FALSE:
            self.add_token(token_type, False)
        else:
            self.add_token(token_type)


class ScanResult(NamedTuple):
    tokens: List[Token]
    errors: List[LexError]


def scan(source: str) -> ScanResult:
    """Scan `source` into tokens, collecting every lexical error found."""
    scanner = Scanner(source)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, scanner.errors)
