import pytest

from plox.errors import LexError
from plox.scanner import Scanner, scan
from plox.tokens import KEYWORDS, Token, TokenType


def types_of(source):
    tokens, errors = scan(source)
    assert errors == []
    return [t.type for t in tokens]


def test_var_declaration_tokens():
    tokens, errors = scan('var foo = "two";')
    assert errors == []
    assert tokens == [
        Token(TokenType.VAR, 'var', None, 1),
        Token(TokenType.IDENTIFIER, 'foo', None, 1),
        Token(TokenType.EQUAL, '=', None, 1),
        Token(TokenType.STRING, '"two"', 'two', 1),
        Token(TokenType.SEMICOLON, ';', None, 1),
        Token(TokenType.EOF, '', None, 1),
    ]


def test_empty_source_is_just_eof():
    tokens, errors = scan('')
    assert errors == []
    assert tokens == [Token(TokenType.EOF, '', None, 1)]


def test_punctuation():
    assert types_of('(){},.-+;*/') == [
        TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN, TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
        TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS, TokenType.SEMICOLON,
        TokenType.STAR, TokenType.SLASH, TokenType.EOF,
    ]


@pytest.mark.parametrize('source, expected', [
    ('!', TokenType.BANG),
    ('!=', TokenType.BANG_EQUAL),
    ('=', TokenType.EQUAL),
    ('==', TokenType.EQUAL_EQUAL),
    ('>', TokenType.GREATER),
    ('>=', TokenType.GREATER_EQUAL),
    ('<', TokenType.LESS),
    ('<=', TokenType.LESS_EQUAL),
])
def test_one_and_two_character_operators(source, expected):
    assert types_of(source) == [expected, TokenType.EOF]


def test_maximal_munch():
    # "===" is "==" followed by "="
    assert types_of('===') == [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF]
    assert types_of('!==') == [TokenType.BANG_EQUAL, TokenType.EQUAL, TokenType.EOF]


@pytest.mark.parametrize('source, value', [
    ('0', 0.0),
    ('7', 7.0),
    ('123', 123.0),
    ('5.2', 5.2),
    ('3.14159', 3.14159),
    ('10.0', 10.0),
])
def test_number_literals(source, value):
    tokens, errors = scan(source)
    assert errors == []
    assert len(tokens) == 2
    assert tokens[0].type == TokenType.NUMBER
    assert tokens[0].lexeme == source
    assert tokens[0].literal == value
    assert isinstance(tokens[0].literal, float)


def test_trailing_dot_is_not_part_of_number():
    tokens, errors = scan('12.')
    assert errors == []
    assert [(t.type, t.lexeme) for t in tokens] == [
        (TokenType.NUMBER, '12'),
        (TokenType.DOT, '.'),
        (TokenType.EOF, ''),
    ]


@pytest.mark.parametrize('text', ['', 'foo', 'hello world', 'a;b', '1 + 2', 'tab\there', 'back\\slash'])
def test_string_literal_excludes_quotes(text):
    tokens, errors = scan(f'"{text}"')
    assert errors == []
    assert tokens[0].type == TokenType.STRING
    assert tokens[0].literal == text
    assert tokens[0].lexeme == f'"{text}"'


def test_escaped_quote_does_not_end_string():
    tokens, errors = scan(r'"say \"hi\""')
    assert errors == []
    assert [t.type for t in tokens] == [TokenType.STRING, TokenType.EOF]
    assert tokens[0].literal == r'say \"hi\"'


def test_multiline_string_counts_lines():
    tokens, errors = scan('"one\ntwo"\nfoo')
    assert errors == []
    assert tokens[0].literal == 'one\ntwo'
    assert tokens[0].line == 2
    assert tokens[1].line == 3


@pytest.mark.parametrize('keyword', sorted(KEYWORDS))
def test_keywords(keyword):
    tokens, errors = scan(keyword)
    assert errors == []
    assert tokens[0].type == KEYWORDS[keyword]


@pytest.mark.parametrize('name', ['foo', 'x1', 'var_', 'printer', 'classy', 'nil2', 'snake_case', 'Var'])
def test_identifiers(name):
    tokens, errors = scan(name)
    assert errors == []
    assert tokens[0].type == TokenType.IDENTIFIER
    assert tokens[0].lexeme == name


def test_boolean_keywords_carry_literal():
    tokens, _ = scan('true false nil')
    assert [t.literal for t in tokens] == [True, False, None, None]


def test_comments_are_discarded():
    assert types_of('// nothing here') == [TokenType.EOF]
    assert types_of('1 // one\n2') == [TokenType.NUMBER, TokenType.NUMBER, TokenType.EOF]
    assert types_of('4 / 2') == [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER, TokenType.EOF]


def test_line_numbers_are_monotonic():
    tokens, _ = scan('var a = 1;\n\nprint a;\r\n\ta;')
    lines = [t.line for t in tokens]
    assert lines == sorted(lines)
    assert tokens[-1].line == 4
    assert [t.line for t in tokens if t.lexeme == 'a'] == [1, 3, 4]


def test_lexemes_are_contiguous_substrings():
    source = 'var total = (1.5 + 2) * "x";'
    tokens, _ = scan(source)
    for token in tokens[:-1]:
        assert token.lexeme in source


def test_unexpected_character_is_reported_and_scanning_continues():
    tokens, errors = scan('var a = 1 @ 2;\n#')
    assert [str(e) for e in errors] == [
        "[line 1] Error: unexpected character '@'",
        "[line 2] Error: unexpected character '#'",
    ]
    assert all(isinstance(e, LexError) for e in errors)
    # the bad characters are skipped; everything else is still scanned
    assert [t.lexeme for t in tokens] == ['var', 'a', '=', '1', '2', ';', '']


def test_unterminated_string():
    scanner = Scanner('print "foo')
    tokens = scanner.scan_tokens()
    assert [e.message for e in scanner.errors] == ['unterminated string']
    assert [t.type for t in tokens] == [TokenType.PRINT, TokenType.EOF]


def test_token_str():
    token = Token(TokenType.NUMBER, '1.5', 1.5, 3)
    assert str(token) == 'NUMBER 1.5 1.5'
