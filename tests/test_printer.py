from plox.parser import parse
from plox.printer import print_program
from plox.scanner import scan


def reprint(source):
    tokens, _ = scan(source)
    statements, errors = parse(tokens)
    assert errors == []
    return print_program(statements)


def test_statements():
    assert reprint('print "a";\nvar b;\nvar c = !true;\nc = b = nil;\n') == (
        'print "a";\n'
        'var b;\n'
        'var c = (!true);\n'
        'c = b = nil;'
    )


def test_grouping_is_made_explicit():
    assert reprint('print 1 + 2 * -3 >= 4 / 2 == false;') == (
        'print (((1 + (2 * (-3))) >= (4 / 2)) == false);'
    )


def test_printed_program_parses_to_the_same_tree():
    source = 'var x = (1 - 2) - -(3 * 4);\nprint x != "y";\n'
    first = reprint(source)
    assert reprint(first) == first


def test_empty_program():
    assert reprint('') == ''
