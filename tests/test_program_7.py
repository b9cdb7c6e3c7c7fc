import io

from plox import ParseError, Session
from plox.session import EXIT_DATAERR

from tests.helpers import read_example


def test_program_7_reports_every_syntax_error():
    out, err = io.StringIO(), io.StringIO()
    session = Session(out=out, err=err)
    assert not session.run(read_example('program_7.lox'))
    # nothing runs when the program does not parse
    assert out.getvalue() == ''
    assert [str(e) for e in session.errors] == [
        "[line 2] Error at 'print': expect ';' after variable declaration",
        "[line 3] Error at ';': expect expression",
    ]
    assert all(isinstance(e, ParseError) for e in session.errors)
    assert session.exit_status == EXIT_DATAERR
