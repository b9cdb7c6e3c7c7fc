import io

from plox import Session
from plox.session import EXIT_SOFTWARE

from tests.helpers import read_example


def test_program_6_runtime_error_stops_script():
    """Program 6 subtracts a number from a string on its third line.

    The first print runs, the error is reported with its line, the last
    print never runs and the session reports the runtime exit status.
    """
    out, err = io.StringIO(), io.StringIO()
    session = Session(out=out, err=err)
    assert not session.run(read_example('program_6.lox'))
    assert out.getvalue() == '"hello world"\n'
    assert "[line 3] RuntimeError: operands of '-' must be numbers" in err.getvalue()
    assert session.exit_status == EXIT_SOFTWARE
