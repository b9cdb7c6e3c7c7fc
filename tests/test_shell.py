import io

from plox import Session, SessionMode
from plox.shell import Shell


def run_shell(lines):
    stdin, stdout, err = io.StringIO(lines), io.StringIO(), io.StringIO()
    session = Session(out=stdout, err=err, mode=SessionMode.INTERACTIVE)
    shell = Shell(session, stdin=stdin, stdout=stdout)
    shell.use_rawinput = False
    shell.cmdloop()
    return stdout.getvalue(), err.getvalue()


def test_lines_share_bindings_and_echo():
    out, err = run_shell('var a = 1;\na + 1;\nprint a;\nexit\n')
    assert out.startswith(Shell.intro)
    assert '>> 2\n' in out
    assert '>> 1\n' in out
    assert out.endswith('Goodbye!\n')
    assert err == ''


def test_print_is_not_a_shell_command():
    out, _ = run_shell('print "p";\nexit\n')
    assert '"p"\n' in out
    assert '*** Unknown syntax' not in out


def test_error_does_not_end_session():
    out, err = run_shell('1 +;\nnil - 1;\nprint 5;\nexit\n')
    assert "[line 1] Error at ';': expect expression" in err
    assert "[line 1] RuntimeError: operands of '-' must be numbers" in err
    assert '>> 5\n' in out


def test_empty_line_is_ignored():
    out, _ = run_shell('1;\n\nexit\n')
    # the previous line is not repeated
    assert out.count('1\n') == 1


def test_end_of_input_quits():
    out, _ = run_shell('var a = 1;\n')
    assert out.endswith('\nGoodbye!\n')
