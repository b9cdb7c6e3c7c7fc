"""Interactive mode for the Lox interpreter. Uses cmd as backend."""

import cmd

from .session import Session


class Shell(cmd.Cmd):
    """Lox interpreter shell.

    Every line is run in the same interactive session, so variables
    declared on one line stay visible on the next. Bare expression
    statements echo their value. An error is reported and the prompt comes
    back; it never ends the session.
    """
    intro = "Lox interpreter :: Python backend\nType 'exit' or press Ctrl-D to quit."
    prompt = ">> "

    def __init__(self, sess: Session, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess

    def default(self, line):
        """Executes an arbitrary line of Lox source."""
        self.sess.reset_errors()
        self.sess.run(line)

    def onecmd(self, line):
        # cmd.Cmd would route 'print x;' to a do_print method; every line that
        # is not a shell command is Lox source
        if line.strip() in ('exit', 'EOF'):
            return super().onecmd(line)
        if not line.strip():
            return self.emptyline()
        return self.default(line)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        self.stdout.write("\n")
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        self.stdout.write("Goodbye!\n")
        return True
