"""CLI entry point for the Lox interpreter.

Usage:
    python -m plox [-v|-vv|-vvv] [script]
    python -m plox [-v...] --emit-ast <script>
    python -m plox [-v...] --ast <ast_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Parse the given script and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file

Without a script the interpreter starts an interactive prompt; type `exit`
or press Ctrl-D to leave it. Debug information is written to `debug.txt`
in the current directory when verbosity is greater than zero.

Exit statuses: 0 on success, 64 for invalid usage, 65 when the script has
lexical or syntax errors, 66 when an input file cannot be read and 70 when
the script fails at runtime.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from .ast_json import program_from_obj, program_to_obj
from .interpreter import SessionMode
from .session import EXIT_DATAERR, EXIT_NOINPUT, EXIT_OK, EXIT_USAGE, Session
from .shell import Shell


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def read_source(path: Path) -> Optional[str]:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        print(f"Error: cannot read {path}: {e.strerror}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = ArgumentParser(prog='plox', description="Lox language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='LOX_FILE', help='emit AST JSON for the given .lox file')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    parser.add_argument('script', nargs='?', help='Lox script (.lox) to execute; omit for an interactive prompt')
    args = parser.parse_args(argv)

    # Emit AST mode
    if args.emit_ast:
        program_file = Path(args.emit_ast)
        source = read_source(program_file)
        if source is None:
            return EXIT_NOINPUT
        session = Session()
        statements = session.parse(source)
        if statements is None:
            return session.exit_status
        try:
            text = json.dumps(program_to_obj(statements), ensure_ascii=False, indent=2)
        except RecursionError:
            print(f"Error: {program_file} is nested too deeply to emit as AST JSON", file=sys.stderr)
            return EXIT_DATAERR
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            out.write(text)
        print(str(out_path))
        return EXIT_OK

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        source = read_source(ast_path)
        if source is None:
            return EXIT_NOINPUT
        try:
            statements = program_from_obj(json.loads(source))
        except (ValueError, TypeError, KeyError, RecursionError) as e:
            print(f"Error: {ast_path} is not a valid AST file: {e}", file=sys.stderr)
            return EXIT_DATAERR
        session = Session(debug_level=args.v)
        try:
            session.execute(statements)
        finally:
            session.close()
        return session.exit_status

    # Interactive prompt
    if not args.script:
        session = Session(mode=SessionMode.INTERACTIVE, debug_level=args.v)
        try:
            Shell(session).cmdloop()
        except KeyboardInterrupt:
            print()
        finally:
            session.close()
        return EXIT_OK

    # Default: execute script file
    source = read_source(Path(args.script))
    if source is None:
        return EXIT_NOINPUT
    session = Session(debug_level=args.v)
    try:
        session.run(source)
    finally:
        session.close()
    return session.exit_status


if __name__ == '__main__':
    sys.exit(main())
