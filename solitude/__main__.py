"""CLI entry point for the Solitude interpreter.

Usage:
    python -m solitude [-v|-vv|-vvv] [--debug-file PATH] <script_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --debug-file  Where debug information goes (default: debug.txt)

Debug information is written to the debug file only when verbosity is
greater than zero. Runtime errors in the script are reported on stderr
and never stop the run; only a missing script stops it before it starts.
"""

import argparse
import sys

from .errors import UnreadableScript
from .interpreter import Interpreter, load_script


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='solitude', description="Solitude language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--debug-file', default='debug.txt', metavar='PATH', help='file receiving debug output')
    parser.add_argument('script', nargs='?', help='Solitude script file to execute')
    args = parser.parse_args(argv)

    if not args.script:
        parser.print_usage()
        return
    try:
        lines = load_script(args.script)
    except UnreadableScript as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    interpreter = Interpreter(debug_level=args.v, debug_file=args.debug_file)
    interpreter.run(lines)


if __name__ == '__main__':
    main()
