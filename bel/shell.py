"""
Interactive shell for Bel.

Lines starting with ':' are shell commands; anything else is read as a
single Bel expression and evaluated with empty locals. Errors are reported
and the loop carries on. Commands only inspect interpreter state:

    :globals :primitives :functions :macros    list names
    :get NAME                                  show a global binding
    :fn NAME                                   dump a function literal as a tree
    :parse CODE                                show how CODE reads
    :load PATH [LIMIT]                         evaluate a source file
    :help :quit
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO

from bel.config import get_history_file, get_log_level
from bel.debug_utils.pprint import format_tree
from bel.errors import BelError
from bel.interpreter import Interpreter
from bel.reader.parser import parse
from bel.types.object import format_object

logger = logging.getLogger(__name__)

PROMPT = ">> "


class ShellExit(Exception):
    """Raised by :quit to leave the read loop."""


class Shell:
    def __init__(self, interp: Optional[Interpreter] = None, out: Optional[TextIO] = None):
        # Keep a single interpreter so definitions persist across lines
        self.interp = interp if interp is not None else Interpreter()
        self.out = out if out is not None else sys.stdout
        self.commands: dict[str, Callable[[str], None]] = {
            ":global": self._globals,
            ":globals": self._globals,
            ":primitive": self._primitives,
            ":primitives": self._primitives,
            ":function": self._functions,
            ":functions": self._functions,
            ":macro": self._macros,
            ":macros": self._macros,
            ":get": self._get,
            ":fn": self._fn,
            ":parse": self._parse,
            ":load": self._load,
            ":help": self._help,
            ":quit": self._quit,
        }

    def write(self, text: str) -> None:
        print(text, file=self.out)

    # --- Input handling ---
    def handle(self, line: str) -> None:
        """Process one input line, reporting errors instead of raising them."""
        line = line.strip()
        if not line:
            return
        try:
            if line.startswith(":"):
                self.run_command(line)
            else:
                self.write(format_object(self.interp.eval_expr(parse(line))))
        except ShellExit:
            raise
        except (BelError, OSError, ValueError) as err:
            logger.error("%s: %s", line, err)
            self.write(f"error: {err}")

    def run_command(self, line: str) -> None:
        name, _, arg = line.partition(" ")
        command = self.commands.get(name)
        if command is None:
            raise ValueError(f"unknown shell command {line}")
        command(arg.strip())

    def repl(self, lines: Iterable[str]) -> None:
        try:
            for line in lines:
                self.handle(line)
        except ShellExit:
            pass

    # --- Commands ---
    def _globals(self, _: str) -> None:
        self.write("globals")
        for name in self.interp.global_names():
            self.write(name)

    def _primitives(self, _: str) -> None:
        self.write("primitives")
        for name in self.interp.primitive_names():
            self.write(name)

    def _functions(self, _: str) -> None:
        self.write("functions")
        for name in self.interp.function_names():
            self.write(name)

    def _macros(self, _: str) -> None:
        self.write("macros")
        for name in self.interp.macro_names():
            self.write(name)

    def _get(self, arg: str) -> None:
        if not arg:
            raise ValueError("invalid command: :get <key>")
        self.write(format_object(self.interp.get(arg)))

    def _fn(self, arg: str) -> None:
        if not arg:
            raise ValueError("invalid command: :fn <name>")
        function = self.interp.function(arg)
        self.write(f"parameters = {format_object(function.parameters)}")
        self.write(f"body = {format_object(function.body)}")
        self.out.write(format_tree(self.interp.get(arg)))

    def _parse(self, arg: str) -> None:
        if not arg:
            raise ValueError("invalid command: :parse <code>")
        self.write(format_object(parse(arg)))

    def _load(self, arg: str) -> None:
        if not arg:
            raise ValueError("invalid command: :load <filepath> [limit]")
        path, _, limit = arg.partition(" ")
        count = self.interp.load(path, int(limit) if limit.strip() else None)
        self.write(f"loaded {count} expression(s) from {path}")

    def _help(self, _: str) -> None:
        self.write(__doc__.strip())

    def _quit(self, _: str) -> None:
        raise ShellExit()


# --- Terminal wiring ---
def read_input(prompt: str = PROMPT) -> Iterable[str]:
    """Yield lines typed at the terminal until EOF or interrupt."""
    try:
        while True:
            yield input(prompt)
    except (EOFError, KeyboardInterrupt):
        print('')
        return


def _setup_history(path: Path):
    try:
        import readline
    except ImportError:
        return None
    try:
        readline.read_history_file(path)
    except OSError:
        print("No previous history.")
    return readline


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line interface for the Bel shell."""
    import argparse

    parser = argparse.ArgumentParser(description='Bel - an interactive Bel interpreter')
    parser.add_argument('-l', '--load', help='Bel source file to evaluate before the prompt')
    parser.add_argument('-n', '--limit', type=int, default=None,
                        help='Stop loading after this many expressions')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: BEL_LOG_LEVEL or WARNING)')
    parser.add_argument('--no-history', action='store_true',
                        help='Do not read or write the history file')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_log_level()).upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.info("program starts")

    shell = Shell()
    if args.load:
        try:
            shell.interp.load(args.load, args.limit)
        except (BelError, OSError) as err:
            print(f"error: {err}", file=sys.stderr)
            return 1

    history = None if args.no_history else get_history_file()
    readline = _setup_history(history) if history is not None else None

    shell.repl(read_input())

    if readline is not None:
        try:
            readline.write_history_file(history)
        except OSError as err:
            logger.warning("could not save history to %s: %s", history, err)
    return 0


if __name__ == '__main__':
    sys.exit(main())
