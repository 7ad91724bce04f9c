"""Interactive session loop for malpy.

Reads a line, keeps reading continuation lines while the reader reports
unterminated input, evaluates the first form and prints the value or
`error: <message>`. Only the interpreter's root Environment persists between
iterations.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, TextIO

from malpy import config
from malpy.errors import MalError
from malpy.evaluation.special_forms import SPECIAL_FORMS
from malpy.interpreter import Interpreter

try:
    import readline
except ImportError:  # not available on every platform
    readline = None

logger = logging.getLogger(__name__)


class REPL:
    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        input_fn: Callable[[str], str] = input,
        out: TextIO | None = None,
        history_file: Optional[Path] = None,
    ):
        self.interp = interp or Interpreter()
        self.input_fn = input_fn
        self.out = out or sys.stdout
        self.history_file = history_file
        self.prompt = config.get_prompt()
        self.continuation_prompt = config.get_continuation_prompt()
        self._candidates: list[str] = []

    # --- line editing ---
    def complete(self, text: str, state: int) -> Optional[str]:
        if state == 0:
            names = {str(s) for s in SPECIAL_FORMS}
            names.update(self.interp.env.natives)
            names.update(str(s) for s in self.interp.env.vars)
            self._candidates = sorted(n for n in names if n.startswith(text))
        try:
            return self._candidates[state]
        except IndexError:
            return None

    def start(self) -> None:
        if readline is None:
            return
        readline.set_completer(self.complete)
        readline.set_completer_delims(" ()[]{};,\"")
        readline.parse_and_bind("tab: complete")
        if self.history_file is None:
            return
        readline.set_history_length(1000)
        try:
            readline.read_history_file(self.history_file)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not read history file %s: %s", self.history_file, e)

    def stop(self) -> None:
        if readline is None or self.history_file is None:
            return
        try:
            readline.write_history_file(self.history_file)
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.history_file, e)

    # --- loop ---
    def read_source(self) -> str:
        """Read one line, plus continuation lines until the input is complete.

        Raises EOFError when input ends before any line is read.
        """
        lines = [self.input_fn(self.prompt)]
        while not self.interp.is_complete("\n".join(lines)):
            try:
                lines.append(self.input_fn(self.continuation_prompt))
            except EOFError:
                # report the unterminated input rather than dropping it
                break
        return "\n".join(lines)

    def rep(self, source: str) -> Optional[str]:
        if not source.strip():
            return None
        try:
            return self.interp.rep(source)
        except MalError as e:
            logger.debug("error reported for %r: %r", source, e)
            return f"error: {e}"

    def run(self) -> None:
        self.start()
        try:
            while True:
                try:
                    source = self.read_source()
                except EOFError:
                    self.out.write("\n")
                    break
                result = self.rep(source)
                if result is not None:
                    self.out.write(result + "\n")
                    self.out.flush()
        except KeyboardInterrupt:
            self.out.write("\n")
        finally:
            self.stop()


def run_file(interp: Interpreter, path: Path) -> int:
    try:
        interp.eval(path.read_text(encoding="utf-8"))
    except MalError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="malpy", description="malpy interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="source file to evaluate, then exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.get_log_level())

    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.file is not None:
        return run_file(interp, args.file)

    REPL(interp, history_file=config.get_history_file()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
