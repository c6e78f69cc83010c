"""Read-eval-print driver and its line source."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Protocol, TextIO

from mallet import Value
from mallet.builtin.env_builtin import register
from mallet.config import PROMPT, configure_logging
from mallet.errors import EvalError, MalletError
from mallet.evaluation.evaluator import evaluate
from mallet.printer import pr_str
from mallet.reader.parser import read_str
from mallet.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Holds the root environment and runs one line at a time through
    read -> eval -> print. Failures at any stage come back as printed
    Error values; definitions persist between lines.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env = env

    def read(self, line: str) -> Value:
        return read_str(line)

    def eval(self, form: Value) -> Value:
        try:
            return evaluate(form, self.env)
        except RecursionError:
            raise EvalError("nesting too deep") from None

    def print(self, value: Value) -> str:
        return pr_str(value, readable=True)

    def rep(self, line: str) -> str:
        try:
            result = self.eval(self.read(line))
        except MalletError as e:
            logger.debug("%s: %s", type(e).__name__, e.message)
            result = e.to_value()
        return self.print(result)


class LineSource(Protocol):
    def read_line(self) -> Optional[str]:
        """Return the next line, or None once input has ended."""


class ReadlineSource:
    """Interactive line source with line editing; records lines in history when asked."""

    def __init__(self, prompt: str = PROMPT, record: bool = True):
        self.prompt = prompt
        self.record = record
        try:
            import readline
        except ImportError:
            # No GNU readline on this platform: plain input() without editing
            readline = None
        else:
            readline.set_auto_history(False)
        self._readline = readline

    def read_line(self) -> Optional[str]:
        try:
            line = input(self.prompt)
        except EOFError:
            return None
        if self.record and line and self._readline is not None:
            self._readline.add_history(line)
        return line


def repl(interp: Interpreter, source: LineSource, out: TextIO = sys.stdout) -> None:
    """Feed lines from `source` through `interp` until the source is exhausted."""
    logger.info("repl started")
    while True:
        line = source.read_line()
        if line is None:
            break
        output = interp.rep(line)
        if output:
            out.write(output + "\n")
    logger.info("repl finished")


def main() -> int:
    configure_logging()
    repl(Interpreter(), ReadlineSource())
    return 0


if __name__ == "__main__":
    sys.exit(main())
