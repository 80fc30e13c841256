"""Interactive read-eval-print loop for sublisp.

Lines typed at the prompt are kept in the readline history, which is loaded
from and written back to the configured history file.
"""

from __future__ import annotations

import logging
import readline
from pathlib import Path
from typing import Callable, Optional

from sublisp import config
from sublisp.interpreter import Interpreter

logger = logging.getLogger(__name__)


class REPL:
    def __init__(
        self,
        interp: Interpreter | None = None,
        history: Path | None = None,
        prompt: str | None = None,
        reader: Callable[[str], str] = input,
        writer: Callable[[str], None] = print,
    ):
        self.interp = interp or Interpreter()
        self.history = history if history is not None else config.get_history_path()
        self.prompt = prompt if prompt is not None else config.get_prompt()
        self.reader = reader
        self.writer = writer

    def complete(self, text: str, state: int) -> Optional[str]:
        m = [k for k in self.interp.ctx.names() if k.startswith(text)]
        try:
            return m[state]
        except IndexError:
            return None

    def register(self) -> None:
        readline.set_history_length(config.get_history_length())
        readline.set_completer(self.complete)
        readline.set_completer_delims(" ()'\"")
        readline.parse_and_bind("tab: complete")

    def load_history(self) -> None:
        try:
            readline.read_history_file(self.history)
            logger.debug("loaded history from %s", self.history)
        except FileNotFoundError:
            logger.debug("no history file at %s yet", self.history)
        except OSError as e:
            logger.warning("could not read history file %s: %s", self.history, e)

    def save_history(self) -> None:
        try:
            readline.write_history_file(self.history)
            logger.debug("saved history to %s", self.history)
        except OSError as e:
            logger.warning("could not write history file %s: %s", self.history, e)

    def step(self, line: str) -> bool:
        """Handle one input line; returns False when the session should end."""
        line = line.strip()
        if not line:
            return True

        readline.add_history(line)
        output = self.interp.run(line)
        if output is None:
            self.writer("")
            return False

        if output.startswith(">"):
            self.writer(f"{output}\n")
        else:
            self.writer(output)
        return True

    def start(self) -> None:
        self.register()
        self.load_history()
        self.writer("")

        try:
            while True:
                try:
                    line = self.reader(self.prompt)
                except EOFError:
                    self.writer("")
                    break
                if not self.step(line):
                    break
        except KeyboardInterrupt:
            self.writer("")
        finally:
            self.save_history()


def main() -> None:
    logging.basicConfig(level=config.get_log_level())
    REPL().start()


if __name__ == "__main__":
    main()
