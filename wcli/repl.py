"""
REPL loop shared by the top-level prompt and every WCLI mode.
"""

import logging
from typing import Callable, Dict, List, Tuple

from wcli.wcli_src.executor import RemoteExecutor
from wcli.wcli_src.transport import ExecutionOutcome
from wcli.wcli_src.ui import MODE_PROMPT, TerminalUI

logger = logging.getLogger(__name__)


class ModeREPL:
    """
    Read-classify-dispatch-report loop.

    Subclasses set ``name`` and ``help_rows``, register extra keywords in
    ``keywords()`` and implement ``default()`` for lines that are not
    keywords. ``enter()`` runs once before the first prompt and is where
    session state gets set up.
    """

    name = "mode"
    prompt = MODE_PROMPT
    help_rows: List[Tuple[str, str]] = []

    def __init__(self, executor: RemoteExecutor, ui: TerminalUI):
        self.executor = executor
        self.config = executor.config
        self.ui = ui
        self._should_exit = False

    def keywords(self) -> Dict[str, Callable[[str], None]]:
        return {
            "exit": self.exit_mode,
            "clear": self.clear_screen,
            "help": self.show_help,
        }

    def classify(self, line: str) -> str:
        """Return the keyword a line maps to; non-keywords fall through to ``default``."""
        return line.strip()

    def dispatch(self, line: str):
        handler = self.keywords().get(self.classify(line))
        if handler is not None:
            handler(line)
        else:
            self.default(line)

    def default(self, line: str):
        raise NotImplementedError

    def enter(self):
        self.ui.hint()

    def run(self):
        """Run the loop until ``exit`` or end of input."""
        self._should_exit = False
        logger.debug("Entering %s mode", self.name)
        self.enter()

        while not self._should_exit:
            try:
                line = self.ui.read_line(self.prompt)
                if line.strip():
                    self.dispatch(line)
            except EOFError:
                logger.debug("End of input in %s mode", self.name)
                break
            except KeyboardInterrupt:
                self.ui.warn("KeyboardInterrupt")

        logger.debug("Leaving %s mode", self.name)

    # ---- common keywords ----
    def exit_mode(self, _line: str = ""):
        self._should_exit = True

    def clear_screen(self, _line: str = ""):
        self.ui.clear()

    def show_help(self, _line: str = ""):
        self.ui.show_help(self.help_rows)

    # ---- helpers ----
    def execute(self, command: str) -> ExecutionOutcome:
        outcome = self.executor.run(command)
        self.ui.show_outcome(outcome)
        return outcome
