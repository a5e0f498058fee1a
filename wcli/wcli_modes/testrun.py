"""
Test mode: run a Python test suite on the remote host inside a virtualenv.

Unlike the other modes this one is a single prompted invocation rather than
a loop; every parameter is asked for each time.
"""

import logging
import time

from wcli.wcli_src import builder
from wcli.wcli_src.executor import RemoteExecutor
from wcli.wcli_src.transport import ExecutionOutcome
from wcli.wcli_src.ui import TerminalUI

logger = logging.getLogger(__name__)


class UnitTestMode:
    name = "test"

    def __init__(self, executor: RemoteExecutor, ui: TerminalUI):
        self.executor = executor
        self.config = executor.config
        self.ui = ui

    def run(self) -> ExecutionOutcome:
        directory = self.ui.ask("Repo path")
        venv = self.ui.ask("venv name")
        tests = self.ui.ask("Tests path")

        command = builder.unittest(directory, venv, tests, self.config.test_runner)

        start = time.monotonic()
        outcome = self.executor.run(command)
        elapsed = int(time.monotonic() - start)

        if outcome.succeeded:
            self.ui.info(f"\n[green]All tests passed in {elapsed}s[/green]")
        else:
            self.ui.info(f"\n[red]Tests failed after {elapsed}s[/red]")
        self.ui.show_outcome(outcome)

        logger.debug("Test run in %s finished in %ss (ok=%s)", directory, elapsed, outcome.succeeded)
        return outcome
