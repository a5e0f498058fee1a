import logging
from datetime import datetime

from wcli.wcli_core.config import Config
from wcli.wcli_core.errors import ConnectionCheckError
from wcli.wcli_src import builder
from wcli.wcli_src.transport import ExecutionOutcome, SSHTransport
from wcli.wcli_src.ui import TerminalUI

logger = logging.getLogger(__name__)

CONNECTIVITY_CHECK = "echo test"


class RemoteExecutor:
    """Drives commands through the transport behind a spinner."""

    def __init__(self, config: Config, transport=None, ui: TerminalUI = None):
        self.config = config
        self.transport = transport or SSHTransport(config)
        self.ui = ui or TerminalUI()

    def run(self, command: str) -> ExecutionOutcome:
        """Execute one remote command and return its outcome."""
        logger.debug("Running on %s: %s", self.config.host, builder.redact(command, self.config.password))

        with self.ui.status():
            outcome = self.transport.execute(command)

        logger.debug(
            "Finished in %.3fs (exit %s, ok=%s)", outcome.elapsed, outcome.returncode, outcome.succeeded
        )
        return outcome

    def test_connectivity(self) -> ExecutionOutcome:
        """
        Check the remote host answers before any user command runs.

        Raises:
            ConnectionCheckError: the host could not be reached.
        """
        outcome = self.run(CONNECTIVITY_CHECK)
        if not outcome.succeeded:
            logger.error("Connectivity check failed: %s", outcome.output.strip())
            raise ConnectionCheckError(f"unable to connect to {self.config.host}")

        when = datetime.now().strftime("%a %b %e at %H:%M:%S")
        self.ui.show_connected(self.config.host, outcome.elapsed, when)
        return outcome

    def test_sql_connectivity(self) -> ExecutionOutcome:
        """
        Check that mariadb accepts the root password on the remote host.

        Raises:
            ConnectionCheckError: mariadb could not be reached.
        """
        outcome = self.run(builder.sql_check(self.config.password))
        if not outcome.succeeded:
            logger.error("mariadb check failed: %s", outcome.output.strip())
            raise ConnectionCheckError("unable to connect to mariadb")

        self.ui.show_connected("mariadb", outcome.elapsed)
        return outcome
