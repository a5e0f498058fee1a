"""
SSH transport for WCLI.

Runs each remote command through the system ``ssh`` binary so the user's
existing ssh setup (known hosts, agent, config) applies unchanged.
"""

import logging
import subprocess
import time
from dataclasses import dataclass
from typing import List

from wcli.wcli_core.config import Config
from wcli.wcli_core.errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionOutcome:
    """Result of one remote command execution."""
    succeeded: bool
    stdout: str
    stderr: str
    elapsed: float
    returncode: int = 0

    @property
    def output(self) -> str:
        """Text to show the user: stdout on success, otherwise stderr (or stdout if stderr is empty)."""
        if self.succeeded:
            return self.stdout
        return self.stderr or self.stdout


class SSHTransport:
    """Executes a fully formed command string on the remote host."""

    def __init__(self, config: Config):
        self.config = config

    def argv(self, command: str) -> List[str]:
        """Build the local argv; the remote command is passed as one verbatim argument."""
        return [
            self.config.ssh_binary,
            "-i", self.config.pem,
            *self.config.ssh_options,
            self.config.host,
            command,
        ]

    def execute(self, command: str) -> ExecutionOutcome:
        start = time.perf_counter()
        try:
            result = subprocess.run(
                self.argv(command),
                capture_output=True,
                text=True,
                errors="replace",
                stdin=subprocess.DEVNULL,
                timeout=self.config.command_timeout,
            )
        except subprocess.TimeoutExpired as e:
            elapsed = time.perf_counter() - start
            logger.warning("Remote command timed out after %.1fs", elapsed)
            return ExecutionOutcome(
                succeeded=False,
                stdout=_text(e.stdout),
                stderr=f"command timed out after {self.config.command_timeout:g}s",
                elapsed=elapsed,
                returncode=-1,
            )
        except OSError as e:
            raise TransportError(f"failed to execute {self.config.ssh_binary}: {e}") from e

        return ExecutionOutcome(
            succeeded=result.returncode == 0,
            stdout=result.stdout or "",
            stderr=result.stderr or "",
            elapsed=time.perf_counter() - start,
            returncode=result.returncode,
        )


def _text(data) -> str:
    # TimeoutExpired carries raw bytes even when text=True was requested
    if data is None:
        return ""
    if isinstance(data, bytes):
        return data.decode("utf-8", errors="replace")
    return data
