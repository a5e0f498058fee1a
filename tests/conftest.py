"""Shared fixtures for WCLI tests."""

import io
from typing import Callable, List, Optional

import pytest
from rich.console import Console

from wcli.wcli_core.config import Config
from wcli.wcli_src.executor import RemoteExecutor
from wcli.wcli_src.transport import ExecutionOutcome
from wcli.wcli_src.ui import TerminalUI


class FakeTransport:
    """Records commands and replays queued outcomes (success with empty output by default)."""

    def __init__(self, outcomes: Optional[List[ExecutionOutcome]] = None, echo: bool = False):
        self.outcomes = list(outcomes or [])
        self.echo = echo
        self.commands: List[str] = []

    def queue(self, *outcomes: ExecutionOutcome) -> None:
        self.outcomes.extend(outcomes)

    def execute(self, command: str) -> ExecutionOutcome:
        self.commands.append(command)
        if self.outcomes:
            return self.outcomes.pop(0)
        return ExecutionOutcome(
            succeeded=True, stdout=command if self.echo else "", stderr="", elapsed=0.01
        )


def ok(stdout: str = "", elapsed: float = 0.01) -> ExecutionOutcome:
    return ExecutionOutcome(succeeded=True, stdout=stdout, stderr="", elapsed=elapsed)


def failed(stderr: str = "", stdout: str = "", returncode: int = 1) -> ExecutionOutcome:
    return ExecutionOutcome(
        succeeded=False, stdout=stdout, stderr=stderr, elapsed=0.01, returncode=returncode
    )


@pytest.fixture
def config() -> Config:
    return Config(password="pw", pem="/keys/host.pem", host="ec2-user@example.com")


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_ui() -> Callable[..., TerminalUI]:
    """Build a UI that reads the given lines and records everything printed."""

    def _make(*lines: str) -> TerminalUI:
        console = Console(file=io.StringIO(), width=200, color_system=None, force_terminal=False)
        stream = io.StringIO("".join(f"{line}\n" for line in lines))
        return TerminalUI(console=console, stream=stream)

    return _make


@pytest.fixture
def make_executor(config: Config, transport: FakeTransport) -> Callable[[TerminalUI], RemoteExecutor]:
    def _make(ui: TerminalUI) -> RemoteExecutor:
        return RemoteExecutor(config, transport, ui)

    return _make


def printed(ui: TerminalUI) -> str:
    return ui.console.file.getvalue()
