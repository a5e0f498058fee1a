from wcli.wcli_src.executor import RemoteExecutor
from wcli.wcli_src.transport import ExecutionOutcome, SSHTransport
from wcli.wcli_src.ui import TerminalUI

__all__ = ["ExecutionOutcome", "RemoteExecutor", "SSHTransport", "TerminalUI"]
