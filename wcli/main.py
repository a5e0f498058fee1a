#!/usr/bin/env python3
"""
WCLI
An interactive shell for running commands on a remote host over SSH.

Modes:
  cmd   Linux commands (sudo, package install/remove)
  git   git commands inside a repository directory
  sql   mariadb queries against a database
  test  Python unit tests inside a virtualenv
"""

# standard libraries
import argparse
import getpass
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, Dict, List, Optional

# rich libraries
import rich_argparse
from rich.console import Console
from rich.markup import escape

from wcli.repl import ModeREPL
from wcli.wcli_core import Config, WCLIError, get_version
from wcli.wcli_core.config import DEFAULT_ENV_FILE
from wcli.wcli_modes import GitMode, ShellMode, SqlMode, UnitTestMode
from wcli.wcli_src.executor import RemoteExecutor
from wcli.wcli_src.transport import SSHTransport
from wcli.wcli_src.ui import TerminalUI

logger = logging.getLogger("wcli")

console = Console()


def get_user() -> str:
    """Local login name, or ``user`` when it cannot be determined."""
    try:
        return getpass.getuser() or "user"
    except (KeyError, OSError):
        return "user"


# ---- Top-level dispatcher ----
class WCLI(ModeREPL):
    """Top-level prompt that routes mode keywords to their interpreters."""

    name = "wcli"
    help_rows = [
        ("cmd", "run a Linux command"),
        ("test", "run Python unit tests"),
        ("git", "run a git command in a repository"),
        ("sql", "run a sql query, run 'help' for assistance"),
        ("clear", "clear the terminal"),
        ("exit", "exit wcli"),
    ]

    def __init__(self, executor: RemoteExecutor, ui: TerminalUI, user: Optional[str] = None):
        super().__init__(executor, ui)
        self.user = user or get_user()
        self.prompt = escape(f"[{self.user}@wcli ~]$ ")

    def keywords(self) -> Dict[str, Callable[[str], None]]:
        keywords = super().keywords()
        keywords.update({
            "cmd": lambda _line: ShellMode(self.executor, self.ui).run(),
            "git": lambda _line: GitMode(self.executor, self.ui).run(),
            "sql": lambda _line: SqlMode(self.executor, self.ui).run(),
            "test": lambda _line: UnitTestMode(self.executor, self.ui).run(),
        })
        return keywords

    def enter(self):
        pass

    def default(self, line: str):
        self.ui.info("invalid command, run 'help' for commands")

    def start(self):
        """Show the banner, check the host is reachable, then hand over to the prompt."""
        self.ui.show_header()
        self.ui.greet(self.user)
        self.executor.test_connectivity()
        self.run()


def configure_logging(debug: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def positive_float(value: str) -> float:
    """argparse type for ``--timeout``: a number of seconds greater than zero."""
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid timeout {value!r}, expected a number of seconds")
    if seconds <= 0:
        raise argparse.ArgumentTypeError(f"invalid timeout {value!r}, must be greater than zero")
    return seconds


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wcli",
        description="WCLI - run commands on a remote host over SSH",
        formatter_class=rich_argparse.RichHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=DEFAULT_ENV_FILE,
        help="dotenv file holding PASS, PEM and EC2 (default: .env)",
    )
    parser.add_argument(
        "--timeout",
        type=positive_float,
        help="seconds before a remote command is abandoned (default: no timeout)",
    )
    parser.add_argument("--debug", action="store_true", help="verbose logging and tracebacks")
    parser.add_argument("--version", action="version", version=f"WCLI {get_version()}")
    return parser


def create_app(config: Config, ui: Optional[TerminalUI] = None, transport=None) -> WCLI:
    ui = ui or TerminalUI(console)
    executor = RemoteExecutor(config, transport or SSHTransport(config), ui)
    return WCLI(executor, ui)


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.debug)

    config = Config.load(args.env_file)
    if args.timeout is not None:
        config = replace(config, command_timeout=args.timeout)

    logger.debug("Connecting to %s with key %s", config.host, config.pem)
    create_app(config).start()
    return 0


def main():
    """Main entry point with error handling."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        console.print("\n[yellow]⚠️ Operation cancelled by user.[/yellow]")
        sys.exit(130)
    except WCLIError as e:
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        if "--debug" in sys.argv:
            import traceback
            console.print("[dim]Debug traceback:[/dim]")
            console.print(traceback.format_exc(), markup=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
