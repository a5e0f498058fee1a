"""
Git mode: run commands inside a repository directory on the remote host.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from wcli.repl import ModeREPL
from wcli.wcli_src import builder


@dataclass
class GitSession:
    directory: str = ""


class GitMode(ModeREPL):
    name = "git"
    help_rows = [
        ("any", "run a git command, ensure syntax is correct"),
        ("change", "change git directory"),
        ("clear", "clears the terminal"),
        ("exit", "exit git"),
    ]

    def __init__(self, executor, ui):
        super().__init__(executor, ui)
        self.session = GitSession()

    def keywords(self) -> Dict[str, Callable[[str], None]]:
        keywords = super().keywords()
        keywords["change"] = self.change
        return keywords

    def enter(self):
        self.session.directory = self.ui.ask("Repo path")
        super().enter()

    def change(self, _line: str = ""):
        """Point the session at a different repository."""
        self.enter()

    def default(self, line: str):
        self.execute(builder.scoped(self.session.directory, line.strip()))
