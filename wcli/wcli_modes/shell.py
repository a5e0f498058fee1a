"""
Shell mode (``cmd``): run Linux commands on the remote host.

Lines starting with ``sudo`` get the root password piped in ahead of them.
"""

from typing import Callable, Dict

from wcli.repl import ModeREPL
from wcli.wcli_src import builder


class ShellMode(ModeREPL):
    name = "cmd"
    help_rows = [
        ("any", "run a Linux cmd, ensure syntax is correct"),
        ("sudo <cmd>", "run a Linux cmd as root"),
        ("install", "install a package"),
        ("remove", "uninstall a package"),
        ("clear", "clears the terminal"),
        ("exit", "exit cmd"),
    ]

    def keywords(self) -> Dict[str, Callable[[str], None]]:
        keywords = super().keywords()
        keywords.update({
            "sudo": self.run_sudo,
            "install": self.install,
            "remove": self.remove,
        })
        return keywords

    def classify(self, line: str) -> str:
        parts = line.split(maxsplit=1)
        return parts[0] if parts else ""

    def default(self, line: str):
        self.execute(builder.plain(line.strip()))

    def run_sudo(self, line: str):
        self.execute(builder.privileged(line.strip(), self.config.password))

    def install(self, _line: str = ""):
        self._package("install")

    def remove(self, _line: str = ""):
        self._package("remove")

    def _package(self, action: str):
        name = self.ui.ask("Package")
        if not name:
            self.ui.warn(f"No package given, nothing to {action}")
            return
        self.execute(builder.package(action, name, self.config.password, self.config.package_manager))
