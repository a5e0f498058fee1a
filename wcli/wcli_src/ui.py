"""Terminal cosmetics for WCLI: banner, prompts, spinner and output panels."""

from typing import IO, Iterable, Optional, Tuple

from rich import box
from rich.console import Console
from rich.status import Status
from rich.table import Table
from rich.text import Text

from wcli.wcli_core import get_version
from wcli.wcli_src.transport import ExecutionOutcome

TITLE = "WCLI 2025"
WEBSITE = "https://github.com/Taghunter98/wcli.git"

LOGO = r"""
                 _  _
                | |(_)
 __      __ ___ | | _   {title}
 \ \ /\ / // __|| || |  {version}
  \ V  V /| (__ | || |
   \_/\_/  \___||_||_|  {website}
"""

MODE_PROMPT = "[magenta]>>> [/magenta] "


class TerminalUI:
    """
    All terminal input and output goes through here.

    ``stream`` replaces stdin when given, which is how scripted sessions
    feed lines in.
    """

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        self.console = console or Console()
        self.stream = stream

    # ---- input ----
    def read_line(self, prompt: str = MODE_PROMPT) -> str:
        """Read one line; raises EOFError when input is exhausted."""
        line = self.console.input(prompt, stream=self.stream)
        if self.stream is not None and line == "":
            raise EOFError
        return line.rstrip("\n")

    def ask(self, message: str) -> str:
        return self.read_line(f"[bold blue]{message}[/bold blue]: ").strip()

    # ---- output ----
    def show_header(self):
        """Display the application banner."""
        logo = LOGO.format(title=TITLE, version=f"Version {get_version()}", website=WEBSITE)
        self.console.print(Text(logo, style="bold"))

    def greet(self, user: str):
        self.console.print(f"Welcome to WCLI {capitalise(user)}! Run 'help' for commands\n")

    def hint(self):
        self.console.print("Run 'help' for commands\n")

    def clear(self):
        self.console.clear()

    def status(self, description: str = "Running") -> Status:
        """Spinner shown while a remote command is in flight."""
        return self.console.status(f"[cyan]{description}[/cyan]", spinner="dots")

    def show_outcome(self, outcome: ExecutionOutcome):
        """
        Write remote output verbatim.

        Bypasses rich rendering entirely: no markup, no wrapping at console
        width, no tab expansion (mariadb batch output is tab-separated).
        """
        text = outcome.output
        if not text.endswith("\n"):
            text += "\n"
        self.console.file.write(text)
        self.console.file.flush()

    def show_connected(self, target: str, elapsed: float, when: Optional[str] = None):
        suffix = f" on {when}" if when else ""
        self.console.print(f"[green]Connected[/green] to {target}{suffix} in {format_elapsed(elapsed)}\n")

    def show_help(self, rows: Iterable[Tuple[str, str]], title: str = "COMMANDS"):
        table = Table(title=title, box=box.SIMPLE, show_header=False, title_justify="left")
        table.add_column("Command", style="cyan", no_wrap=True)
        table.add_column("Description", style="white")
        for command, description in rows:
            table.add_row(f"'{command}'", description)
        self.console.print(table)

    def info(self, message: str):
        self.console.print(message, highlight=False)

    def warn(self, message: str):
        self.console.print(f"[yellow]⚠️ {message}[/yellow]")

    def error(self, message: str):
        self.console.print(f"[red]❌ {message}[/red]")


def capitalise(user: str) -> str:
    return user[:1].upper() + user[1:]


def format_elapsed(seconds: float) -> str:
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.2f}s"
