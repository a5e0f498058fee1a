"""
SQL mode: run queries against mariadb on the remote host as root.

Entering the mode (and every ``change``) first checks that mariadb accepts
the root password; a failed check is fatal.
"""

from dataclasses import dataclass
from typing import Callable, Dict

from wcli.repl import ModeREPL
from wcli.wcli_src import builder


@dataclass
class SqlSession:
    database: str = ""


class SqlMode(ModeREPL):
    name = "sql"
    help_rows = [
        ("any", "run a sql query, ensure syntax is correct"),
        ("database", "show current database"),
        ("change", "change database"),
        ("clear", "clears the terminal"),
        ("exit", "exit sql"),
    ]

    def __init__(self, executor, ui):
        super().__init__(executor, ui)
        self.session = SqlSession()

    def keywords(self) -> Dict[str, Callable[[str], None]]:
        keywords = super().keywords()
        keywords.update({
            "database": self.show_database,
            "change": self.change,
        })
        return keywords

    def enter(self):
        self.executor.test_sql_connectivity()
        self.session.database = self.ui.ask("Database")
        super().enter()

    def change(self, _line: str = ""):
        self.enter()

    def show_database(self, _line: str = ""):
        self.ui.info(f"In database: {self.session.database}")

    def default(self, line: str):
        self.execute(builder.sql_query(self.session.database, line.strip(), self.config.password))
