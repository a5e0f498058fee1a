from wcli.wcli_modes.git import GitMode, GitSession
from wcli.wcli_modes.shell import ShellMode
from wcli.wcli_modes.sql import SqlMode, SqlSession
from wcli.wcli_modes.testrun import UnitTestMode

__all__ = ["GitMode", "GitSession", "ShellMode", "SqlMode", "SqlSession", "UnitTestMode"]
