"""
Remote command construction.

Every function here is pure string building. Nothing is quoted or escaped:
WCLI is a single-operator tool and everything typed at its prompts is trusted
as-is. The root password is interpolated in cleartext into privileged
commands (``echo <password> | ...``) and travels to the remote host inside
the command string; use ``redact`` before logging anything built here.
"""

REDACTED = "****"

SQL_CLIENT = "sudo -S mariadb -u root -p"


def plain(command: str) -> str:
    return command


def privileged(command: str, secret: str) -> str:
    """Feed the secret to sudo on stdin ahead of the command."""
    return f"echo {secret} | {command}"


def scoped(directory: str, command: str) -> str:
    return f"cd {directory} && {command}"


def package(action: str, name: str, secret: str, manager: str = "yum") -> str:
    """Install or remove a package with the remote package manager."""
    if action not in ("install", "remove"):
        raise ValueError(f"Unknown package action: {action}")
    return privileged(f"sudo {manager} {action} -y {name}", secret)


def sql_check(secret: str) -> str:
    return privileged(SQL_CLIENT, secret)


def sql_query(database: str, query: str, secret: str) -> str:
    return privileged(f'{SQL_CLIENT} -e "USE {database}; {query}"', secret)


def unittest(directory: str, venv: str, tests: str, runner: str = "python3 -m unittest discover") -> str:
    """Activate ``venv`` inside ``directory`` and run the test runner over ``tests``."""
    return scoped(directory, f"source {venv}/bin/activate && {runner} {tests}")


def redact(command: str, secret: str) -> str:
    if not secret:
        return command
    return command.replace(secret, REDACTED)
