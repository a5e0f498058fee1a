import logging
import os
import shlex
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import dotenv_values

from wcli.wcli_core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = Path(".env")
REQUIRED_KEYS = ("PASS", "PEM", "EC2")


@dataclass(frozen=True)
class Config:
    """Connection settings and credential, loaded once at startup."""
    password: str = field(repr=False)
    pem: str
    host: str
    ssh_binary: str = "ssh"
    ssh_options: List[str] = field(default_factory=list)
    command_timeout: Optional[float] = None
    package_manager: str = "yum"
    test_runner: str = "python3 -m unittest discover"

    @classmethod
    def from_mapping(cls, values: Mapping[str, Optional[str]]) -> "Config":
        """Build a config from raw key/value pairs (``PASS``, ``PEM``, ``EC2``, ``WCLI_*``)."""
        missing = [key for key in REQUIRED_KEYS if not (values.get(key) or "").strip()]
        if missing:
            raise ConfigError(f"Missing required configuration: {', '.join(missing)}")

        options = values.get("WCLI_SSH_OPTIONS") or ""
        try:
            ssh_options = shlex.split(options)
        except ValueError as e:
            raise ConfigError(f"Invalid WCLI_SSH_OPTIONS: {e}") from e

        return cls(
            password=values["PASS"].strip(),
            pem=values["PEM"].strip(),
            host=values["EC2"].strip(),
            ssh_binary=(values.get("WCLI_SSH_BINARY") or "ssh").strip(),
            ssh_options=ssh_options,
            command_timeout=parse_timeout(values.get("WCLI_COMMAND_TIMEOUT")),
            package_manager=(values.get("WCLI_PACKAGE_MANAGER") or "yum").strip(),
            test_runner=(values.get("WCLI_TEST_RUNNER") or "python3 -m unittest discover").strip(),
        )

    @classmethod
    def load(cls, env_file: Optional[Path] = None, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Load configuration from a dotenv file and the process environment.

        Environment variables win over values from the file. A missing env
        file is not an error on its own; missing keys are.
        """
        env_file = env_file or DEFAULT_ENV_FILE
        environ = os.environ if environ is None else environ

        values = {}
        if env_file.exists():
            values.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
            logger.debug("Loaded env file: %s", env_file)
        else:
            logger.debug("No env file at %s, using environment only", env_file)

        for key in (*REQUIRED_KEYS, "WCLI_SSH_BINARY", "WCLI_SSH_OPTIONS", "WCLI_COMMAND_TIMEOUT",
                    "WCLI_PACKAGE_MANAGER", "WCLI_TEST_RUNNER"):
            if environ.get(key):
                values[key] = environ[key]

        return cls.from_mapping(values)


def parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Parse a positive timeout in seconds; anything else disables the timeout."""
    if raw is None or not str(raw).strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("WCLI_COMMAND_TIMEOUT must be a number, got %r. Commands will not time out.", raw)
        return None
    if value <= 0:
        logger.warning("WCLI_COMMAND_TIMEOUT must be > 0, got %s. Commands will not time out.", value)
        return None
    return value
