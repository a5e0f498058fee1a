from wcli.wcli_core.config import Config
from wcli.wcli_core.errors import ConfigError, ConnectionCheckError, TransportError, WCLIError

__version__ = "1.0.0"


def get_version() -> str:
    return __version__


__all__ = [
    "Config",
    "ConfigError",
    "ConnectionCheckError",
    "TransportError",
    "WCLIError",
    "get_version",
]
