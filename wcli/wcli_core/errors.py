"""Exception types raised by the WCLI core."""


class WCLIError(Exception):
    """Base class for errors that abort WCLI."""


class ConfigError(WCLIError):
    """Required configuration is missing or invalid."""


class TransportError(WCLIError):
    """The local ssh process could not be started."""


class ConnectionCheckError(WCLIError):
    """A startup connectivity self-test failed."""
