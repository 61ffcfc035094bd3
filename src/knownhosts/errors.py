"""Exception hierarchy shared by the store, parser, CLI and TUI."""

from __future__ import annotations

from pathlib import Path


class KnownHostsError(Exception):
    """Base class for all knownhosts errors."""


class NoHomeDirError(KnownHostsError):
    """The user's home directory could not be determined."""


class HostsFileError(KnownHostsError):
    """An I/O failure on the known_hosts file."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path


class ReadFailure(HostsFileError):
    """The known_hosts file could not be read."""


class WriteFailure(HostsFileError):
    """The known_hosts file could not be written."""


class InvalidFormat(KnownHostsError, ValueError):
    """A single known_hosts line does not have the expected shape."""

    def __init__(self, line: str, reason: str = "invalid input string") -> None:
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason
