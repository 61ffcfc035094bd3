"""Host record model — the parsed view of one known_hosts line."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HostRecord:
    """A single known_hosts entry: ``[name][,address] keytype publickey``."""

    name: str = ""
    address: str = ""
    key_type: str = ""
    public_key: str = ""

    @property
    def label(self) -> str:
        """Human-readable host: ``name, address``, or whichever is set."""
        if self.name and self.address:
            return f"{self.name}, {self.address}"
        return self.name or self.address
