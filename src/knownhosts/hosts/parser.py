"""Record parser — turn one known_hosts line into a HostRecord."""

from __future__ import annotations

import ipaddress

from knownhosts.errors import InvalidFormat
from knownhosts.hosts.models import HostRecord


def parse_record(line: str) -> HostRecord:
    """Parse ``identifier keytype publickey`` into a HostRecord.

    The line is split on single spaces and must yield exactly three
    fields. Key material is not validated.
    """
    fields = line.split(" ")
    if len(fields) != 3:
        raise InvalidFormat(line)

    name, address = _split_identifier(line, fields[0])
    return HostRecord(
        name=name,
        address=address,
        key_type=fields[1],
        public_key=fields[2],
    )


def _split_identifier(line: str, spec: str) -> tuple[str, str]:
    """Split ``name[,address]`` into (name, address).

    A single part is an address if it is an IP literal, otherwise a
    name. Two parts are always (name, address).
    """
    parts = spec.split(",")

    if len(parts) == 1:
        if _is_ip(parts[0]):
            return "", parts[0]
        name, address = parts[0], ""
    elif len(parts) == 2:
        name, address = parts
    else:
        raise InvalidFormat(line, "too many comma-separated host names")

    if not name and not address:
        raise InvalidFormat(line, "missing host name and address")
    return name, address


def _is_ip(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True
