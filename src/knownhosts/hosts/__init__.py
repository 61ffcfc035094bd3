"""known_hosts file handling: line store, record parser and matcher."""

from knownhosts.hosts.matcher import delete, host_part, search
from knownhosts.hosts.models import HostRecord
from knownhosts.hosts.parser import parse_record
from knownhosts.hosts.store import exists, load, locate, save

__all__ = [
    "HostRecord",
    "delete",
    "exists",
    "host_part",
    "load",
    "locate",
    "parse_record",
    "save",
    "search",
]
