"""Matcher — substring search and delete-by-pattern over known_hosts lines.

Matching only looks at the host part of a line (everything before the
first whitespace), so a pattern never matches key material.
"""

from __future__ import annotations

from collections.abc import Iterable


def host_part(line: str) -> str:
    """Return the first whitespace-delimited field, or "" for a blank line."""
    fields = line.split(maxsplit=1)
    if not fields:
        return ""
    return fields[0]


def search(lines: Iterable[str], pattern: str) -> list[str]:
    """Lines whose host part contains *pattern* (case-sensitive)."""
    out: list[str] = []
    for line in lines:
        host = host_part(line)
        if host and pattern in host:
            out.append(line)
    return out


def delete(lines: Iterable[str], pattern: str) -> list[str]:
    """Drop lines equal to *pattern* or whose host part contains it.

    Empty lines are always dropped.
    """
    out: list[str] = []
    for line in lines:
        if not line:
            continue
        if line == pattern:
            continue
        host = host_part(line)
        if host and pattern in host:
            continue
        out.append(line)
    return out
