"""Line store — read and write known_hosts as an ordered list of lines."""

from __future__ import annotations

import logging
import os
import stat
import sys
from collections.abc import Iterable
from pathlib import Path

from knownhosts.errors import NoHomeDirError, ReadFailure, WriteFailure

logger = logging.getLogger(__name__)

DOS_LINEBREAK = "\r\n"
UNIX_LINEBREAK = "\n"

# Applied only when the file does not exist yet
DEFAULT_MODE = 0o644


def locate() -> Path:
    """Return the per-user known_hosts path (``~/.ssh/known_hosts``)."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as exc:
        raise NoHomeDirError("Could not determine the home directory") from exc
    return home / ".ssh" / "known_hosts"


def exists(path: Path) -> bool:
    """True if *path* exists and can be stat'ed."""
    try:
        path.stat()
    except OSError:
        return False
    return True


def linebreak() -> str:
    """Line terminator used when writing the file on this platform."""
    if sys.platform == "win32":
        return DOS_LINEBREAK
    return UNIX_LINEBREAK


def split_lines(text: str) -> list[str]:
    """Normalize line endings, trim each line and drop the empty ones."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: list[str] = []
    for raw in text.split("\n"):
        line = raw.strip()
        if line:
            lines.append(line)
    return lines


def load(path: Path) -> list[str]:
    """Read *path* and return its non-empty, trimmed lines in file order."""
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ReadFailure(f"failed to read known_hosts: {exc}", path) from exc

    # Undecodable bytes survive as lone surrogates and are written back as-is
    lines = split_lines(data.decode("utf-8", errors="surrogateescape"))
    logger.debug("Loaded %d line(s) from %s", len(lines), path)
    return lines


def save(path: Path, lines: Iterable[str]) -> None:
    """Write *lines* to *path*, one per line, with a trailing terminator.

    Keeps the permission bits of an existing file.
    """
    lines = list(lines)
    eol = linebreak()
    content = eol.join(lines) + eol

    try:
        try:
            mode = stat.S_IMODE(path.stat().st_mode)
        except FileNotFoundError:
            mode = DEFAULT_MODE

        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(
            fd, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as fh:
            fh.write(content)
        os.chmod(path, mode)
    except OSError as exc:
        raise WriteFailure(f"failed to write known_hosts: {exc}", path) from exc

    logger.debug("Saved %d line(s) to %s", len(lines), path)


def printable(text: str) -> str:
    """Render *text* for a terminal, showing undecodable bytes as U+FFFD."""
    return text.encode("utf-8", errors="surrogateescape").decode(
        "utf-8", errors="replace"
    )
