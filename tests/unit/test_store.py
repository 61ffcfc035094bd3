"""Tests for the known_hosts line store."""

from __future__ import annotations

import os
import random
import stat
import sys
from pathlib import Path

import pytest

from knownhosts.errors import NoHomeDirError, ReadFailure, WriteFailure
from knownhosts.hosts import store


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        ("github.com ssh-rsa key1", ["github.com ssh-rsa key1"]),
        (
            "github.com ssh-rsa key1\ngitlab.com ssh-rsa key2",
            ["github.com ssh-rsa key1", "gitlab.com ssh-rsa key2"],
        ),
        (
            "github.com ssh-rsa key1\r\ngitlab.com ssh-rsa key2",
            ["github.com ssh-rsa key1", "gitlab.com ssh-rsa key2"],
        ),
        (
            "github.com ssh-rsa key1\rgitlab.com ssh-rsa key2",
            ["github.com ssh-rsa key1", "gitlab.com ssh-rsa key2"],
        ),
        (
            "github.com ssh-rsa key1\n   \ngitlab.com ssh-rsa key2\n\t\n",
            ["github.com ssh-rsa key1", "gitlab.com ssh-rsa key2"],
        ),
        (
            "  github.com ssh-rsa key1  \n  gitlab.com ssh-rsa key2  ",
            ["github.com ssh-rsa key1", "gitlab.com ssh-rsa key2"],
        ),
        ("line1\r\nline2\nline3\r", ["line1", "line2", "line3"]),
    ],
)
def test_split_lines(text: str, expected: list[str]):
    assert store.split_lines(text) == expected


def test_locate_under_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    assert store.locate() == tmp_path / ".ssh" / "known_hosts"


def test_locate_without_home(monkeypatch: pytest.MonkeyPatch):
    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))
    with pytest.raises(NoHomeDirError):
        store.locate()


def test_exists(hosts_file: Path, tmp_path: Path):
    assert store.exists(hosts_file)
    assert not store.exists(tmp_path / "missing")


def test_load(hosts_file: Path, sample_lines: list[str]):
    assert store.load(hosts_file) == sample_lines


def test_load_missing_file(tmp_path: Path):
    with pytest.raises(ReadFailure) as info:
        store.load(tmp_path / "missing")
    assert info.value.path == tmp_path / "missing"


def test_save_writes_trailing_newline(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(sys, "platform", "linux")
    path = tmp_path / "known_hosts"
    store.save(path, ["a ssh-rsa k1", "b ssh-rsa k2"])
    assert path.read_bytes() == b"a ssh-rsa k1\nb ssh-rsa k2\n"


def test_save_uses_crlf_on_windows(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(sys, "platform", "win32")
    path = tmp_path / "known_hosts"
    store.save(path, ["a ssh-rsa k1", "b ssh-rsa k2"])
    assert path.read_bytes() == b"a ssh-rsa k1\r\nb ssh-rsa k2\r\n"


def test_save_then_load_round_trip(tmp_path: Path):
    path = tmp_path / "known_hosts"
    path.write_text("  a ssh-rsa k1 \r\n\r\n\tb ssh-rsa k2\r", encoding="utf-8")
    lines = store.load(path)
    store.save(path, lines)
    assert store.load(path) == ["a ssh-rsa k1", "b ssh-rsa k2"]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_save_preserves_permissions(hosts_file: Path):
    os.chmod(hosts_file, 0o600)
    store.save(hosts_file, ["a ssh-rsa k1"])
    assert stat.S_IMODE(hosts_file.stat().st_mode) == 0o600


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_save_new_file_default_mode(tmp_path: Path):
    path = tmp_path / "known_hosts"
    store.save(path, ["a ssh-rsa k1"])
    assert stat.S_IMODE(path.stat().st_mode) == store.DEFAULT_MODE


def test_save_into_missing_directory(tmp_path: Path):
    with pytest.raises(WriteFailure):
        store.save(tmp_path / "nope" / "known_hosts", ["a ssh-rsa k1"])


def test_save_keeps_undecodable_bytes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(sys, "platform", "linux")
    path = tmp_path / "known_hosts"
    path.write_bytes(b"caf\xe9 ssh-rsa k1\r\n\xff\xfe,10.0.0.1 ssh-rsa k2\n")

    store.save(path, store.load(path))

    assert path.read_bytes() == b"caf\xe9 ssh-rsa k1\n\xff\xfe,10.0.0.1 ssh-rsa k2\n"


@pytest.mark.parametrize("seed", range(20))
def test_load_save_round_trip_arbitrary_bytes(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, seed: int
):
    monkeypatch.setattr(sys, "platform", "linux")
    rng = random.Random(seed)
    alphabet = [bytes([b]) for b in range(256)] + [b"\n", b"\r\n", b"\r", b" "] * 16
    raw = b"".join(rng.choice(alphabet) for _ in range(400))
    path = tmp_path / "known_hosts"
    path.write_bytes(raw)

    first = store.load(path)
    store.save(path, first)

    assert store.load(path) == first
    encoded = [line.encode("utf-8", errors="surrogateescape") for line in first]
    assert path.read_bytes() == b"\n".join(encoded) + b"\n"
    for line in encoded:
        assert line in raw


def test_printable_replaces_undecodable_bytes():
    text = b"caf\xe9".decode("utf-8", errors="surrogateescape")
    assert store.printable(text) == "caf\ufffd"
    assert store.printable("github.com") == "github.com"
