"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_LINES = [
    "github.com ssh-rsa key1",
    "gitlab.com ssh-rsa key2",
    "myserver,192.168.1.1 ssh-ed25519 key3",
    "10.0.0.5 ecdsa-sha2-nistp256 key4",
]


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("KNOWNHOSTS_FILE", raising=False)
    monkeypatch.delenv("KNOWNHOSTS_TICK_INTERVAL", raising=False)


@pytest.fixture
def sample_lines() -> list[str]:
    return list(SAMPLE_LINES)


@pytest.fixture
def hosts_file(tmp_path: Path, sample_lines: list[str]) -> Path:
    path = tmp_path / "known_hosts"
    path.write_text("\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
