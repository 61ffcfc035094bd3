"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from knownhosts.config import KnownHostsConfig


def test_explicit_path_wins(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KNOWNHOSTS_FILE", str(tmp_path / "env"))
    config = KnownHostsConfig.load(tmp_path / "explicit")
    assert config.hosts_file == tmp_path / "explicit"


def test_env_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("KNOWNHOSTS_FILE", str(tmp_path / "env"))
    assert KnownHostsConfig.load().hosts_file == tmp_path / "env"


def test_default_path_under_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    config = KnownHostsConfig.load()
    assert config.hosts_file == tmp_path / ".ssh" / "known_hosts"
    assert config.tick_interval == 1.0


def test_no_home_leaves_path_unset(monkeypatch: pytest.MonkeyPatch):
    def _no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(_no_home))
    assert KnownHostsConfig.load().hosts_file is None


def test_tick_interval_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("KNOWNHOSTS_TICK_INTERVAL", "0.25")
    assert KnownHostsConfig.load(tmp_path / "f").tick_interval == 0.25


@pytest.mark.parametrize("value", ["abc", "0", "-1", "nan", "inf"])
def test_bad_tick_interval_keeps_default(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, value: str
):
    monkeypatch.setenv("KNOWNHOSTS_TICK_INTERVAL", value)
    assert KnownHostsConfig.load(tmp_path / "f").tick_interval == 1.0


def test_bad_tick_interval_does_not_break_cli(
    monkeypatch: pytest.MonkeyPatch, hosts_file: Path
):
    from click.testing import CliRunner

    from knownhosts.cli import main

    monkeypatch.setenv("KNOWNHOSTS_TICK_INTERVAL", "fast")
    result = CliRunner().invoke(main, ["-f", str(hosts_file), "ls"])
    assert result.exit_code == 0
    assert "github.com" in result.output
