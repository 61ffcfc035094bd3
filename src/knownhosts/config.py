"""Global configuration — hosts file location, env vars, defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from knownhosts.errors import NoHomeDirError
from knownhosts.hosts.store import locate

logger = logging.getLogger(__name__)


@dataclass
class KnownHostsConfig:
    """Application-wide configuration.

    ``hosts_file`` is ``None`` when no location could be resolved; callers
    treat that as "nothing to do".
    """

    hosts_file: Path | None = None
    tick_interval: float = 1.0
    verbose: bool = False

    @classmethod
    def load(cls, hosts_file: str | Path | None = None) -> KnownHostsConfig:
        """Load config from an explicit path, env vars, or the home directory."""
        config = cls()

        if hosts_file is not None:
            config.hosts_file = Path(hosts_file)
        else:
            env_file = os.environ.get("KNOWNHOSTS_FILE")
            if env_file:
                config.hosts_file = Path(env_file)
            else:
                try:
                    config.hosts_file = locate()
                except NoHomeDirError:
                    logger.debug("No home directory; hosts file unresolved")

        env_interval = os.environ.get("KNOWNHOSTS_TICK_INTERVAL")
        if env_interval:
            try:
                interval = float(env_interval)
            except ValueError:
                interval = 0.0
            if 0 < interval < float("inf"):
                config.tick_interval = interval
            else:
                logger.warning(
                    "Ignoring KNOWNHOSTS_TICK_INTERVAL=%r; expected seconds > 0",
                    env_interval,
                )

        return config
