"""knownhosts — list, search and prune entries in ~/.ssh/known_hosts."""

__version__ = "0.1.0"
