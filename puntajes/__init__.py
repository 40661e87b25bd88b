"""Binary score files, a lookup tree, a queue and a ranking for a game server."""

__version__ = "0.1.0"
__all__ = ["fifo", "records", "tree", "storage", "ranking"]