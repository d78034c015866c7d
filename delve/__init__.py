"""delve — turn-based dungeon-crawler simulation core."""

__version__ = "0.1.0"
