"""Authoritative server for the shrimp arena game."""

__all__ = [
    "broadcast",
    "clock",
    "collision",
    "config",
    "constants",
    "food",
    "main",
    "movement",
    "protocol",
    "sessions",
    "shrimp",
    "snapshot",
    "transport",
    "utils",
    "world",
]
