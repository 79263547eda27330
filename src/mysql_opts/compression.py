"""
Compression level for the MySQL compressed protocol.

Only affects outgoing packets.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_LEVEL = 0
MAX_LEVEL = 9
DEFAULT_LEVEL = 6


@dataclass(frozen=True, order=True)
class Compression:
    """
    Immutable zlib compression level (0-9).

    Attributes:
        level: Compression level, ``0`` (none) to ``9`` (best)
    """

    level: int = DEFAULT_LEVEL

    def __post_init__(self) -> None:
        if isinstance(self.level, bool) or not isinstance(self.level, int):
            raise TypeError(f"Compression level must be an int, got {type(self.level).__name__}")
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            raise ValueError(f"Compression level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {self.level}")

    @classmethod
    def fast(cls) -> Compression:
        """Fastest compression (level 1)."""
        return cls(1)

    @classmethod
    def default(cls) -> Compression:
        """Default compression (level 6)."""
        return cls(DEFAULT_LEVEL)

    @classmethod
    def best(cls) -> Compression:
        """Best compression (level 9)."""
        return cls(MAX_LEVEL)

    def __int__(self) -> int:
        return self.level


__all__ = ["Compression"]
