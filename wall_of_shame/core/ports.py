"""Protocol definitions for infrastructure adapters."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Optional, Protocol


class LeaderboardPort(Protocol):
    """Port exposing the shamed-player counters."""

    def add(self, player: str) -> int:
        """Record one more offense for ``player`` and return the new count."""
        ...

    def worst(self) -> Optional[tuple[str, int]]:
        """Return the player with the highest count, or ``None`` when empty."""
        ...

    def clear(self) -> None:
        """Forget every recorded offense."""
        ...

    def remove(self, player: str) -> str:
        """Return the second-chance message for ``player``."""
        ...

    def count(self, player: str) -> int:
        """Return the offense count for ``player`` (0 when unknown)."""
        ...

    def snapshot(self) -> dict[str, int]:
        """Return a copy of all counts in first-added order."""
        ...


__all__ = ["LeaderboardPort"]
