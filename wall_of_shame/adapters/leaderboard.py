"""In-memory leaderboard adapter implementing the leaderboard port.

Counts live only for the lifetime of the owning service container; nothing
is written to disk.
"""

from __future__ import annotations

import threading
from typing import Optional

from wall_of_shame.core.logging import get_logger
from wall_of_shame.core.ports import LeaderboardPort

logger = get_logger(__name__)

SECOND_CHANCE_MESSAGE = (
    "Everybody deserves to have a second chance. {player}, "
    "try to stay out of the wall or just stop playing"
)


class LeaderboardStore(LeaderboardPort):
    """Player name -> offense count, guarded by a single lock.

    Names are case-sensitive and stored exactly as supplied. Dicts preserve
    insertion order, which ``worst`` relies on to break ties in favour of the
    player shamed first.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}
        self._lock = threading.Lock()

    def add(self, player: str) -> int:
        with self._lock:
            new_count = self._counts.get(player, 0) + 1
            self._counts[player] = new_count
        logger.info("player shamed", extra={"player": player, "count": new_count})
        return new_count

    def worst(self) -> Optional[tuple[str, int]]:
        with self._lock:
            best: Optional[tuple[str, int]] = None
            for player, count in self._counts.items():
                if best is None or count > best[1]:
                    best = (player, count)
            return best

    def clear(self) -> None:
        with self._lock:
            removed = len(self._counts)
            self._counts.clear()
        logger.info("wall cleaned", extra={"removed_players": removed})

    def remove(self, player: str) -> str:
        # Counts are left untouched; removal only produces the message.
        return SECOND_CHANCE_MESSAGE.format(player=player)

    def count(self, player: str) -> int:
        with self._lock:
            return self._counts.get(player, 0)

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)


__all__ = ["LeaderboardStore", "SECOND_CHANCE_MESSAGE"]
