"""Intent types recognised by the wall of shame skill."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class IntentType(str, Enum):
    """Enumeration of every intent the router can dispatch."""

    ADD_PLAYER = "WallOfShameAddition"
    REMOVE_PLAYER = "WallOfShameRemoval"
    CLEAN_WALL = "WallOfShameClean"
    WORST_PLAYER = "WallOfShameWorst"
    HELP = "AMAZON.HelpIntent"
    STOP = "AMAZON.StopIntent"
    CANCEL = "AMAZON.CancelIntent"
    UNRECOGNIZED = "Unrecognized"

    @classmethod
    def parse(cls, name: Optional[str]) -> "IntentType":
        """Map a platform intent name onto the enum.

        Unknown or missing names resolve to ``UNRECOGNIZED`` rather than raising.
        """
        if not name:
            return cls.UNRECOGNIZED
        try:
            return cls(name)
        except ValueError:
            return cls.UNRECOGNIZED


PLAYER_SLOT = "Player"


__all__ = ["IntentType", "PLAYER_SLOT"]
