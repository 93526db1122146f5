"""Application service layer scaffolding for intent handling."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from wall_of_shame.core.ports import LeaderboardPort

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .intent_router import IntentRouter


@dataclass(slots=True)
class ServiceContainer:
    """Aggregate of application-level services available to handlers.

    The container owns the leaderboard state and the randomness source so
    that each app instance (or test) works against its own isolated copy.
    """

    leaderboard: Optional[LeaderboardPort] = None
    rng: random.Random = field(default_factory=random.Random)
    intent_router: Optional["IntentRouter"] = None


def build_default_services(
    *,
    leaderboard_port: Optional[LeaderboardPort] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> ServiceContainer:
    """Return a service container with the default intent router wiring."""

    # pylint: disable=import-outside-toplevel
    from wall_of_shame.adapters.leaderboard import LeaderboardStore

    from .intent_router import build_default_router

    return ServiceContainer(
        leaderboard=leaderboard_port if leaderboard_port is not None else LeaderboardStore(),
        rng=rng if rng is not None else random.Random(seed),
        intent_router=build_default_router(),
    )


__all__ = ["ServiceContainer", "build_default_services"]
