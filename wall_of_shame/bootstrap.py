"""Application bootstrap helpers for assembling the service container."""

from __future__ import annotations

from typing import Optional

from wall_of_shame.adapters.leaderboard import LeaderboardStore
from wall_of_shame.core.config import config
from wall_of_shame.services import ServiceContainer, build_default_services


def build_default_service_container(seed: Optional[int] = None) -> ServiceContainer:
    """Return the default service container wired to an empty in-memory leaderboard.

    ``seed`` overrides ``QUOTE_RANDOM_SEED`` for the quote picker.
    """

    return build_default_services(
        leaderboard_port=LeaderboardStore(),
        seed=seed if seed is not None else config.QUOTE_RANDOM_SEED,
    )


__all__ = ["build_default_service_container"]
