"""Wall of shame intent handlers: add, remove, worst player, and clean."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from wall_of_shame.core.intents import PLAYER_SLOT
from wall_of_shame.core.models import Card, SkillResponse
from wall_of_shame.core.ports import LeaderboardPort

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wall_of_shame.services import ServiceContainer
    from wall_of_shame.services.intent_router import IntentRequest

PLAYER_PLACEHOLDER = "{player}"

SHAME_QUOTES: tuple[str, ...] = (
    "I'm not surprised. {player} is a terrible player",
    "I've seen {player} play once. It injured my eyes permanently. That's why I'm blind. Sad story",
    "{player} deserves to be there.",
)

WORST_PLAYER_SPEECH = "In the race of mediocrity, {player} is ahead and it's well deserved"
WORST_PLAYER_FALLBACK = "I don't have any data to prove it but my guess goes to Venelin"
WORST_PLAYER_TITLE = "Who is the worst player?"

CLEAN_WALL_SPEECH = "The wall have been cleaned."
CLEAN_WALL_TITLE = "Clean wall"


def choose_shame_quote(player: str, rng: random.Random) -> str:
    """Pick one quote uniformly at random and fill in the player name.

    No history is kept, so the same quote may come up twice in a row.
    """
    template = rng.choice(SHAME_QUOTES)
    return template.replace(PLAYER_PLACEHOLDER, player)


def _require_leaderboard(services: "ServiceContainer") -> LeaderboardPort:
    leaderboard = services.leaderboard
    if leaderboard is None:
        raise RuntimeError("LeaderboardPort has not been configured.")
    return leaderboard


def _card_response(title: str, speech: str) -> SkillResponse:
    return SkillResponse.tell(speech, card=Card(title=title, content=speech))


def handle_add_player(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    """Put the named player on the wall and taunt them."""
    player = request.require_slot(PLAYER_SLOT)
    _require_leaderboard(services).add(player)
    message = choose_shame_quote(player, services.rng)
    return _card_response(f"{player} added to the wall of shame", message)


def handle_remove_player(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    """Offer the named player a second chance.

    The leaderboard keeps the player's count; only the message is produced.
    """
    player = request.require_slot(PLAYER_SLOT)
    message = _require_leaderboard(services).remove(player)
    return _card_response(f"{player} removed from the wall of shame", message)


def handle_worst_player(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    del request
    entry = _require_leaderboard(services).worst()
    if entry is None:
        message = WORST_PLAYER_FALLBACK
    else:
        message = WORST_PLAYER_SPEECH.format(player=entry[0])
    return _card_response(WORST_PLAYER_TITLE, message)


def handle_clean_wall(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    del request
    _require_leaderboard(services).clear()
    return _card_response(CLEAN_WALL_TITLE, CLEAN_WALL_SPEECH)


__all__ = [
    "CLEAN_WALL_SPEECH",
    "CLEAN_WALL_TITLE",
    "SHAME_QUOTES",
    "WORST_PLAYER_FALLBACK",
    "WORST_PLAYER_SPEECH",
    "WORST_PLAYER_TITLE",
    "choose_shame_quote",
    "handle_add_player",
    "handle_clean_wall",
    "handle_remove_player",
    "handle_worst_player",
]
