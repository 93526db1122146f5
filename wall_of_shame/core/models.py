"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

Slots = Mapping[str, Optional[str]]


@dataclass(frozen=True, slots=True)
class Card:
    """Simple visual card shown alongside the spoken response."""

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class SkillResponse:
    """Platform-neutral response produced by the intent router.

    "Tell" responses end the session; "ask" responses keep it open and carry
    a reprompt spoken when the user stays silent.
    """

    speech_text: str
    should_end_session: bool = True
    reprompt_text: Optional[str] = None
    card: Optional[Card] = None

    @classmethod
    def tell(cls, speech_text: str, card: Optional[Card] = None) -> "SkillResponse":
        """Build a response that ends the session."""
        return cls(speech_text=speech_text, should_end_session=True, card=card)

    @classmethod
    def ask(cls, speech_text: str, reprompt_text: str) -> "SkillResponse":
        """Build a response that waits for further input."""
        return cls(
            speech_text=speech_text,
            should_end_session=False,
            reprompt_text=reprompt_text,
        )


__all__ = ["Card", "SkillResponse", "Slots"]
