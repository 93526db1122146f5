"""Simple intent handlers: welcome, help, goodbye, and unsupported requests."""

from __future__ import annotations

from typing import TYPE_CHECKING

from wall_of_shame.core.models import SkillResponse

if TYPE_CHECKING:  # pragma: no cover - typing only
    from wall_of_shame.services import ServiceContainer
    from wall_of_shame.services.intent_router import IntentRequest

WELCOME_SPEECH = (
    "Welcome to the wall of shame Helper. You can ask a question like, "
    "who's the worst player? Or add a player on the wall ... "
    "Now, what can I help you with?"
)
WELCOME_REPROMPT = "For instructions on what you can say, please say help me."

HELP_SPEECH = (
    "You can ask questions about the wall of shame such as, who's the worst player, "
    "or, you can say exit... Now, how can I help you?"
)
HELP_REPROMPT = (
    "You can say things like, what's the worst player, or you can say exit... "
    "Now, how can I help you?"
)

GOODBYE_SPEECH = "Goodbye"
UNSUPPORTED_SPEECH = "This is unsupported.  Please try something else."


def build_welcome_response() -> SkillResponse:
    """Greeting spoken when the skill is opened without an intent."""
    return SkillResponse.ask(WELCOME_SPEECH, WELCOME_REPROMPT)


def build_help_response() -> SkillResponse:
    return SkillResponse.ask(HELP_SPEECH, HELP_REPROMPT)


def handle_help(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    """Explain what the skill can do and keep the session open."""
    del request, services
    return build_help_response()


def handle_goodbye(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    """Stop and cancel both end the session with a farewell."""
    del request, services
    return SkillResponse.tell(GOODBYE_SPEECH)


def handle_unsupported(request: "IntentRequest", services: "ServiceContainer") -> SkillResponse:
    del request, services
    return SkillResponse.ask(UNSUPPORTED_SPEECH, UNSUPPORTED_SPEECH)


__all__ = [
    "GOODBYE_SPEECH",
    "HELP_REPROMPT",
    "HELP_SPEECH",
    "UNSUPPORTED_SPEECH",
    "WELCOME_REPROMPT",
    "WELCOME_SPEECH",
    "build_help_response",
    "build_welcome_response",
    "handle_goodbye",
    "handle_help",
    "handle_unsupported",
]
