"""Voice platform request handling: identity gate and request-type routing.

The handler sits between the wire envelope and the intent router. It rejects
requests from unknown applications, answers session lifecycle callbacks, and
hands intent requests to the router.
"""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional

from wall_of_shame.core.api_models import SkillRequestEnvelope, SkillResponseEnvelope
from wall_of_shame.core.exceptions import UnsupportedApplicationError, UnsupportedRequestTypeError
from wall_of_shame.core.logging import get_logger, skill_request_context
from wall_of_shame.services import ServiceContainer
from wall_of_shame.services.intents.simple_intents import build_welcome_response

logger = get_logger(__name__)

_EnvelopeHandler = Callable[[SkillRequestEnvelope], SkillResponseEnvelope]


class SkillRequestHandler:
    """Route platform requests for one service container.

    ``supported_application_ids`` is the allow-list checked before anything
    else; an empty allow-list accepts every request.
    """

    def __init__(
        self,
        services: ServiceContainer,
        supported_application_ids: Optional[Iterable[str]] = None,
    ) -> None:
        self.services = services
        self.supported_application_ids = frozenset(supported_application_ids or ())
        self._routes: Mapping[str, _EnvelopeHandler] = {
            "LaunchRequest": self.on_launch,
            "IntentRequest": self.on_intent,
            "SessionStartedRequest": self.on_session_started,
            "SessionEndedRequest": self.on_session_ended,
        }

    def handle(self, envelope: SkillRequestEnvelope) -> SkillResponseEnvelope:
        """Verify the caller and dispatch on ``envelope.request.type``."""
        with skill_request_context(envelope.session_id(), envelope.request.requestId):
            self.verify_application_id(envelope.application_id())
            route = self._routes.get(envelope.request.type)
            if route is None:
                logger.warning(
                    "unsupported request type", extra={"request_type": envelope.request.type}
                )
                raise UnsupportedRequestTypeError(envelope.request.type)
            return route(envelope)

    def verify_application_id(self, application_id: Optional[str]) -> None:
        if not self.supported_application_ids:
            return
        if application_id not in self.supported_application_ids:
            logger.warning(
                "rejected request from unsupported application",
                extra={"application_id": application_id or "-"},
            )
            raise UnsupportedApplicationError(
                f"application id {application_id!r} is not supported"
            )

    def on_session_started(self, envelope: SkillRequestEnvelope) -> SkillResponseEnvelope:
        del envelope
        logger.info("onSessionStarted")
        return SkillResponseEnvelope()

    def on_launch(self, envelope: SkillRequestEnvelope) -> SkillResponseEnvelope:
        del envelope
        logger.info("onLaunch")
        return SkillResponseEnvelope.from_skill_response(build_welcome_response())

    def on_intent(self, envelope: SkillRequestEnvelope) -> SkillResponseEnvelope:
        """Hand the intent name and slot values over to the intent router."""
        intent = envelope.request.intent
        intent_name = intent.name if intent else None
        slots = intent.slot_values() if intent else {}
        logger.info("onIntent", extra={"intent_name": intent_name or "-"})
        router = self.services.intent_router
        if router is None:
            raise RuntimeError("IntentRouter has not been configured.")
        result = router.dispatch(intent_name, slots, self.services)
        return SkillResponseEnvelope.from_skill_response(result)

    def on_session_ended(self, envelope: SkillRequestEnvelope) -> SkillResponseEnvelope:
        logger.info("onSessionEnded", extra={"reason": envelope.request.reason or "-"})
        return SkillResponseEnvelope()


__all__ = ["SkillRequestHandler"]
