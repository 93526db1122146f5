"""Intent router and supporting request models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Mapping, MutableMapping, Optional

from wall_of_shame.core.exceptions import MissingSlotError
from wall_of_shame.core.intents import IntentType
from wall_of_shame.core.logging import get_logger
from wall_of_shame.core.models import SkillResponse, Slots

from .intents import simple_intents, wall_intents

if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from . import ServiceContainer

logger = get_logger(__name__)


@dataclass(slots=True)
class IntentRequest:
    """Normalized intent invocation handed over by the platform adapter."""

    intent: IntentType
    slots: Slots = field(default_factory=dict)

    def require_slot(self, name: str) -> str:
        """Return the value of slot ``name`` or raise :class:`MissingSlotError`."""
        value = self.slots.get(name)
        if value is None or not value.strip():
            raise MissingSlotError(name)
        return value


IntentHandler = Callable[[IntentRequest, "ServiceContainer"], SkillResponse]


class IntentRouterError(RuntimeError):
    """Base error for router failures."""


class IntentHandlerNotFoundError(IntentRouterError):
    """Raised when no handler is registered for the requested intent."""


class IntentRouter:
    """Dispatch intents to registered handlers."""

    def __init__(self, handlers: Mapping[IntentType, IntentHandler] | None = None) -> None:
        self._handlers: MutableMapping[IntentType, IntentHandler] = dict(handlers or {})

    def register(self, intent: IntentType, handler: IntentHandler) -> None:
        """Register or replace a handler for ``intent``."""

        self._handlers[intent] = handler

    def unregister(self, intent: IntentType) -> None:
        """Remove a handler if present."""

        self._handlers.pop(intent, None)

    def dispatch(
        self,
        intent_name: Optional[str],
        slots: Optional[Slots],
        services: "ServiceContainer",
    ) -> SkillResponse:
        """Resolve ``intent_name`` and run its handler against ``services``.

        Unknown names are dispatched as ``IntentType.UNRECOGNIZED``.
        """

        request = IntentRequest(intent=IntentType.parse(intent_name), slots=dict(slots or {}))
        if request.intent is IntentType.UNRECOGNIZED and intent_name:
            logger.info("unrecognized intent received", extra={"intent_name": intent_name})
        return self.dispatch_request(request, services)

    def dispatch_request(
        self, request: IntentRequest, services: "ServiceContainer"
    ) -> SkillResponse:
        """Invoke the handler for ``request.intent``.

        A missing or blank required slot degrades to the help prompt.
        """

        try:
            handler = self._handlers[request.intent]
        except KeyError as exc:
            raise IntentHandlerNotFoundError(
                f"No handler registered for intent {request.intent}"
            ) from exc
        logger.info("dispatching intent", extra={"intent": request.intent.value})
        try:
            return handler(request, services)
        except MissingSlotError as exc:
            logger.info(
                "required slot missing; falling back to help",
                extra={"intent": request.intent.value, "slot": exc.slot_name},
            )
            return simple_intents.build_help_response()

    def handlers(self) -> Mapping[IntentType, IntentHandler]:
        """Return a shallow copy of the current intent handler registry."""

        return dict(self._handlers)


def default_handlers() -> dict[IntentType, IntentHandler]:
    """Return the handler table covering every :class:`IntentType` member."""

    return {
        IntentType.ADD_PLAYER: wall_intents.handle_add_player,
        IntentType.REMOVE_PLAYER: wall_intents.handle_remove_player,
        IntentType.WORST_PLAYER: wall_intents.handle_worst_player,
        IntentType.CLEAN_WALL: wall_intents.handle_clean_wall,
        IntentType.HELP: simple_intents.handle_help,
        IntentType.STOP: simple_intents.handle_goodbye,
        IntentType.CANCEL: simple_intents.handle_goodbye,
        IntentType.UNRECOGNIZED: simple_intents.handle_unsupported,
    }


def build_default_router() -> IntentRouter:
    """Return a router prewired with the default handler table."""

    return IntentRouter(default_handlers())


__all__ = [
    "IntentRouter",
    "IntentRouterError",
    "IntentHandlerNotFoundError",
    "IntentHandler",
    "IntentRequest",
    "build_default_router",
    "default_handlers",
]
