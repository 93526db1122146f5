"""Serverless entrypoint: ``lambda_handler(event, context)``.

The service container is created once per warm runtime instance, so the wall
survives across invocations served by the same instance and is lost when the
instance is recycled.
"""

from __future__ import annotations

from typing import Any, Optional

from wall_of_shame.bootstrap import build_default_service_container
from wall_of_shame.core.api_models import SkillRequestEnvelope
from wall_of_shame.core.config import config
from wall_of_shame.core.logging import correlation_id_context, get_logger
from wall_of_shame.services import ServiceContainer
from wall_of_shame.services.skill_handler import SkillRequestHandler

logger = get_logger(__name__)

_instance: dict[str, Optional[ServiceContainer]] = {"services": None}


def _get_services() -> ServiceContainer:
    services = _instance["services"]
    if services is None:
        logger.info("cold start; creating service container")
        services = build_default_service_container()
        _instance["services"] = services
    return services


def reset_instance() -> None:
    """Drop the cached container (used primarily in tests)."""
    _instance["services"] = None


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Answer one platform event.

    Rejected application ids and unknown request types propagate as
    exceptions so the platform records the invocation as failed.
    """
    with correlation_id_context(getattr(context, "aws_request_id", None)):
        envelope = SkillRequestEnvelope.model_validate(event)
        handler = SkillRequestHandler(_get_services(), config.SKILL_APPLICATION_IDS)
        return handler.handle(envelope).to_wire()


__all__ = ["lambda_handler", "reset_instance"]
