"""Voice platform skill webhook route."""

from __future__ import annotations

import json
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from wall_of_shame.core.api_models import SkillRequestEnvelope
from wall_of_shame.core.exceptions import UnsupportedApplicationError, UnsupportedRequestTypeError
from wall_of_shame.core.logging import get_logger
from wall_of_shame.services.skill_handler import SkillRequestHandler

from ..dependencies import get_skill_handler

router = APIRouter(tags=["skill"])
logger = get_logger(__name__)


@router.post("/alexa")
async def handle_skill_request(
    request: Request,
    handler: Annotated[SkillRequestHandler, Depends(get_skill_handler)],
) -> JSONResponse:
    """Validate the platform envelope and answer it with a response envelope."""
    try:
        payload = await request.json()
        envelope = SkillRequestEnvelope.model_validate(payload)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.error("Invalid JSON received", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid JSON"},
        )
    except ValidationError as exc:
        logger.warning("malformed skill envelope", extra={"errors": exc.error_count()})
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Malformed request envelope"},
        )

    try:
        result = handler.handle(envelope)
    except UnsupportedApplicationError:
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"error": "Unsupported application id"},
        )
    except UnsupportedRequestTypeError as exc:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": f"Unsupported request type: {exc}"},
        )
    return JSONResponse(content=result.to_wire())


__all__ = ["router"]
