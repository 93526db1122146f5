"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so ``wall_of_shame.core.config`` picks up the
test defaults below when it is first imported.
"""
from __future__ import annotations

import os
import random
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

TEST_APPLICATION_ID = "amzn1.ask.skill.test-wall-of-shame"

os.environ.setdefault("SKILL_APPLICATION_IDS", f'["{TEST_APPLICATION_ID}"]')
os.environ.setdefault("HEALTHCHECK_API_TOKEN", "test-health-token")
os.environ.setdefault("WALL_LOG_LEVEL", "warning")

from wall_of_shame.services import ServiceContainer, build_default_services  # noqa: E402
from wall_of_shame.services import runtime  # noqa: E402


@pytest.fixture()
def services() -> ServiceContainer:
    """Fresh container with an empty wall and a seeded quote picker."""
    return build_default_services(rng=random.Random(1234))


@pytest.fixture(autouse=True)
def _reset_runtime_registry():
    yield
    runtime.clear_services()


def make_envelope(
    request: dict,
    *,
    application_id: str | None = TEST_APPLICATION_ID,
    session_id: str = "SessionId.test",
) -> dict:
    """Build a platform request envelope around ``request``."""
    session: dict = {"sessionId": session_id, "new": False}
    if application_id is not None:
        session["application"] = {"applicationId": application_id}
    return {"version": "1.0", "session": session, "request": request}


def intent_request(name: str | None, player: str | None = None, *, with_slot: bool = True) -> dict:
    """Build an ``IntentRequest`` payload with an optional Player slot."""
    intent: dict = {"name": name, "slots": {}}
    if with_slot:
        slot: dict = {"name": "Player"}
        if player is not None:
            slot["value"] = player
        intent["slots"]["Player"] = slot
    return {"type": "IntentRequest", "requestId": "EdwRequestId.test", "intent": intent}
