"""Tests for request-type routing and the application id gate."""

from __future__ import annotations

import pytest
from conftest import TEST_APPLICATION_ID, intent_request, make_envelope

from wall_of_shame.core.api_models import SkillRequestEnvelope
from wall_of_shame.core.exceptions import UnsupportedApplicationError, UnsupportedRequestTypeError
from wall_of_shame.services.skill_handler import SkillRequestHandler


def _handle(handler: SkillRequestHandler, payload: dict) -> dict:
    return handler.handle(SkillRequestEnvelope.model_validate(payload)).to_wire()


@pytest.fixture()
def handler(services) -> SkillRequestHandler:
    return SkillRequestHandler(services, [TEST_APPLICATION_ID])


def test_launch_returns_welcome_ask(handler):
    wire = _handle(handler, make_envelope({"type": "LaunchRequest", "requestId": "r1"}))

    body = wire["response"]
    assert body["outputSpeech"]["text"].startswith("Welcome to the wall of shame Helper.")
    assert body["reprompt"]["outputSpeech"]["text"] == (
        "For instructions on what you can say, please say help me."
    )
    assert body["shouldEndSession"] is False


@pytest.mark.parametrize("request_type", ["SessionStartedRequest", "SessionEndedRequest"])
def test_session_lifecycle_returns_empty_body(handler, request_type):
    wire = _handle(handler, make_envelope({"type": request_type, "reason": "USER_INITIATED"}))

    assert wire == {"version": "1.0", "response": {}}


def test_intent_request_reaches_the_router(handler, services):
    wire = _handle(handler, make_envelope(intent_request("WallOfShameAddition", "Bob")))

    assert services.leaderboard.count("Bob") == 1
    assert wire["response"]["card"]["title"] == "Bob added to the wall of shame"
    assert wire["response"]["shouldEndSession"] is True


def test_intent_request_without_intent_is_unsupported(handler):
    wire = _handle(handler, make_envelope({"type": "IntentRequest"}))

    assert wire["response"]["outputSpeech"]["text"] == (
        "This is unsupported.  Please try something else."
    )
    assert wire["response"]["shouldEndSession"] is False


def test_unknown_application_is_rejected_before_dispatch(handler, services):
    payload = make_envelope(intent_request("WallOfShameAddition", "Bob"), application_id="other")

    with pytest.raises(UnsupportedApplicationError):
        _handle(handler, payload)
    assert services.leaderboard.snapshot() == {}


def test_missing_application_id_is_rejected(handler):
    with pytest.raises(UnsupportedApplicationError):
        _handle(handler, make_envelope({"type": "LaunchRequest"}, application_id=None))


def test_empty_allow_list_accepts_everything(services):
    open_handler = SkillRequestHandler(services, [])

    wire = _handle(open_handler, make_envelope({"type": "LaunchRequest"}, application_id="any"))

    assert wire["response"]["shouldEndSession"] is False


def test_unknown_request_type_raises(handler):
    with pytest.raises(UnsupportedRequestTypeError):
        _handle(handler, make_envelope({"type": "CanFulfillIntentRequest"}))
