"""Voice platform request/response envelope models."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel, Field

from wall_of_shame.core.models import SkillResponse


class SkillApplication(BaseModel):
    """Application (skill) identity declared by the platform."""

    applicationId: str


class SkillSlot(BaseModel):
    """Resolved slot value; ``value`` is absent when the user did not fill it."""

    name: str
    value: Optional[str] = None


class SkillIntent(BaseModel):
    """Intent name with its slots."""

    name: Optional[str] = None
    slots: dict[str, SkillSlot] = Field(default_factory=dict)

    def slot_values(self) -> dict[str, Optional[str]]:
        """Flatten slots to a name -> value mapping."""
        return {key: slot.value for key, slot in self.slots.items()}


class SkillRequest(BaseModel):
    """Inner request payload."""

    type: str
    requestId: Optional[str] = None
    locale: str = "en-US"
    intent: Optional[SkillIntent] = None
    reason: Optional[str] = None


class SkillSession(BaseModel):
    """Session information."""

    sessionId: str
    new: bool = True
    application: Optional[SkillApplication] = None


class SkillSystem(BaseModel):
    application: Optional[SkillApplication] = None


class SkillContext(BaseModel):
    System: Optional[SkillSystem] = None


class SkillRequestEnvelope(BaseModel):
    """Full request envelope posted by the voice platform."""

    version: str = "1.0"
    session: Optional[SkillSession] = None
    context: Optional[SkillContext] = None
    request: SkillRequest

    def application_id(self) -> Optional[str]:
        """Return the declared application id, preferring the session copy."""
        if self.session and self.session.application:
            return self.session.application.applicationId
        if self.context and self.context.System and self.context.System.application:
            return self.context.System.application.applicationId
        return None

    def session_id(self) -> Optional[str]:
        return self.session.sessionId if self.session else None


class OutputSpeech(BaseModel):
    """Plain text speech output."""

    type: Literal["PlainText"] = "PlainText"
    text: str


class SimpleCard(BaseModel):
    """Card for visual display."""

    type: Literal["Simple"] = "Simple"
    title: str
    content: str


class Reprompt(BaseModel):
    outputSpeech: OutputSpeech


class SkillResponseBody(BaseModel):
    """Response body; every field is omitted for lifecycle acknowledgements."""

    outputSpeech: Optional[OutputSpeech] = None
    card: Optional[SimpleCard] = None
    reprompt: Optional[Reprompt] = None
    shouldEndSession: Optional[bool] = None


class SkillResponseEnvelope(BaseModel):
    """Full response envelope returned to the voice platform."""

    version: str = "1.0"
    response: SkillResponseBody = Field(default_factory=SkillResponseBody)

    @classmethod
    def from_skill_response(cls, result: SkillResponse) -> "SkillResponseEnvelope":
        """Serialize a platform-neutral response into the wire envelope."""
        body = SkillResponseBody(
            outputSpeech=OutputSpeech(text=result.speech_text),
            shouldEndSession=result.should_end_session,
        )
        if result.card is not None:
            body.card = SimpleCard(title=result.card.title, content=result.card.content)
        if result.reprompt_text is not None:
            body.reprompt = Reprompt(outputSpeech=OutputSpeech(text=result.reprompt_text))
        return cls(response=body)

    def to_wire(self) -> dict[str, Any]:
        """Return the JSON-ready dict with unset optional fields dropped."""
        return self.model_dump(exclude_none=True)


__all__ = [
    "OutputSpeech",
    "Reprompt",
    "SimpleCard",
    "SkillApplication",
    "SkillContext",
    "SkillIntent",
    "SkillRequest",
    "SkillRequestEnvelope",
    "SkillResponseBody",
    "SkillResponseEnvelope",
    "SkillSession",
    "SkillSlot",
    "SkillSystem",
]
