"""Core exception types shared across layers."""


class MissingSlotError(Exception):
    """Raised when a required slot is absent or blank."""

    def __init__(self, slot_name: str) -> None:
        super().__init__(f"slot '{slot_name}' is missing or empty")
        self.slot_name = slot_name


class UnsupportedApplicationError(Exception):
    """Raised when a request names an application id outside the allow-list."""


class UnsupportedRequestTypeError(Exception):
    """Raised when the platform sends a request type the skill does not handle."""


__all__ = [
    "MissingSlotError",
    "UnsupportedApplicationError",
    "UnsupportedRequestTypeError",
]
