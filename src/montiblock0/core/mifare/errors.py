"""Block 0 validation errors."""

from __future__ import annotations

UID_LENGTH_MESSAGE = ">> ERROR: ONLY 4-BYTE UIDS SUPPORTED FOR CLASSIC CLONING"


class ValidationError(ValueError):
    """Base class for rejected Block 0 inputs."""


class InvalidUidLength(ValidationError):
    """The UID text does not decode to exactly 4 bytes."""

    def __init__(self, message: str = UID_LENGTH_MESSAGE) -> None:
        super().__init__(message)
