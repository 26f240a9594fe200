"""Custom exception types for the checkpointing calculator."""

from __future__ import annotations


class CheckpointCalcError(Exception):
    """Base class for domain-specific errors."""


class MalformedNumberError(CheckpointCalcError, ValueError):
    """Raised when console input that must be an integer is not one."""

    def __init__(self, text: str, message: str | None = None) -> None:
        if message is None:
            message = f"Expected an integer, got {text!r}."
        super().__init__(message)
        self.text = text


class SlotError(CheckpointCalcError):
    """Raised when the durable slot cannot be read or written."""

    def __init__(self, path, message: str) -> None:
        super().__init__(f"{message} (slot: {path})")
        self.path = path


class SnapshotDecodeError(CheckpointCalcError):
    """Raised when a persisted snapshot payload cannot be decoded."""

    def __init__(self, message: str, *, payload: bytes | None = None) -> None:
        super().__init__(message)
        self.payload = payload


__all__ = [
    "CheckpointCalcError",
    "MalformedNumberError",
    "SlotError",
    "SnapshotDecodeError",
]
