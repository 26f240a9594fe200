# storage/base.py
"""Slot interface and the in-process implementation."""

from __future__ import annotations

from typing import Protocol


class Slot(Protocol):
    """A single durable blob.

    ``write`` must leave the slot holding either the previous or the new
    content, never a mix of both. ``read`` returns ``b""`` when nothing has
    been committed; an empty payload is also how callers mark "no command in
    flight".
    """

    def read(self) -> bytes: ...

    def write(self, content: bytes) -> None: ...


class MemorySlot:
    """In-memory slot; content is lost on process exit."""

    def __init__(self, content: bytes = b"") -> None:
        self._content = bytes(content)
        self.write_count = 0

    def read(self) -> bytes:
        return self._content

    def write(self, content: bytes) -> None:
        self._content = bytes(content)
        self.write_count += 1
