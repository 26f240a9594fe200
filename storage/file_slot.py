# storage/file_slot.py
"""File-backed slot with a crash-safe replace protocol.

A write goes through three steps:

1. the payload is written and fsynced to ``<path>_tmp``;
2. ``<path>`` is deleted;
3. ``<path>_tmp`` is renamed to ``<path>``.

A crash before (2) leaves the old canonical file in place. A crash between
(2) and (3) leaves only the temporary file, which already holds the complete
new payload; :meth:`FileSlot.read` detects that state and finishes the rename
before returning. A torn temporary file is never visible because the
canonical file still exists whenever the temporary one may be incomplete.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from core.exceptions import SlotError

logger = logging.getLogger("checkpoint_calc")


class FileSlot:
    """Durable slot stored at ``path``."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    @property
    def temporary_path(self) -> Path:
        return self.path.with_name(self.path.name + "_tmp")

    def read(self) -> bytes:
        try:
            if self.path.exists():
                return self.path.read_bytes()
            if self.temporary_path.exists():
                logger.info(
                    "Found uncommitted slot write at %s; completing it.",
                    self.temporary_path,
                )
                self._promote()
                return self.path.read_bytes()
        except OSError as exc:
            raise SlotError(self.path, f"Could not read slot: {exc}") from exc
        return b""

    def write(self, content: bytes) -> None:
        try:
            self._write_temporary(content)
            if self.path.exists():
                self.path.unlink()
            self._promote()
        except OSError as exc:
            raise SlotError(self.path, f"Could not write slot: {exc}") from exc
        logger.debug("Committed %d bytes to %s", len(content), self.path)

    def _write_temporary(self, content: bytes) -> None:
        with open(self.temporary_path, "wb") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

    def _promote(self) -> None:
        os.rename(self.temporary_path, self.path)
        _fsync_directory(self.path.parent)


def _fsync_directory(directory: Path) -> None:
    # Directory fsync makes the rename itself durable; not every platform
    # allows opening a directory, so this is best effort.
    try:
        fd = os.open(str(directory), os.O_RDONLY)
    except OSError:
        return
    try:
        os.fsync(fd)
    except OSError:
        pass
    finally:
        os.close(fd)
