"""Plain-data building blocks shared by every command kind."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

READ = "read"
WRITE = "write"
ACTIONS = (READ, WRITE)


@dataclass(frozen=True, slots=True)
class Step:
    """One scheduled console interaction.

    ``message`` names a configured text for writes that emit fixed messages
    (help, not-found); computed writes leave it as ``None``.
    """

    action: str
    message: str | None = None


def read_step() -> Step:
    return Step(READ)


def write_step(message: str | None = None) -> Step:
    return Step(WRITE, message)


@dataclass
class CommandState:
    """Execution state of one command.

    Steps before ``cursor`` have been performed; the command is done once the
    cursor reaches the end of ``schedule``. Subclasses add the data each kind
    accumulates and set ``kind`` to their registry tag.
    """

    kind: ClassVar[str] = ""

    accumulator: int
    schedule: list[Step] = field(default_factory=list)
    cursor: int = 0

    @property
    def done(self) -> bool:
        return self.cursor == len(self.schedule)

    @property
    def next_step(self) -> Step:
        return self.schedule[self.cursor]

    def extend(self, *steps: Step) -> None:
        self.schedule.extend(steps)
