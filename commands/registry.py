"""Central table of command kinds.

Every :class:`~commands.base.CommandState` subclass must have exactly one
entry here; :func:`_check_exhaustive` enforces that at import time so a new
kind cannot be added without its handlers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from commands.arithmetic import (
    AddState,
    MedianState,
    add_read,
    add_write,
    create_add,
    create_median,
    median_read,
    median_write,
)
from commands.base import READ, WRITE, CommandState, Step
from commands.meta import (
    HelpState,
    NotFoundState,
    create_help,
    create_not_found,
    help_read,
    help_write,
    not_found_write,
)
from commands.rand import RandState, create_rand, rand_read, rand_write

StepHandler = Callable[[CommandState, Step, object], None]


@dataclass(frozen=True)
class CommandSpec:
    state_type: type[CommandState]
    create: Callable[[int], CommandState]
    read: StepHandler | None
    write: StepHandler | None
    # Whether the session adopts the command's final accumulator.
    updates_accumulator: bool = False

    @property
    def kind(self) -> str:
        return self.state_type.kind

    def handler_for(self, step: Step) -> StepHandler:
        if step.action == READ:
            handler = self.read
        elif step.action == WRITE:
            handler = self.write
        else:
            raise ValueError(f"Unknown step action {step.action!r}")
        if handler is None:
            raise ValueError(f"Command '{self.kind}' has no {step.action} steps")
        return handler


COMMAND_REGISTRY = {
    spec.kind: spec
    for spec in (
        CommandSpec(AddState, create_add, add_read, add_write),
        CommandSpec(MedianState, create_median, median_read, median_write),
        CommandSpec(
            RandState, create_rand, rand_read, rand_write, updates_accumulator=True
        ),
        CommandSpec(HelpState, create_help, help_read, help_write),
        CommandSpec(NotFoundState, create_not_found, None, not_found_write),
    )
}

# Console words that start a command. "exit" is handled by the dispatcher.
VOCABULARY = {
    "add": AddState.kind,
    "median": MedianState.kind,
    "rand": RandState.kind,
    "help": HelpState.kind,
}
EXIT = "exit"


def get_command(name: str) -> CommandSpec:
    """Return the CommandSpec for console word ``name``; unknown words map to
    not-found.

    Matching is exact and case-sensitive; callers strip the line first.
    """
    return COMMAND_REGISTRY[VOCABULARY.get(name, NotFoundState.kind)]


def spec_for(state: CommandState) -> CommandSpec:
    return COMMAND_REGISTRY[state.kind]


def _check_exhaustive() -> None:
    declared = {cls.kind for cls in CommandState.__subclasses__()}
    missing = declared - set(COMMAND_REGISTRY)
    if missing:
        raise RuntimeError(f"Command kinds without handlers: {sorted(missing)}")


_check_exhaustive()
