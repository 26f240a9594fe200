"""Park-Miller pseudo-random sequence over the session accumulator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from commands.base import CommandState, read_step, write_step
from commands.formatting import format_number, parse_int

MULTIPLIER = 16807
MODULUS = 2**31 - 1


def next_value(x: int) -> int:
    """One Lehmer step: ``(16807 * x) mod (2**31 - 1)``."""
    return MULTIPLIER * x % MODULUS


@dataclass
class RandState(CommandState):
    kind: ClassVar[str] = "rand"

    # None until the count line has been read.
    requested: int | None = None


def create_rand(accumulator: int) -> RandState:
    return RandState(accumulator, schedule=[read_step()])


def rand_read(state: RandState, step, context) -> None:
    state.requested = parse_int(context.console.read_line())
    # Exactly one write per requested value; non-positive counts add nothing.
    state.schedule.extend(write_step() for _ in range(state.requested))


def rand_write(state: RandState, step, context) -> None:
    context.console.write_line(format_number(state.accumulator))
    state.accumulator = next_value(state.accumulator)
