"""Add and median: commands that read integers and print one result."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

import numpy as np

from commands.base import CommandState, read_step, write_step
from commands.formatting import format_number, parse_int


@dataclass
class AddState(CommandState):
    kind: ClassVar[str] = "add"

    inputs: list[int] = field(default_factory=list)


def create_add(accumulator: int) -> AddState:
    return AddState(accumulator, schedule=[read_step(), read_step(), write_step()])


def add_read(state: AddState, step, context) -> None:
    state.inputs.append(parse_int(context.console.read_line()))


def add_write(state: AddState, step, context) -> None:
    context.console.write_line(format_number(sum(state.inputs)))


@dataclass
class MedianState(CommandState):
    kind: ClassVar[str] = "median"

    # None until the leading count line has been read.
    count: int | None = None
    inputs: list[int] = field(default_factory=list)


def create_median(accumulator: int) -> MedianState:
    return MedianState(accumulator, schedule=[read_step()])


def median_read(state: MedianState, step, context) -> None:
    value = parse_int(context.console.read_line())
    if state.count is None:
        state.count = value
        state.schedule.extend(read_step() for _ in range(value))
        state.extend(write_step())
    else:
        state.inputs.append(value)


def median_write(state: MedianState, step, context) -> None:
    context.console.write_line(format_number(median(state.inputs)))


def median(values) -> int | float:
    """Median of ``values``; 0 for an empty sequence.

    Odd counts return the middle element unchanged, even counts the mean of
    the two middle elements as a float.
    """
    if len(values) == 0:
        return 0
    ordered = np.sort(np.asarray(values, dtype=np.int64))
    mid = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return int(ordered[mid])
    return (int(ordered[mid - 1]) + int(ordered[mid])) / 2
