"""Help and not-found: commands that mostly print configured texts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from commands.base import CommandState, read_step, write_step

HELP_PROMPT = "help_prompt"
HELP_COMMANDS = "help_commands"
HELP_EXIT_HINT = "help_exit_hint"
HELP_UNKNOWN = "help_unknown"
HELP_TOPICS = {
    "add": "help_topic_add",
    "median": "help_topic_median",
    "rand": "help_topic_rand",
}
HELP_END = "end"

NOT_FOUND = "not_found"


@dataclass
class HelpState(CommandState):
    kind: ClassVar[str] = "help"

    # Last topic name entered, if any.
    topic: str | None = None


def create_help(accumulator: int) -> HelpState:
    return HelpState(
        accumulator,
        schedule=[
            write_step(HELP_PROMPT),
            write_step(HELP_COMMANDS),
            write_step(HELP_EXIT_HINT),
        ],
    )


def help_write(state: HelpState, step, context) -> None:
    context.console.write_line(context.parameters.message(step.message))
    if step.message == HELP_EXIT_HINT:
        state.extend(read_step())


def help_read(state: HelpState, step, context) -> None:
    topic = context.console.read_line().strip()
    state.topic = topic
    if topic == HELP_END:
        return
    if topic in HELP_TOPICS:
        state.extend(write_step(HELP_TOPICS[topic]), write_step(HELP_EXIT_HINT))
    else:
        state.extend(
            write_step(HELP_UNKNOWN),
            write_step(HELP_COMMANDS),
            write_step(HELP_EXIT_HINT),
        )


@dataclass
class NotFoundState(CommandState):
    kind: ClassVar[str] = "not_found"


def create_not_found(accumulator: int) -> NotFoundState:
    return NotFoundState(accumulator, schedule=[write_step(NOT_FOUND)])


def not_found_write(state: NotFoundState, step, context) -> None:
    context.console.write_line(context.parameters.message(step.message))
