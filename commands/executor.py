"""Step-by-step execution with a checkpoint after every step."""

from __future__ import annotations

import logging

from commands.base import CommandState
from commands.codec import encode_snapshot
from commands.registry import spec_for

logger = logging.getLogger("checkpoint_calc")


def checkpoint(state: CommandState, context) -> None:
    """Persist the full snapshot of ``state`` to ``context.slot``."""
    context.slot.write(encode_snapshot(state))
    logger.debug(
        "Checkpointed %s at step %d/%d", state.kind, state.cursor, len(state.schedule)
    )


def run_command(state: CommandState, context) -> CommandState:
    """Perform the remaining steps of ``state``.

    Each step does one console interaction, advances the cursor and is
    checkpointed before the next step begins, so an interrupted run can be
    continued from the slot without repeating or skipping an interaction.
    A state that is already done is returned unchanged.
    """
    spec = spec_for(state)
    while not state.done:
        step = state.next_step
        spec.handler_for(step)(state, step, context)
        state.cursor += 1
        checkpoint(state, context)
    return state
