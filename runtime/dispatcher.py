"""Session loop: resume any in-flight command, then serve console lines."""

from __future__ import annotations

import logging

from commands.base import CommandState
from commands.codec import decode_snapshot
from commands.context import CommandContext
from commands.executor import checkpoint, run_command
from commands.registry import EXIT, get_command
from parameters.session_parameters import SessionParameters

logger = logging.getLogger("checkpoint_calc")


class Dispatcher:
    """Owns the session accumulator and the single active command."""

    def __init__(self, console, slot, parameters: SessionParameters | None = None):
        self.parameters = parameters if parameters is not None else SessionParameters()
        self.context = CommandContext(console, slot, self.parameters)
        self.accumulator = int(self.parameters.get("initial_accumulator"))
        self.active: CommandState | None = None

    @property
    def slot(self):
        return self.context.slot

    def resume(self) -> CommandState | None:
        """Finish the command left in the slot by a previous process, if any.

        The resumed command's accumulator becomes the session accumulator,
        which is how the rand sequence survives restarts.
        """
        payload = self.slot.read()
        if not payload:
            logger.debug("Slot is empty; starting a fresh session.")
            return None

        state = decode_snapshot(payload)
        if state.done:
            logger.debug("Last %s command already finished.", state.kind)
        else:
            logger.info(
                "Resuming %s command at step %d/%d.",
                state.kind,
                state.cursor + 1,
                len(state.schedule),
            )
        self.active = state
        run_command(state, self.context)
        self.active = None
        self.accumulator = state.accumulator
        return state

    def execute_line(self, line: str) -> bool:
        """Run the command named by ``line``. Returns False once the session ends."""
        name = (line or "").strip()
        if name == EXIT:
            self.slot.write(b"")
            logger.info("Session closed; slot cleared.")
            return False

        spec = get_command(name)
        state = spec.create(self.accumulator)
        self.active = state
        # The fresh state is persisted before its first step so a crash right
        # after the command word was read still resumes this command.
        checkpoint(state, self.context)
        run_command(state, self.context)
        self.active = None
        if spec.updates_accumulator:
            self.accumulator = state.accumulator
        return True

    def run(self) -> None:
        """Resume, then read and execute lines until ``exit``.

        ``EOFError`` from the console propagates without touching the slot;
        the next start resumes from the last checkpoint.
        """
        self.resume()
        while self.execute_line(self.context.console.read_line()):
            pass
