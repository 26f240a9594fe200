from dataclasses import dataclass, field

from parameters.session_parameters import SessionParameters
from runtime.console import UserConsole
from storage.base import Slot


@dataclass
class CommandContext:
    """Transient collaborators a command runs against.

    None of these are part of a snapshot; a resumed command is handed a fresh
    context before its next step.
    """

    console: UserConsole
    slot: Slot
    parameters: SessionParameters = field(default_factory=SessionParameters)
