"""Line-oriented console transport."""

from __future__ import annotations

import sys
from collections import deque
from typing import Iterable, Protocol, TextIO


class UserConsole(Protocol):
    def read_line(self) -> str: ...

    def write_line(self, text: str) -> None: ...


class StreamConsole:
    """Console over text streams.

    ``preload`` lines are served before anything is read from ``input_stream``
    (used for ``--instructions`` files). ``read_line`` raises ``EOFError`` once
    input is exhausted.
    """

    def __init__(
        self,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        *,
        preload: Iterable[str] = (),
    ) -> None:
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self._pending = deque(line.rstrip("\r\n") for line in preload)

    def read_line(self) -> str:
        if self._pending:
            return self._pending.popleft()
        line = self.input_stream.readline()
        if line == "":
            raise EOFError("console input exhausted")
        return line.rstrip("\r\n")

    def write_line(self, text: str) -> None:
        self.output_stream.write(f"{text}\n")
        self.output_stream.flush()
