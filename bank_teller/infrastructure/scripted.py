"""In-memory Communicate double driven by a fixed script of input lines"""

from collections import deque
from typing import Iterable, List, Optional

from bank_teller.infrastructure.communicate import first_char


class ScriptedCommunicate:
    """
    Replays input lines in order and records everything written.

    Output is kept as one entry per write; write_line entries end in "\\n".
    Reading past the end of the script raises EOFError, like a closed terminal.
    """

    def __init__(self, lines: Iterable[str] = ()):
        self._input = deque(lines)
        self.output: List[str] = []

    def read_line(self) -> str:
        if not self._input:
            raise EOFError("Script exhausted")
        return self._input.popleft()

    def read_char(self) -> Optional[str]:
        return first_char(self.read_line())

    def write(self, message: str) -> None:
        self.output.append(message)

    def write_line(self, message: str) -> None:
        self.output.append(message + "\n")

    @property
    def remaining(self) -> int:
        """Number of scripted lines not yet read"""
        return len(self._input)

    @property
    def transcript(self) -> str:
        """Everything written so far, as it would appear on a terminal"""
        return "".join(self.output)
