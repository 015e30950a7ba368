"""Text channel between the teller and the customer"""

import sys
from typing import Optional, Protocol, TextIO


class Communicate(Protocol):
    """Blocking, line-oriented text interface used by the teller"""

    def read_line(self) -> str: ...

    def read_char(self) -> Optional[str]: ...

    def write(self, message: str) -> None: ...

    def write_line(self, message: str) -> None: ...


def first_char(line: str) -> Optional[str]:
    """First character of a line without its terminator, or None for an empty line"""
    line = line.rstrip("\r\n")
    return line[0] if line else None


class ConsoleCommunicate:
    """Communicate over a terminal (stdin/stdout unless other streams are given)"""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def read_line(self) -> str:
        """
        Block until a full line is available.

        Raises:
            EOFError: When the input stream is exhausted
        """
        line = self.stdin.readline()
        if not line:
            raise EOFError("End of input")
        return line

    def read_char(self) -> Optional[str]:
        return first_char(self.read_line())

    def write(self, message: str) -> None:
        self.stdout.write(message)
        self.stdout.flush()

    def write_line(self, message: str) -> None:
        self.stdout.write(message + "\n")
        self.stdout.flush()
