from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from switchcontroller.protocol.line_protocol import frame


@dataclass
class PrintOnlyTransport:
    """
    Drop-in stand-in for SerialTransport.
    Prints each command line instead of writing to serial, and keeps them in `lines`.
    """
    echo: bool = True
    lines: List[str] = field(default_factory=list)
    closed: bool = False

    def write_line(self, line: str) -> None:
        frame(line)  # same framing checks as the real thing
        self.lines.append(line)
        if self.echo:
            print(line)

    def close(self) -> None:
        self.closed = True
