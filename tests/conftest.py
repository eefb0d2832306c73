from __future__ import annotations
from typing import List, Optional

import pytest

from switchcontroller.driver import SwitchController


class FakeTransport:
    """Records lines; optionally fails every write with `fail`."""

    def __init__(self, fail: Optional[BaseException] = None):
        self.lines: List[str] = []
        self.fail = fail
        self.closed = False

    def write_line(self, line: str) -> None:
        if self.fail is not None:
            raise self.fail
        self.lines.append(line)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def ctrl(transport: FakeTransport) -> SwitchController:
    return SwitchController(transport)


class ScriptedController:
    """Returns the given states in order; exceptions in the list are raised."""

    def __init__(self, states):
        self.states = list(states)

    def read_state(self):
        item = self.states.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item
