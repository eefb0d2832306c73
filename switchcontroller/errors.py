from __future__ import annotations


class SwitchControllerError(Exception):
    """Base class for everything this package raises on purpose."""


class UnknownButton(SwitchControllerError, ValueError):
    def __init__(self, token: str):
        super().__init__(f"unknown button token: {token!r}")
        self.token = token


class UnknownStick(SwitchControllerError, ValueError):
    def __init__(self, token: str):
        super().__init__(f"unknown stick token: {token!r}")
        self.token = token


class EmptyButtonList(SwitchControllerError, ValueError):
    def __init__(self, op: str):
        super().__init__(f"{op} needs at least one button")
        self.op = op


class InvalidStickValue(SwitchControllerError, ValueError):
    def __init__(self, axis: str, value: float):
        super().__init__(f"{axis} axis out of range [-1.0, 1.0]: {value!r}")
        self.axis = axis
        self.value = value


class InvalidSleepDuration(SwitchControllerError, ValueError):
    def __init__(self, seconds: float):
        super().__init__(f"sleep duration must be a finite number >= 0: {seconds!r}")
        self.seconds = seconds


class ProtocolError(SwitchControllerError, ValueError):
    """A received/replayed line does not follow the command grammar."""

    def __init__(self, msg: str, line: str = ""):
        super().__init__(f"{msg}: {line!r}" if line else msg)
        self.line = line


class TransportError(SwitchControllerError):
    """
    Opaque failure from the serial side (open, write, disconnect).

    The original exception is kept as __cause__.
    """
