from __future__ import annotations
import logging
from typing import Iterable

import serial

from switchcontroller.controllers.types import Button, ControllerState, Stick, StickMode
from switchcontroller.errors import TransportError
from switchcontroller.protocol import line_protocol as lp
from switchcontroller.protocol.serial_transport import SerialTransport, Transport

logger = logging.getLogger(__name__)


class SwitchController:
    """
    A connection to the Pico Switch-controller over a line transport.

    Every call validates, encodes one line and hands it to the transport.
    Nothing waits on the device: there are no replies, and PRESS/SLEEP
    timing is carried out on the device side. Not thread safe; share one
    instance across threads only behind your own lock.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    @classmethod
    def open(cls, port: str, baud: int = 115200, *, timeout_s: float = 1.0, log_tx: bool = False) -> "SwitchController":
        """Open a serial connection to the Pico (e.g. /dev/ttyACM0)."""
        return cls(SerialTransport.open(port, baud, timeout_s=timeout_s, log_tx=log_tx))

    @classmethod
    def from_serial(cls, ser: serial.Serial, *, log_tx: bool = False) -> "SwitchController":
        """Wrap an already-opened pyserial port."""
        return cls(SerialTransport.from_serial(ser, log_tx=log_tx))

    def _send(self, line: str) -> None:
        try:
            self.transport.write_line(line)
        except TransportError:
            raise
        except OSError as e:
            raise TransportError(f"transport write failed: {e}") from e

    def press(self, buttons: Iterable[Button]) -> None:
        """Press and release one or more buttons together (device holds them ~100ms)."""
        self._send(lp.encode_press(buttons))

    def hold(self, buttons: Iterable[Button]) -> None:
        """Hold buttons down until an explicit release()."""
        self._send(lp.encode_hold(buttons))

    def release(self, buttons: Iterable[Button]) -> None:
        self._send(lp.encode_release(buttons))

    def stick(self, stick: Stick, horizontal: float, vertical: float) -> None:
        """Set an analog stick position. Values range from -1.0 to 1.0."""
        self._send(lp.encode_stick(stick, horizontal, vertical))

    def state(self, state: ControllerState, sticks: StickMode) -> None:
        """Set the whole controller in one command; `sticks` picks which stick pairs are sent."""
        self._send(lp.encode_state(state, sticks))

    def sleep(self, seconds: float) -> None:
        """Pause command processing on the device. Does not block this process."""
        self._send(lp.encode_sleep(seconds))

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "SwitchController":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
