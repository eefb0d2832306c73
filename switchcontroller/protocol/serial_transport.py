from __future__ import annotations
import logging
from typing import Optional, Protocol

import serial

from switchcontroller.errors import TransportError
from switchcontroller.protocol.line_protocol import frame
from switchcontroller.utils import _escape_bytes

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Where command lines go. One exclusive handle to one device."""
    def write_line(self, line: str) -> None: ...
    def close(self) -> None: ...


# ----------------------------
# Transport layer (line protocol over USB serial)
# ----------------------------
class SerialTransport:
    def __init__(self, ser: serial.Serial, *, log_tx: bool = False):
        self.ser = ser
        self.log_tx = log_tx

    @classmethod
    def open(cls, port: str, baud: int = 115200, *, timeout_s: float = 1.0, log_tx: bool = False) -> "SerialTransport":
        try:
            ser = serial.Serial(port, baudrate=baud, timeout=timeout_s, write_timeout=timeout_s)
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"could not open {port}: {e}") from e
        logger.info("opened serial %s @ %d", port, baud)
        return cls(ser, log_tx=log_tx)

    @classmethod
    def from_serial(cls, ser: serial.Serial, *, log_tx: bool = False) -> "SerialTransport":
        return cls(ser, log_tx=log_tx)

    @property
    def port(self) -> Optional[str]:
        return getattr(self.ser, "port", None)

    def write_line(self, line: str) -> None:
        raw = frame(line)

        if self.log_tx:
            logger.info("TX_RAW : %s", _escape_bytes(raw))
        else:
            logger.debug("TX_RAW : %s", _escape_bytes(raw))

        try:
            self.ser.write(raw)
            self.ser.flush()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"write to {self.port} failed: {e}") from e

    def close(self) -> None:
        try:
            self.ser.close()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"close of {self.port} failed: {e}") from e
        logger.info("closed serial %s", self.port)

    def __enter__(self) -> "SerialTransport":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
