from switchcontroller.controllers.types import Button, ControllerState, Stick, StickMode
from switchcontroller.driver import SwitchController
from switchcontroller.errors import (
    EmptyButtonList,
    InvalidSleepDuration,
    InvalidStickValue,
    ProtocolError,
    SwitchControllerError,
    TransportError,
    UnknownButton,
    UnknownStick,
)
from switchcontroller.protocol.print_protocol import PrintOnlyTransport
from switchcontroller.protocol.serial_transport import SerialTransport, Transport

__version__ = "0.1.0"
