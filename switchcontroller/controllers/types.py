from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Protocol, Tuple

from switchcontroller.errors import InvalidStickValue, UnknownButton, UnknownStick
from switchcontroller.utils import format_number, in_unit_range


class Button(Enum):
    """Switch controller button. The value is the wire token."""
    A = "a"
    B = "b"
    X = "x"
    Y = "y"
    L = "l"
    R = "r"
    ZL = "zl"
    ZR = "zr"
    PLUS = "plus"
    MINUS = "minus"
    HOME = "home"
    CAPTURE = "capture"
    L_STICK = "l_stick"
    R_STICK = "r_stick"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"

    @property
    def token(self) -> str:
        return self.value

    @property
    def bit(self) -> int:
        return BUTTON_BITS[self]

    @classmethod
    def from_token(cls, token: str) -> "Button":
        try:
            return _BUTTON_BY_TOKEN[token.strip().lower()]
        except (KeyError, AttributeError):
            raise UnknownButton(token) from None

    def __str__(self) -> str:
        return self.value


class Stick(Enum):
    LEFT = "l_stick"
    RIGHT = "r_stick"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def from_token(cls, token: str) -> "Stick":
        try:
            return _STICK_BY_TOKEN[token.strip().lower()]
        except (KeyError, AttributeError):
            raise UnknownStick(token) from None

    def __str__(self) -> str:
        return self.value


class StickMode(Enum):
    """
    How many stick pairs a STATE line carries.

      NONE -> digits only (sticks untouched on the device)
      LEFT -> digits LH LV
      BOTH -> digits LH LV RH RV
    """
    NONE = 0
    LEFT = 1
    BOTH = 2


# Position of each button in the STATE digit string. Kept as an explicit table
# so reordering the enum never changes the wire format.
BUTTON_BITS: Dict[Button, int] = {
    Button.A: 0,
    Button.B: 1,
    Button.X: 2,
    Button.Y: 3,
    Button.L: 4,
    Button.R: 5,
    Button.ZL: 6,
    Button.ZR: 7,
    Button.PLUS: 8,
    Button.MINUS: 9,
    Button.HOME: 10,
    Button.CAPTURE: 11,
    Button.L_STICK: 12,
    Button.R_STICK: 13,
    Button.DPAD_UP: 14,
    Button.DPAD_DOWN: 15,
    Button.DPAD_LEFT: 16,
    Button.DPAD_RIGHT: 17,
}

BUTTON_COUNT = len(BUTTON_BITS)
BUTTON_ORDER: Tuple[Button, ...] = tuple(sorted(BUTTON_BITS, key=BUTTON_BITS.__getitem__))

_BUTTON_BY_TOKEN: Dict[str, Button] = {b.value: b for b in Button}
_STICK_BY_TOKEN: Dict[str, Stick] = {s.value: s for s in Stick}

assert sorted(BUTTON_BITS.values()) == list(range(BUTTON_COUNT)) == list(range(len(Button)))


def check_axes(stick: Stick, horizontal: float, vertical: float) -> Tuple[float, float]:
    """Validate one stick pair; returns it as floats."""
    if not in_unit_range(horizontal):
        raise InvalidStickValue(f"{stick.token} horizontal", horizontal)
    if not in_unit_range(vertical):
        raise InvalidStickValue(f"{stick.token} vertical", vertical)
    return float(horizontal), float(vertical)


def check_pair(stick: Stick, pair: Tuple[float, float]) -> Tuple[float, float]:
    try:
        horizontal, vertical = pair
    except (TypeError, ValueError):
        raise InvalidStickValue(stick.token, pair) from None
    return check_axes(stick, horizontal, vertical)


def check_buttons(buttons: List[bool]) -> None:
    if len(buttons) != BUTTON_COUNT:
        raise ValueError(f"expected {BUTTON_COUNT} button states, got {len(buttons)}")


@dataclass
class ControllerState:
    """
    Full controller snapshot for the STATE command.

    Mutable builder: set what you need, encode, reuse or throw away.
    Sticks are (horizontal, vertical), each in [-1.0, 1.0]; center is 0.0.
    Values assigned directly to the fields are checked again at encode time.
    """
    buttons: List[bool] = field(default_factory=lambda: [False] * BUTTON_COUNT)
    left_stick: Tuple[float, float] = (0.0, 0.0)
    right_stick: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.buttons = [bool(p) for p in self.buttons]
        check_buttons(self.buttons)
        self.left_stick = check_pair(Stick.LEFT, self.left_stick)
        self.right_stick = check_pair(Stick.RIGHT, self.right_stick)

    def set_button(self, button: Button, pressed: bool) -> "ControllerState":
        self.buttons[button.bit] = bool(pressed)
        return self

    def button(self, button: Button) -> bool:
        return self.buttons[button.bit]

    def set_stick(self, stick: Stick, horizontal: float, vertical: float) -> "ControllerState":
        pair = check_axes(stick, horizontal, vertical)
        if stick is Stick.LEFT:
            self.left_stick = pair
        else:
            self.right_stick = pair
        return self

    def set_left_stick(self, horizontal: float, vertical: float) -> "ControllerState":
        return self.set_stick(Stick.LEFT, horizontal, vertical)

    def set_right_stick(self, horizontal: float, vertical: float) -> "ControllerState":
        return self.set_stick(Stick.RIGHT, horizontal, vertical)

    def stick(self, stick: Stick) -> Tuple[float, float]:
        return self.left_stick if stick is Stick.LEFT else self.right_stick

    def pressed(self) -> List[Button]:
        return [b for b in BUTTON_ORDER if self.buttons[b.bit]]

    def reset(self) -> "ControllerState":
        self.buttons = [False] * BUTTON_COUNT
        self.left_stick = (0.0, 0.0)
        self.right_stick = (0.0, 0.0)
        return self

    def bits(self) -> str:
        check_buttons(self.buttons)
        out = "".join("1" if p else "0" for p in self.buttons)
        return out

    def encode(self, sticks: StickMode) -> str:
        """
        STATE payload: 18 digits, then 0, 2 or 4 stick numbers depending on `sticks`.
        """
        if not isinstance(sticks, StickMode):
            raise TypeError(f"sticks must be a StickMode, got {sticks!r}")

        parts = [self.bits()]
        if sticks in (StickMode.LEFT, StickMode.BOTH):
            parts += [format_number(v) for v in check_pair(Stick.LEFT, self.left_stick)]
        if sticks is StickMode.BOTH:
            parts += [format_number(v) for v in check_pair(Stick.RIGHT, self.right_stick)]
        return " ".join(parts)


class Controller(Protocol):
    """Anything that can be polled for a Switch-shaped snapshot (see bridge)."""
    def read_state(self) -> ControllerState: ...
