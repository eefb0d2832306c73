"""
Line protocol for the Pico Switch-controller firmware.

One command per line, ASCII, space separated, newline terminated:

    PRESS <button>+
    HOLD <button>+
    RELEASE <button>+
    STICK <stick> <h> <v>
    STATE <18 digits> [<lh> <lv> [<rh> <rv>]]
    SLEEP <seconds>

Keywords are case-insensitive on the device; '#' lines are comments.
The encode_* functions are pure and return the line without its terminator;
frame() adds the terminator and produces the bytes a transport writes.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from switchcontroller.controllers.types import (
    BUTTON_COUNT,
    BUTTON_ORDER,
    Button,
    ControllerState,
    Stick,
    StickMode,
    check_axes,
)
from switchcontroller.errors import EmptyButtonList, InvalidSleepDuration, ProtocolError
from switchcontroller.utils import format_number

LINE_TERMINATOR = "\n"

PRESS = "PRESS"
HOLD = "HOLD"
RELEASE = "RELEASE"
STICK = "STICK"
STATE = "STATE"
SLEEP = "SLEEP"

BUTTON_OPS = (PRESS, HOLD, RELEASE)
KEYWORDS = BUTTON_OPS + (STICK, STATE, SLEEP)

__all__ = [
    "LINE_TERMINATOR",
    "Command",
    "decode_tokens",
    "encode_hold",
    "encode_press",
    "encode_release",
    "encode_sleep",
    "encode_state",
    "encode_stick",
    "format_number",
    "frame",
    "parse_line",
]


# ----------------------------
# Encoding
# ----------------------------
def _button_tokens(op: str, buttons: Iterable[Button]) -> List[str]:
    # A str is iterable too; "ab" must not turn into two buttons.
    if isinstance(buttons, (str, bytes)):
        raise TypeError(f"{op} takes Button members, not a string: {buttons!r}")
    seq = list(buttons)
    if not seq:
        raise EmptyButtonList(op)
    for b in seq:
        if not isinstance(b, Button):
            raise TypeError(f"{op} takes Button members, got {b!r}")
    return [b.token for b in seq]


def _encode_buttons(op: str, buttons: Iterable[Button]) -> str:
    return " ".join([op] + _button_tokens(op, buttons))


def encode_press(buttons: Iterable[Button]) -> str:
    """PRESS line. The device holds the buttons for ~100ms and releases them itself."""
    return _encode_buttons(PRESS, buttons)


def encode_hold(buttons: Iterable[Button]) -> str:
    return _encode_buttons(HOLD, buttons)


def encode_release(buttons: Iterable[Button]) -> str:
    return _encode_buttons(RELEASE, buttons)


def encode_stick(stick: Stick, horizontal: float, vertical: float) -> str:
    if not isinstance(stick, Stick):
        raise TypeError(f"expected a Stick, got {stick!r}")
    h, v = check_axes(stick, horizontal, vertical)
    return f"{STICK} {stick.token} {format_number(h)} {format_number(v)}"


def encode_state(state: ControllerState, sticks: StickMode) -> str:
    return f"{STATE} {state.encode(sticks)}"


def encode_sleep(seconds: float) -> str:
    try:
        ok = math.isfinite(seconds) and seconds >= 0
    except (TypeError, OverflowError):
        ok = False
    if not ok:
        raise InvalidSleepDuration(seconds)
    return f"{SLEEP} {format_number(seconds)}"


def frame(line: str) -> bytes:
    """Terminate one command line and encode it for the wire."""
    if "\n" in line or "\r" in line:
        raise ValueError(f"command line must not contain line breaks: {line!r}")
    return (line + LINE_TERMINATOR).encode("ascii")


# ----------------------------
# Decoding (what the firmware does with a line)
# ----------------------------
@dataclass(frozen=True)
class Command:
    op: str
    buttons: Tuple[Button, ...] = ()
    stick: Optional[Stick] = None
    values: Tuple[float, ...] = ()
    bits: Optional[str] = None

    def to_state(self) -> ControllerState:
        """Rebuild the ControllerState a STATE command describes."""
        if self.op != STATE or self.bits is None:
            raise ProtocolError(f"{self.op} is not a STATE command")
        st = ControllerState()
        for b in BUTTON_ORDER:
            st.set_button(b, self.bits[b.bit] == "1")
        if len(self.values) >= 2:
            st.set_left_stick(*self.values[:2])
        if len(self.values) == 4:
            st.set_right_stick(*self.values[2:])
        return st

    @property
    def stick_mode(self) -> StickMode:
        return {0: StickMode.NONE, 2: StickMode.LEFT, 4: StickMode.BOTH}[len(self.values)]


def _floats(args: List[str], line: str) -> Tuple[float, ...]:
    try:
        vals = tuple(float(a) for a in args)
    except ValueError:
        raise ProtocolError("bad number", line) from None
    if not all(math.isfinite(v) for v in vals):
        raise ProtocolError("bad number", line)
    return vals


def parse_line(line: str) -> Optional[Command]:
    """
    Parse one command line. Returns None for blank lines and '#' comments.
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None

    op, *args = text.split()
    op = op.upper()

    if op in BUTTON_OPS:
        if not args:
            raise EmptyButtonList(op)
        return Command(op=op, buttons=tuple(Button.from_token(a) for a in args))

    if op == STICK:
        if len(args) != 3:
            raise ProtocolError("STICK takes <stick> <h> <v>", line)
        stick = Stick.from_token(args[0])
        h, v = _floats(args[1:], line)
        return Command(op=op, stick=stick, values=check_axes(stick, h, v))

    if op == STATE:
        if len(args) not in (1, 3, 5):
            raise ProtocolError("STATE takes 18 digits and 0, 2 or 4 stick values", line)
        bits = args[0]
        if len(bits) != BUTTON_COUNT or set(bits) - {"0", "1"}:
            raise ProtocolError(f"STATE needs exactly {BUTTON_COUNT} binary digits", line)
        vals = _floats(args[1:], line)
        if len(vals) >= 2:
            check_axes(Stick.LEFT, *vals[:2])
        if len(vals) == 4:
            check_axes(Stick.RIGHT, *vals[2:])
        return Command(op=op, values=vals, bits=bits)

    if op == SLEEP:
        if len(args) != 1:
            raise ProtocolError("SLEEP takes <seconds>", line)
        (seconds,) = _floats(args, line)
        if seconds < 0:
            raise InvalidSleepDuration(seconds)
        return Command(op=op, values=(seconds,))

    raise ProtocolError("unknown command", line)


def decode_tokens(line: str) -> List[Button]:
    """Buttons named by a PRESS/HOLD/RELEASE line, in the order given."""
    cmd = parse_line(line)
    if cmd is None or cmd.op not in BUTTON_OPS:
        raise ProtocolError("not a PRESS/HOLD/RELEASE line", line)
    return list(cmd.buttons)
