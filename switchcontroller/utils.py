import glob
import math
import os
import time
from decimal import Decimal
from typing import Optional


# ----------------------------
# Utilities
# ----------------------------
def clamp(n: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, n))


def apply_deadzone(x: float, deadzone: float) -> float:
    return 0.0 if abs(x) < deadzone else x


def in_unit_range(x: float) -> bool:
    """True for -1.0 <= x <= 1.0. NaN, non-numbers and huge ints are never in range."""
    try:
        return not math.isnan(x) and -1.0 <= x <= 1.0
    except (TypeError, OverflowError):
        return False


def format_number(x: float) -> str:
    """
    Shortest decimal that reads back as the same float, never in exponent form.

      0.5 -> "0.5", 0.0 -> "0", -1.0 -> "-1", 1e-05 -> "0.00001"
    """
    x = float(x)
    if not math.isfinite(x):
        raise ValueError(f"cannot format non-finite number: {x!r}")
    if x == 0.0:
        return "0"  # also folds -0.0
    s = format(Decimal(repr(x)), "f")
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _escape_bytes(b: bytes, max_len: int = 240) -> str:
    if len(b) > max_len:
        b = b[:max_len] + b"..."
    return b.decode("utf-8", "backslashreplace").replace("\n", "\\n").replace("\r", "\\r")


def list_serial_candidates() -> list[str]:
    """
    Return candidate serial device paths, ordered by preference.

    Preference:
      1) Stable symlinks: /dev/serial/by-id/*
      2) CDC ACM devices: /dev/ttyACM*  (the Pico shows up here)
      3) USB serial bridges: /dev/ttyUSB*
    """
    candidates: list[str] = []
    candidates += sorted(glob.glob("/dev/serial/by-id/*"))
    candidates += sorted(glob.glob("/dev/ttyACM*"))
    candidates += sorted(glob.glob("/dev/ttyUSB*"))

    out: list[str] = []
    for p in candidates:
        if os.path.exists(p):
            out.append(p)
    return out


def guess_serial_port(preferred: Optional[str] = None, *, wait_s: float = 0.0) -> str:
    """
    Serial port selection.

    - If 'preferred' is given, return it unchanged; opening it is what fails if it is wrong.
    - Otherwise scan known device patterns.
    - If wait_s > 0, keep scanning until timeout (the Pico can enumerate slowly after a reset).
    """
    if preferred:
        return preferred

    deadline = time.time() + max(0.0, wait_s)
    while True:
        candidates = list_serial_candidates()
        if candidates:
            return candidates[0]
        if time.time() >= deadline:
            break
        time.sleep(0.1)

    raise FileNotFoundError(
        "No serial port found. Looked for /dev/serial/by-id/*, /dev/ttyACM*, /dev/ttyUSB*."
    )
