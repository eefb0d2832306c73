from __future__ import annotations

import os


def env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    return default if v is None else int(v)


def env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    return default if v is None else float(v)


def env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


# ============================
# Serial / Protocol
# ============================
SERIAL_PORT = env_str("SERIAL_PORT", "") or None  # None: scan /dev (Pico enumerates as CDC ACM)
SERIAL_BAUD = env_int("SERIAL_BAUD", 115200)
SERIAL_TIMEOUT_S = env_float("SERIAL_TIMEOUT_S", 1.0)
PORT_WAIT_S = env_float("PORT_WAIT_S", 0.0)

LOG_TX = env_bool("LOG_TX", False)
LOG_LEVEL = env_str("LOG_LEVEL", "INFO")

# ============================
# Demo runner
# ============================
DEMO_SLEEP_S = env_float("DEMO_SLEEP_S", 1.0)

# ============================
# Pad bridge
# ============================
CTRL_INDEX = env_int("CTRL_INDEX", 0)
CTRL_DEADZONE = env_float("CTRL_DEADZONE", 0.12)
TRIGGER_THRESHOLD = env_float("TRIGGER_THRESHOLD", 0.5)

BRIDGE_HZ = env_float("BRIDGE_HZ", 60.0)
MIN_SEND_INTERVAL_S = env_float("MIN_SEND_INTERVAL_S", 0.016)
MAX_STALE_S = env_float("MAX_STALE_S", 0.5)
