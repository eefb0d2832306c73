from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass
class RawPadState:
    axes: Dict[str, float]     # pygame axes, -1.0..1.0 (LY/RY: up is -1.0)
    buttons: Dict[str, int]
    hat: Tuple[int, int]       # (x, y), y=+1 is up


@dataclass(frozen=True)
class MapTuning:
    deadzone: float = 0.12
    trigger_threshold: float = 0.5
    invert_y: bool = True      # pygame up is -1.0, Switch up is +1.0
    positional_faces: bool = True  # Xbox A (bottom) -> Switch B (bottom), etc.


@dataclass(frozen=True)
class BridgeConfig:
    hz: float = 60.0
    neutral_on_disconnect: bool = True
    neutral_on_exit: bool = True

    # send behavior
    min_send_interval_s: float = 0.016
    max_stale_s: float = 0.5
