from __future__ import annotations
import time
from dataclasses import dataclass
from typing import Optional

from switchcontroller.bridge.types import BridgeConfig


@dataclass
class SendDecider:
    """
    Decides whether a STATE line is worth sending.

    Sends the first line, any changed line once the rate limit allows,
    and resends an unchanged line after max_stale_s as a keepalive.
    """
    cfg: BridgeConfig
    last_send_t: float = 0.0
    last_line: Optional[str] = None

    def should_send(self, line: str) -> bool:
        now = time.time()

        if self.last_line is None:
            return True

        if now - self.last_send_t < self.cfg.min_send_interval_s:
            return False

        if line != self.last_line:
            return True

        return (now - self.last_send_t) >= self.cfg.max_stale_s

    def mark_sent(self, line: str) -> None:
        self.last_line = line
        self.last_send_t = time.time()
