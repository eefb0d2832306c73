"""
Pad bridge: poll a physical pad, forward it to the Switch as STATE lines.

  - Input (controller adapter -> ControllerState)
  - Transport (SwitchController over serial)
  - Orchestration (this loop, with change detection and a keepalive)

Each frame is one full STATE with both sticks, so the device never
drifts from the pad even if a line is lost.
"""
from __future__ import annotations
import logging
import time
from dataclasses import dataclass, field

from switchcontroller.bridge.filters import SendDecider
from switchcontroller.bridge.types import BridgeConfig
from switchcontroller.controllers.types import Controller, ControllerState, StickMode
from switchcontroller.driver import SwitchController
from switchcontroller.errors import TransportError
from switchcontroller.protocol.line_protocol import encode_state

logger = logging.getLogger(__name__)


@dataclass
class PadBridge:
    controller: Controller
    switch: SwitchController
    cfg: BridgeConfig = BridgeConfig()
    decider: SendDecider = field(init=False)

    def __post_init__(self) -> None:
        self.decider = SendDecider(self.cfg)

    def send_neutral(self) -> None:
        neutral = ControllerState()
        self.switch.state(neutral, StickMode.BOTH)
        self.decider.mark_sent(encode_state(neutral, StickMode.BOTH))

    def step(self) -> bool:
        """One poll. Returns True if a line was sent."""
        try:
            st = self.controller.read_state()
        except Exception:
            if self.cfg.neutral_on_disconnect:
                logger.warning("controller read failed, sending neutral state")
                self.send_neutral()
            raise

        line = encode_state(st, StickMode.BOTH)
        if not self.decider.should_send(line):
            return False

        self.switch.state(st, StickMode.BOTH)
        self.decider.mark_sent(line)
        return True

    def run_forever(self) -> None:
        period = 1.0 / max(1.0, self.cfg.hz)
        try:
            while True:
                loop_start = time.time()
                self.step()

                # Maintain rate
                elapsed = time.time() - loop_start
                sleep_s = period - elapsed
                if sleep_s > 0:
                    time.sleep(sleep_s)
        finally:
            if self.cfg.neutral_on_exit:
                try:
                    self.send_neutral()
                except TransportError as e:
                    logger.warning("could not send neutral state on exit: %s", e)
