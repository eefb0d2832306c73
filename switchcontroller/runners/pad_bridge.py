from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from switchcontroller import config
from switchcontroller.bridge.bridge import PadBridge
from switchcontroller.bridge.mapping import SwitchLayoutMapper
from switchcontroller.bridge.types import BridgeConfig, MapTuning
from switchcontroller.controllers.types import Controller
from switchcontroller.driver import SwitchController
from switchcontroller.errors import SwitchControllerError
from switchcontroller.protocol.print_protocol import PrintOnlyTransport
from switchcontroller.utils import guess_serial_port

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Forward a local gamepad to the Pico Switch controller.")
    p.add_argument("port", nargs="?", default=config.SERIAL_PORT)
    p.add_argument("baud", nargs="?", type=int, default=config.SERIAL_BAUD)
    p.add_argument("--index", type=int, default=config.CTRL_INDEX, help="pygame joystick index")
    p.add_argument("--hz", type=float, default=config.BRIDGE_HZ)
    p.add_argument("--label-faces", action="store_true", help="map A->A, B->B... instead of by position")
    p.add_argument("--dry-run", action="store_true", help="print STATE lines instead of opening the port")
    return p.parse_args(argv)


def build_controller(args: argparse.Namespace) -> Controller:
    """pygame pad -> ControllerState. Needs the 'bridge' extra."""
    try:
        from switchcontroller.controllers.xbox_pygame import XboxController, XboxPygameAdapter
    except ImportError as e:
        raise RuntimeError(f"pad bridge needs pygame (pip install switchcontroller[bridge]): {e}") from e

    # pygame.error is a RuntimeError, as is "no controller found"
    raw = XboxController(index=args.index)
    logger.info("controller: %s", raw.name)
    tuning = MapTuning(
        deadzone=config.CTRL_DEADZONE,
        trigger_threshold=config.TRIGGER_THRESHOLD,
        positional_faces=not args.label_faces,
    )
    return XboxPygameAdapter(raw, SwitchLayoutMapper(tuning))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)-5s: %(name)s: %(message)s")

    logger.info("Pad -> Switch bridge starting. Ctrl+C to exit.")

    cfg = BridgeConfig(
        hz=args.hz,
        min_send_interval_s=config.MIN_SEND_INTERVAL_S,
        max_stale_s=config.MAX_STALE_S,
    )

    try:
        # 1) Controller
        controller = build_controller(args)

        # 2) Serial
        if args.dry_run:
            switch = SwitchController(PrintOnlyTransport())
        else:
            port = guess_serial_port(args.port, wait_s=config.PORT_WAIT_S)
            logger.info("Serial: %s @ %d", port, args.baud)
            switch = SwitchController.open(
                port, args.baud, timeout_s=config.SERIAL_TIMEOUT_S, log_tx=config.LOG_TX
            )

        # 3) Bridge
        with switch:
            PadBridge(controller, switch, cfg).run_forever()
    except KeyboardInterrupt:
        logger.info("Stopping.")
    except (SwitchControllerError, FileNotFoundError, RuntimeError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
