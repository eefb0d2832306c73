from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from switchcontroller import config
from switchcontroller.controllers.types import Button, Stick
from switchcontroller.driver import SwitchController
from switchcontroller.errors import SwitchControllerError
from switchcontroller.protocol.print_protocol import PrintOnlyTransport
from switchcontroller.utils import guess_serial_port

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Send a short command sequence to the Pico Switch controller.")
    p.add_argument("port", nargs="?", default=config.SERIAL_PORT, help="serial port, e.g. /dev/ttyACM0 (default: scan)")
    p.add_argument("baud", nargs="?", type=int, default=config.SERIAL_BAUD)
    p.add_argument("--sleep", type=float, default=config.DEMO_SLEEP_S, help="device-side pause between presses")
    p.add_argument("--dry-run", action="store_true", help="print the lines instead of opening the port")
    return p.parse_args(argv)


def run(ctrl: SwitchController, pause_s: float) -> None:
    ctrl.press([Button.A])
    ctrl.sleep(pause_s)
    ctrl.press([Button.Y])

    # Center both sticks
    ctrl.stick(Stick.LEFT, 0.0, 0.0)
    ctrl.stick(Stick.RIGHT, 0.0, 0.0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)-5s: %(name)s: %(message)s")

    try:
        if args.dry_run:
            ctrl = SwitchController(PrintOnlyTransport())
        else:
            port = guess_serial_port(args.port, wait_s=config.PORT_WAIT_S)
            logger.info("using serial port %s @ %d", port, args.baud)
            ctrl = SwitchController.open(
                port, args.baud, timeout_s=config.SERIAL_TIMEOUT_S, log_tx=config.LOG_TX
            )
        with ctrl:
            run(ctrl, args.sleep)
    except (SwitchControllerError, FileNotFoundError) as e:
        logger.error("%s", e)
        return 1

    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
