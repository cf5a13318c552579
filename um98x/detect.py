"""Detection and baud-rate setup of UM981/UM982 receivers, and a fix printer."""

from __future__ import annotations

import argparse
import logging
import time
from enum import Enum
from typing import Iterable, Optional

import serial

from um98x.parser import Um982

BAUD_GPS = 460800
BAUDRATES = (460800, 115200, 921600)
TMP_BUFFER_SIZE = 2048
_OVERLONG = TMP_BUFFER_SIZE - 2

log = logging.getLogger(__name__)


class Receiver(Enum):
    """Receiver models recognised from the VERSION reply."""

    UM981 = "UM981"
    UM982 = "UM982"


def _reconfigure(port, receiver: Receiver, pause: float) -> None:
    log.info("%s baudrate wrong for AOG. Setting to %d bps for AOG", receiver.value, BAUD_GPS)
    for com in ("COM1", "COM2", "COM3"):
        port.write(f"CONFIG {com} {BAUD_GPS}\r\n".encode())
        time.sleep(pause)
    port.baudrate = BAUD_GPS
    time.sleep(pause)
    port.write(b"SAVECONFIG\r\n")


def check_um98x(port, baudrates: Iterable[int] = BAUDRATES, pause: float = 0.1) -> Optional[Receiver]:
    """Probe the port at each baud rate for a UM981/UM982.

    A receiver found at a rate other than 460800 is switched to 460800 and
    told to save its configuration. Returns the model, or None.
    """
    bytes_read = 0
    for baudrate in baudrates:
        log.info("Checking for UM98x at baudrate: %d", baudrate)
        port.baudrate = baudrate
        time.sleep(pause)
        port.write(b"VERSION\r\n")
        time.sleep(pause)
        found = None
        while port.in_waiting:
            line = port.read_until(b"\n", TMP_BUFFER_SIZE)
            if line.endswith(b"\n"):
                line = line[:-1]
            bytes_read = len(line)
            text = line.decode("latin-1")
            found = next((r for r in Receiver if r.value in text), None)
            if found:
                log.info("%s VERSION: %s", found.value, text.strip())
                if baudrate != BAUD_GPS:
                    _reconfigure(port, found, pause)
                break
        if found:
            return found
        if bytes_read > _OVERLONG:
            break
    return None


def main(argv=None) -> int:
    """Detect the receiver on a serial device, then print latitude and longitude of each fix."""
    parser = argparse.ArgumentParser(description="Detect a UM981/UM982 and print GGA positions.")
    parser.add_argument("device", help="serial device the receiver is attached to")
    parser.add_argument("--limit", type=int, default=0,
                        help="stop after this many fixes (default: run until interrupted)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    with serial.Serial(args.device, baudrate=BAUD_GPS, timeout=0.1) as port:
        receiver = check_um98x(port)
        if receiver is None:
            log.warning("No UM98x receiver detected")
        port.baudrate = BAUD_GPS

        gps = Um982(port)
        fixes = 0

        def show(gga):
            nonlocal fixes
            print(gga.latitude)
            print(gga.longitude)
            fixes += 1

        gps.on_gga(show)
        try:
            while not args.limit or fixes < args.limit:
                gps.poll()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())