"""Streaming parser for the NMEA sentences sent by UM981/UM982 receivers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union

MSG_BUF_SIZE = 384
MAX_FIELDS = 24
_DELIMITERS = re.compile(r"[*;,]")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class GgaData:
    """Position fix taken from a GGA sentence; every field is kept as text."""

    fix_time: str = ""
    latitude: str = ""
    lat_ns: str = ""
    longitude: str = ""
    lon_ew: str = ""
    fix_quality: str = ""
    num_sats: str = ""
    hdop: str = ""
    altitude: str = ""
    age_dgps: str = ""


@dataclass(frozen=True)
class VtgData:
    """Course and speed taken from a VTG sentence; speed is in metres per second."""

    heading: str = ""
    speed_knots: str = ""
    speed: float = 0.0


@dataclass(frozen=True)
class HprData:
    """Heading, roll and solution quality taken from an HPR sentence."""

    heading: str = ""
    roll: str = ""
    sol_quality: int = 0


Sentence = Union[GgaData, VtgData, HprData]


def _atof(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _split(message: str) -> list[str]:
    return _DELIMITERS.split(message, maxsplit=MAX_FIELDS)[:MAX_FIELDS]


def _as_char(char: Union[str, bytes, bytearray, int]) -> str:
    if isinstance(char, int):
        char = chr(char)
    elif isinstance(char, (bytes, bytearray)):
        char = bytes(char).decode("latin-1")
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


class Um982:
    """Collects characters from a receiver port and decodes GGA, VTG and HPR sentences.

    The latest decoded values are kept in ``gga``, ``vtg`` and ``hpr``.
    """

    def __init__(self, port=None):
        self.port = port
        self.gga = GgaData()
        self.vtg = VtgData()
        self.hpr = HprData()
        self._gga_callback: Optional[Callable[[GgaData], None]] = None
        self._vtg_callback: Optional[Callable[[VtgData], None]] = None
        self._hpr_callback: Optional[Callable[[HprData], None]] = None
        self._reset()

    def on_gga(self, callback):
        """Register a function called with every decoded GGA sentence."""
        self._gga_callback = callback

    def on_vtg(self, callback):
        """Register a function called with every decoded VTG sentence."""
        self._vtg_callback = callback

    def on_hpr(self, callback):
        """Register a function called with every decoded HPR sentence."""
        self._hpr_callback = callback

    def poll(self) -> Optional[Sentence]:
        """Read at most one byte from the port and process it."""
        if self.port is None:
            raise RuntimeError("no port attached")
        waiting = getattr(self.port, "in_waiting", None)
        if waiting is not None and not waiting:
            return None
        data = self.port.read(1)
        if not data:
            return None
        return self.feed(data[:1])

    def feed(self, char) -> Optional[Sentence]:
        """Process one character; return the decoded sentence once a line completes."""
        char = _as_char(char)
        room = len(self._buffer) < MSG_BUF_SIZE - 1
        if char == "$":
            if room:
                self._buffer.append(char)
            self._got_dollar = True
        elif char == "\r":
            if room:
                self._buffer.append(char)
            self._got_cr = True
            self._got_dollar = False
        elif char == "\n":
            if room:
                self._buffer.append(char)
            self._got_lf = True
            self._got_dollar = False
        elif self._got_dollar and room:
            self._buffer.append(char)

        if not (self._got_cr and self._got_lf):
            return None
        message = "".join(self._buffer).split("\0", 1)[0]
        self._reset()
        return self._dispatch(message)

    def _reset(self) -> None:
        self._buffer: list[str] = []
        self._got_dollar = False
        self._got_cr = False
        self._got_lf = False

    def _dispatch(self, message: str) -> Optional[Sentence]:
        fields = _split(message)
        head = fields[0]
        count = len(fields)
        if count > 13 and "GGA" in head:
            self.gga = GgaData(
                fix_time=fields[1][:11],
                latitude=fields[2][:14],
                lat_ns=fields[3][:2],
                longitude=fields[4][:14],
                lon_ew=fields[5][:2],
                fix_quality=fields[6][:1],
                num_sats=fields[7][:3],
                hdop=fields[8][:4],
                altitude=fields[9][:11],
                age_dgps=fields[13][:9],
            )
            if self._gga_callback:
                self._gga_callback(self.gga)
            return self.gga
        if count > 5 and "VTG" in head:
            self.vtg = VtgData(
                heading=fields[1][:11],
                speed_knots=fields[5][:9],
                speed=_atof(fields[5]) * 1852 / 3600,
            )
            if self._vtg_callback:
                self._vtg_callback(self.vtg)
            return self.vtg
        if count > 5 and "HPR" in head:
            self.hpr = HprData(
                heading=fields[2][:7],
                roll=fields[3][:7],
                sol_quality=_atoi(fields[5]),
            )
            if self._hpr_callback:
                self._hpr_callback(self.hpr)
            return self.hpr
        return None