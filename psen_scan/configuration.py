"""Scanner defaults, scanner identifiers and zoneset configuration types."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_HOST_IP_STRING = "auto"

DATA_PORT_OF_SCANNER_DEVICE = 2000
CONTROL_PORT_OF_SCANNER_DEVICE = 3000

DATA_PORT_OF_HOST_DEVICE = 55115
CONTROL_PORT_OF_HOST_DEVICE = 55116

FRAGMENTED_SCANS = False
INTENSITIES = False
DIAGNOSTICS = False

#: Start angle of measurement in radians.
DEFAULT_ANGLE_START = -math.radians(137.4)
#: End angle of measurement in radians.
DEFAULT_ANGLE_END = math.radians(137.4)
DEFAULT_SCAN_ANGLE_RESOLUTION = math.radians(0.1)

TIME_PER_SCAN_IN_S = 0.03

RANGE_MIN_IN_M = 0.05
RANGE_MAX_IN_M = 40.0

#: Angle step between zoneset distance values, in tenths of a degree.
DEFAULT_ZONESET_ANGLE_STEP = 5

#: The 2D scan is rotated around the z-axis by this angle (radians).
DEFAULT_X_AXIS_ROTATION = math.radians(137.5)


class ScannerId(enum.IntEnum):
    """Identifier of a device within a scanner cluster."""

    master = 0
    slave0 = 1
    slave1 = 2
    slave2 = 3

    def __str__(self) -> str:
        return self.name.capitalize()


VALID_SCANNER_IDS = (ScannerId.master, ScannerId.slave0, ScannerId.slave1, ScannerId.slave2)


class ZoneSetSpeedRangeException(RuntimeError):
    """Raised for a speed range whose minimum exceeds its maximum."""


@dataclass(frozen=True)
class ZoneSetSpeedRange:
    """The speed range at which a zoneset is active."""

    min: int = 0
    max: int = 0

    def __post_init__(self) -> None:
        if self.min > self.max:
            raise ZoneSetSpeedRangeException(
                f"Invalid speedrange min: {self.min} > max: {self.max}"
            )


@dataclass
class ZoneSet:
    """A set of simultaneously active zones; distances are in millimetres."""

    safety1: List[int] = field(default_factory=list)
    safety2: List[int] = field(default_factory=list)
    safety3: List[int] = field(default_factory=list)
    warn1: List[int] = field(default_factory=list)
    warn2: List[int] = field(default_factory=list)
    muting1: List[int] = field(default_factory=list)
    muting2: List[int] = field(default_factory=list)
    #: Angle between consecutive distance values, in tenths of a degree.
    resolution: int = 0
    speed_range: Optional[ZoneSetSpeedRange] = None


@dataclass
class ZoneSetConfiguration:
    """All zonesets configured on a scanner."""

    zonesets: List[ZoneSet] = field(default_factory=list)