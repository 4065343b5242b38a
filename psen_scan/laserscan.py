"""A single laser scan as delivered to the user."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List

#: Largest allowed resolution: a full circle, in tenths of a degree.
MAX_RESOLUTION = 3600


def _format_number(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _format_values(values: Iterable[float]) -> str:
    return "{" + ", ".join(_format_number(v) for v in values) + "}"


def _format_angle(tenth_of_degree: int) -> str:
    return f"{_format_number(tenth_of_degree / 10.0)} deg"


@dataclass
class LaserScan:
    """One scan round (or fragment) of a scanner.

    Angles and the resolution are given in tenths of a degree, distances in mm
    and the timestamp of the first ray in nanoseconds.
    """

    resolution: int
    min_scan_angle: int
    max_scan_angle: int
    scan_counter: int
    active_zoneset: int
    timestamp: int
    measurements: List[float] = field(default_factory=list)
    intensities: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.resolution <= 0:
            raise ValueError("Resolution must not be 0")
        if self.resolution > MAX_RESOLUTION:
            raise ValueError("Resolution out of possible angle range")
        if self.min_scan_angle > self.max_scan_angle:
            raise ValueError("Attention: Start angle has to be smaller than end angle!")

    def __str__(self) -> str:
        return (
            f"LaserScan(timestamp = {self.timestamp} nsec, "
            f"scanCounter = {self.scan_counter}, "
            f"minScanAngle = {_format_angle(self.min_scan_angle)}, "
            f"maxScanAngle = {_format_angle(self.max_scan_angle)}, "
            f"resolution = {_format_angle(self.resolution)}, "
            f"active_zoneset = {self.active_zoneset}, "
            f"measurements = {_format_values(self.measurements)}, "
            f"intensities = {_format_values(self.intensities)})"
        )