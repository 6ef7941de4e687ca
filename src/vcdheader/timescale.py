"""
Timescale values for VCD headers.

A timescale is written as a single token like ``1ps`` or ``100ns``.
"""

from dataclasses import dataclass
from enum import Enum
import re


class TimeUnit(Enum):
    FS = "fs"
    PS = "ps"
    NS = "ns"
    US = "us"
    MS = "ms"
    S = "s"

    @property
    def exponent(self) -> int:
        """Power of ten relative to one second."""
        return _EXPONENTS[self]


_EXPONENTS = {
    TimeUnit.FS: -15,
    TimeUnit.PS: -12,
    TimeUnit.NS: -9,
    TimeUnit.US: -6,
    TimeUnit.MS: -3,
    TimeUnit.S: 0,
}


@dataclass(frozen=True)
class Timescale:
    """Simulation time resolution, e.g. ``Timescale(1, TimeUnit.PS)``."""
    value: int = 1
    unit: TimeUnit = TimeUnit.NS

    def __str__(self) -> str:
        return f"{self.value}{self.unit.value}"

    @property
    def seconds(self) -> float:
        return self.value * 10.0 ** self.unit.exponent

    @classmethod
    def from_str(cls, text: str) -> "Timescale":
        """
        Decode ``<digits><unit>``.

        The unit is matched case-sensitively and no space is allowed between
        the magnitude and the unit.

        Raises:
            ValueError: if the magnitude or the unit is missing or unknown
        """
        match = re.fullmatch(r"([0-9]+)(.*)", text, re.DOTALL)
        if not match:
            raise ValueError(f"Timescale has no magnitude: {text!r}")

        unit = match.group(2)
        try:
            time_unit = TimeUnit(unit)
        except ValueError:
            raise ValueError(f"Unknown timescale unit: {unit!r}") from None

        return cls(value=int(match.group(1)), unit=time_unit)
