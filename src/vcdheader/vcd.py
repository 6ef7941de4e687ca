"""
Header record and parse options.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from vcdheader.timescale import Timescale


@dataclass
class ParseOptions:
    """Options for header parsing."""
    # Count every newline instead of one per newline-bearing token
    exact_line_numbers: bool = False


@dataclass
class VCD:
    """Metadata found in a VCD header."""
    date: str = ""
    version: str = ""
    timescale: Timescale = field(default_factory=Timescale)
    comments: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "version": self.version,
            "timescale": {
                "value": self.timescale.value,
                "unit": self.timescale.unit.value,
            },
            "comments": list(self.comments),
        }
