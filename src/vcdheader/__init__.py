"""
vcdheader - Read the header metadata of Value Change Dump files.

Extracts the date, version, timescale and comments of a VCD header.
"""

from vcdheader.errors import LoadError
from vcdheader.timescale import Timescale, TimeUnit
from vcdheader.vcd import VCD, ParseOptions
from vcdheader.parser import (
    ScanConfig,
    CommandBlock,
    tokenize,
    scan,
    scan_blocks,
    get_date,
    get_version,
    get_timescale,
    get_comments,
    parse,
)
from vcdheader.loader import VCDLoader

__version__ = "0.1.0"
__all__ = [
    # Core
    "VCDLoader",
    "VCD",
    "ParseOptions",
    "LoadError",
    "Timescale",
    "TimeUnit",
    # Scanner
    "ScanConfig",
    "CommandBlock",
    "tokenize",
    "scan",
    "scan_blocks",
    # Fields
    "get_date",
    "get_version",
    "get_timescale",
    "get_comments",
    "parse",
]
