"""
Entry points for loading a VCD header from text or from a file.
"""

from pathlib import Path
from typing import Optional, Union
import logging

from vcdheader.parser import parse
from vcdheader.vcd import VCD, ParseOptions

logger = logging.getLogger("VCDHeader.Loader")


class VCDLoader:
    """
    Load VCD header metadata.

    Usage:
        vcd = VCDLoader.load_from_str("$timescale 1ps $end")
        vcd = VCDLoader.load_from_file("simulation.vcd")
    """

    @staticmethod
    def load_from_str(text: str, options: Optional[ParseOptions] = None) -> VCD:
        return parse(text, options)

    @staticmethod
    def load_from_file(filepath: Union[str, Path],
                       options: Optional[ParseOptions] = None) -> VCD:
        """Read ``filepath`` as UTF-8 and parse its header."""
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"VCD file not found: {filepath}")

        logger.info(f"Loading VCD header from {path}")
        return parse(path.read_text(encoding="utf-8"), options)
