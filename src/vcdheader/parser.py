"""
Command block scanner for VCD headers.

A header is a run of ``$command ... $end`` blocks inside a stream of
space-separated tokens:

    $date
        Mon Jan 1 00:00:00 2024
    $end
    $timescale 1ps $end

Only the space character separates tokens. Newlines stay attached to the
token they were read with and are stripped before the token is compared or
accumulated, so text inside a block is normalized to single spaces. A token
holding only newlines still counts as block content.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple
import logging

from vcdheader.errors import LoadError
from vcdheader.timescale import Timescale
from vcdheader.vcd import VCD, ParseOptions

logger = logging.getLogger("VCDHeader.Parser")

END = "$end"


@dataclass(frozen=True)
class ScanConfig:
    """Which command to scan for and whether it may appear more than once."""
    command: str
    enforce_single: bool = False


@dataclass
class CommandBlock:
    """Text of one closed command block."""
    text: str
    line: int  # line of the closing $end


def tokenize(text: str, exact_line_numbers: bool = False) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(line, token)`` pairs.

    By default the line counter advances once for each token holding a
    newline, which undercounts blank lines. ``exact_line_numbers`` counts
    every newline instead.
    """
    line = 1
    for word in text.split(" "):
        if not word:
            continue
        yield line, word
        line = _next_line(line, word, exact_line_numbers)


def _next_line(line: int, word: str, exact_line_numbers: bool) -> int:
    if exact_line_numbers:
        return line + word.count("\n")
    return line + 1 if "\n" in word else line


def scan_blocks(text: str, config: ScanConfig,
                options: Optional[ParseOptions] = None) -> List[CommandBlock]:
    """
    Find every ``config.command ... $end`` block in ``text``.

    Returns an empty list when the command never appears.

    Raises:
        LoadError: if another command starts before the block's ``$end``,
            if the input ends inside a block, or if ``config.enforce_single``
            is set and the command opens a second time
    """
    options = options or ParseOptions()
    command = config.command

    blocks: List[CommandBlock] = []
    current: List[str] = []
    in_block = False
    line, raw = 1, ""

    for line, raw in tokenize(text, options.exact_line_numbers):
        word = raw.replace("\n", "")

        if in_block and word.startswith("$") and word != command and word != END:
            logger.debug(f"{word} opened inside {command} at line {line}")
            raise LoadError(line, f"{command} missing an $end")

        if word == END and current:
            # Newline-only tokens keep the block open for $end but add no text
            content = " ".join(w for w in current if w).strip()
            blocks.append(CommandBlock(text=content, line=line))
            logger.debug(f"Closed {command} block at line {line}")
            current = []
            in_block = False
        elif in_block:
            current.append(word)
        elif word == command:
            if blocks and config.enforce_single:
                logger.debug(f"Second {command} at line {line}")
                raise LoadError(line, f"Multiple {command} commands is invalid")
            in_block = True

    if in_block:
        # Line reached after the last token
        line = _next_line(line, raw, options.exact_line_numbers)
        raise LoadError(line, f"{command} missing an $end")

    return blocks


def scan(text: str, command: str, enforce_single: bool = False,
         options: Optional[ParseOptions] = None) -> List[str]:
    """Return the text of every ``command`` block, in input order."""
    config = ScanConfig(command=command, enforce_single=enforce_single)
    return [block.text for block in scan_blocks(text, config, options)]


def _single(text: str, command: str,
            options: Optional[ParseOptions]) -> Optional[CommandBlock]:
    blocks = scan_blocks(text, ScanConfig(command, enforce_single=True), options)
    return blocks[0] if blocks else None


def get_date(text: str, options: Optional[ParseOptions] = None) -> Optional[str]:
    block = _single(text, "$date", options)
    return block.text if block else None


def get_version(text: str, options: Optional[ParseOptions] = None) -> Optional[str]:
    block = _single(text, "$version", options)
    return block.text if block else None


def get_timescale(text: str, options: Optional[ParseOptions] = None) -> Optional[Timescale]:
    """Decode the ``$timescale`` block, or ``None`` if there is none."""
    block = _single(text, "$timescale", options)
    if block is None:
        return None
    try:
        return Timescale.from_str(block.text)
    except ValueError as e:
        logger.debug(f"Undecodable timescale: {e}")
        raise LoadError(block.line, f"Invalid $timescale '{block.text}'") from e


def get_comments(text: str, options: Optional[ParseOptions] = None) -> List[str]:
    return scan(text, "$comment", enforce_single=False, options=options)


def parse(text: str, options: Optional[ParseOptions] = None) -> VCD:
    """
    Parse the header metadata of a VCD buffer.

    Fields are extracted in the order date, version, timescale, comments and
    the first error is raised. Missing fields keep the ``VCD`` defaults.
    """
    date = get_date(text, options)
    version = get_version(text, options)
    timescale = get_timescale(text, options)
    comments = get_comments(text, options)

    return VCD(
        date=date if date is not None else "",
        version=version if version is not None else "",
        timescale=timescale if timescale is not None else Timescale(),
        comments=comments,
    )
