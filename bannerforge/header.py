"""FIGfont header line parsing."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

FIGLET_SIGNATURE = "flf2a"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class PrintDirection(Enum):
    LEFT_TO_RIGHT = 0
    RIGHT_TO_LEFT = 1


@dataclass(frozen=True)
class Header:
    """Parameters from the first line of a .flf file."""
    hard_blank: str
    height: int
    baseline: int
    max_length: int
    old_layout: int
    comment_lines: int
    comment_direction: PrintDirection = PrintDirection.LEFT_TO_RIGHT
    full_layout: Optional[int] = None
    code_tag_count: Optional[int] = None


def parse_header(line):
    """Parse a header line such as ``flf2a$ 6 5 16 15 11 0 24463``.

    Returns a Header, or None if the line is not a FIGfont header.
    Print directions other than 0 and 1 fall back to left-to-right.
    """
    tokens = line.split()
    if not tokens:
        return None

    signature = tokens[0]
    if (len(signature) != len(FIGLET_SIGNATURE) + 1
            or not signature.startswith(FIGLET_SIGNATURE)):
        return None

    # Mandatory five fields plus up to three optional ones; anything
    # past that is ignored.
    numeric = tokens[1:9]
    if not all(_INTEGER.fullmatch(tok) for tok in numeric):
        return None
    fields = [int(tok) for tok in numeric]
    if len(fields) < 5:
        return None

    height, baseline, max_length, old_layout, comment_lines = fields[:5]
    if height <= 0 or comment_lines < 0:
        return None

    direction = PrintDirection.LEFT_TO_RIGHT
    if len(fields) > 5 and fields[5] == PrintDirection.RIGHT_TO_LEFT.value:
        direction = PrintDirection.RIGHT_TO_LEFT

    return Header(
        hard_blank=signature[-1],
        height=height,
        baseline=baseline,
        max_length=max_length,
        old_layout=old_layout,
        comment_lines=comment_lines,
        comment_direction=direction,
        full_layout=fields[6] if len(fields) > 6 else None,
        code_tag_count=fields[7] if len(fields) > 7 else None,
    )
