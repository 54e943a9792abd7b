"""Splitting FIGfont (.flf) file content into header, comments and glyph rows."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .header import Header, parse_header

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FontFile:
    """Raw contents of a .flf file.

    ``header_lines`` holds the header line followed by its comment lines;
    ``lines`` holds every remaining row, still carrying terminators and
    hard blanks.
    """
    header: Header
    header_lines: tuple
    lines: tuple
    terminator: str

    @property
    def comments(self):
        return self.header_lines[1:]

    def character_line_terminator(self):
        return self.terminator

    def blocks(self):
        """Group glyph rows into blocks of ``header.height`` rows.

        A trailing partial block is dropped.
        """
        height = self.header.height
        usable = len(self.lines) - len(self.lines) % height
        return [self.lines[i:i + height] for i in range(0, usable, height)]


def split_lines(content):
    """Split text on newlines, tolerating CRLF and a final newline."""
    lines = [line.rstrip("\r") for line in content.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def detect_terminator(line):
    """Return the end-of-row mark used by a glyph row, or None.

    The mark is the last non-whitespace character of the row. Letters and
    digits never act as marks.
    """
    stripped = line.rstrip()
    if not stripped:
        return None
    mark = stripped[-1]
    if mark.isalnum():
        return None
    return mark


def parse_font_file(content):
    """Parse the text of a .flf file.

    Returns a FontFile, or None if the header is invalid or fewer rows than
    one full glyph follow the comments.
    """
    lines = split_lines(content)
    if not lines:
        return None

    header = parse_header(lines[0])
    if header is None:
        logger.debug("Rejected font content: bad header %r", lines[0][:40])
        return None

    glyph_start = 1 + header.comment_lines
    if len(lines) < glyph_start:
        logger.debug("Rejected font content: expected %d comment lines, "
                     "found %d", header.comment_lines, len(lines) - 1)
        return None

    glyph_lines = lines[glyph_start:]
    if len(glyph_lines) < header.height:
        logger.debug("Rejected font content: %d glyph rows, need at least %d",
                     len(glyph_lines), header.height)
        return None

    terminator = detect_terminator(glyph_lines[0])
    if terminator is None:
        logger.debug("Rejected font content: no row terminator in %r",
                     glyph_lines[0])
        return None

    return FontFile(
        header=header,
        header_lines=tuple(lines[:glyph_start]),
        lines=tuple(glyph_lines),
        terminator=terminator,
    )


def read_font_file(path):
    """Read and parse a .flf file from disk.

    Returns None if the file cannot be read or is not a valid font.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Could not read font file %s: %s", path, exc)
        return None
    return parse_font_file(content)
