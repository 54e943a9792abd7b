"""Glyph tables built from FIGfont files, and the bundled font registry."""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

from .errors import InvalidGlyphData, InvalidHeader, ResourceMissing
from .fontfile import parse_font_file
from .header import parse_header

logger = logging.getLogger(__name__)

FONT_DIR = Path(__file__).parent / "fonts"

# Glyph blocks are assigned to consecutive code points from here on.
FIRST_CODE_POINT = 32


class FontName(Enum):
    """Fonts bundled in ``bannerforge/fonts``."""
    STANDARD = "standard"
    LARRY3D = "larry3d"

    @property
    def path(self):
        return FONT_DIR / f"{self.value}.flf"


@dataclass(frozen=True)
class Char:
    """A single glyph: one string per row."""
    lines: tuple

    @property
    def height(self):
        return len(self.lines)

    @property
    def width(self):
        return max((len(line) for line in self.lines), default=0)


EMPTY_CHAR = Char(())


@dataclass(frozen=True)
class Font:
    height: int
    characters: MappingProxyType

    def glyph(self, ch):
        """Return the glyph for ``ch``, or EMPTY_CHAR if the font lacks it."""
        return self.characters.get(ord(ch), EMPTY_CHAR)


def _strip_row(row, terminator, count):
    """Drop up to ``count`` trailing terminators from a glyph row."""
    row = row.rstrip()
    for _ in range(count):
        if not row.endswith(terminator):
            break
        row = row[:-1]
    return row


def build_char(block, terminator, hard_blank):
    """Turn a raw glyph block into a Char.

    The last row of a block carries a doubled terminator.
    """
    last = len(block) - 1
    return Char(tuple(
        _strip_row(row, terminator, 2 if i == last else 1)
        .replace(hard_blank, " ")
        for i, row in enumerate(block)
    ))


def build_font(font_file):
    """Build a Font from a parsed FontFile.

    Blocks map to code points 32, 33, 34, ... in file order; code-tagged
    glyphs after the standard set are numbered the same way. Returns None
    if the file holds no complete glyph block.
    """
    blocks = font_file.blocks()
    if not blocks:
        return None

    header = font_file.header
    characters = {
        code: build_char(block, font_file.terminator, header.hard_blank)
        for code, block in enumerate(blocks, start=FIRST_CODE_POINT)
    }
    return Font(height=header.height,
                characters=MappingProxyType(characters))


@lru_cache(maxsize=None)
def _load_bundled(name):
    path = name.path
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceMissing(name.value) from exc

    font_file = parse_font_file(content)
    if font_file is None:
        first_line = content.split("\n", 1)[0]
        if parse_header(first_line) is None:
            raise InvalidHeader(name.value)
        raise InvalidGlyphData(name.value)

    font = build_font(font_file)
    if font is None:
        raise InvalidGlyphData(name.value)

    logger.debug("Loaded font %s: %d glyphs, height %d",
                 name.value, len(font.characters), font.height)
    return font


def load_font(name=FontName.STANDARD):
    """Load a bundled font by FontName (or its string value).

    Fonts are cached for the life of the process.

    Raises:
        ValueError: ``name`` is not a bundled font.
        ResourceMissing: the .flf file is absent or unreadable.
        InvalidHeader: the first line is not a FIGfont header.
        InvalidGlyphData: glyph rows are missing or malformed.
    """
    return _load_bundled(FontName(name))
