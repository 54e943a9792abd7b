"""Banner rendering: glyph composition and box decoration."""

from .font import FontName, load_font


def render_text(text, font):
    """Compose the glyphs for ``text`` row by row.

    Glyphs are concatenated without smushing. Characters missing from the
    font contribute nothing, so the result always has ``font.height`` rows.
    """
    rows = []
    for row in range(font.height):
        parts = []
        for ch in text:
            glyph = font.characters.get(ord(ch))
            if glyph is not None and row < glyph.height:
                parts.append(glyph.lines[row])
        rows.append("".join(parts))
    return "\n".join(rows)


def render(text, boxed=False, font=FontName.STANDARD):
    """Render text as an ASCII-art banner.

    Args:
        text: Text to render. Characters outside the font are skipped.
        boxed: Wrap the banner in a Unicode box border.
        font: FontName (or its string value) of a bundled font.

    Returns:
        The banner as a newline-separated string.

    Raises:
        FontLoadError: the bundled font could not be loaded.
    """
    rendered = render_text(text, load_font(font))
    return box(rendered) if boxed else rendered


def box(text):
    """Wrap text in a ╔═╗║╚═╝ border with two columns of padding.

    Widths are measured in characters, not terminal cells.
    """
    lines = text.split("\n")
    max_width = max((len(line) for line in lines), default=0)
    inner = max_width + 4

    result = ["╔" + "═" * inner + "╗", "║" + " " * inner + "║"]
    for line in lines:
        result.append("║  " + line + " " * (max_width - len(line) + 2) + "║")
    result.append("║" + " " * inner + "║")
    result.append("╚" + "═" * inner + "╝")
    return "\n".join(result)


boxed = box
