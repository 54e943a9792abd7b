"""Errors raised when a bundled font cannot be loaded."""


class FontLoadError(Exception):
    """Base class for font loading failures."""

    def __init__(self, font_name, message):
        super().__init__(f"{message}: '{font_name}.flf'")
        self.font_name = font_name


class ResourceMissing(FontLoadError):
    def __init__(self, font_name):
        super().__init__(font_name, "missing font resource")


class InvalidHeader(FontLoadError):
    def __init__(self, font_name):
        super().__init__(font_name, "invalid font file")


class InvalidGlyphData(FontLoadError):
    def __init__(self, font_name):
        super().__init__(font_name, "invalid glyph data")
