"""BannerForge - Render text as ASCII-art banners from FIGlet fonts."""

from .errors import FontLoadError, InvalidGlyphData, InvalidHeader, ResourceMissing
from .font import Font, FontName, load_font
from .renderer import box, boxed, render, render_text

__version__ = "0.1.0"
__all__ = [
    "render", "render_text", "boxed", "box", "load_font",
    "Font", "FontName",
    "FontLoadError", "ResourceMissing", "InvalidHeader", "InvalidGlyphData",
]
