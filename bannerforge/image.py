"""Rasterizing rendered banners to images."""

from dataclasses import dataclass

import numpy as np
from PIL import Image, ImageDraw


@dataclass
class ImageConfig:
    """Configuration for banner image export."""

    # Pixel size of one character cell (width, height)
    cell_size: tuple = (8, 16)

    # Margin around the banner, in cells
    padding: int = 1

    # Colors
    foreground: tuple = (20, 20, 20)
    background: tuple = (245, 240, 225)
    transparent_background: bool = False


def rasterize_banner(rendered, cell_size):
    """Rasterize a rendered banner to a grayscale mask.

    Every non-space character becomes a filled cell.

    Args:
        rendered: Newline-separated banner text.
        cell_size: (width, height) of one character cell in pixels.

    Returns:
        numpy array of shape (rows * cell_h, cols * cell_w), values 0-255.
    """
    cell_w, cell_h = cell_size
    lines = rendered.split("\n")
    cols = max((len(line) for line in lines), default=0)
    if cols == 0:
        return np.zeros((len(lines) * cell_h, 0), dtype=np.uint8)

    img = Image.new('L', (cols * cell_w, len(lines) * cell_h), 0)
    draw = ImageDraw.Draw(img)

    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if ch.isspace():
                continue
            x0, y0 = x * cell_w, y * cell_h
            draw.rectangle((x0, y0, x0 + cell_w - 1, y0 + cell_h - 1), fill=255)

    return np.array(img)


def banner_image(rendered, config=None):
    """Render banner text to an RGBA image.

    Args:
        rendered: Output of render() or box().
        config: ImageConfig instance (defaults used if None).

    Returns:
        PIL Image in RGBA mode.
    """
    if config is None:
        config = ImageConfig()

    mask = rasterize_banner(rendered, config.cell_size).astype(np.float64) / 255.0

    cell_w, cell_h = config.cell_size
    pad_x = config.padding * cell_w
    pad_y = config.padding * cell_h
    h = mask.shape[0] + 2 * pad_y
    w = mask.shape[1] + 2 * pad_x

    alpha = np.zeros((h, w), dtype=np.float64)
    alpha[pad_y:pad_y + mask.shape[0], pad_x:pad_x + mask.shape[1]] = mask

    fg = np.array(config.foreground, dtype=np.float64)
    bg = np.array(config.background, dtype=np.float64)
    color = bg + (fg - bg) * alpha[:, :, np.newaxis]

    rgba = np.zeros((h, w, 4), dtype=np.uint8)
    rgba[:, :, :3] = np.clip(color, 0, 255).astype(np.uint8)
    if config.transparent_background:
        rgba[:, :, 3] = (alpha * 255).astype(np.uint8)
    else:
        rgba[:, :, 3] = 255

    return Image.fromarray(rgba, 'RGBA')
