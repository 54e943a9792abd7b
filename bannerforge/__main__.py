"""CLI entry point for BannerForge."""

import argparse
import sys
from pathlib import Path

from . import render
from .errors import FontLoadError
from .font import FontName


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Render text as an ASCII-art banner"
    )
    parser.add_argument("text", nargs="?", help="Text to render")
    parser.add_argument(
        "--font", "-f", default=FontName.STANDARD.value,
        choices=[name.value for name in FontName],
        help="Bundled font to use (default: standard)"
    )
    parser.add_argument(
        "--boxed", "-b", action="store_true",
        help="Wrap the banner in a box border"
    )
    parser.add_argument(
        "--output", "-o", default=None,
        help="Write a PNG image to this path instead of printing"
    )
    parser.add_argument(
        "--cell-width", type=int, default=8,
        help="Image cell width in pixels (default: 8)"
    )
    parser.add_argument(
        "--cell-height", type=int, default=16,
        help="Image cell height in pixels (default: 16)"
    )
    parser.add_argument(
        "--list-fonts", action="store_true",
        help="List bundled fonts and exit"
    )

    args = parser.parse_args(argv)

    if args.cell_width <= 0 or args.cell_height <= 0:
        parser.error("cell sizes must be positive")

    if args.list_fonts:
        for name in FontName:
            print(name.value)
        return 0
    if args.text is None:
        parser.error("the following arguments are required: text")

    try:
        banner = render(args.text, boxed=args.boxed, font=args.font)
    except FontLoadError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.output is None:
        print(banner)
        return 0

    from .image import ImageConfig, banner_image

    config = ImageConfig(cell_size=(args.cell_width, args.cell_height))
    image = banner_image(banner, config)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    image.save(str(output))
    print(f"Saved banner ({image.size[0]}x{image.size[1]}) to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
