"""Tests for rasterizing banners to images."""

import numpy as np
import pytest


def test_rasterize_shape_and_ink():
    from bannerforge.image import rasterize_banner
    mask = rasterize_banner("#  \n #", (2, 3))
    assert mask.shape == (6, 6)
    assert mask.dtype == np.uint8
    assert (mask[0:3, 0:2] == 255).all()
    assert (mask[3:6, 2:4] == 255).all()
    assert np.count_nonzero(mask) == 12


def test_rasterize_blank_banner():
    from bannerforge.image import rasterize_banner
    mask = rasterize_banner("\n", (4, 4))
    assert mask.shape == (8, 0)


def test_banner_image_size_includes_padding():
    from bannerforge import render
    from bannerforge.image import banner_image, ImageConfig
    text = render("Hi")
    lines = text.split("\n")
    cols = max(len(line) for line in lines)
    config = ImageConfig(cell_size=(4, 8), padding=2)
    img = banner_image(text, config)
    assert img.mode == "RGBA"
    assert img.size == ((cols + 4) * 4, (len(lines) + 4) * 8)


def test_banner_image_colors():
    from bannerforge.image import banner_image, ImageConfig
    config = ImageConfig(cell_size=(1, 1), padding=1,
                         foreground=(255, 0, 0), background=(0, 0, 255))
    arr = np.array(banner_image("# ", config))
    assert tuple(arr[1, 1]) == (255, 0, 0, 255)
    assert tuple(arr[1, 2]) == (0, 0, 255, 255)
    assert tuple(arr[0, 0]) == (0, 0, 255, 255)


def test_banner_image_transparent_background():
    from bannerforge.image import banner_image, ImageConfig
    config = ImageConfig(cell_size=(1, 1), padding=0,
                         transparent_background=True)
    arr = np.array(banner_image("# ", config))
    assert arr[0, 0, 3] == 255
    assert arr[0, 1, 3] == 0


@pytest.mark.parametrize("option, value", [
    ("--cell-width", "0"),
    ("--cell-height", "-4"),
])
def test_cli_rejects_non_positive_cell_size(tmp_path, capsys, option, value):
    from bannerforge.__main__ import main
    out = tmp_path / "banner.png"
    with pytest.raises(SystemExit) as excinfo:
        main(["Hi", "-o", str(out), option, value])
    assert excinfo.value.code == 2
    assert "cell sizes must be positive" in capsys.readouterr().err
    assert not out.exists()


def test_cli_writes_png(tmp_path, capsys):
    from PIL import Image
    from bannerforge.__main__ import main
    out = tmp_path / "out" / "banner.png"
    assert main(["Hi", "-o", str(out), "--cell-width", "2", "--cell-height", "4"]) == 0
    assert out.exists()
    assert Image.open(out).mode == "RGBA"
    assert "Saved banner" in capsys.readouterr().out
