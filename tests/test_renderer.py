"""Tests for rasterization, SVG output and the data URL pass-through."""

from io import BytesIO

import numpy as np
import pytest
from PIL import Image

from qrsymbol import DataTooLarge, ImageReference, PixelSurface, rasterize, render, render_svg_from_matrix
from qrsymbol.renderer import QUIET_ZONE

DATA_URL = "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNk+M9QDwADhgGAWjR9awAAAABJRU5ErkJggg=="


def test_rasterize_scale_and_size(hello_symbol):
    surface = rasterize(hello_symbol, 280)
    assert isinstance(surface, PixelSurface)
    # 21 modules + 2 * 4 quiet zone = 29; 280 // 29 = 9
    assert surface.scale == 9
    assert surface.width == surface.height == 261
    assert surface.border == QUIET_ZONE
    assert surface.image.size == (261, 261)


def test_rasterize_never_scales_below_one(hello_symbol):
    surface = rasterize(hello_symbol, 10)
    assert surface.scale == 1
    assert surface.width == 29


def test_quiet_zone_is_light(hello_symbol):
    pixels = rasterize(hello_symbol, 280).to_array()
    quiet = 4 * 9
    assert (pixels[:quiet] == 255).all()
    assert (pixels[-quiet:] == 255).all()
    assert (pixels[:, :quiet] == 255).all()
    assert (pixels[:, -quiet:] == 255).all()


def test_modules_become_scale_squares(hello_symbol):
    surface = rasterize(hello_symbol, 280)
    pixels = surface.to_array()
    assert pixels.shape == (261, 261, 3)
    dark_pixels = int((pixels[:, :, 0] == 0).sum())
    assert dark_pixels == hello_symbol.dark_count * 81
    # Top-left finder corner module
    assert (pixels[36:45, 36:45] == 0).all()
    # Light ring inside the finder
    assert (pixels[45:54, 45:54] == 255).all()


def test_png_export(hello_symbol):
    surface = rasterize(hello_symbol, 100)
    data = surface.to_png_bytes()
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    with Image.open(BytesIO(data)) as img:
        assert img.size == (surface.width, surface.height)
    assert surface.to_data_url().startswith("data:image/png;base64,")


def test_render_encodes_text():
    surface = render("HELLO", 280)
    assert isinstance(surface, PixelSurface)
    assert surface.width == 261


def test_render_passes_through_data_urls(monkeypatch):
    def fail(_):
        raise AssertionError("encode must not run for image data")

    monkeypatch.setattr("qrsymbol.renderer.encode", fail)
    reference = render(DATA_URL, 280)
    assert isinstance(reference, ImageReference)
    assert reference.src == DATA_URL
    assert reference.max_width == reference.max_height == 280
    assert reference.mime_type == "image/png"


def test_image_reference_html():
    html = ImageReference(DATA_URL, 120, 120).to_html()
    assert html.startswith(f'<img src="{DATA_URL}"')
    assert "max-width:120px" in html
    assert "max-height:120px" in html
    assert "image-rendering:pixelated" in html


def test_bytes_with_data_prefix_are_encoded():
    assert isinstance(render(b"data:not-an-image", 280), PixelSurface)


@pytest.mark.parametrize("size", [0, -5, 2.5, True, "280"])
def test_render_rejects_bad_target_size(size):
    with pytest.raises(ValueError):
        render("HELLO", size)


def test_render_propagates_data_too_large():
    with pytest.raises(DataTooLarge):
        render("x" * 3000, 280)


def test_svg_has_one_rect_per_dark_module(hello_symbol):
    svg = render_svg_from_matrix(hello_symbol, border=4, scale=10).decode("utf-8")
    assert svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'width="290" height="290"' in svg
    assert svg.count("<rect") == hello_symbol.dark_count + 1
    assert '<rect x="40" y="40" width="10" height="10" fill="#000000"/>' in svg


def test_rasterize_accepts_plain_lists():
    rows = [[True, False], [False, True]]
    surface = rasterize(rows, 10, border=0)
    assert surface.scale == 5
    pixels = surface.to_array()
    assert np.array_equal(pixels[0, 0], [0, 0, 0])
    assert np.array_equal(pixels[0, 5], [255, 255, 255])
