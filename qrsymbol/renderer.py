# -*- coding: utf-8 -*-
"""
QR Code Renderer Module

Rasterizes a finished symbol into a Pillow image with a quiet zone, and
provides the pass-through path for data that is already a rendered image.

Functions:
    rasterize: Scale a Matrix into a PixelSurface
    render: Encode and rasterize, or pass through a data URL
    render_svg_from_matrix: Vector rendering of a Matrix
"""

import base64
import html
import logging
from dataclasses import dataclass
from io import BytesIO
from typing import Iterable, Sequence, Union

import numpy as np
from PIL import Image, ImageDraw

from .qr_generator import encode

logger = logging.getLogger(__name__)

# Quiet zone width in modules (ISO/IEC 18004:2015 section 6.3.8)
QUIET_ZONE = 4
DEFAULT_TARGET_SIZE = 280
DATA_URL_PREFIX = "data:"

PALETTE = {
    'light': (255, 255, 255),
    'dark': (0, 0, 0),
}


@dataclass(frozen=True)
class PixelSurface:
    """
    Rasterized symbol.

    Attributes:
        width (int): Image width in pixels
        height (int): Image height in pixels
        scale (int): Pixels per module side
        border (int): Quiet zone width in modules
        image (Image.Image): RGB Pillow image
    """

    width: int
    height: int
    scale: int
    border: int
    image: Image.Image

    def to_png_bytes(self) -> bytes:
        buf = BytesIO()
        self.image.save(buf, format='PNG')
        return buf.getvalue()

    def to_base64(self) -> str:
        return base64.b64encode(self.to_png_bytes()).decode('ascii')

    def to_data_url(self) -> str:
        return f"data:image/png;base64,{self.to_base64()}"

    def to_array(self) -> np.ndarray:
        """RGB pixels as a uint8 array of shape (height, width, 3)."""
        return np.asarray(self.image)


@dataclass(frozen=True)
class ImageReference:
    """
    Pre-rendered image data handed back untouched by render().

    Attributes:
        src (str): The data URL exactly as given
        max_width (int): Display bound in pixels
        max_height (int): Display bound in pixels
    """

    src: str
    max_width: int
    max_height: int

    @property
    def mime_type(self) -> str:
        header = self.src[len(DATA_URL_PREFIX):].split(',', 1)[0]
        return header.split(';', 1)[0]

    def to_html(self, alt: str = "QR Code") -> str:
        """<img> element sized to fit within the display bounds."""
        return (
            f'<img src="{html.escape(self.src, quote=True)}" alt="{html.escape(alt, quote=True)}" '
            f'style="max-width:{self.max_width}px;max-height:{self.max_height}px;'
            f'image-rendering:pixelated;" />'
        )


def _check_target_size(target_size: int) -> None:
    if isinstance(target_size, bool) or not isinstance(target_size, int) or target_size <= 0:
        raise ValueError(f"target_size must be a positive integer, got {target_size!r}")


def rasterize(
    matrix: Iterable[Sequence[bool]],
    target_size: int = DEFAULT_TARGET_SIZE,
    border: int = QUIET_ZONE
) -> PixelSurface:
    """
    Render a module matrix as a black-on-white RGB image.

    The scale is the largest integer number of pixels per module that keeps
    the image (matrix plus quiet zone) within target_size, but never below 1.

    Args:
        matrix (Iterable[Sequence[bool]]): Rows of modules (True=dark)
        target_size (int): Desired image side in pixels
        border (int): Quiet zone size in modules

    Returns:
        PixelSurface: Square image of (size + 2 * border) * scale pixels

    Example:
        >>> surface = rasterize(encode("HELLO"), 280)
        >>> surface.scale, surface.width
        (9, 261)
    """
    _check_target_size(target_size)
    rows = list(matrix)
    size = len(rows)
    total_modules = size + 2 * border
    scale = max(1, target_size // total_modules)
    img_px = total_modules * scale

    img = Image.new('RGB', (img_px, img_px), PALETTE['light'])
    draw = ImageDraw.Draw(img)
    for r in range(size):
        for c in range(size):
            if not rows[r][c]:
                continue
            x0 = (c + border) * scale
            y0 = (r + border) * scale
            draw.rectangle([x0, y0, x0 + scale - 1, y0 + scale - 1], fill=PALETTE['dark'])

    return PixelSurface(img_px, img_px, scale, border, img)


def render(
    data: Union[str, bytes],
    target_size: int = DEFAULT_TARGET_SIZE
) -> Union[PixelSurface, ImageReference]:
    """
    Turn data into something displayable.

    A string that is already a data URL (starts with "data:") is returned as
    an ImageReference bounded by target_size, without being encoded.
    Anything else is encoded with encode() and rasterized.

    Args:
        data (Union[str, bytes]): Text or bytes to encode, or an image data URL
        target_size (int): Display size in pixels

    Returns:
        Union[PixelSurface, ImageReference]

    Raises:
        DataTooLarge: If the data does not fit in a QR symbol
        ValueError: If target_size is not a positive integer
    """
    _check_target_size(target_size)
    if isinstance(data, str) and data.startswith(DATA_URL_PREFIX):
        logger.debug("Passing through pre-rendered image data (%d chars)", len(data))
        return ImageReference(data, target_size, target_size)
    return rasterize(encode(data), target_size)


def render_svg_from_matrix(
    matrix: Iterable[Sequence[bool]],
    border: int = QUIET_ZONE,
    scale: int = 10,
    light: str = "#ffffff",
    dark: str = "#000000"
) -> bytes:
    """
    Render a module matrix as SVG, one rect per dark module.

    Args:
        matrix (Iterable[Sequence[bool]]): Rows of modules (True=dark)
        border (int): Quiet zone size in modules
        scale (int): Pixel size per module
        light (str): Background color
        dark (str): Module color

    Returns:
        bytes: UTF-8 encoded SVG content
    """
    rows = list(matrix)
    n = len(rows)
    px = (n + 2 * border) * scale

    out = []
    out.append('<?xml version="1.0" encoding="UTF-8"?>')
    out.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{px}" height="{px}" viewBox="0 0 {px} {px}">')
    out.append(f'<rect width="{px}" height="{px}" fill="{light}"/>')
    for r in range(n):
        for c in range(n):
            if not rows[r][c]:
                continue
            x = (c + border) * scale
            y = (r + border) * scale
            out.append(f'<rect x="{x}" y="{y}" width="{scale}" height="{scale}" fill="{dark}"/>')
    out.append('</svg>')
    return "\n".join(out).encode("utf-8")
