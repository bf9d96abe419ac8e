# -*- coding: utf-8 -*-
"""
qrsymbol - QR Symbol Encoder

Encodes byte strings into QR symbols (byte mode, error correction level L,
versions 1-40) and rasterizes them for display.

Modules:
    qr_generator: encode() and the mask search
    renderer: render(), rasterization and SVG output
    codewords: Payload to codeword stream
    reed_solomon: Error correction coding
    functional_areas: Function pattern layout
    placement: Data placement
    masks: Mask patterns, format and version information
    penalties: Mask penalty evaluation
"""

__version__ = "1.0.0"

from .errors import DataTooLarge, QRSymbolError
from .matrix import Matrix
from .qr_generator import encode, evaluate_all_masks
from .renderer import ImageReference, PixelSurface, rasterize, render, render_svg_from_matrix

__all__ = [
    'encode',
    'render',
    'rasterize',
    'render_svg_from_matrix',
    'evaluate_all_masks',
    'Matrix',
    'PixelSurface',
    'ImageReference',
    'DataTooLarge',
    'QRSymbolError',
]
