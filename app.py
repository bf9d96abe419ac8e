#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
qrsymbol - Flask Preview Application

Small web front end over the encoder: a form that previews the symbol for
some text, plus PNG and SVG export endpoints. Image data URLs are shown as
they are instead of being encoded.
"""

import logging
from io import BytesIO
from typing import Tuple

from flask import Flask, render_template_string, request, send_file

from qrsymbol import DataTooLarge, encode, rasterize, render, render_svg_from_matrix
from qrsymbol.renderer import DATA_URL_PREFIX, DEFAULT_TARGET_SIZE, QUIET_ZONE

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

MIN_SIZE = 21
MAX_SIZE = 2000
MAX_BORDER = 20

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Symbol Preview</title>
  <style>
    body{font-family:Arial, sans-serif; padding:18px; color:#222}
    .field{display:flex; flex-direction:column; font-size:14px; margin-bottom:10px}
    textarea, input{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    .card{margin-top:18px; border:1px solid #ddd; border-radius:10px; padding:14px}
    .metrics{font-size:13px; line-height:1.4}
    .error{color:#b00; font-weight:700}
  </style>
</head>
<body>
  <h1>QR Symbol Preview</h1>
  <form method="post">
    <div class="field">
      <label for="text">Text</label>
      <textarea id="text" name="text" rows="4" cols="60">{{ text }}</textarea>
    </div>
    <div class="field">
      <label for="size">Size (px)</label>
      <input id="size" name="size" type="number" value="{{ size }}">
    </div>
    <div class="field">
      <label for="border">Quiet zone (modules)</label>
      <input id="border" name="border" type="number" value="{{ border }}">
    </div>
    <button type="submit">Generate</button>
  </form>
  {% if error %}<p class="error">{{ error }}</p>{% endif %}
  {% if qr %}
  <div class="card">
    {% if qr.passthrough %}
      {{ qr.img_html | safe }}
      <div class="metrics">Pre-rendered image ({{ qr.mime_type }}), shown as is.</div>
    {% else %}
      <img src="{{ qr.data_url }}" width="{{ qr.width }}" height="{{ qr.height }}" alt="QR Code">
      <div class="metrics">
        Version {{ qr.version }} ({{ qr.modules }}x{{ qr.modules }} modules),
        mask {{ qr.mask }}, penalty {{ qr.penalty }},
        {{ qr.width }}x{{ qr.height }} px at {{ qr.scale }} px/module
      </div>
    {% endif %}
  </div>
  {% endif %}
</body>
</html>
"""


def _clamp(raw, default: int, low: int, high: int) -> int:
    try:
        value = int(raw if raw not in (None, "") else default)
    except (ValueError, TypeError):
        return default
    if value < low or value > high:
        return default
    return value


def _read_params(req) -> Tuple[str, int, int]:
    """Extract and validate preview parameters from a Flask request."""
    text = (req.values.get('text') or "").strip()
    size = _clamp(req.values.get('size'), DEFAULT_TARGET_SIZE, MIN_SIZE, MAX_SIZE)
    border = _clamp(req.values.get('border'), QUIET_ZONE, 0, MAX_BORDER)
    return text, size, border


app = Flask(__name__)


@app.errorhandler(DataTooLarge)
def handle_data_too_large(ex: DataTooLarge):
    logger.error(f"QR generation failed: {ex}")
    return str(ex), 413


@app.route('/', methods=['GET', 'POST'])
def index():
    text, size, border = _read_params(request)
    qr_view = None
    error = None

    if request.method == 'POST':
        if not text:
            error = "Enter the text to encode."
        elif text.startswith(DATA_URL_PREFIX):
            reference = render(text, size)
            qr_view = {
                'passthrough': True,
                'img_html': reference.to_html(),
                'mime_type': reference.mime_type,
            }
        else:
            try:
                symbol = encode(text)
            except DataTooLarge as ex:
                error = f"Could not generate the QR code: {ex}"
                logger.error(f"QR generation failed: {ex}")
                symbol = None

            if symbol:
                surface = rasterize(symbol, size, border)
                logger.info(f"Generated QR code version {symbol.version} with mask {symbol.mask}")
                qr_view = {
                    'passthrough': False,
                    'data_url': surface.to_data_url(),
                    'width': surface.width,
                    'height': surface.height,
                    'scale': surface.scale,
                    'version': symbol.version,
                    'modules': symbol.size,
                    'mask': symbol.mask,
                    'penalty': symbol.penalty,
                }

    return render_template_string(
        TEMPLATE, text=text, size=size, border=border, qr=qr_view, error=error
    )


@app.route('/export/png', methods=['GET'])
def export_png():
    text, size, border = _read_params(request)
    if not text:
        return "Missing text", 400
    if text.startswith(DATA_URL_PREFIX):
        return "Text is already an image", 400
    surface = rasterize(encode(text), size, border)
    buf = BytesIO(surface.to_png_bytes())
    return send_file(buf, as_attachment=True, download_name='qr.png', mimetype='image/png')


@app.route('/export/svg', methods=['GET'])
def export_svg():
    text, _, border = _read_params(request)
    if not text:
        return "Missing text", 400
    if text.startswith(DATA_URL_PREFIX):
        return "Text is already an image", 400
    svg_bytes = render_svg_from_matrix(encode(text), border=border, scale=10)
    return send_file(BytesIO(svg_bytes), as_attachment=True,
                     download_name='qr.svg', mimetype='image/svg+xml')


if __name__ == "__main__":
    app.run(debug=False)
