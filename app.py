#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
PrettyQR - Flask Web Application

Serves styled QR codes as PNG:

    GET /qr.png?text=hello&fg=143c8c&rotate=90&solid=true&label=Hi&size=24
    GET /qr/download?text=hello
"""

import logging
import os
from io import BytesIO
from typing import Any, Dict

from flask import Flask, request, send_file

from prettyqr import FilesystemFont, Generator
from prettyqr.config import MAX_ALPHA, validate_rgba
from prettyqr.exceptions import EncodingError, PrettyQrError, ValidationError

# Configure logging
logging.basicConfig(level=os.environ.get('PRETTYQR_LOG_LEVEL', 'INFO').upper())
logger = logging.getLogger(__name__)

DEFAULT_LABEL_SIZE = 24


def _parse_color(value: str):
    """Parse ``RRGGBB`` or ``RRGGBBAA`` (alpha 00-7f, 00 = opaque)."""
    raw = value.strip().lstrip('#')
    if len(raw) not in (6, 8):
        raise ValidationError(f"Color must be RRGGBB or RRGGBBAA: [{value}]")
    try:
        channels = [int(raw[i:i + 2], 16) for i in range(0, len(raw), 2)]
    except ValueError:
        raise ValidationError(f"Color must be hexadecimal: [{value}]") from None
    if len(channels) == 3:
        channels.append(0)
    if channels[3] > MAX_ALPHA:
        raise ValidationError(f"Alpha value must be between 00-{MAX_ALPHA:02x}: [{value}]")
    return validate_rgba(*channels)


def _read_params(req) -> Dict[str, Any]:
    """Extract QR generation parameters from a Flask request."""
    return {
        'text': (req.values.get('text') or "").strip(),
        'ecc': (req.values.get('ecc') or "L").strip().upper(),
        'fg': req.values.get('fg'),
        'bg': req.values.get('bg'),
        'rotate': req.values.get('rotate') or "0",
        'solid': req.values.get('solid') == 'true',
        'label': (req.values.get('label') or "").strip(),
        'size': req.values.get('size') or DEFAULT_LABEL_SIZE,
    }


def _build_generator(params: Dict[str, Any]) -> Generator:
    qr = Generator().content(params['text'], params['ecc'])
    if params['fg']:
        qr.foreground(*_parse_color(params['fg']))
    if params['bg']:
        qr.background(*_parse_color(params['bg']))
    qr.rotate(params['rotate']).solid(params['solid'])

    if params['label']:
        font_path = app.config.get('PRETTYQR_FONT')
        if not font_path:
            raise ValidationError("Labels are disabled: PRETTYQR_FONT is not configured")
        try:
            size = int(params['size'])
        except (TypeError, ValueError):
            raise ValidationError(f"Label size must be an integer: [{params['size']}]") from None
        qr.text(params['label'], FilesystemFont(font_path), size)
    return qr


def _png_response(as_attachment: bool):
    params = _read_params(request)
    if not params['text']:
        return "Missing text", 400

    try:
        logger.info(f"Generating QR code with parameters: ecc={params['ecc']}, "
                    f"rotate={params['rotate']}, solid={params['solid']}, label={bool(params['label'])}")
        png = _build_generator(params).to_png()
    except (ValidationError, EncodingError) as ex:
        logger.warning(f"Rejected QR request: {ex}")
        return str(ex), 400
    except PrettyQrError as ex:
        logger.error(f"QR rendering failed: {ex}")
        return str(ex), 500

    return send_file(BytesIO(png), mimetype='image/png',
                     as_attachment=as_attachment, download_name='qr.png')


app = Flask(__name__)
app.config['PRETTYQR_FONT'] = os.environ.get('PRETTYQR_FONT')


@app.route('/qr.png', methods=['GET'])
def qr_png():
    return _png_response(as_attachment=False)


@app.route('/qr/download', methods=['GET'])
def qr_download():
    return _png_response(as_attachment=True)


if __name__ == "__main__":
    app.run(debug=True)
