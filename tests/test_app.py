# -*- coding: utf-8 -*-
from io import BytesIO

import pytest
from PIL import Image

from app import app


@pytest.fixture
def client():
    app.config.update(TESTING=True, PRETTYQR_FONT=None)
    with app.test_client() as client:
        yield client


def test_png(client):
    response = client.get('/qr.png?text=TEST&solid=true')
    assert response.status_code == 200
    assert response.mimetype == 'image/png'
    with Image.open(BytesIO(response.data)) as image:
        assert image.size == (290, 290)


def test_colors_and_rotation(client):
    response = client.get('/qr.png?text=TEST&fg=%23c80000&bg=0000c87f&rotate=-90')
    assert response.status_code == 200
    with Image.open(BytesIO(response.data)) as image:
        image = image.convert('RGBA')
        assert image.getpixel((0, 0)) == (0, 0, 200, 0)


def test_download(client):
    response = client.get('/qr/download?text=TEST')
    assert response.status_code == 200
    assert 'attachment' in response.headers['Content-Disposition']
    assert 'qr.png' in response.headers['Content-Disposition']


def test_missing_text(client):
    assert client.get('/qr.png').status_code == 400


@pytest.mark.parametrize("query", [
    'text=TEST&rotate=45',
    'text=TEST&rotate=nan',
    'text=TEST&rotate=inf',
    'text=TEST&fg=zzzzzz',
    'text=TEST&fg=00000080',
    'text=TEST&ecc=X',
    'text=TEST&label=Hi',
])
def test_bad_requests(client, query):
    response = client.get('/qr.png?' + query)
    assert response.status_code == 400


def test_label_with_missing_font(client, tmp_path):
    app.config['PRETTYQR_FONT'] = str(tmp_path / 'missing.ttf')
    response = client.get('/qr.png?text=TEST&label=Hi')
    assert response.status_code == 500
