# -*- coding: utf-8 -*-
import logging

import pytest
from PIL import Image

from prettyqr import FilesystemFont, Generator, RenderConfig
from prettyqr.config import Color
from prettyqr.exceptions import EncodingError, FontNotFoundError, SaveQrError, ValidationError

BLACK = (0, 0, 0, 255)
WHITE = (255, 255, 255, 255)


@pytest.fixture
def qr():
    return Generator().content("TEST")


class TestContent:
    def test_symbol_size(self, qr):
        assert qr.qr_size() == 21
        assert qr.version() == 1

    def test_no_content_yet(self):
        qr = Generator()
        assert qr.qr_size() is None
        with pytest.raises(ValidationError):
            qr.make()
        with pytest.raises(ValidationError):
            qr.empty_mask()

    def test_level_changes_symbol(self):
        low = Generator().content("https://example.com/some/longer/path", 'L')
        high = Generator().content("https://example.com/some/longer/path", 'H')
        assert high.qr_size() > low.qr_size()

    def test_invalid_level(self):
        with pytest.raises(ValidationError):
            Generator().content("TEST", 'X')

    def test_too_much_data(self):
        with pytest.raises(EncodingError):
            Generator().content("a" * 3000, 'H')

    def test_empty_mask(self, qr):
        mask = qr.empty_mask()
        assert len(mask) == 21
        assert not any(any(row) for row in mask)


class TestSetters:
    def test_chaining_returns_generator(self, qr):
        assert qr.foreground(1, 2, 3).background(4, 5, 6, 7).rotate(90).solid() is qr
        assert qr.config.foreground == Color(1, 2, 3, 0)
        assert qr.config.background == Color(4, 5, 6, 7)
        assert qr.config.rotation == 90
        assert qr.config.solid is True

    @pytest.mark.parametrize("rgba", [(0, 0, 0, 0), (255, 255, 255, 127)])
    def test_color_boundaries_accepted(self, qr, rgba):
        qr.foreground(*rgba)
        assert qr.config.foreground == Color(*rgba)

    @pytest.mark.parametrize("rgba", [(256, 0, 0, 0), (0, 0, 0, 128)])
    def test_color_boundaries_rejected(self, qr, rgba):
        qr.foreground(9, 9, 9)
        with pytest.raises(ValidationError):
            qr.foreground(*rgba)
        with pytest.raises(ValidationError):
            qr.background(*rgba)
        assert qr.config.foreground == Color(9, 9, 9, 0)

    def test_rotation_rejected_eagerly(self, qr):
        qr.rotate(180)
        with pytest.raises(ValidationError):
            qr.rotate(45)
        with pytest.raises(ValidationError):
            qr.rotate("ninety")
        assert qr.config.rotation == 180

    def test_hide_mask_contract(self, qr):
        mask = qr.empty_mask()
        mask[10][10] = True
        qr.set_hide_mask(mask)
        before = qr.config

        with pytest.raises(ValidationError):
            qr.set_hide_mask([[False] * 21] * 20)
        assert qr.config is before
        assert qr.config.hide_mask[10][10] is True

    def test_hide_mask_is_copied(self, qr):
        mask = qr.empty_mask()
        qr.set_hide_mask(mask)
        mask[0][0] = True
        assert qr.config.hide_mask[0][0] is False

    def test_hide_mask_needs_content(self):
        with pytest.raises(ValidationError):
            Generator().set_hide_mask([[False]])

    def test_stale_hide_mask_fails_at_render(self, qr):
        qr.set_hide_mask(qr.empty_mask())
        qr.content("x" * 100)
        assert qr.qr_size() != 21
        with pytest.raises(ValidationError):
            qr.make()

    def test_text_validation(self, qr, bundled_font):
        with pytest.raises(ValidationError):
            qr.text("", bundled_font, 12)
        with pytest.raises(ValidationError):
            qr.text("hi", bundled_font, 0)
        with pytest.raises(ValidationError):
            qr.text("hi", "not a font", 12)
        assert qr.config.center_text is None

    def test_missing_font_file(self, tmp_path):
        with pytest.raises(FontNotFoundError):
            FilesystemFont(tmp_path / "nope.ttf")

    def test_font_file_path(self, tmp_path):
        path = tmp_path / "font.ttf"
        path.write_bytes(b"\x00")
        assert FilesystemFont(path).filepath == str(path)


class TestMake:
    def test_end_to_end_size(self, qr):
        image = qr.solid().make()
        n = qr.qr_size()
        assert image.size == (n * 10 + 4 * 10 * 2, n * 10 + 4 * 10 * 2)
        assert image.getpixel((0, 0)) == WHITE
        assert image.getpixel((45, 45)) == BLACK

    def test_custom_config(self):
        qr = Generator(RenderConfig(module_size=4, border_size=2, error_correction='H')).content("TEST")
        assert qr.make().size == (qr.qr_size() * 4 + 16,) * 2

    def test_rotation_keeps_size(self, qr):
        assert qr.rotate(-270).make().size == qr.rotate(0).make().size

    def test_colors(self, qr):
        image = qr.foreground(200, 0, 0).background(0, 0, 200, 127).make()
        assert image.getpixel((0, 0)) == (0, 0, 200, 0)
        assert image.getpixel((45, 45)) == (200, 0, 0, 255)

    def test_make_is_repeatable_with_text(self, qr, bundled_font):
        qr.text("Hi", bundled_font, 20)
        first = qr.make()
        second = qr.make()
        assert first.tobytes() == second.tobytes()
        assert qr.config.hide_mask is None

    def test_to_png(self, qr):
        data = qr.to_png()
        assert data.startswith(b"\x89PNG\r\n\x1a\n")

    def test_save(self, qr, tmp_path):
        path = tmp_path / "qr.png"
        qr.save(path)
        with Image.open(path) as image:
            assert image.format == 'PNG'
            assert image.size == (290, 290)

    def test_save_failure(self, qr, tmp_path):
        with pytest.raises(SaveQrError):
            qr.save(tmp_path / "missing" / "qr.png")


@pytest.mark.parametrize("angle", [float("nan"), float("inf"), "nan", "inf"])
def test_non_finite_rotation_rejected(qr, angle):
    with pytest.raises(ValidationError):
        qr.rotate(angle)
    assert qr.config.rotation == 0


def test_make_logs_once_at_info(qr, caplog):
    with caplog.at_level(logging.INFO, logger="prettyqr"):
        qr.make()
    info = [r for r in caplog.records if r.levelno == logging.INFO and r.name.startswith("prettyqr")]
    assert len(info) == 1
