"""Tests for tiny_color.core.sample — reading colours out of Pillow images."""

import pytest
from PIL import Image
from tiny_color import Color
from tiny_color.core.sample import sample_pixel, sample_region


def _two_tone() -> Image.Image:
    """40x20 image: left half red, right half blue."""
    img = Image.new('RGB', (40, 20), (255, 0, 0))
    img.paste((0, 0, 255), (20, 0, 40, 20))
    return img


class TestSamplePixel:
    def test_left(self):
        assert sample_pixel(_two_tone(), 0, 0) == Color(255, 0, 0)

    def test_right(self):
        assert sample_pixel(_two_tone(), 39, 19) == Color(0, 0, 255)

    def test_rgba_alpha_dropped(self):
        img = Image.new('RGBA', (2, 2), (10, 20, 30, 128))
        assert sample_pixel(img, 1, 1) == Color(10, 20, 30)

    def test_outside_raises(self):
        with pytest.raises(ValueError):
            sample_pixel(_two_tone(), 40, 0)
        with pytest.raises(ValueError):
            sample_pixel(_two_tone(), 0, -1)


class TestSampleRegion:
    def test_uniform(self):
        assert sample_region(_two_tone(), (0, 0, 20, 20)) == Color(255, 0, 0)

    def test_mean_of_two_halves(self):
        # 50/50 red and blue -> 127.5 rounds up
        assert sample_region(_two_tone(), (0, 0, 40, 20)) == Color(128, 0, 128)

    def test_mean_rounds_to_nearest(self):
        img = Image.new('RGB', (3, 1), (0, 0, 0))
        img.putpixel((0, 0), (255, 10, 1))
        # r: 85.0, g: 3.33, b: 0.33
        assert sample_region(img, (0, 0, 3, 1)) == Color(85, 3, 0)

    def test_no_uint8_overflow(self):
        img = Image.new('RGB', (100, 100), (255, 255, 255))
        assert sample_region(img, (0, 0, 100, 100)) == Color(255, 255, 255)

    def test_empty_bounds_raise(self):
        with pytest.raises(ValueError):
            sample_region(_two_tone(), (5, 5, 5, 10))

    def test_bounds_outside_raise(self):
        with pytest.raises(ValueError):
            sample_region(_two_tone(), (0, 0, 41, 20))
