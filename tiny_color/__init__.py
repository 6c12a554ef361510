"""tiny-color — an RGB colour value type with #RRGGBB encoding."""

from tiny_color.core.types import Color, InvalidColorString, parse_hex

__all__ = ['Color', 'InvalidColorString', 'parse_hex']
