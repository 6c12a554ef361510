"""Color value type: one immutable RGB triple and its #RRGGBB encoding."""

from __future__ import annotations

import re
from dataclasses import dataclass

# Length 7, leading '#', then three ASCII hex pairs. int(..., 16) alone is too
# lenient (it accepts ' f', '+f' and non-ASCII digits).
_HEX_PATTERN = re.compile(r'#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')


class InvalidColorString(ValueError):
    """Raised when a string is not a #RRGGBB colour. Carries the rejected input."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f'invalid color string: {value}')


@dataclass(frozen=True)
class Color:
    """An RGB colour with 8-bit channels.

    Usage:

        red = Color(255, 0, 0)
        red.to_hex()               # '#FF0000'
        Color.from_hex('#ff0000')  # Color(r=255, g=0, b=0)
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f'channel {name} must be an int, got {type(value).__name__}')
            if not 0 <= value <= 255:
                raise ValueError(f'channel {name} out of range 0-255: {value}')

    def __str__(self) -> str:
        return self.to_hex()

    def to_hex(self) -> str:
        """Canonical encoding: '#' plus two uppercase hex digits per channel."""
        return f'#{self.r:02X}{self.g:02X}{self.b:02X}'

    def to_rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def from_rgb(cls, rgb: tuple[int, int, int]) -> Color:
        r, g, b = rgb
        return cls(r, g, b)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Decode '#RRGGBB' (any case). Raises InvalidColorString otherwise."""
        if not isinstance(text, str) or len(text) != 7 or not text.startswith('#'):
            raise InvalidColorString(text)
        m = _HEX_PATTERN.fullmatch(text)
        if m is None:
            raise InvalidColorString(text)
        return cls(int(m.group(1), 16), int(m.group(2), 16), int(m.group(3), 16))


def parse_hex(text: str) -> Color:
    """Module-level alias for Color.from_hex."""
    return Color.from_hex(text)
