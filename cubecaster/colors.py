"""Named colours and helpers for packing and shading 0xTTRRGGBB values."""

from __future__ import annotations

import struct

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

DARK_RED = 0x8B0000
LIGHT_RED = 0xFF6347

DARK_GREEN = 0x006400
LIME_GREEN = 0x32CD32

DARK_BLUE = 0x00008B
NAVY = 0x000080
SKY_BLUE = 0x87CEEB

YELLOW = 0xFFFF00
GOLD = 0xFFD700
ORANGE = 0xFFA500

PURPLE = 0x800080
MAGENTA = 0xFF00FF
VIOLET = 0x9400D3

CYAN = 0x00FFFF
TEAL = 0x008080

BROWN = 0xA52A2A
CHOCOLATE = 0xD2691E

GRAY = 0x808080
LIGHT_GRAY = 0xD3D3D3
DARK_GRAY = 0x404040


def _single(value: float) -> float:
    """Round a number to single precision, as a 32-bit float would hold it."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _channels(color: int) -> tuple[int, int, int, int]:
    return (
        (color >> 24) & 0xFF,
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
    )


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and red, green, blue channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


def darken_color(original_color: int, darkness_factor: float) -> int:
    """Scale each colour channel by ``1 - darkness_factor``; negative factors count as 0."""
    factor = _single(darkness_factor)
    if factor < 0:
        factor = 0.0
    t, r, g, b = _channels(original_color)
    keep = 1.0 - factor
    return create_trgb(t, int(r * keep), int(g * keep), int(b * keep))


def wall_shade_color(wall_dir: bool, color: int) -> int:
    """Shade a wall colour: lightly for vertical hits, heavily for horizontal ones."""
    t, r, g, b = _channels(color)
    keep = 1.0 - _single(0.1 if wall_dir else 0.7)
    return create_trgb(t, int(r * keep), int(g * keep), int(b * keep))