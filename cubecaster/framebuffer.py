"""An in-memory pixel buffer with the drawing primitives the renderer needs."""

from __future__ import annotations

from collections.abc import Sequence

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
TILE_SIZE = 64
MINIMAP_SCALE = 0.4

MAP_TILE_COLORS = {
    "1": 0xF2DDBA,
    "0": 0xFFFFFF,
    "6": 0x00FF00,
    "5": 0x0000FF,
    "P": 0xFFFFFF,
}


class FrameBuffer:
    """A row-major buffer of 0xTTRRGGBB pixels."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = [0] * (width * height)

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Write one pixel; writes that fall outside the buffer are dropped.

        Like a flat image buffer, a column equal to the width lands on the
        first pixel of the next row.
        """
        x, y = int(x), int(y)
        if x < 0 or y < 0 or x > self.width or y > self.height:
            return
        offset = y * self.width + x
        if offset >= len(self.pixels):
            return
        self.pixels[offset] = color

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the buffer")
        return self.pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to black."""
        self.pixels = [0] * (self.width * self.height)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: int) -> None:
        """Fill a rectangle; rectangles starting at a negative corner are skipped."""
        x, y, width, height = int(x), int(y), int(width), int(height)
        if x < 0 or y < 0:
            return
        for row in range(height):
            for col in range(width):
                self.put_pixel(x + col, y + row, color)

    def fill_tile(self, col: int, row: int, color: int) -> None:
        """Paint one minimap tile, with a black edge on its top and left sides."""
        size = TILE_SIZE * MINIMAP_SCALE
        edge = size - 1
        i = 0
        while i < size:
            j = 0
            while j < size:
                border = i == 0 or j == 0 or i == edge or j == edge
                self.put_pixel(
                    col * TILE_SIZE * MINIMAP_SCALE + i,
                    row * TILE_SIZE * MINIMAP_SCALE + j,
                    0x000000 if border else color,
                )
                j += 1
            i += 1

    def draw_line(self, x: int, y: int, x1: int, y1: int, color: int) -> None:
        """Draw a line from (x, y) towards (x1, y1), not including the end point."""
        dx = x1 - x
        dy = y1 - y
        sx = 1 if dx >= 0 else -1
        sy = 1 if dy >= 0 else -1
        dx, dy = abs(dx), abs(dy)
        if dx > dy:
            p = 2 * dy - dx
            while x != x1:
                self.put_pixel(x, y, color)
                x += sx
                if p >= 0:
                    y += sy
                    p -= 2 * dx
                p += 2 * dy
        else:
            p = 2 * dx - dy
            while y != y1:
                self.put_pixel(x, y, color)
                y += sy
                if p >= 0:
                    x += sx
                    p -= 2 * dy
                p += 2 * dx

    def draw_circle(self, cx: float, cy: float, radius: float, color: int) -> None:
        """Draw a filled circle centred on (cx, cy)."""
        start = int(-radius)
        limit = radius * radius
        y = start
        while y <= radius:
            x = start
            while x <= radius:
                if x * x + y * y <= limit:
                    self.put_pixel(cx + x, cy + y, color)
                x += 1
            y += 1

    def draw_map(self, grid: Sequence[str]) -> None:
        """Draw the minimap for a grid of map rows."""
        for row, line in enumerate(grid):
            for col, cell in enumerate(line):
                color = MAP_TILE_COLORS.get(cell)
                if color is not None:
                    self.fill_tile(col, row, color)