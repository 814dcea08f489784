"""The player, grid ray casting and the projected wall renderer."""

from __future__ import annotations

import math
import struct
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .colors import VIOLET, darken_color
from .framebuffer import (
    MINIMAP_SCALE,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    FrameBuffer,
)

FOV = 60 * (math.pi / 180)
WALL_STRIP_WIDTH = 10
NUM_RAYS = WINDOW_WIDTH // WALL_STRIP_WIDTH
FPS = 60
FRAME_TIME_MS = 1000 // FPS
SPEED_MULTIPLIER = 60.0 / FPS
MOVE_SPEED = 3 * SPEED_MULTIPLIER
ROT_SPEED = SPEED_MULTIPLIER * 2 * math.pi / 180
SHADE_DISTANCE = 120

KEY_W = 119
KEY_S = 115
KEY_D = 100
KEY_A = 97

_INT_MAX = 2**31 - 1
_FLT_MAX = 3.4028234663852886e38

HitCallback = Callable[[int, int, int, int], object]


def _f32(value: float) -> float:
    """Round to single precision."""
    if math.isnan(value) or math.isinf(value):
        return value
    if abs(value) > _FLT_MAX:
        return math.copysign(math.inf, value)
    return struct.unpack("f", struct.pack("f", value))[0]


def _fdiv(a: float, b: float) -> float:
    """Floating division that yields infinities or NaN instead of raising."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _idiv(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _c_round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _grid_cell(grid: Sequence[str], row: int, col: int) -> str:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        return ""
    return grid[row][col]


def norm_angle(angle: float) -> float:
    """Bring an angle into the range [0, 2*pi)."""
    angle = math.fmod(angle, 2 * math.pi)
    if angle < 0:
        angle += 2 * math.pi
    return angle


def calc_dist(x: float, x1: float, y: float, y1: float) -> float:
    """Distance between two points whose coordinates are truncated to integers."""
    dx = int(x1) - int(x)
    dy = int(y1) - int(y)
    return math.sqrt(dx * dx + dy * dy)


def map_is_open(x: float, y: float, grid: Sequence[str]) -> bool:
    """Tell whether a pixel position is not inside a wall tile.

    Positions outside the window count as open; rows past the end of the
    grid count as walls.
    """
    if x < 0 or y < 0 or x > WINDOW_WIDTH or y > WINDOW_HEIGHT:
        return True
    grid_x = math.floor(x / TILE_SIZE)
    grid_y = math.floor(y / TILE_SIZE)
    if grid_y > 10 or grid_y >= len(grid):
        return False
    row = grid[grid_y]
    if grid_x >= len(row):
        return True
    return row[grid_x] != "1"


@dataclass
class Ray:
    """One cast ray and the wall it hit."""

    angle: float
    column_id: int
    is_down: bool
    is_right: bool
    hit_x: float = 0.0
    hit_y: float = 0.0
    distance: int = 0
    vertical_hit: bool = False

    @property
    def is_up(self) -> bool:
        return not self.is_down

    @property
    def is_left(self) -> bool:
        return not self.is_right


@dataclass
class Player:
    """The player's position in pixels, heading and current input."""

    x: int
    y: int
    radius: int = 3
    turn_dir: int = 0
    walk_dir: int = 0
    rot_angle: float = math.pi / 2
    move_speed: float = MOVE_SPEED
    rot_speed: float = ROT_SPEED

    @classmethod
    def from_start(cls, row: int, col: int) -> Player:
        """Place a player at the centre of the given map cell."""
        return cls(
            x=col * TILE_SIZE + TILE_SIZE // 2,
            y=row * TILE_SIZE + TILE_SIZE // 2,
        )

    def key_press(self, keycode: int) -> None:
        """Start walking or turning for the W, S, D and A keys."""
        if keycode == KEY_W:
            self.walk_dir = 1
        if keycode == KEY_S:
            self.walk_dir = -1
        if keycode == KEY_D:
            self.turn_dir = 1
        if keycode == KEY_A:
            self.turn_dir = -1

    def key_release(self, keycode: int) -> None:
        """Stop walking or turning when a movement key is released."""
        if keycode in (KEY_W, KEY_S):
            self.walk_dir = 0
        if keycode in (KEY_D, KEY_A):
            self.turn_dir = 0

    def move(self, grid: Sequence[str]) -> None:
        """Turn, then step along each axis unless that step enters a wall tile."""
        self.rot_angle += self.turn_dir * self.rot_speed
        step = int(self.move_speed * self.walk_dir)
        sx = _c_round(step * math.cos(self.rot_angle))
        sy = _c_round(step * math.sin(self.rot_angle))
        if _grid_cell(grid, _idiv(self.y, TILE_SIZE), _idiv(self.x + sx, TILE_SIZE)) != "1":
            self.x += sx
        if _grid_cell(grid, _idiv(self.y + sy, TILE_SIZE), _idiv(self.x, TILE_SIZE)) != "1":
            self.y += sy


def _horizontal_hit(
    player: Player, grid: Sequence[str], angle: float, is_down: bool, is_right: bool
) -> tuple[float, float] | None:
    tan_a = math.tan(angle)
    y_intercept = float(_idiv(player.y, TILE_SIZE) * TILE_SIZE)
    if is_down:
        y_intercept += TILE_SIZE
    x_intercept = _f32(player.x + _fdiv(y_intercept - player.y, tan_a))
    y_step = float(TILE_SIZE) if is_down else -float(TILE_SIZE)
    x_step = _f32(_fdiv(TILE_SIZE, tan_a))
    if (not is_right and x_step > 0) or (is_right and x_step < 0):
        x_step = -x_step
    next_x, next_y = x_intercept, _f32(y_intercept)
    while 0 <= next_x <= WINDOW_WIDTH and next_y >= 0:
        check_y = _f32(next_y + (0 if is_down else -1))
        if not map_is_open(next_x, check_y, grid):
            return next_x, next_y
        if is_down and check_y > WINDOW_HEIGHT:
            # Everything below the window counts as open, so no wall lies ahead.
            return None
        next_x = _f32(next_x + x_step)
        next_y = _f32(next_y + y_step)
    return None


def _vertical_hit(
    player: Player, grid: Sequence[str], angle: float, is_down: bool, is_right: bool
) -> tuple[int, int] | None:
    tan_a = math.tan(angle)
    x_intercept = float(_idiv(player.x, TILE_SIZE) * TILE_SIZE)
    if is_right:
        x_intercept += TILE_SIZE
    y_intercept = _f32(player.y + (x_intercept - player.x) * tan_a)
    x_step = float(TILE_SIZE) if is_right else -float(TILE_SIZE)
    y_step = _f32(TILE_SIZE * tan_a)
    if (not is_down and y_step > 0) or (is_down and y_step < 0):
        y_step = -y_step
    next_x, next_y = _f32(x_intercept), y_intercept
    while 0 <= next_x <= WINDOW_WIDTH and next_y >= 0:
        check_y = _f32(next_y + (0 if is_right else -3))
        if not map_is_open(next_x, check_y, grid):
            return int(next_x), int(check_y)
        next_x = _f32(next_x + x_step)
        next_y = _f32(next_y + y_step)
    return None


def cast_rays(
    player: Player, grid: Sequence[str], on_hit: HitCallback | None = None
) -> list[Ray]:
    """Cast one ray per wall strip across the field of view.

    ``on_hit`` receives the minimap line (x, y, x1, y1) from the player to
    each ray's wall hit.
    """
    rays: list[Ray] = []
    ray_angle = player.rot_angle - FOV / 2.0
    for column in range(NUM_RAYS):
        angle = norm_angle(ray_angle)
        is_down = 0 < angle < math.pi
        is_right = not (math.pi / 2 < angle < math.pi * 3 / 2)
        ray = Ray(angle=angle, column_id=column, is_down=is_down, is_right=is_right)

        horz = _horizontal_hit(player, grid, angle, is_down, is_right)
        vert = _vertical_hit(player, grid, angle, is_down, is_right)

        dst_vert = 0
        dst_horz = 0
        if vert is not None:
            dst_vert = int(calc_dist(player.x, vert[0], player.y, vert[1]))
            dst_horz = _INT_MAX
        if horz is not None:
            dst_horz = int(calc_dist(player.x, horz[0], player.y, horz[1]))
            if not dst_vert:
                dst_vert = _INT_MAX

        hit: tuple[float, float] | None = None
        if vert is not None and dst_vert < dst_horz:
            hit = vert
            ray.distance = dst_vert
            ray.vertical_hit = True
        elif horz is not None and dst_horz <= dst_vert:
            hit = horz
            ray.distance = dst_horz
            ray.vertical_hit = False

        if hit is not None:
            ray.hit_x = _f32(float(hit[0]))
            ray.hit_y = _f32(float(hit[1]))
            if on_hit is not None:
                on_hit(
                    int(player.x * MINIMAP_SCALE),
                    int(player.y * MINIMAP_SCALE),
                    int(hit[0] * MINIMAP_SCALE),
                    int(hit[1] * MINIMAP_SCALE),
                )
        rays.append(ray)
        ray_angle += FOV / (NUM_RAYS - 1)
    return rays


def render_walls(frame: FrameBuffer, player: Player, rays: Sequence[Ray]) -> None:
    """Draw one shaded wall strip per ray, corrected for the fish-eye effect."""
    projection = (WINDOW_WIDTH // 2) / math.tan(FOV / 2)
    for index, ray in enumerate(rays):
        if ray.distance <= 0:
            continue
        corrected = ray.distance * math.cos(ray.angle - player.rot_angle)
        strip_height = min(TILE_SIZE / corrected * projection, WINDOW_HEIGHT)
        color = darken_color(VIOLET, 1 - SHADE_DISTANCE / corrected)
        frame.fill_rect(
            index * WALL_STRIP_WIDTH,
            WINDOW_HEIGHT // 2 - strip_height / 2,
            WALL_STRIP_WIDTH,
            strip_height,
            color,
        )