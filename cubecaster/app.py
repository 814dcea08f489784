"""The game loop: render a frame, move the player and show it in a window."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence

from .colors import MAGENTA
from .framebuffer import MINIMAP_SCALE, WINDOW_HEIGHT, WINDOW_WIDTH, FrameBuffer
from .mapfile import GameMap, MapError, load_map
from .raycast import FPS, Player, Ray, cast_rays, render_walls

PLAYER_DOT_RADIUS = 4
WINDOW_TITLE = "cubecaster"
USAGE = "Please provide the map to the program\n./map_checker [MAP]"


class Game:
    """One running game: the map, the player, the last cast rays and the frame."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.player = Player.from_start(*game_map.start)
        self.frame = FrameBuffer(WINDOW_WIDTH, WINDOW_HEIGHT)
        self.rays: list[Ray] = []

    def render(self) -> None:
        """Draw one frame: the walls seen by the previous rays, the minimap and new rays."""
        frame = self.frame
        player = self.player
        frame.clear()
        render_walls(frame, player, self.rays)
        frame.draw_map(self.map.grid)
        frame.draw_circle(
            player.x * MINIMAP_SCALE,
            player.y * MINIMAP_SCALE,
            PLAYER_DOT_RADIUS,
            MAGENTA,
        )
        self.rays = cast_rays(
            player,
            self.map.grid,
            lambda x, y, x1, y1: frame.draw_line(x, y, x1, y1, MAGENTA),
        )

    def update(self) -> None:
        """Render the current frame, then apply the player's movement."""
        self.render()
        self.player.move(self.map.grid)


def _rgb_bytes(frame: FrameBuffer) -> bytes:
    """Pack the frame's pixels as consecutive red, green, blue bytes."""
    out = bytearray()
    for pixel in frame.pixels:
        out += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF))
    return bytes(out)


def _run(game: Game) -> int:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    game.player.key_press(event.key)
                elif event.type == pygame.KEYUP:
                    game.player.key_release(event.key)
            clock.tick(FPS)
            game.update()
            image = pygame.image.frombuffer(
                _rgb_bytes(game.frame), (WINDOW_WIDTH, WINDOW_HEIGHT), "RGB"
            )
            screen.blit(image, (0, 0))
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and run the game window."""
    parser = argparse.ArgumentParser(prog="cubecaster", add_help=True)
    parser.add_argument("map", nargs="?")
    args = parser.parse_args(argv)
    if args.map is None:
        print(USAGE)
        return 1
    try:
        game_map = load_map(args.map)
    except (OSError, MapError) as error:
        print(f"Error\n{error}", file=sys.stderr)
        return 1
    game = Game(game_map)
    print(f"starting position: {game_map.start[0]} {game_map.start[1]}")
    return _run(game)