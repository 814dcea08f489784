import math

import pytest

from cubecaster.app import Game, main
from cubecaster.colors import MAGENTA
from cubecaster.framebuffer import MINIMAP_SCALE, WINDOW_HEIGHT, WINDOW_WIDTH
from cubecaster.mapfile import read_map
from cubecaster.raycast import KEY_W, NUM_RAYS, Player

ROOM = [
    "1111111\n",
    "1000001\n",
    "1000001\n",
    "100P001\n",
    "1000001\n",
    "1000001\n",
    "1111111\n",
]


@pytest.fixture
def game():
    return Game(read_map(ROOM))


def test_player_starts_at_map_start(game):
    expected = Player.from_start(*game.map.start)
    assert (game.player.x, game.player.y) == (expected.x, expected.y)
    assert game.rays == []


def test_frame_has_window_size(game):
    assert (game.frame.width, game.frame.height) == (WINDOW_WIDTH, WINDOW_HEIGHT)


def test_render_casts_one_ray_per_strip(game):
    game.render()
    assert len(game.rays) == NUM_RAYS
    assert [ray.column_id for ray in game.rays] == list(range(NUM_RAYS))


def test_render_draws_player_dot(game):
    game.render()
    x = int(game.player.x * MINIMAP_SCALE)
    y = int(game.player.y * MINIMAP_SCALE)
    assert game.frame.get_pixel(x, y) == MAGENTA


def test_render_does_not_move_player(game):
    before = (game.player.x, game.player.y, game.player.rot_angle)
    game.render()
    assert (game.player.x, game.player.y, game.player.rot_angle) == before


def test_walls_appear_from_second_frame(game):
    game.render()
    minimap_edge = int(len(ROOM[0]) * 64 * MINIMAP_SCALE) + 2
    row = WINDOW_HEIGHT // 2
    assert any(ray.distance > 0 for ray in game.rays)
    game.render()
    strip = [game.frame.get_pixel(x, row) for x in range(minimap_edge, WINDOW_WIDTH)]
    assert any(pixel != 0 for pixel in strip)


def test_update_without_input_keeps_position(game):
    before = (game.player.x, game.player.y)
    game.update()
    assert (game.player.x, game.player.y) == before
    assert len(game.rays) == NUM_RAYS


def test_update_walks_forward_along_heading(game):
    game.player.key_press(KEY_W)
    x0, y0 = game.player.x, game.player.y
    game.update()
    assert math.isclose(game.player.rot_angle, math.pi / 2)
    assert game.player.x == x0
    assert game.player.y > y0


def test_released_key_stops_walking(game):
    game.player.key_press(KEY_W)
    game.update()
    game.player.key_release(KEY_W)
    position = (game.player.x, game.player.y)
    game.update()
    assert (game.player.x, game.player.y) == position


def test_main_without_map_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Please provide the map to the program" in out


def test_main_with_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "absent.cub")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_with_map_without_start_fails(tmp_path, capsys):
    path = tmp_path / "room.cub"
    path.write_text("111\n101\n111\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err