import pytest

from cubecaster.framebuffer import (
    MAP_TILE_COLORS,
    MINIMAP_SCALE,
    TILE_SIZE,
    FrameBuffer,
)

COLOR = 0xFF00FF
BACKGROUND = 0x123456


@pytest.fixture
def frame():
    return FrameBuffer(64, 48)


def test_new_buffer_is_black(frame):
    assert set(frame.pixels) == {0}
    assert len(frame.pixels) == 64 * 48


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        FrameBuffer(0, 10)


def test_put_then_get_round_trip(frame):
    frame.put_pixel(5, 7, COLOR)
    assert frame.get_pixel(5, 7) == COLOR
    assert frame.get_pixel(7, 5) == 0


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (65, 0), (0, 49), (63, 48)])
def test_out_of_range_writes_are_dropped(frame, x, y):
    frame.put_pixel(x, y, COLOR)
    assert COLOR not in frame.pixels


def test_column_equal_to_width_wraps_to_next_row(frame):
    frame.put_pixel(64, 3, COLOR)
    assert frame.get_pixel(0, 4) == COLOR


def test_get_pixel_outside_raises(frame):
    with pytest.raises(IndexError):
        frame.get_pixel(64, 0)


def test_clear_resets_every_pixel(frame):
    frame.fill_rect(0, 0, 10, 10, COLOR)
    frame.clear()
    assert set(frame.pixels) == {0}


def test_fill_rect_covers_exact_area(frame):
    frame.fill_rect(2, 3, 5, 4, COLOR)
    assert frame.pixels.count(COLOR) == 5 * 4
    assert frame.get_pixel(2, 3) == COLOR
    assert frame.get_pixel(6, 6) == COLOR
    assert frame.get_pixel(7, 6) == 0


def test_fill_rect_truncates_float_sizes(frame):
    frame.fill_rect(0, 0, 3.9, 2.5, COLOR)
    assert frame.pixels.count(COLOR) == 3 * 2


def test_fill_rect_with_negative_corner_does_nothing(frame):
    frame.fill_rect(-1, 0, 5, 5, COLOR)
    frame.fill_rect(0, -1, 5, 5, COLOR)
    assert COLOR not in frame.pixels


def test_horizontal_line_excludes_end_point(frame):
    frame.draw_line(0, 0, 5, 0, COLOR)
    assert [frame.get_pixel(x, 0) for x in range(5)] == [COLOR] * 5
    assert frame.get_pixel(5, 0) == 0


def test_diagonal_line(frame):
    frame.draw_line(0, 0, 3, 3, COLOR)
    assert [frame.get_pixel(i, i) for i in range(3)] == [COLOR] * 3
    assert frame.pixels.count(COLOR) == 3


def test_line_backwards_is_drawn(frame):
    frame.draw_line(10, 10, 10, 4, COLOR)
    assert [frame.get_pixel(10, y) for y in range(5, 11)] == [COLOR] * 6
    assert frame.get_pixel(10, 4) == 0


def test_zero_length_line_draws_nothing(frame):
    frame.draw_line(3, 3, 3, 3, COLOR)
    assert COLOR not in frame.pixels


def test_circle_of_radius_zero_is_one_pixel(frame):
    frame.draw_circle(10, 10, 0, COLOR)
    assert frame.pixels.count(COLOR) == 1
    assert frame.get_pixel(10, 10) == COLOR


def test_circle_is_symmetric(frame):
    frame.draw_circle(20, 20, 4, COLOR)
    for y in range(15, 26):
        for x in range(15, 26):
            mirrored = frame.get_pixel(40 - x, 40 - y)
            assert frame.get_pixel(x, y) == mirrored
            assert frame.get_pixel(y, x) == frame.get_pixel(x, y)


def test_circle_stays_within_radius(frame):
    frame.draw_circle(20, 20, 2, COLOR)
    assert frame.get_pixel(22, 20) == COLOR
    assert frame.get_pixel(22, 22) == 0


def test_tile_has_border_and_body():
    frame = FrameBuffer(100, 100)
    frame.fill_rect(0, 0, 100, 100, BACKGROUND)
    frame.fill_tile(0, 0, COLOR)
    last = int(TILE_SIZE * MINIMAP_SCALE)
    assert frame.get_pixel(0, 0) == 0
    assert frame.get_pixel(0, 5) == 0
    assert frame.get_pixel(5, 0) == 0
    assert frame.get_pixel(1, 1) == COLOR
    assert frame.get_pixel(last, last) == COLOR
    assert frame.get_pixel(last + 1, last + 1) == BACKGROUND


def test_draw_map_colours_cells():
    frame = FrameBuffer(100, 100)
    frame.fill_rect(0, 0, 100, 100, BACKGROUND)
    frame.draw_map(["10", " 6"])
    second_col = int(TILE_SIZE * MINIMAP_SCALE) + 2
    assert frame.get_pixel(1, 1) == MAP_TILE_COLORS["1"]
    assert frame.get_pixel(second_col, 1) == MAP_TILE_COLORS["0"]
    assert frame.get_pixel(second_col, second_col) == MAP_TILE_COLORS["6"]
    assert frame.get_pixel(1, second_col) == BACKGROUND