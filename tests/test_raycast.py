import pytest

from cubemaze.player import Player
from cubemaze.raycast import Side, cast_ray

ROOM = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]

HALL = [
    "1111111",
    "1000001",
    "1000001",
    "1000001",
    "1000001",
    "100N001",
    "1111111",
]


def test_centre_ray_north_hits_top_wall():
    player = Player.from_start(2, 2, "N")
    hit = cast_ray(player, ROOM, 5, 10, 100)
    assert hit.side == Side.WE
    assert (hit.map_x, hit.map_y) == (0, 2)
    assert hit.wall_dist == pytest.approx(1.5)
    assert hit.wall_x == pytest.approx(0.5)


def test_centre_ray_east_crosses_column_lines():
    player = Player.from_start(2, 2, "E")
    hit = cast_ray(player, ROOM, 5, 10, 100)
    assert hit.side == Side.SO
    assert (hit.map_x, hit.map_y) == (2, 4)
    assert hit.step_y == 1


def test_every_column_hits_a_wall_cell():
    player = Player.from_start(5, 3, "N")
    for column in range(0, 40):
        hit = cast_ray(player, HALL, column, 40, 200)
        assert HALL[hit.map_x][hit.map_y] == "1"
        assert 0.0 <= hit.wall_x < 1.0
        assert hit.wall_dist > 0
        assert hit.wall_start <= 100 <= hit.wall_end


def test_nearer_wall_is_taller():
    player = Player.from_start(5, 3, "N")
    far = cast_ray(player, HALL, 20, 40, 200)
    player.rotate_left()
    for _ in range(44):
        player.rotate_left()
    near = cast_ray(player, HALL, 20, 40, 200)
    assert near.wall_dist < far.wall_dist
    assert near.line_height > far.line_height


def test_line_height_matches_distance():
    player = Player.from_start(2, 2, "S")
    hit = cast_ray(player, ROOM, 5, 10, 100)
    assert hit.line_height == int(100 / hit.wall_dist)
    assert hit.wall_end - hit.wall_start <= hit.line_height + 1


def test_ray_leaving_map_raises():
    open_field = ["000", "0N0", "000"]
    player = Player.from_start(1, 1, "N")
    with pytest.raises(ValueError):
        cast_ray(player, open_field, 5, 10, 100)