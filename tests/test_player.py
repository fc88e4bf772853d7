import math

import pytest

from cubemaze.player import ROT_SPEED, SPEED, Player, find_start

ROOM = [
    "11111",
    "10001",
    "10N01",
    "10001",
    "11111",
]

CELL = [
    "111",
    "1N1",
    "111",
]


def test_find_start_returns_row_column_and_letter():
    assert find_start(ROOM) == (2, 2, "N")


def test_find_start_without_start_raises():
    with pytest.raises(ValueError):
        find_start(["111", "101", "111"])


def test_from_start_north():
    player = Player.from_start(2, 2, "N")
    assert (player.pos_x, player.pos_y) == (2.5, 2.5)
    assert (player.dir_x, player.dir_y) == (-1.0, 0.0)
    assert (player.plane_x, player.plane_y) == (0.0, 0.66)
    assert player.facing == "N"


@pytest.mark.parametrize(
    "facing, direction",
    [("N", (-1.0, 0.0)), ("S", (1.0, 0.0)), ("E", (0.0, 1.0)), ("W", (0.0, -1.0))],
)
def test_plane_is_perpendicular_to_direction(facing, direction):
    player = Player.from_start(0, 0, facing)
    assert (player.dir_x, player.dir_y) == direction
    assert player.dir_x * player.plane_x + player.dir_y * player.plane_y == 0
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)


def test_from_start_unknown_facing():
    with pytest.raises(ValueError):
        Player.from_start(1, 1, "X")


def test_rotation_keeps_length():
    player = Player.from_start(2, 2, "E")
    for _ in range(10):
        player.rotate_left()
    assert math.hypot(player.dir_x, player.dir_y) == pytest.approx(1.0)
    assert math.hypot(player.plane_x, player.plane_y) == pytest.approx(0.66)


def test_rotate_left_turns_by_rot_speed():
    player = Player.from_start(2, 2, "S")
    player.rotate_left()
    assert player.dir_x == pytest.approx(math.cos(ROT_SPEED))
    assert player.dir_y == pytest.approx(math.sin(ROT_SPEED))


def test_rotate_right_undoes_rotate_left():
    player = Player.from_start(2, 2, "W")
    player.rotate_left()
    player.rotate_right()
    assert player.dir_x == pytest.approx(0.0, abs=1e-12)
    assert player.dir_y == pytest.approx(-1.0)
    assert player.plane_x == pytest.approx(-0.66)
    assert player.plane_y == pytest.approx(0.0, abs=1e-12)


def test_move_forward_north():
    player = Player.from_start(2, 2, "N")
    player.move_forward(ROOM)
    assert player.pos_x == pytest.approx(2.5 - SPEED)
    assert player.pos_y == pytest.approx(2.5)


def test_move_back_undoes_move_forward():
    player = Player.from_start(2, 2, "N")
    player.move_forward(ROOM)
    player.move_back(ROOM)
    assert player.pos_x == pytest.approx(2.5)
    assert player.pos_y == pytest.approx(2.5)


def test_move_right_follows_plane():
    player = Player.from_start(2, 2, "N")
    player.move_right(ROOM)
    assert player.pos_x == pytest.approx(2.5)
    assert player.pos_y == pytest.approx(2.5 + 0.66 * SPEED)


def test_move_left_undoes_move_right():
    player = Player.from_start(2, 2, "N")
    player.move_right(ROOM)
    player.move_left(ROOM)
    assert player.pos_y == pytest.approx(2.5)


def test_walls_stop_the_player():
    player = Player.from_start(1, 1, "N")
    for _ in range(20):
        player.move_forward(CELL)
        player.move_right(CELL)
    assert int(player.pos_x) == 1
    assert int(player.pos_y) == 1
    for _ in range(20):
        player.move_back(CELL)
        player.move_left(CELL)
    assert int(player.pos_x) == 1
    assert int(player.pos_y) == 1