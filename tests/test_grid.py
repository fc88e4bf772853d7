import pytest

from cubemaze.grid import (
    MapError,
    check_close,
    check_letters,
    check_start_position,
    first_column_ok,
    has_cub_extension,
    is_closed,
    last_line_ok,
    map_width,
    pad_map,
    row_only,
)

RAGGED = [" 1111", "11N01", "1111"]


@pytest.mark.parametrize(
    "path, expected",
    [
        ("maps/level.cub", True),
        ("level.cub", True),
        ("level.cub.txt", False),
        ("level.cu", False),
        ("level.xpm", False),
    ],
)
def test_has_cub_extension(path, expected):
    assert has_cub_extension(path) is expected


def test_map_width_is_longest_row():
    assert map_width(["1", "111", "11"]) == 3
    assert map_width([]) == 0


def test_pad_map_invariants():
    width = map_width(RAGGED)
    grid = pad_map(RAGGED, width)
    assert len(grid) == len(RAGGED)
    assert all(len(row) == width for row in grid)
    assert all(" " not in row for row in grid)
    for original, padded in zip(RAGGED, grid):
        for index, char in enumerate(original):
            if char != " ":
                assert padded[index] == char
        assert set(padded[len(original):]) <= {"3"}


def test_pad_map_fills_with_void():
    assert pad_map(["1 1"], 5) == ["13133"]


def test_row_only():
    assert row_only("1", "1 1\t1") is True
    assert row_only("1", "101") is False
    assert row_only("1", None) is True


def test_check_letters_rejects_unknown_character():
    with pytest.raises(MapError):
        check_letters(["111", "1X1", "111"])


def test_check_letters_accepts_map_characters():
    rows = ["111 ", "1N01", "1111"]
    check_letters(rows)
    assert rows == ["111 ", "1N01", "1111"]


def test_check_start_position_multiple():
    with pytest.raises(MapError, match="multiple"):
        check_start_position(["111", "1NS", "111"])


def test_check_start_position_missing():
    with pytest.raises(MapError, match="missing"):
        check_start_position(["111", "101", "111"])


def test_first_column():
    assert first_column_ok(["111", "3N1", "111"]) is True
    assert first_column_ok(["111", "0N1", "111"]) is False


def test_closed_square():
    assert is_closed(["111", "1N1", "111"]) is True


def test_closed_ragged_map():
    grid = pad_map(RAGGED, map_width(RAGGED))
    assert is_closed(grid) is True


@pytest.mark.parametrize(
    "grid",
    [
        ["111", "1N0", "111"],
        ["1111", "1N31", "1111"],
        ["101", "1N1", "111"],
        ["111", "0N1", "111"],
        ["111", "1N1", "101"],
        [],
    ],
)
def test_not_closed(grid):
    assert is_closed(grid) is False


def test_check_close_without_void():
    assert check_close(["111", "1N1", "111"]) is True


def test_check_close_walled_void():
    assert check_close(["111", "131", "111"]) is True


def test_check_close_void_beside_floor():
    assert check_close(["111", "130", "111"]) is False


def test_check_close_void_under_floor():
    assert check_close(["1011", "1311", "1111"]) is False


def test_last_line_skips_trailing_empty_lines():
    assert last_line_ok(["NO a.xpm\n", "111\n", "1N1\n", "1 1 1\n", "\n", "\n"])


def test_last_line_rejects_floor():
    assert last_line_ok(["111\n", "1101\n"]) is False


def test_last_line_all_empty():
    assert last_line_ok(["\n", ""]) is False