"""Validation of the map part of a scene file."""

from __future__ import annotations

_VOID = "3"
_START = frozenset("NSEW")
_OPEN = frozenset("0NSEW")
_ALLOWED = frozenset("01NSEW ")
_EDGE = frozenset("13")
_SPACE = frozenset(" \t\n\v\f\r")
_LAST_LINE = frozenset("1 ")


class MapError(ValueError):
    """Raised when a map breaks one of the scene rules."""


def has_cub_extension(path):
    """Return True if the path names a ``.cub`` file."""
    return str(path).endswith(".cub")


def map_width(rows):
    """Return the length of the longest map row, 0 for no rows."""
    return max((len(row) for row in rows), default=0)


def pad_map(rows, width):
    """Return the rows with spaces turned into void cells, padded to width.

    Void cells are written as ``"3"``; short rows are filled with them.
    """
    return [row[:width].replace(" ", _VOID).ljust(width, _VOID) for row in rows]


def row_only(char, row):
    """Return True if the row holds only ``char`` and whitespace.

    A missing row (None) passes.
    """
    if row is None:
        return True
    return all(c == char or c in _SPACE for c in row)


def check_letters(rows):
    """Raise MapError if a row holds a character a map may not use."""
    for row in rows:
        bad = next((c for c in row if c not in _ALLOWED), None)
        if bad is not None:
            raise MapError(f"use of wrong character {bad!r}")


def check_start_position(rows):
    """Raise MapError unless exactly one start cell (N, S, E, W) exists."""
    starts = sum(c in _START for row in rows for c in row)
    if starts > 1:
        raise MapError("multiple position point")
    if starts == 0:
        raise MapError("it's missing a position point")


def first_column_ok(grid):
    """Return True if every row starts with a wall or a void cell."""
    return all(row[0] in _EDGE for row in grid if row)


def _top_row_ok(grid):
    return bool(grid) and all(c in _EDGE for c in grid[0])


def _cell(grid, i, j):
    """Return the cell at row i, column j, or "" outside the grid."""
    if 0 <= i < len(grid) and 0 <= j < len(grid[i]):
        return grid[i][j]
    return ""


def is_closed(grid):
    """Return True if every walkable cell of a padded grid is walled in.

    A floor or start cell may not touch a void cell or the grid's edge.
    """
    if not grid or not first_column_ok(grid) or not _top_row_ok(grid):
        return False
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if c not in _OPEN:
                continue
            neighbours = (
                _cell(grid, i, j + 1),
                _cell(grid, i, j - 1),
                _cell(grid, i + 1, j),
                _cell(grid, i - 1, j),
            )
            if any(n in ("", _VOID) for n in neighbours):
                return False
    return True


def _beside_ok(grid, i, j):
    # The right-hand bound is the number of rows, not the row length.
    if j + 1 < len(grid) and _cell(grid, i, j + 1) not in _EDGE:
        return False
    if j - 1 >= 0 and _cell(grid, i, j - 1) not in _EDGE:
        return False
    return True


def _row_ok(grid, row, j, width):
    if j >= 1 or row == 0:
        pass
    straight = _cell(grid, row, j)
    diagonal = _cell(grid, row, j - 1)
    if straight != _VOID and diagonal != _VOID and "0" in (straight, diagonal):
        return False
    if j + 1 < width - 1 and _cell(grid, row, j + 1) == "0":
        return False
    return True


def _around_ok(grid, i, j):
    width = len(grid[i])
    if i >= 1 and not _row_ok(grid, i - 1, j, width):
        return False
    if i + 1 < len(grid) - 1:
        below = i + 1
        if j >= 1:
            straight = _cell(grid, below, j)
            diagonal = _cell(grid, below, j - 1)
            if (
                straight != _VOID
                and diagonal != _VOID
                and "0" in (straight, diagonal)
            ):
                return False
        if j + 1 < width - 1 and _cell(grid, below, j + 1) == "0":
            return False
    return True


def check_close(grid):
    """Return True if no void cell lies next to a floor cell.

    Looks beside each void cell and at the rows above and below it.
    """
    for i, row in enumerate(grid):
        for j, c in enumerate(row):
            if c == _VOID and not (
                _beside_ok(grid, i, j) and _around_ok(grid, i, j)
            ):
                return False
    return True


def last_line_ok(lines):
    """Return True if the last non-empty line holds only walls and spaces."""
    for line in reversed([line.removesuffix("\n") for line in lines]):
        if line:
            return all(c in _LAST_LINE for c in line)
    return False