"""The player: start position, facing, turning and walking on the grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

SPEED = 0.1
ROT_SPEED = 0.07
PLANE = 0.66

_START = frozenset("NSEW")

# Facing -> (dir_x, dir_y, plane_x, plane_y). x runs down the rows,
# y runs along the columns.
_FACINGS = {
    "N": (-1.0, 0.0, 0.0, PLANE),
    "S": (1.0, 0.0, 0.0, -PLANE),
    "E": (0.0, 1.0, PLANE, 0.0),
    "W": (0.0, -1.0, -PLANE, 0.0),
}


def find_start(grid):
    """Return (row, column, facing) of the start cell in the grid.

    If several start cells exist the last one found wins.
    """
    found = None
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell in _START:
                found = (i, j, cell)
    if found is None:
        raise ValueError("map has no start position")
    return found


@dataclass
class Player:
    """Position, view direction and camera plane of the player.

    ``facing`` is the start letter; its cell stays walkable like a floor.
    """

    pos_x: float
    pos_y: float
    dir_x: float
    dir_y: float
    plane_x: float
    plane_y: float
    facing: str

    @classmethod
    def from_start(cls, row, col, facing):
        """Place the player in the middle of a start cell, facing N, S, E or W."""
        try:
            dir_x, dir_y, plane_x, plane_y = _FACINGS[facing]
        except KeyError:
            raise ValueError(f"unknown facing {facing!r}") from None
        return cls(row + 0.5, col + 0.5, dir_x, dir_y, plane_x, plane_y, facing)

    def _rotate(self, dir_angle, plane_angle, plane_x_cos_angle):
        old_dir_x = self.dir_x
        old_plane_x = self.plane_x
        self.dir_x = self.dir_x * math.cos(dir_angle) - self.dir_y * math.sin(dir_angle)
        self.dir_y = old_dir_x * math.sin(dir_angle) + self.dir_y * math.cos(dir_angle)
        self.plane_x = (
            self.plane_x * math.cos(plane_x_cos_angle)
            - self.plane_y * math.sin(plane_angle)
        )
        self.plane_y = (
            old_plane_x * math.sin(plane_angle)
            + self.plane_y * math.cos(plane_angle)
        )

    def rotate_left(self):
        """Turn the view one step to the left."""
        self._rotate(ROT_SPEED, ROT_SPEED, ROT_SPEED)

    def rotate_right(self):
        """Turn the view one step to the right."""
        self._rotate(-ROT_SPEED, -ROT_SPEED, ROT_SPEED)

    def _walkable(self, grid, x, y):
        return grid[int(x)][int(y)] in ("0", self.facing)

    def _step(self, grid, dx, dy):
        # Each axis is tried on its own, so the player slides along walls.
        if self._walkable(grid, self.pos_x + dx, self.pos_y):
            self.pos_x += dx
        if self._walkable(grid, self.pos_x, self.pos_y + dy):
            self.pos_y += dy

    def move_forward(self, grid):
        """Walk one step along the view direction."""
        self._step(grid, self.dir_x * SPEED, self.dir_y * SPEED)

    def move_back(self, grid):
        """Walk one step against the view direction."""
        self._step(grid, -self.dir_x * SPEED, -self.dir_y * SPEED)

    def move_right(self, grid):
        """Walk one step along the camera plane."""
        self._step(grid, self.plane_x * SPEED, self.plane_y * SPEED)

    def move_left(self, grid):
        """Walk one step against the camera plane."""
        self._step(grid, -(self.plane_x * SPEED), -(self.plane_y * SPEED))