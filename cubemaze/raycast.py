"""Casting one ray per screen column through the map grid."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

WIN_WIDTH = 1920
WIN_HEIGHT = 1000

_MIN_DISTANCE = 1e-9


class Side(IntEnum):
    """Which kind of grid line a ray crossed when it hit a wall."""

    NO = 0
    SO = 1
    WE = 2
    EA = 3


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall and how tall that wall is on screen."""

    side: Side
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    wall_dist: float
    line_height: int
    wall_start: int
    wall_end: int
    wall_x: float


def _delta(component):
    return math.inf if component == 0 else abs(1 / component)


def _start_side(direction, pos, cell, delta):
    if direction < 0:
        step = -1
        distance = (pos - cell) * delta if delta != math.inf else math.inf
    else:
        step = 1
        distance = (cell + 1.0 - pos) * delta if delta != math.inf else math.inf
    return step, distance


def cast_ray(player, grid, column, width=WIN_WIDTH, height=WIN_HEIGHT):
    """Cast the ray for one screen column and return the wall it hits.

    Raises ValueError if the ray leaves the grid without meeting a wall.
    """
    cam = 2 * column / float(width) - 1
    dir_x = player.dir_x + player.plane_x * cam
    dir_y = player.dir_y + player.plane_y * cam
    map_x = int(player.pos_x)
    map_y = int(player.pos_y)
    delta_x = _delta(dir_x)
    delta_y = _delta(dir_y)
    step_x, side_x = _start_side(dir_x, player.pos_x, map_x, delta_x)
    step_y, side_y = _start_side(dir_y, player.pos_y, map_y, delta_y)

    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Side.EA if dir_x > 0 else Side.WE
        else:
            side_y += delta_y
            map_y += step_y
            side = Side.SO if dir_y > 0 else Side.NO
        if not (0 <= map_x < len(grid) and 0 <= map_y < len(grid[map_x])):
            raise ValueError(f"ray for column {column} left the map")
        if grid[map_x][map_y] == "1":
            break

    if side in (Side.WE, Side.EA):
        wall_dist = (map_x - player.pos_x + (1 - step_x) // 2) / dir_x
    else:
        wall_dist = (map_y - player.pos_y + (1 - step_y) // 2) / dir_y
    line_height = int(height / max(wall_dist, _MIN_DISTANCE))
    wall_start = -(line_height // 2) + height // 2
    wall_end = line_height // 2 + height // 2
    if side in (Side.WE, Side.EA):
        wall_x = player.pos_y + wall_dist * dir_y
    else:
        wall_x = player.pos_x + wall_dist * dir_x
    wall_x -= math.floor(wall_x)

    return RayHit(
        side=side,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        wall_dist=wall_dist,
        line_height=line_height,
        wall_start=wall_start,
        wall_end=wall_end,
        wall_x=wall_x,
    )