"""Grid ray casting (DDA) and drawing of one screen column."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .images import Image, shade

_SOLID = ("1", "D")
_MIN_WALL_DIST = 0.001


@dataclass
class RayHit:
    """Where a ray stopped.

    ``map_x``/``map_y`` is the wall cell, ``side`` is 0 for a vertical grid
    line and 1 for a horizontal one, ``perp_wall`` the fish-eye corrected
    distance and ``hit_x``/``hit_y`` the exact point hit on the wall.
    """

    map_x: int
    map_y: int
    side: int
    ray_dir_x: float
    ray_dir_y: float
    step_x: int
    step_y: int
    perp_wall: float
    hit_x: float
    hit_y: float
    hit_enemy: bool = False


def step_sign(value: float) -> int:
    """-1 for a negative direction component, 1 otherwise (zero counts as positive)."""
    if value < 0:
        return -1
    return 1


def _delta(component: float) -> float:
    return math.inf if component == 0 else abs(1.0 / component)


def _side_dist(component: float, pos: float, cell: int, delta: float) -> float:
    if math.isinf(delta):
        return math.inf
    if component < 0:
        return (pos - cell) * delta
    return (cell + 1.0 - pos) * delta


def cast_ray(rows, px: float, py: float, view_dir: float, ray_angle: float) -> RayHit:
    """Walk the grid from (px, py) along *ray_angle* until a wall or door."""
    rdx = math.cos(ray_angle)
    rdy = math.sin(ray_angle)
    x, y = int(px), int(py)
    delta_x, delta_y = _delta(rdx), _delta(rdy)
    step_x, step_y = step_sign(rdx), step_sign(rdy)
    side_x = _side_dist(rdx, px, x, delta_x)
    side_y = _side_dist(rdy, py, y, delta_y)
    longest = max((len(row) for row in rows), default=0)
    side = 0
    hit_enemy = False
    while True:
        if not (0 <= y < len(rows)) or not (0 <= x < longest):
            raise ValueError("ray left the map")
        row = rows[y]
        cell = row[x] if x < len(row) else ""
        if cell == "E":
            hit_enemy = True
        if cell in _SOLID:
            break
        if side_x < side_y:
            side_x += delta_x
            x += step_x
            side = 0
        else:
            side_y += delta_y
            y += step_y
            side = 1
    if side == 0:
        perp = (x - px + (1 - step_x) // 2) / rdx
    else:
        perp = (y - py + (1 - step_y) // 2) / rdy
    hit_x = px + perp * rdx
    hit_y = py + perp * rdy
    perp *= math.cos(ray_angle - view_dir)
    return RayHit(x, y, side, rdx, rdy, step_x, step_y, perp, hit_x, hit_y, hit_enemy)


def wall_texture(rows, hit: RayHit, textures):
    """The texture for the wall face *hit* landed on."""
    row = rows[hit.map_y]
    if hit.map_x < len(row) and row[hit.map_x] == "D":
        return textures.door
    if hit.side == 0:
        return textures.west if hit.ray_dir_x > 0 else textures.east
    return textures.north if hit.ray_dir_y > 0 else textures.south


def draw_column(frame: Image, column: int, hit: RayHit, wall: Image,
                ceiling: int, floor: int) -> None:
    """Draw ceiling, textured wall slice and floor for one screen column."""
    height = frame.height
    wall_dist = max(hit.perp_wall, _MIN_WALL_DIST)
    wall_height = int(height / wall_dist)
    top = height // 2 - wall_height // 2
    bottom = height // 2 + wall_height // 2
    for y in range(0, top):
        frame.put_pixel(column, y, ceiling)
    along = hit.hit_y if hit.side == 0 else hit.hit_x
    tex_x = int((along - math.floor(along)) * wall.width)
    span = bottom - top
    for y in range(max(top, 0), min(bottom, height)):
        tex_y = int(((y - top) / span) * wall.height)
        color = shade(wall.get_pixel(tex_x, tex_y), hit.perp_wall)
        frame.put_pixel(column, y, color)
    for y in range(max(bottom, 0), height):
        frame.put_pixel(column, y, floor)