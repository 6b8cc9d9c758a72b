"""Projection and drawing of enemy sprites."""

from __future__ import annotations

import math

from .config import FOV
from .images import Image, shade

_HALF_FOV = math.radians(FOV) / 2.0
_MIN_DIST = 0.1


def enemy_screen_x(world, dx: float, dy: float) -> int | None:
    """Screen column of a point at offset (dx, dy), or None outside the view."""
    angle = math.atan2(dy, dx) - world.camera.dir
    if angle < -math.pi:
        angle += 2 * math.pi
    if angle > math.pi:
        angle -= 2 * math.pi
    if abs(angle) > _HALF_FOV:
        return None
    half = world.width // 2
    return int(angle / _HALF_FOV * half + half)


def enemy_sprite_size(height: int, dx: float, dy: float) -> int:
    """On-screen side length of a sprite at offset (dx, dy)."""
    dist = max(math.hypot(dx, dy), _MIN_DIST)
    return int(height / dist)


def enemy_on_center(world, x: int, y: int, size: int, index: int, zbuffer) -> bool:
    """True if enemy *index*, drawn at (x, y), covers the crosshair unoccluded."""
    center_x = world.width // 2
    center_y = world.height // 2
    texture = world.textures.enemy[0]
    if texture is None or size <= 0:
        return False
    if not (x <= center_x < x + size and y <= center_y < y + size):
        return False
    tx = (center_x - x) * texture.width // size
    ty = (center_y - y) * texture.height // size
    if texture.get_pixel(tx, ty) & 0xFFFFFF == 0:
        return False
    enemy = world.enemies[index]
    cam = world.camera
    dist = math.hypot(enemy.x + 0.5 - cam.x, enemy.y + 0.5 - cam.y)
    return dist < zbuffer[center_x]


def _draw_sprite(world, frame: Image, sprite: Image, left: int, top: int,
                 size: int, dist: float, zbuffer) -> None:
    width = world.width
    rows = min(size, world.height - top)
    cols = min(size, width - left)
    for sy in range(rows):
        ty = sy * sprite.height // size
        for sx in range(cols):
            column = left + sx
            if not (0 <= column < width and dist < zbuffer[column]):
                continue
            color = sprite.get_pixel(sx * sprite.width // size, ty)
            if color & 0xFFFFFF:
                frame.put_pixel(column, top + sy, shade(color, dist))


def draw_enemy(world, frame: Image, index: int, zbuffer) -> None:
    """Draw enemy *index* onto *frame* and mark it as target if under the crosshair."""
    enemy = world.enemies[index]
    if not enemy.alive:
        return
    dx = enemy.x - world.camera.x
    dy = enemy.y - world.camera.y
    screen_x = enemy_screen_x(world, dx, dy)
    if screen_x is None or screen_x >= world.width:
        return
    size = enemy_sprite_size(world.height, dx, dy)
    top = world.height // 2 - size // 2
    left = screen_x - size // 2
    if enemy.f is not None and size > 0:
        _draw_sprite(world, frame, enemy.f, left, top, size, math.hypot(dx, dy), zbuffer)
    if world.keys.mouse.firing and enemy_on_center(world, left, top, size, index, zbuffer):
        world.player.target = index
        world.player.targeting = True