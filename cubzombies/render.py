"""Rendering of one game frame: walls, sprites and overlays."""

from __future__ import annotations

import math

from .config import FOV
from .controls import swap_gun_stance
from .enemies import hit_enemy, move_enemies, sort_enemies
from .hud import crosshair_spread, draw_crosshair, draw_gun
from .images import Image, rgb_color
from .minimap import draw_minimap
from .raycast import cast_ray, draw_column, wall_texture
from .sprites import draw_enemy

_MISS_FRAMES = 10


def draw_items(world, frame: Image, zbuffer) -> None:
    """Draw enemies, resolve a shot, then the crosshair, weapon and minimap."""
    sort_enemies(world)
    for index in reversed(range(world.z_count)):
        if world.enemies[index].alive:
            draw_enemy(world, frame, index, zbuffer)
    mouse = world.keys.mouse
    player = world.player
    if mouse.firing and player.targeting and player.gun.stance == 0:
        hit_enemy(world, player.target)
    elif mouse.firing:
        mouse.fire_frames = _MISS_FRAMES
        mouse.firing = False
    swap_gun_stance(world)
    draw_crosshair(frame, crosshair_spread(world.keys))
    if player.gun.idle is not None:
        draw_gun(frame, player.gun.idle)
    draw_minimap(frame, world.grid, world.camera.x, world.camera.y)


def update_frame(world, frame: Image, now: float) -> list[float]:
    """Cast one ray per screen column, draw everything, then move the enemies.

    Wall textures must be loaded. Returns the per-column wall distances.
    """
    cam = world.camera
    fov = math.radians(FOV)
    rays = world.width
    angle_step = fov / rays
    start_angle = cam.dir - fov / 2.0
    ceiling = rgb_color(world.ceiling_color)
    floor = rgb_color(world.floor_color)
    zbuffer: list[float] = []
    for column in range(rays):
        hit = cast_ray(world.grid, cam.x, cam.y, cam.dir, start_angle + column * angle_step)
        zbuffer.append(hit.perp_wall)
        wall = wall_texture(world.grid, hit, world.textures)
        draw_column(frame, column, hit, wall, ceiling, floor)
    draw_items(world, frame, zbuffer)
    move_enemies(world, now)
    return zbuffer