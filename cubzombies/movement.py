"""Collision checks and player movement."""

from __future__ import annotations

import math

from .config import HITBOX, INVU_TIME, STEP, Key

_SOLID = ("1", "D")


class GameOver(Exception):
    """The player's health dropped to zero."""

    def __init__(self, message: str = "Game Over") -> None:
        super().__init__(message)


def _cell(grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def _corners(x: float, y: float, hitbox: float):
    px, py = int(x + hitbox), int(y + hitbox)
    mx, my = int(x - hitbox), int(y - hitbox)
    return ((py, px), (py, mx), (my, px), (my, mx))


def move_overflow(world, x: float, y: float, hitbox: float) -> bool:
    """True if a box of half-size *hitbox* at (x, y) leaves the map."""
    grid = world.grid
    px, py = int(x + hitbox), int(y + hitbox)
    mx, my = int(x - hitbox), int(y - hitbox)
    rows = len(grid)
    if not (0 <= py < rows and 0 <= my < rows):
        return True
    for row in (py, my):
        width = len(grid[row])
        if not (0 <= px < width and 0 <= mx < width):
            return True
    return False


def _check_last_hit(world, now: float) -> bool:
    if now - world.player.last_hit >= INVU_TIME:
        world.player.last_hit = now
        return False
    return True


def touches_player(world, x: float, y: float, hitbox: float, now: float) -> bool:
    """True if the box touches the player; hurts the player unless invulnerable."""
    if move_overflow(world, x, y, hitbox):
        return True
    if not any(_cell(world.grid, r, c) == "P" for r, c in _corners(x, y, hitbox)):
        return False
    if _check_last_hit(world, now):
        return True
    world.player.hp -= 25
    if world.player.hp <= 0:
        raise GameOver()
    return True


def is_blocked(world, x: float, y: float, hitbox: float, now: float) -> bool:
    """True if walls, doors, the map edge or the player stop a box at (x, y)."""
    if move_overflow(world, x, y, HITBOX * 2):
        return True
    cells = [_cell(world.grid, r, c) for r, c in _corners(x, y, hitbox)]
    if any(cell in _SOLID for cell in cells):
        return True
    return touches_player(world, x, y, hitbox, now)


def step_length(keys) -> float:
    """Distance covered by one move, halved when moving diagonally or turning."""
    if (keys.up or keys.down) and (keys.right or keys.left):
        return STEP * 0.5
    if keys.l_arrow or keys.r_arrow:
        return STEP * 0.5
    return STEP


def _try_move(world, dx: float, dy: float, step: float, now: float,
              keep_column: bool) -> None:
    cam = world.camera
    grid = world.grid
    new_x = cam.x + dx * step
    new_y = cam.y + dy * step
    if is_blocked(world, new_x, new_y, HITBOX, now):
        return
    if _cell(grid, int(cam.y), int(new_x + dx * HITBOX)) in _SOLID:
        return
    col = cam.x if keep_column else new_x
    if _cell(grid, int(new_y + dy * HITBOX), int(col)) in _SOLID:
        return
    cam.x = new_x
    cam.y = new_y


def move(world, key: Key, now: float) -> None:
    """Move the player one step in the direction *key* stands for."""
    cam = world.camera
    grid = world.grid
    grid[int(cam.y)][int(cam.x)] = "0"
    step = step_length(world.keys)
    if cam.x > 0 and cam.y > 0 and _cell(grid, int(cam.y), int(cam.x)):
        side = cam.dir + math.pi / 2
        if key is Key.UP:
            if world.keys.shift:
                step *= 2
            _try_move(world, math.cos(cam.dir), math.sin(cam.dir), step, now, False)
        elif key is Key.DOWN:
            _try_move(world, -math.cos(cam.dir), -math.sin(cam.dir), step, now, True)
        elif key is Key.LEFT:
            _try_move(world, -math.cos(side), -math.sin(side), step, now, False)
        elif key is Key.RIGHT:
            _try_move(world, math.cos(side), math.sin(side), step, now, False)
    grid[int(cam.y)][int(cam.x)] = "P"