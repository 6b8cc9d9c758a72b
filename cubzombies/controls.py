"""Keyboard and mouse input, weapons, doors, view turning and regeneration."""

from __future__ import annotations

import math

from .config import LEFT_CLICK, MOUSE_SENSI, SCROLL_DOWN, SCROLL_UP, VIEW, Key

_KEY_FLAGS = {
    Key.UP: "up",
    Key.DOWN: "down",
    Key.LEFT: "left",
    Key.RIGHT: "right",
    Key.L_ARROW: "l_arrow",
    Key.R_ARROW: "r_arrow",
    Key.SHIFT: "shift",
    Key.E: "e",
}

_DOOR_COST = 500
_RELOAD_FRAMES = 10
_REGEN_DELAY = 2.5
_FULL_HP = 100
_TWO_PI = 2 * math.pi


def mouse_click(world, button: int) -> None:
    """Start firing on a left click; switch weapons on scroll."""
    if button == LEFT_CLICK and world.keys.mouse.fire_frames <= 0:
        world.keys.mouse.firing = True
    if button in (SCROLL_UP, SCROLL_DOWN):
        swap_gun(world)


def key_press(world, key) -> None:
    """Mark *key* as held. Escape ends the program with SystemExit."""
    flag = _KEY_FLAGS.get(key)
    if flag is not None:
        setattr(world.keys, flag, True)
    if key is Key.ESC:
        raise SystemExit(1)


def key_release(world, key) -> None:
    """Mark *key* as released."""
    flag = _KEY_FLAGS.get(key)
    if flag is not None:
        setattr(world.keys, flag, False)


def swap_gun(world) -> None:
    """Exchange the gun in hand with the other one."""
    player = world.player
    player.gun, player.laser = player.laser, player.gun


def swap_gun_stance(world) -> None:
    """Advance the fire / recoil / idle animation of the gun in hand."""
    world.player.targeting = False
    mouse = world.keys.mouse
    gun = world.player.gun
    if mouse.fire_frames > 0 and gun.stance == 0:
        gun.idle, gun.firing = gun.firing, gun.idle
        gun.stance = 2
    elif mouse.fire_frames <= 0 and gun.stance == 2:
        gun.idle, gun.firing = gun.firing, gun.idle
        gun.idle, gun.moving = gun.moving, gun.idle
        gun.stance = 1
        mouse.fire_frames = _RELOAD_FRAMES
    elif mouse.fire_frames <= 0 and gun.stance == 1:
        gun.idle, gun.moving = gun.moving, gun.idle
        gun.stance = 0
    if mouse.fire_frames > 0:
        mouse.fire_frames -= 1


def _cell(grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def open_door(world) -> int:
    """Open a door next to the player if affordable; return what it cost."""
    if not world.keys.e or world.player.money < _DOOR_COST:
        return 0
    grid = world.grid
    x, y = int(world.camera.x), int(world.camera.y)
    if not _cell(grid, y, x):
        return 0
    for row, col in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
        if _cell(grid, row, col) == "D":
            grid[row][col] = "0"
            return _DOOR_COST
    return 0


def door_check(world) -> None:
    """Pay for and open an adjacent door while E is held."""
    before = world.player.money
    if world.player.money >= _DOOR_COST and world.keys.e:
        world.player.money -= open_door(world)
    if before != world.player.money:
        print(f"Your new sold is: {world.player.money}")


def update_hp(world, now: float) -> None:
    """Regenerate a little health every few seconds."""
    player = world.player
    if player.hp >= _FULL_HP:
        return
    if now - player.last_regen >= _REGEN_DELAY:
        if player.hp <= 97:
            player.hp += 3
        elif player.hp <= 98:
            player.hp += 2
        else:
            player.hp += 1
        player.last_regen = now


def view(world, key) -> None:
    """Turn the view with the arrow keys, keeping the angle in [-pi, pi]."""
    cam = world.camera
    if key is Key.R_ARROW:
        cam.dir += VIEW
    elif key is Key.L_ARROW:
        cam.dir -= VIEW
    else:
        return
    if cam.dir < -math.pi:
        cam.dir += _TWO_PI
    if cam.dir > math.pi:
        cam.dir -= _TWO_PI


def turn_by_mouse(world, delta: int) -> None:
    """Turn the view by a horizontal mouse offset, keeping the angle in [0, 2pi)."""
    if delta == 0 or abs(delta) >= world.width // 4:
        return
    cam = world.camera
    cam.dir += delta * MOUSE_SENSI
    while cam.dir >= _TWO_PI:
        cam.dir -= _TWO_PI
    while cam.dir < 0:
        cam.dir += _TWO_PI