import math

import pytest

from cubzombies.config import (
    LEFT_CLICK,
    MOUSE_SENSI,
    SCROLL_DOWN,
    SCROLL_UP,
    VIEW,
    Key,
)
from cubzombies.controls import (
    door_check,
    key_press,
    key_release,
    mouse_click,
    open_door,
    swap_gun,
    swap_gun_stance,
    turn_by_mouse,
    update_hp,
    view,
)
from cubzombies.images import Image
from cubzombies.state import Keys, World

ROOM = ["11111", "10D01", "10P01", "10001", "11111"]


def make_world():
    world = World(grid=[list(row) for row in ROOM])
    world.camera.x = 2.5
    world.camera.y = 2.5
    return world


@pytest.mark.parametrize(
    "key, attr",
    [
        (Key.UP, "up"),
        (Key.DOWN, "down"),
        (Key.LEFT, "left"),
        (Key.RIGHT, "right"),
        (Key.L_ARROW, "l_arrow"),
        (Key.R_ARROW, "r_arrow"),
        (Key.SHIFT, "shift"),
        (Key.E, "e"),
    ],
)
def test_press_and_release(key, attr):
    world = make_world()
    key_press(world, key)
    assert getattr(world.keys, attr) is True
    key_release(world, key)
    assert getattr(world.keys, attr) is False


def test_escape_exits():
    world = make_world()
    with pytest.raises(SystemExit):
        key_press(world, Key.ESC)


def test_unknown_key_ignored():
    world = make_world()
    key_press(world, None)
    assert world.keys == Keys()


def test_left_click_starts_firing():
    world = make_world()
    mouse_click(world, LEFT_CLICK)
    assert world.keys.mouse.firing is True


def test_left_click_ignored_while_reloading():
    world = make_world()
    world.keys.mouse.fire_frames = 5
    mouse_click(world, LEFT_CLICK)
    assert world.keys.mouse.firing is False


def test_scroll_swaps_weapons():
    world = make_world()
    gun, laser = world.player.gun, world.player.laser
    mouse_click(world, SCROLL_UP)
    assert world.player.gun is laser
    assert world.player.laser is gun
    mouse_click(world, SCROLL_DOWN)
    assert world.player.gun is gun


def test_swap_gun_twice_restores():
    world = make_world()
    gun = world.player.gun
    swap_gun(world)
    swap_gun(world)
    assert world.player.gun is gun


def test_gun_stance_cycle_restores_images():
    world = make_world()
    gun = world.player.gun
    idle, moving, firing = Image.blank(1, 1), Image.blank(1, 1), Image.blank(1, 1)
    gun.idle, gun.moving, gun.firing = idle, moving, firing
    world.player.targeting = True
    world.keys.mouse.fire_frames = 1
    swap_gun_stance(world)
    assert gun.stance == 2
    assert gun.idle is firing
    assert world.player.targeting is False
    swap_gun_stance(world)
    assert gun.stance == 1
    assert gun.idle is moving
    assert world.keys.mouse.fire_frames > 0
    for _ in range(50):
        swap_gun_stance(world)
        if gun.stance == 0:
            break
    assert gun.stance == 0
    assert (gun.idle, gun.moving, gun.firing) == (idle, moving, firing)


def test_door_check_opens_door(capsys):
    world = make_world()
    world.player.money = 600
    world.keys.e = True
    door_check(world)
    assert world.grid[1][2] == "0"
    assert world.player.money == 600 - 500
    assert f"Your new sold is: {world.player.money}" in capsys.readouterr().out


def test_door_check_too_poor(capsys):
    world = make_world()
    world.player.money = 499
    world.keys.e = True
    door_check(world)
    assert world.grid[1][2] == "D"
    assert world.player.money == 499
    assert capsys.readouterr().out == ""


def test_open_door_needs_e_key():
    world = make_world()
    world.player.money = 600
    assert open_door(world) == 0
    assert world.grid[1][2] == "D"


def test_open_door_returns_cost():
    world = make_world()
    world.player.money = 600
    world.keys.e = True
    assert open_door(world) == 500
    assert open_door(world) == 0


@pytest.mark.parametrize("start, expected", [(90, 93), (98, 100), (99, 100), (100, 100)])
def test_update_hp_regenerates(start, expected):
    world = make_world()
    world.player.hp = start
    update_hp(world, 10.0)
    assert world.player.hp == expected


def test_update_hp_waits_between_regens():
    world = make_world()
    world.player.hp = 50
    world.player.last_regen = 10.0
    update_hp(world, 11.0)
    assert world.player.hp == 50
    assert world.player.last_regen == 10.0


def test_view_turns_both_ways():
    world = make_world()
    view(world, Key.R_ARROW)
    assert math.isclose(world.camera.dir, VIEW)
    view(world, Key.L_ARROW)
    view(world, Key.L_ARROW)
    assert math.isclose(world.camera.dir, -VIEW)


def test_view_wraps_angle():
    world = make_world()
    world.camera.dir = math.pi
    view(world, Key.R_ARROW)
    assert -math.pi <= world.camera.dir <= math.pi
    assert math.isclose(math.cos(world.camera.dir), math.cos(math.pi + VIEW))


def test_view_ignores_other_keys():
    world = make_world()
    world.camera.dir = 1.0
    view(world, Key.UP)
    assert world.camera.dir == 1.0


def test_turn_by_mouse_wraps_into_range():
    world = make_world()
    start = 2 * math.pi - 0.001
    world.camera.dir = start
    turn_by_mouse(world, 100)
    assert 0 <= world.camera.dir < 2 * math.pi
    assert math.isclose(math.cos(world.camera.dir), math.cos(start + 100 * MOUSE_SENSI))


@pytest.mark.parametrize("delta_factor", [0, 1])
def test_turn_by_mouse_ignores_zero_and_large(delta_factor):
    world = make_world()
    world.camera.dir = 1.0
    turn_by_mouse(world, delta_factor * (world.width // 4))
    assert world.camera.dir == 1.0