import math

from cubzombies.images import Image, shade
from cubzombies.sprites import (
    draw_enemy,
    enemy_on_center,
    enemy_screen_x,
    enemy_sprite_size,
)
from cubzombies.state import Enemy, World

RED = 0xFF0000


def make_world(texture=None):
    world = World(grid=[list("11111"), list("1P001"), list("11111")], width=40, height=20)
    world.camera.x = 1.5
    world.camera.y = 1.5
    world.camera.dir = 0.0
    sprite = texture if texture is not None else Image(4, 4, [RED] * 16)
    world.textures.enemy = [sprite, Image.blank(1, 1), Image.blank(1, 1)]
    world.enemies.append(Enemy(alive=True, x=3.5, y=1.5, f=sprite))
    return world


def far_zbuffer(world):
    return [100.0] * world.width


def test_screen_x_straight_ahead_is_center():
    world = make_world()
    assert enemy_screen_x(world, 1.0, 0.0) == world.width // 2


def test_screen_x_behind_is_none():
    world = make_world()
    assert enemy_screen_x(world, -1.0, 0.0) is None


def test_screen_x_is_symmetric():
    world = make_world()
    left = enemy_screen_x(world, 1.0, -0.3)
    right = enemy_screen_x(world, 1.0, 0.3)
    assert left < world.width // 2 < right
    assert abs(left + right - world.width) <= 1


def test_screen_x_wraps_angle():
    world = make_world()
    world.camera.dir = 2 * math.pi - 0.1
    result = enemy_screen_x(world, 1.0, 0.05)
    assert result is not None
    assert result > world.width // 2


def test_sprite_size_halves_with_double_distance():
    assert enemy_sprite_size(800, 2.0, 0.0) * 2 == enemy_sprite_size(800, 1.0, 0.0)


def test_sprite_size_clamps_small_distance():
    assert enemy_sprite_size(800, 0.0, 0.0) == enemy_sprite_size(800, 0.05, 0.0)
    assert enemy_sprite_size(800, 0.0, 0.0) == enemy_sprite_size(800, 0.1, 0.0)


def test_draw_enemy_paints_shaded_sprite():
    world = make_world()
    frame = Image.blank(world.width, world.height)
    draw_enemy(world, frame, 0, far_zbuffer(world))
    assert frame.get_pixel(world.width // 2, world.height // 2) == shade(RED, 2.0)
    assert frame.get_pixel(0, 0) == 0
    assert world.player.targeting is False


def test_draw_enemy_hidden_behind_wall():
    world = make_world()
    frame = Image.blank(world.width, world.height)
    draw_enemy(world, frame, 0, [1.0] * world.width)
    assert frame.get_pixel(world.width // 2, world.height // 2) == 0
    assert frame.pixels == Image.blank(world.width, world.height).pixels


def test_draw_dead_enemy_draws_nothing():
    world = make_world()
    world.enemies[0].alive = False
    world.keys.mouse.firing = True
    frame = Image.blank(world.width, world.height)
    draw_enemy(world, frame, 0, far_zbuffer(world))
    assert frame.get_pixel(world.width // 2, world.height // 2) == 0
    assert frame.pixels == Image.blank(world.width, world.height).pixels
    assert world.player.targeting is False


def test_draw_enemy_sets_target_when_firing():
    world = make_world()
    world.keys.mouse.firing = True
    frame = Image.blank(world.width, world.height)
    draw_enemy(world, frame, 0, far_zbuffer(world))
    assert world.player.targeting is True
    assert world.player.target == 0


def test_enemy_on_center_inside_and_outside():
    world = make_world()
    zbuffer = far_zbuffer(world)
    assert enemy_on_center(world, 15, 5, 10, 0, zbuffer) is True
    assert enemy_on_center(world, world.width // 2 + 1, 5, 10, 0, zbuffer) is False


def test_enemy_on_center_transparent_texture():
    world = make_world(texture=Image.blank(4, 4))
    assert enemy_on_center(world, 15, 5, 10, 0, far_zbuffer(world)) is False


def test_enemy_on_center_occluded():
    world = make_world()
    assert enemy_on_center(world, 15, 5, 10, 0, [1.0] * world.width) is False