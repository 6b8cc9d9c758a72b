"""Enemy rounds, animation frames, rewards and movement towards the player."""

from __future__ import annotations

import itertools
import math

from .config import EARN_HIT, EARN_KILL, ENEMY_HP, HITBOX
from .movement import is_blocked
from .reachability import check_way

_HIT_FRAMES = 20
_EARN_FRAMES = 20
_ANIMATION_PERIOD = 10
_SPEED = 0.04
_FAR_AWAY = 999999.0

_REWARDS = {0: EARN_HIT, 1: EARN_KILL}
_boss_counter = itertools.count(1)


def earn_money(world, kind: int) -> None:
    """Reward the player: kind 0 for a hit, kind 1 for a kill."""
    amount = _REWARDS.get(kind)
    if amount is None:
        return
    world.player.money += amount
    world.gameplay.last_earn = amount
    world.player.earn_frames = _EARN_FRAMES


def hit_enemy(world, index: int) -> None:
    """Apply one shot of the current gun to enemy *index*."""
    world.player.targeting = False
    world.keys.mouse.fire_frames = _HIT_FRAMES
    world.keys.mouse.firing = False
    enemy = world.enemies[index]
    enemy.hp -= world.player.gun.power
    if enemy.hp <= 0:
        enemy.alive = False
        earn_money(world, 1)
    else:
        enemy.last_hit = _HIT_FRAMES
        enemy.frame = 0
        enemy.f = world.textures.enemy[2]
        earn_money(world, 0)


def enemies_wiped(world) -> bool:
    """True when no enemy is alive."""
    return not any(enemy.alive for enemy in world.enemies)


def is_boss(now: float) -> bool:
    """Pseudo-random choice, true about one time in ten."""
    fraction = int((now - int(now)) * 100000000)
    return (fraction + next(_boss_counter) * 7) % 10 == 0


def revive_enemies(world, now: float) -> None:
    """Start a new, stronger round once every enemy is dead."""
    if world.z_count <= 0 or not enemies_wiped(world):
        return
    gameplay = world.gameplay
    gameplay.round += 1
    gameplay.enemy_hp = ENEMY_HP + gameplay.round // 2
    for index, enemy in enumerate(world.enemies):
        swap_frame(world, index)
        enemy.alive = check_way(world.grid, enemy.y_start, enemy.x_start)
        enemy.x = enemy.x_start + 0.5
        enemy.y = enemy.y_start + 0.5
        enemy.boss = is_boss(now)
        enemy.hp = gameplay.enemy_hp
        if enemy.boss:
            enemy.hp = gameplay.enemy_hp * 2
            enemy.f = world.textures.boss[0]
        else:
            enemy.f = world.textures.enemy[0]


def update_distances(world) -> None:
    """Store each enemy's distance to the player; dead ones are pushed far away."""
    cam = world.camera
    for enemy in world.enemies:
        if enemy.alive:
            enemy.dist = math.hypot(enemy.x - cam.x, enemy.y - cam.y)
        else:
            enemy.dist = _FAR_AWAY


def sort_enemies(world) -> None:
    """Order enemies from nearest to farthest, keeping ties in place."""
    if world.z_count <= 1:
        return
    update_distances(world)
    world.enemies.sort(key=lambda enemy: enemy.dist)


def _animate(enemy, frames) -> None:
    idle, moving, hit = frames
    if not enemy.alive and enemy.f is hit:
        enemy.f = idle
        return
    enemy.last_hit -= 1
    enemy.frame += 1
    if enemy.last_hit <= 0 and enemy.f is hit:
        enemy.f = idle
    elif enemy.frame % _ANIMATION_PERIOD == 0:
        enemy.frame = 0
        enemy.f = moving if enemy.f is idle else idle


def swap_frame_boss(world, index: int) -> None:
    """Advance the animation of a boss."""
    _animate(world.enemies[index], world.textures.boss)


def swap_frame(world, index: int) -> None:
    """Advance the animation of enemy *index*."""
    enemy = world.enemies[index]
    if enemy.boss:
        swap_frame_boss(world, index)
    _animate(enemy, world.textures.enemy)


def move_enemy(world, index: int, now: float) -> None:
    """Step enemy *index* towards the player, sliding along obstacles."""
    enemy = world.enemies[index]
    cam = world.camera
    enemy.dir = math.atan2(cam.y - enemy.y, cam.x - enemy.x)
    new_x = enemy.x + math.cos(enemy.dir) * _SPEED
    new_y = enemy.y + math.sin(enemy.dir) * _SPEED
    if not is_blocked(world, new_x, new_y, HITBOX, now):
        enemy.x = new_x
        enemy.y = new_y
        swap_frame(world, index)
        return
    if not is_blocked(world, new_x, enemy.y, HITBOX, now):
        enemy.x = new_x
    if not is_blocked(world, enemy.x, new_y, HITBOX, now):
        enemy.y = new_y


def move_enemies(world, now: float) -> None:
    """Move every living enemy."""
    for index, enemy in enumerate(world.enemies):
        if enemy.alive:
            move_enemy(world, index, now)