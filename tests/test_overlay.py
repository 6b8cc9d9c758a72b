from cubzombies.overlay import (
    TextItem,
    earn_text,
    fps_text,
    money_text,
    round_text,
    tick_infos,
)
from cubzombies.state import Enemy, World

GRID = ["11111", "1Z0P1", "11111"]


def _world():
    world = World(grid=[list(row) for row in GRID])
    world.player.hp = 100
    return world


def test_labels():
    assert fps_text(10, 0.5) == "... FPS"
    assert fps_text(120, 2.0) == "60 FPS"
    assert money_text(400) == "400 $"
    assert earn_text(10) == "10 $"
    assert round_text(0) == "Round 1"


def test_tick_infos_texts_and_counters():
    world = _world()
    world.fps_start = 1000.0
    world.keys.mouse.fire_frames = 5
    items = tick_infos(world, 1000.5)
    texts = [item.text for item in items]
    assert texts == [money_text(world.player.money), "... FPS", "Round 1"]
    assert items[0] == TextItem(texts[0], world.width - 40, 20, 0xFFFF00)
    assert world.fps_frames == 1
    assert world.keys.mouse.fire_frames == 4


def test_tick_infos_keeps_negative_fire_frames():
    world = _world()
    world.fps_start = 1000.0
    world.keys.mouse.fire_frames = -1
    tick_infos(world, 1003.0)
    assert world.keys.mouse.fire_frames == -1


def test_tick_infos_shows_earnings_while_frames_remain():
    world = _world()
    world.fps_start = 1000.0
    world.player.earn_frames = 20
    world.gameplay.last_earn = 10
    items = tick_infos(world, 1003.0)
    assert world.player.earn_frames == 19
    assert any(item.text == "10 $" for item in items)


def test_tick_infos_regenerates_health():
    world = _world()
    world.fps_start = 1000.0
    world.player.hp = 50
    world.player.last_regen = 0.0
    tick_infos(world, 1003.0)
    assert world.player.hp == 53


def test_tick_infos_starts_new_round_when_wiped():
    world = _world()
    world.enemies.append(Enemy(alive=False, x_start=1, y_start=1))
    world.fps_start = 1000.0
    tick_infos(world, 1000.2)
    assert world.gameplay.round == 1
    assert world.enemies[0].alive is True
    assert world.enemies[0].x == 1.5