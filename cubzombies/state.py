"""Game state: the map grid, the player, the enemies and the textures in use."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass, field
from pathlib import Path

from .config import ENEMY_HP, ENEMY_NBR, HEIGHT, MONEY, SPAWN, WIDTH, CubError, Phase
from .images import Image
from .reachability import check_way

_PLAYER_MARKS = "WNES"


@dataclass(eq=False)
class Gun:
    """A weapon: its three animation images, current stance and damage."""

    idle: Image | None = None
    moving: Image | None = None
    firing: Image | None = None
    stance: int = 0
    power: int = 1


@dataclass(eq=False)
class Enemy:
    """One zombie (or boss) and its spawn point."""

    alive: bool = False
    hp: int = 0
    last_hit: float = 0.0
    x: float = 0.0
    y: float = 0.0
    x_start: int = 0
    y_start: int = 0
    dir: float = 0.0
    dist: float = 0.0
    frame: int = 0
    boss: bool = False
    f: Image | None = None


@dataclass
class Player:
    """Health, money and weapons of the player."""

    hp: int = 100
    money: int = MONEY
    earn: int = 0
    earn_frames: int = 0
    last_hit: float = 0.0
    last_regen: float = 0.0
    target: int = 0
    targeting: bool = False
    gun: Gun = field(default_factory=lambda: Gun(power=1))
    laser: Gun = field(default_factory=lambda: Gun(power=2))


@dataclass
class Mouse:
    """Firing state driven by the mouse."""

    firing: bool = False
    fire_frames: int = 0


@dataclass
class Keys:
    """Which keys are currently held."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    l_arrow: bool = False
    r_arrow: bool = False
    shift: bool = False
    e: bool = False
    mouse: Mouse = field(default_factory=Mouse)
    replace_cursor: bool = False


@dataclass
class Camera:
    """Player position in map units and viewing angle in radians."""

    x: float = 0.0
    y: float = 0.0
    dir: float = 0.0


@dataclass
class Gameplay:
    """Round progress and enemy strength."""

    round: int = 0
    enemy_hp: int = ENEMY_HP
    last_earn: int = 0


@dataclass(eq=False)
class Textures:
    """Loaded images for walls, doors, enemies and the loading screen."""

    north: Image | None = None
    south: Image | None = None
    west: Image | None = None
    east: Image | None = None
    door: Image | None = None
    loading: Image | None = None
    enemy: list = field(default_factory=lambda: [None, None, None])
    boss: list = field(default_factory=lambda: [None, None, None])


@dataclass(eq=False)
class World:
    """The whole mutable game state."""

    grid: list[list[str]]
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    width: int = WIDTH
    height: int = HEIGHT
    camera: Camera = field(default_factory=Camera)
    keys: Keys = field(default_factory=Keys)
    player: Player = field(default_factory=Player)
    gameplay: Gameplay = field(default_factory=Gameplay)
    textures: Textures = field(default_factory=Textures)
    enemies: list[Enemy] = field(default_factory=list)
    z_total: int = 0
    fps_frames: int = 0
    fps_start: float = 0.0
    phase: Phase = Phase.LOADING
    loading_progress: int = 0

    @property
    def z_count(self) -> int:
        """Number of enemies in play."""
        return len(self.enemies)

    @classmethod
    def from_config(cls, config) -> World:
        """Build a fresh world from a parsed .cub configuration."""
        world = cls(
            grid=[list(row) for row in config.rows],
            floor_color=tuple(config.floor_color),
            ceiling_color=tuple(config.ceiling_color),
        )
        world.player.last_hit = elapsed_time()
        return world


def elapsed_time() -> float:
    """Current wall-clock time in seconds."""
    return time.time()


def direction_for(c: str) -> float:
    """Starting view angle for a player orientation letter."""
    return {"N": math.pi / 2 * 3, "S": math.pi / 2, "W": math.pi}.get(c, 0.0)


def count_z(rows) -> int:
    """Number of enemy spawn cells in *rows*."""
    return sum(1 for row in rows for c in row if c == "Z")


def read_map_file(path) -> list[str]:
    """Read a map file into a list of rows without line breaks."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="surrogateescape")
    except OSError as exc:
        raise CubError(f"Can't open map file {path}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def _place_cell(world: World, c: str, col: int, row: int) -> None:
    cam = world.camera
    if c in _PLAYER_MARKS and cam.x == 0 and cam.y == 0:
        cam.x = col + 0.5
        cam.y = row + 0.5
        cam.dir = direction_for(c)
        world.grid[row][col] = "P"
    if (
        c == "Z"
        and SPAWN
        and len(world.enemies) < ENEMY_NBR
        and len(world.enemies) < world.z_total
    ):
        world.enemies.append(
            Enemy(
                alive=check_way(world.grid, row, col),
                hp=ENEMY_HP,
                x=col + 0.5,
                y=row + 0.5,
                x_start=col,
                y_start=row,
                f=world.textures.enemy[0],
            )
        )


def place_entities(world: World) -> None:
    """Put the player and the enemies at their starting cells."""
    world.z_total = count_z(world.grid)
    for row, line in enumerate(world.grid):
        for col in range(len(line)):
            _place_cell(world, line[col], col, row)
    for line in world.grid:
        for col, c in enumerate(line):
            if c in _PLAYER_MARKS:
                line[col] = "P"