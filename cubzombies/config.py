"""Game constants, input identifiers and the error raised for bad map files."""

from enum import Enum, auto

WIDTH = 1600
HEIGHT = 800

VALID_CHARS = "0 1NSZDEW"
PLAYER_CHARS = "NSEW"

STEP = 0.1
FOV = 60
SHADERS = True
VIEW = 0.05
RAYS = WIDTH
HITBOX = 0.15
ENEMY_NBR = 12
SPAWN = True
MOUSE_SENSI = 0.0003
INVU_TIME = 1
ENEMY_HP = 3
MONEY = 400
EARN_HIT = 10
EARN_KILL = 100

LOADING_BAR_WIDTH = 600
LOADING_BAR_HEIGHT = 8
LOADING_STEPS = 100
OPENING_ANIMATION_STEPS = 20

LEFT_CLICK = 1
SCROLL_UP = 4
SCROLL_DOWN = 5

SHADE_MAX_DIST = 7.0
SHADE_MIN_BRIGHT = 0.2


class CubError(Exception):
    """A .cub file, its map or one of its resources is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Key(Enum):
    """Logical keys the game reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    L_ARROW = auto()
    R_ARROW = auto()
    SHIFT = auto()
    E = auto()
    ESC = auto()


class Phase(Enum):
    """Stages the main loop goes through."""

    LOADING = 1
    OPENING = 2
    GAME = 3