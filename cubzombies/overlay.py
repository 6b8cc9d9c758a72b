"""Per-frame text overlay: money, frame rate, rewards and round number."""

from __future__ import annotations

from dataclasses import dataclass

from .config import SPAWN
from .controls import update_hp
from .enemies import revive_enemies

_YELLOW = 0xFFFF00
_WHITE = 0xFFFFFF


@dataclass(frozen=True)
class TextItem:
    """A string to draw at a screen position in a colour."""

    text: str
    x: int
    y: int
    color: int


def fps_text(frames: int, elapsed: float) -> str:
    """Average frame rate label; '...' during the first second."""
    if elapsed < 1:
        return "... FPS"
    return f"{int(frames / elapsed)} FPS"


def money_text(money: int) -> str:
    """Label for the player's money."""
    return f"{money} $"


def earn_text(earn: int) -> str:
    """Label for the last reward."""
    return f"{earn} $"


def round_text(round_index: int) -> str:
    """Label for the current round, counted from one."""
    return f"Round {round_index + 1}"


def tick_infos(world, now: float) -> list[TextItem]:
    """Advance per-frame bookkeeping and return the texts to show."""
    width, height = world.width, world.height
    elapsed = now - world.fps_start
    if int(elapsed) % 10 == 0 and SPAWN:
        revive_enemies(world, now)
    mouse = world.keys.mouse
    if mouse.fire_frames >= 0:
        mouse.fire_frames -= 1
    items = [
        TextItem(money_text(world.player.money), width - 40, 20, _YELLOW),
        TextItem(fps_text(world.fps_frames, elapsed), width - 40, 10, _YELLOW),
    ]
    player = world.player
    if player.earn_frames > 0:
        player.earn_frames -= 1
        items.append(
            TextItem(
                earn_text(world.gameplay.last_earn),
                width // 2 + 40,
                height // 2 - height // 10 + player.earn_frames,
                _YELLOW,
            )
        )
    items.append(TextItem(round_text(world.gameplay.round), 15, height - 10, _WHITE))
    world.fps_frames += 1
    update_hp(world, now)
    return items