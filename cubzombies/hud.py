"""Crosshair, health bar and weapon overlays."""

from __future__ import annotations

from .images import Image

_WHITE = 0xFFFFFF
_CROSS_NEAR = 5
_CROSS_FAR = 15
_BAR_WIDTH = 200
_BAR_HEIGHT = 20
_BAR_BORDER = 2


def crosshair_spread(keys) -> int:
    """Gap added to the crosshair while moving, wider when running."""
    if keys.up or keys.down or keys.left or keys.right:
        return 25 if keys.shift else 15
    return 0


def draw_crosshair(frame: Image, spread: int) -> None:
    """Draw four three-pixel-thick white arms around the screen centre."""
    cx = frame.width // 2
    cy = frame.height // 2
    arm = range(_CROSS_NEAR + spread, _CROSS_FAR + spread + 1)
    for pos in arm:
        for thick in (-1, 0, 1):
            frame.put_pixel(cx - pos, cy + thick, _WHITE)
            frame.put_pixel(cx + pos, cy + thick, _WHITE)
            frame.put_pixel(cx + thick, cy - pos, _WHITE)
            frame.put_pixel(cx + thick, cy + pos, _WHITE)


def bar_color(hp: int) -> int:
    """Green, yellow or red depending on health."""
    if hp > 60:
        return 0x00FF00
    if hp > 30:
        return 0xFFFF00
    return 0xFF0000


def health_width(hp: int) -> int:
    """Width in pixels of the filled part of the health bar."""
    inner = _BAR_WIDTH - 2 * _BAR_BORDER
    if hp > 100:
        return inner
    if hp <= 0:
        return 0
    return hp * inner // 100


def draw_health_bar(frame: Image, hp: int) -> None:
    """Draw a bordered health bar at the bottom centre of *frame*."""
    filled = health_width(hp)
    color = bar_color(hp)
    bar_x = frame.width // 2 - 110
    bar_y = frame.height - 40
    for y in range(bar_y, bar_y + _BAR_HEIGHT):
        for x in range(bar_x, bar_x + _BAR_WIDTH):
            border = (
                x < bar_x + _BAR_BORDER
                or x >= bar_x + _BAR_WIDTH - _BAR_BORDER
                or y < bar_y + _BAR_BORDER
                or y >= bar_y + _BAR_HEIGHT - _BAR_BORDER
            )
            if border:
                frame.put_pixel(x, y, _WHITE)
            elif x < bar_x + _BAR_BORDER + filled:
                frame.put_pixel(x, y, color)


def draw_gun(frame: Image, gun_image: Image) -> None:
    """Draw the weapon in the bottom-right corner; black is transparent."""
    left = frame.width - gun_image.width
    top = frame.height - gun_image.height
    for y in range(gun_image.height):
        for x in range(gun_image.width):
            color = gun_image.get_pixel(x, y)
            if color & 0xFFFFFF:
                frame.put_pixel(left + x, top + y, color)