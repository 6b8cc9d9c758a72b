"""Loading screen image, progress bar and opening curtain."""

from __future__ import annotations

from .config import (
    LOADING_BAR_HEIGHT,
    LOADING_BAR_WIDTH,
    LOADING_STEPS,
    OPENING_ANIMATION_STEPS,
)
from .images import Image

_BAR_COLOR = 0xFFFFFF


def _div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    return int(a / b)


def copy_scaled_image(frame: Image, src: Image) -> None:
    """Stretch *src* over the whole of *frame* (nearest neighbour)."""
    if frame.width == 0 or frame.height == 0:
        return
    columns = [x * src.width // frame.width for x in range(frame.width)]
    for y in range(frame.height):
        sy = y * src.height // frame.height
        base = y * frame.width
        if 0 <= sy < src.height:
            src_base = sy * src.width
            row = [
                src.pixels[src_base + sx] if 0 <= sx < src.width else 0
                for sx in columns
            ]
        else:
            row = [0] * frame.width
        frame.pixels[base:base + frame.width] = row


def draw_loading_bar(frame: Image, progress: int) -> None:
    """Draw the progress bar for *progress* out of the loading steps."""
    bar_x = _div(frame.width - LOADING_BAR_WIDTH, 2)
    bar_y = frame.height - 80
    bar_width = _div(LOADING_BAR_WIDTH * progress, LOADING_STEPS)
    for y in range(bar_y, bar_y + LOADING_BAR_HEIGHT):
        for x in range(bar_x, bar_x + bar_width):
            frame.put_pixel(x, y, _BAR_COLOR)


def opening_mask_height(height: int, step: int) -> int:
    """Height of each black band at step *step* of the opening animation."""
    return _div((height // 2) * (OPENING_ANIMATION_STEPS - step), OPENING_ANIMATION_STEPS)


def draw_opening_mask(frame: Image, mask_height: int) -> None:
    """Black out *mask_height* rows at the top and at the bottom of *frame*."""
    black = [0] * frame.width
    for y in range(min(max(mask_height, 0), frame.height)):
        top = y * frame.width
        bottom = (frame.height - 1 - y) * frame.width
        frame.pixels[top:top + frame.width] = black
        frame.pixels[bottom:bottom + frame.width] = black