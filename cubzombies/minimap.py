"""Top-left minimap overlay."""

from __future__ import annotations

from .images import Image, minimap_color

_ORIGIN = 20
_SCALE = 5
_CELLS = 16
_BORDER_COLOR = 0xFF0000


def _draw_square(frame: Image, x: int, y: int, color: int) -> None:
    for i in range(_SCALE):
        for j in range(_SCALE):
            frame.put_pixel(x + i, y + j, color)


def _draw_border(frame: Image) -> None:
    size = _CELLS * _SCALE
    for pos in range(_ORIGIN, _ORIGIN + size):
        frame.put_pixel(pos, _ORIGIN - 1, _BORDER_COLOR)
        frame.put_pixel(pos, _ORIGIN + size, _BORDER_COLOR)
        frame.put_pixel(_ORIGIN - 1, pos, _BORDER_COLOR)
        frame.put_pixel(_ORIGIN + size, pos, _BORDER_COLOR)


def draw_minimap(frame: Image, rows, px: float, py: float) -> None:
    """Draw the 16x16 cells around (px, py) and a border onto *frame*."""
    first_row = max(int(py) - 8, 0)
    first_col = max(int(px) - 8, 0)
    y = _ORIGIN
    for line in rows[first_row:first_row + _CELLS]:
        for offset, c in enumerate(line[first_col:first_col + _CELLS]):
            if c not in ("Z", "0"):
                _draw_square(frame, _ORIGIN + offset * _SCALE, y, minimap_color(c))
        y += _SCALE
    _draw_border(frame)