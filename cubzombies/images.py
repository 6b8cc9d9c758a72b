"""In-memory images, image loading and colour helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image as PILImage
from PIL import ImageColor

from .config import SHADE_MAX_DIST, SHADE_MIN_BRIGHT, SHADERS, CubError

_XPM_STRING = re.compile(r'"((?:[^"\\]|\\.)*)"')
_XPM_KEYS = ("c", "m", "g4", "g", "s")


@dataclass(eq=False)
class Image:
    """A width x height grid of 0xRRGGBB pixels stored row by row."""

    width: int
    height: int
    pixels: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image size must not be negative")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match image size")

    @classmethod
    def blank(cls, width: int, height: int) -> Image:
        """Return a black image of the given size."""
        return cls(width, height, [0] * (width * height))

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the image are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel; raise IndexError outside the image."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y * self.width + x]


def _xpm_color(spec: str) -> int:
    if spec.lower() == "none":
        return 0
    if spec.startswith("#") and len(spec) == 13:
        digits = spec[1:]
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 4, 8))
        return (r << 16) | (g << 8) | b
    r, g, b = ImageColor.getrgb(spec)[:3]
    return (r << 16) | (g << 8) | b


def _color_spec(tokens: list[str]) -> str:
    specs: dict[str, list[str]] = {}
    current = None
    for token in tokens:
        if token in _XPM_KEYS:
            current = token
            specs[current] = []
        elif current is not None:
            specs[current].append(token)
    for key in _XPM_KEYS:
        if specs.get(key):
            return " ".join(specs[key])
    raise ValueError("colour entry without a value")


def _parse_xpm(text: str) -> Image:
    strings = _XPM_STRING.findall(text)
    if not strings:
        raise ValueError("no XPM data")
    width, height, ncolors, cpp = (int(v) for v in strings[0].split()[:4])
    colors = {}
    for entry in strings[1:1 + ncolors]:
        colors[entry[:cpp]] = _xpm_color(_color_spec(entry[cpp:].split()))
    rows = strings[1 + ncolors:1 + ncolors + height]
    if len(rows) != height:
        raise ValueError("missing pixel rows")
    pixels = []
    for row in rows:
        if len(row) < width * cpp:
            raise ValueError("short pixel row")
        pixels.extend(colors[row[i:i + cpp]] for i in range(0, width * cpp, cpp))
    return Image(width, height, pixels)


def _load_with_pillow(path: Path) -> Image:
    with PILImage.open(path) as img:
        rgb = img.convert("RGB")
        pixels = [(r << 16) | (g << 8) | b for r, g, b in rgb.getdata()]
        return Image(rgb.width, rgb.height, pixels)


def load_xpm(path) -> Image:
    """Load an XPM image (or any format Pillow reads) from *path*."""
    path = Path(path)
    try:
        raw = path.read_bytes()
        if b"XPM" in raw[:128]:
            return _parse_xpm(raw.decode("latin-1"))
        return _load_with_pillow(path)
    except (OSError, ValueError, KeyError, IndexError) as exc:
        raise CubError(f"Cannot load image {path}") from exc


def rgb_color(rgb) -> int:
    """Pack an (r, g, b) triple into 0xRRGGBB."""
    r, g, b = rgb
    return (r << 16) | (g << 8) | b


def minimap_color(c: str) -> int:
    """Colour used for a map cell on the minimap."""
    return {"D": 0x0FF000, "P": 0xFF0000, "1": 0xFFFFFF}.get(c, 0)


def shade(color: int, dist: float) -> int:
    """Darken *color* according to its distance from the viewer."""
    if not SHADERS:
        return color
    if dist >= SHADE_MAX_DIST:
        factor = SHADE_MIN_BRIGHT
    else:
        factor = 1.0 - (dist / SHADE_MAX_DIST) * (1.0 - SHADE_MIN_BRIGHT)
    r = int(((color >> 16) & 0xFF) * factor)
    g = int(((color >> 8) & 0xFF) * factor)
    b = int((color & 0xFF) * factor)
    return (r << 16) | (g << 8) | b