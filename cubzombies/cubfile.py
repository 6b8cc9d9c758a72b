"""Reading and validating .cub scene description files."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .config import CubError
from .mapcheck import MapLayout, is_valid_map_char, parse_map

TEXTURE_IDS = (
    "NO ", "SO ", "WE ", "EA ", "DO ",
    "ZI ", "ZM ", "ZH ", "BI ", "BM ",
    "GI ", "GM ", "GS ", "LI ", "LM ", "LS ",
)

_DIGITS = "0123456789"
_COLOR_INVALID = "Color in cub file not valid"


@dataclass
class CubConfig:
    """Everything a .cub file describes.

    ``textures`` maps two-letter identifiers (``"NO"``, ``"GI"`` ...) to paths;
    colours are (r, g, b) triples.
    """

    textures: dict[str, str] = field(default_factory=dict)
    floor_color: tuple[int, int, int] = (0, 0, 0)
    ceiling_color: tuple[int, int, int] = (0, 0, 0)
    layout: MapLayout | None = None

    @property
    def rows(self) -> list[str]:
        """The raw map rows."""
        return self.layout.rows if self.layout is not None else []


def check_args(argv) -> str:
    """Return the single .cub path in *argv* (program name excluded)."""
    args = list(argv)
    if len(args) == 1 and args[0].endswith(".cub"):
        return args[0]
    raise CubError("Wrong arguments : ./cub3d <maps/map1.cub>")


def read_cub_lines(path) -> list[str]:
    """Read a .cub file and return its lines without line breaks."""
    path = Path(path)
    if path.is_dir():
        raise CubError(".Cub need to be file not directory")
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise CubError("Can't open .cub file") from exc
    text = raw.decode("utf-8", errors="surrogateescape")
    if not text:
        raise CubError("File is empty")
    if text.endswith("\n"):
        raise CubError("The map must be the last element in the file")
    return text.split("\n")


def parse_texture_line(line: str, ident: str) -> str:
    """Extract and check the texture path on *line*, which starts with *ident*."""
    rest = line[len(ident):]
    start = len(rest)
    for pos, c in enumerate(rest):
        if c == ".":
            start = pos
            break
        if c != " ":
            raise CubError("Cub file data are not valid")
    path = rest[start:]
    try:
        fd = os.open(path, os.O_RDONLY)
    except (OSError, ValueError) as exc:
        raise CubError(f"Can't open: {ident} texture.") from exc
    os.close(fd)
    return path


def parse_color(line: str) -> tuple[int, int, int]:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into an (r, g, b) triple."""
    text = line[2:]
    values: list[int] = []
    pos = 0
    while pos < len(text):
        index = len(values)
        if index == 3:
            raise CubError(_COLOR_INVALID)
        start = pos
        if index == 0:
            while start < len(text) and text[start] == " ":
                start += 1
        elif text[start] not in _DIGITS:
            raise CubError(_COLOR_INVALID)
        end = start
        while end < len(text) and text[end] in _DIGITS:
            end += 1
        more = end < len(text) and text[end] == "," and end + 1 < len(text)
        last = index == 2 and end == len(text)
        if not (more or last):
            raise CubError(_COLOR_INVALID)
        digits = text[start:end]
        if not 1 <= len(digits) <= 3:
            raise CubError(_COLOR_INVALID)
        value = int(digits)
        if value > 255:
            raise CubError("R,G,B colors need be in range [0,255]")
        values.append(value)
        pos = end if index == 2 else end + 1
    if len(values) != 3:
        raise CubError(_COLOR_INVALID)
    return values[0], values[1], values[2]


def _check_complete(textures: dict[str, str], colors: dict[str, tuple], layout) -> None:
    missing_texture = any(ident.strip() not in textures for ident in TEXTURE_IDS)
    if missing_texture or "F" not in colors or "C" not in colors or layout is None:
        raise CubError("Lack of data required in cub_file")


def parse_cub_lines(lines: list[str]) -> CubConfig:
    """Parse the lines of a .cub file into a CubConfig."""
    textures: dict[str, str] = {}
    colors: dict[str, tuple[int, int, int]] = {}
    layout = None
    i = 0
    while i < len(lines):
        line = lines[i]
        ident = next((t for t in TEXTURE_IDS if line.startswith(t)), None)
        if ident is not None:
            path = parse_texture_line(line, ident)
            key = ident.strip()
            if key in textures:
                raise CubError("Too much texture path")
            textures[key] = path
        elif line.startswith(("F ", "C ")):
            kind = line[0]
            if kind in colors:
                raise CubError("Too much colors infos")
            colors[kind] = parse_color(line)
        elif line and is_valid_map_char(line[0]):
            layout = parse_map(lines, i)
            i += len(layout.rows)
            continue
        elif line:
            raise CubError("Wrong data in cub file")
        i += 1
    _check_complete(textures, colors, layout)
    return CubConfig(textures, colors["F"], colors["C"], layout)


def load_cub(path) -> CubConfig:
    """Read, parse and validate the .cub file at *path*."""
    return parse_cub_lines(read_cub_lines(path))