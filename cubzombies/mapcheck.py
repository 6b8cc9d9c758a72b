"""Extraction and validation of the map section of a .cub file."""

from __future__ import annotations

from dataclasses import dataclass

from .config import PLAYER_CHARS, VALID_CHARS, CubError

_MAP_CHARS = "EWSNZD 10"


@dataclass
class MapLayout:
    """A validated map: raw rows, rows with spaces walled, and the player start."""

    rows: list[str]
    walled: list[str]
    player: str
    player_row: int
    player_col: int


def is_valid_map_char(c: str) -> bool:
    """Whether *c* may start a map line."""
    return len(c) == 1 and c in _MAP_CHARS


def first_char_in(chars: str, line: str) -> int | None:
    """Index of the first character of *line* found in *chars*, or None."""
    return next((i for i, c in enumerate(line) if c in chars), None)


def extract_map(lines: list[str], start: int) -> list[str]:
    """Return the map rows starting at *start*; nothing may follow the map."""
    tail = lines[start:]
    rows: list[str] = []
    for offset, line in enumerate(tail):
        if line:
            rows.append(line)
            continue
        following = next((later for later in tail[offset:] if later), None)
        if following is not None:
            if first_char_in(VALID_CHARS, following) is not None:
                raise CubError("The map need to be in one part")
            raise CubError("The map must be the last element in the file")
        break
    return rows


def check_valid_chars(rows: list[str]) -> None:
    """Raise CubError if a row holds a character not allowed in a map."""
    if any(c not in VALID_CHARS for row in rows for c in row):
        raise CubError("Wrong char in map")


def find_player(rows: list[str]) -> tuple[str, int, int]:
    """Return (orientation, row, column) of the single player start."""
    found = None
    for r, row in enumerate(rows):
        col = first_char_in(PLAYER_CHARS, row)
        if col is None:
            continue
        if found is not None or first_char_in(PLAYER_CHARS, row[col + 1:]) is not None:
            raise CubError("Too much players")
        found = (row[col], r, col)
    if found is None:
        raise CubError("Need a player")
    return found


def spaces_to_walls(rows: list[str]) -> list[str]:
    """Copy of *rows* with every space turned into a wall."""
    return [row.replace(" ", "1") for row in rows]


def _cell(grid: list[list[str]], r: int, c: int) -> str | None:
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        return grid[r][c]
    return None


def check_enclosed(rows: list[str], row: int, col: int) -> None:
    """Raise CubError unless the area reachable from (row, col) is walled in."""
    grid = [list(line) for line in rows]
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if grid[r][c] == "G":
            continue
        neighbours = [(r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)]
        cells = [_cell(grid, nr, nc) for nr, nc in neighbours]
        if any(cell is None or cell == " " for cell in cells):
            raise CubError("Map must be surrounded by walls")
        grid[r][c] = "G"
        stack.extend(
            pos for pos, cell in zip(neighbours, cells) if cell not in ("G", "1")
        )


def parse_map(lines: list[str], start: int) -> MapLayout:
    """Extract the map at *start* and run every map check on it."""
    rows = extract_map(lines, start)
    check_valid_chars(rows)
    player, player_row, player_col = find_player(rows)
    walled = spaces_to_walls(rows)
    check_enclosed(rows, player_row, player_col)
    return MapLayout(rows, walled, player, player_row, player_col)