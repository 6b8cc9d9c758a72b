"""Whether an enemy spawn point is connected to the player."""

from __future__ import annotations

_WALKABLE = frozenset("ESNWZ0P")
_PLAYER = frozenset("EWSNP")


def check_way(rows, row: int, col: int) -> bool:
    """True if the flood from (row, col) over open cells reaches every player mark."""
    grid = [list(line) for line in rows]
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        if grid[r][c] == "A":
            continue
        grid[r][c] = "A"
        for nr, nc in ((r, c + 1), (r, c - 1), (r + 1, c), (r - 1, c)):
            if 0 <= nr < len(grid) and 0 <= nc < len(grid[nr]) and grid[nr][nc] in _WALKABLE:
                stack.append((nr, nc))
    return not any(cell in _PLAYER for line in grid for cell in line)