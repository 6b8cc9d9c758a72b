# cubzombies

A small raycasting first-person shooter. You walk through a maze read from a
`.cub` file, buy your way through doors, and hold off rounds of zombies (and
the occasional boss) with a pistol and a laser.

## Installing

```
pip install .
```

This pulls in `pygame` for the window, input and text, and `pillow` for
images that are not XPM files (XPM textures are read directly).

## Playing

```
cubzombies maps/map1.cub
```

The command takes exactly one argument, a path ending in `.cub`. Any problem
with the arguments, the file or a texture is printed to standard error as
`Error` followed by a one-line reason, and the command exits with status 1.

### Controls

| Input              | Action                              |
|--------------------|-------------------------------------|
| W / A / S / D      | move forward, left, back, right     |
| Left Shift         | run (doubles forward speed)         |
| Left / Right arrow | turn                                |
| Mouse              | turn                                |
| Left click         | fire                                |
| Mouse wheel        | switch between pistol and laser     |
| E                  | open an adjacent door (costs 500 $) |
| Esc                | quit                                |

You start with 400 $ and 100 HP. The pistol does 1 damage per shot, the laser
2. Hitting a zombie earns 10 $, killing one earns 100 $. A zombie that touches
you takes 25 HP, after which you cannot be hurt for one second; at 0 HP the
game prints `Game Over` and ends. Below 100 HP you regain up to 3 HP every
2.5 seconds.

When every zombie is down, a new round starts on the next ten-second mark:
zombies return to their spawn points with more health each second round, and
each has about a one-in-ten chance of coming back as a boss with double
health. Only zombies whose spawn point is connected to the player come alive.

The screen shows a minimap in the top-left corner, a health bar at the bottom,
your money, the frame rate, the round number and each reward as you earn it.

## The `.cub` file

Texture lines hold an identifier, spaces, and a path that starts with `.` and
names a file that exists:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
DO ./textures/door.xpm
ZI ./textures/zombie_idle.xpm
ZM ./textures/zombie_move.xpm
ZH ./textures/zombie_hit.xpm
BI ./textures/boss_idle.xpm
BM ./textures/boss_move.xpm
GI ./textures/gun_idle.xpm
GM ./textures/gun_move.xpm
GS ./textures/gun_shot.xpm
LI ./textures/laser_idle.xpm
LM ./textures/laser_move.xpm
LS ./textures/laser_shot.xpm
```

Floor and ceiling colours are `R,G,B` triples of 0–255, with no spaces after
the first number:

```
F 120,120,120
C 30,30,60
```

The map comes last, in one piece, with no newline after its final row.
Allowed characters:

- `1` wall, `0` floor, space for nothing
- `N`, `S`, `E`, `W` the player and the way they face (exactly one)
- `Z` a zombie spawn point (at most 12 are used)
- `D` a door

The area the player can reach must be closed off by walls. Each identifier and
colour may be given only once, and every one of them is required.

A loading screen is read from `textures/loading_screen.xpm`, relative to the
current directory, if present; without it the game goes straight in.

## Using the parts

The file handling can be used without opening a window:

```python
from cubzombies.config import CubError
from cubzombies.cubfile import load_cub

try:
    config = load_cub("maps/map1.cub")
except CubError as err:
    print(err.message)
else:
    print(config.textures["NO"], config.floor_color, config.rows)
```

`cubzombies.images.load_xpm` loads a texture into an `Image`, and
`cubzombies.state.World.from_config` builds the game state from a parsed file.