"""Window, main loop and program entry point."""

from __future__ import annotations

import sys
from array import array
from pathlib import Path

import pygame

from .config import LOADING_STEPS, OPENING_ANIMATION_STEPS, CubError, Key, Phase
from .controls import door_check, key_press, key_release, mouse_click, turn_by_mouse, view
from .cubfile import check_args, load_cub
from .hud import draw_health_bar
from .images import Image, load_xpm
from .loading import copy_scaled_image, draw_loading_bar, draw_opening_mask, opening_mask_height
from .movement import GameOver, move
from .overlay import tick_infos
from .render import update_frame
from .state import Gun, Textures, World, elapsed_time, place_entities

LOADING_SCREEN = Path("textures/loading_screen.xpm")

_KEYMAP = {
    pygame.K_w: Key.UP,
    pygame.K_s: Key.DOWN,
    pygame.K_a: Key.LEFT,
    pygame.K_d: Key.RIGHT,
    pygame.K_LEFT: Key.L_ARROW,
    pygame.K_RIGHT: Key.R_ARROW,
    pygame.K_LSHIFT: Key.SHIFT,
    pygame.K_e: Key.E,
    pygame.K_ESCAPE: Key.ESC,
}

_HELD_MOVES = (("up", Key.UP), ("down", Key.DOWN), ("left", Key.LEFT), ("right", Key.RIGHT))
_FONT_SIZE = 16


def _load(config, ident: str) -> Image:
    path = config.textures.get(ident)
    if path is None:
        raise CubError(f"Texture {ident} corrupted")
    try:
        return load_xpm(path)
    except CubError as exc:
        raise CubError(f"Texture {ident} corrupted") from exc


def load_textures(config, width: int, height: int) -> tuple[Textures, Gun, Gun]:
    """Load every image the .cub file names; return textures, gun and laser.

    The loading screen, if present, is scaled to width x height.
    """
    textures = Textures()
    textures.north = _load(config, "NO")
    textures.south = _load(config, "SO")
    textures.east = _load(config, "EA")
    textures.west = _load(config, "WE")
    textures.door = _load(config, "DO")
    textures.enemy = [_load(config, "ZI"), _load(config, "ZM"), _load(config, "ZH")]
    textures.boss = [_load(config, "BI"), _load(config, "BM"), _load(config, "BI")]
    laser = Gun(power=2)
    gun = Gun(power=1)
    laser.idle = _load(config, "LI")
    gun.idle = _load(config, "GI")
    gun.firing = _load(config, "GS")
    laser.firing = _load(config, "LS")
    gun.moving = _load(config, "GM")
    laser.moving = _load(config, "LM")
    try:
        source = load_xpm(LOADING_SCREEN)
    except CubError:
        textures.loading = None
    else:
        scaled = Image.blank(width, height)
        copy_scaled_image(scaled, source)
        textures.loading = scaled
    return textures, gun, laser


class Game:
    """Drives the loading screen, the opening animation and the game itself."""

    def __init__(self, world: World, screen) -> None:
        self.world = world
        self.screen = screen
        self.frame = Image.blank(world.width, world.height)
        self.running = True
        self._opening_step = 0
        self._opening_started = False
        self._font = None
        world.phase = Phase.LOADING
        world.loading_progress = 0
        world.fps_start = elapsed_time()

    def handle_event(self, event) -> None:
        """React to one pygame event."""
        world = self.world
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            key = _KEYMAP.get(event.key)
            if key is Key.ESC:
                self.running = False
            elif key is not None:
                key_press(world, key)
        elif event.type == pygame.KEYUP:
            key = _KEYMAP.get(event.key)
            if key is not None:
                key_release(world, key)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            mouse_click(world, event.button)
        elif event.type == pygame.MOUSEMOTION:
            self._mouse_moved(event.pos[0])

    def _mouse_moved(self, x: int) -> None:
        keys = self.world.keys
        if keys.replace_cursor:
            keys.replace_cursor = False
            return
        turn_by_mouse(self.world, x - self.world.width // 2)
        keys.replace_cursor = True
        if self.screen is not None:
            pygame.mouse.set_pos(self.world.width // 2, self.world.height // 2)

    def tick(self) -> list:
        """Run one iteration of the main loop; return the texts shown."""
        now = elapsed_time()
        phase = self.world.phase
        if phase is Phase.LOADING:
            self._loading_tick()
        elif phase is Phase.OPENING:
            self._opening_tick(now)
        elif phase is Phase.GAME:
            return self._game_tick(now)
        return []

    def _loading_tick(self) -> None:
        world = self.world
        image = world.textures.loading
        if image is None:
            print("ERROR: Failed to load loading_screen.xpm!")
            world.phase = Phase.GAME
            return
        copy_scaled_image(self.frame, image)
        draw_loading_bar(self.frame, world.loading_progress)
        self._present([])
        world.loading_progress += 1
        if world.loading_progress > LOADING_STEPS:
            world.textures.loading = None
            world.phase = Phase.OPENING
            world.loading_progress = 0

    def _opening_tick(self, now: float) -> None:
        world = self.world
        if not self._opening_started:
            update_frame(world, self.frame, now)
            self._opening_started = True
            self._opening_step = 0
        update_frame(world, self.frame, now)
        draw_opening_mask(self.frame, opening_mask_height(world.height, self._opening_step))
        self._present([])
        self._opening_step += 1
        if self._opening_step >= OPENING_ANIMATION_STEPS:
            world.phase = Phase.GAME
            self._opening_started = False
            self._opening_step = 0

    def _game_tick(self, now: float) -> list:
        world = self.world
        keys = world.keys
        for flag, key in _HELD_MOVES:
            if getattr(keys, flag):
                move(world, key, now)
        if keys.l_arrow:
            view(world, Key.L_ARROW)
        if keys.r_arrow:
            view(world, Key.R_ARROW)
        if keys.e:
            door_check(world)
        self.frame = Image.blank(world.width, world.height)
        update_frame(world, self.frame, now)
        draw_health_bar(self.frame, world.player.hp)
        texts = tick_infos(world, now)
        self._present(texts)
        return texts

    def _present(self, texts) -> None:
        if self.screen is None:
            return
        frame = self.frame
        opaque = array("I", (p | 0xFF000000 for p in frame.pixels))
        layout = "BGRA" if sys.byteorder == "little" else "ARGB"
        surface = pygame.image.frombuffer(opaque.tobytes(), (frame.width, frame.height), layout)
        self.screen.blit(surface, (0, 0))
        if texts:
            if self._font is None:
                pygame.font.init()
                self._font = pygame.font.Font(None, _FONT_SIZE)
            ascent = self._font.get_ascent()
            for item in texts:
                rgb = ((item.color >> 16) & 0xFF, (item.color >> 8) & 0xFF, item.color & 0xFF)
                label = self._font.render(item.text, True, rgb)
                self.screen.blit(label, (item.x, item.y - ascent))
        pygame.display.flip()

    def run(self) -> int:
        """Loop until the window closes or the player dies; return the exit status."""
        self.running = True
        if self.screen is not None:
            pygame.mouse.set_visible(False)
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                    if not self.running:
                        break
                if self.running:
                    self.tick()
        except GameOver as over:
            print(over)
        finally:
            if self.screen is not None:
                pygame.mouse.set_visible(True)
        return 1


def main(argv=None) -> int:
    """Start the game on the .cub file named on the command line."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        path = check_args(argv)
        config = load_cub(path)
        world = World.from_config(config)
        textures, gun, laser = load_textures(config, world.width, world.height)
    except CubError as err:
        print(f"Error\n{err.message}", file=sys.stderr)
        return 1
    world.textures = textures
    world.player.gun = gun
    world.player.laser = laser
    place_entities(world)
    pygame.init()
    try:
        screen = pygame.display.set_mode((world.width, world.height))
        pygame.display.set_caption("cub3D")
        return Game(world, screen).run()
    finally:
        pygame.quit()