"""The game window, its event loop and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .minimap import draw_minimap
from .player import Controller, Key, Player
from .raycast import WIN_HEIGHT, WIN_WIDTH, Frame, render_scene
from .scene import Scene, SceneError, load_scene

TITLE = "Cub3d"
USAGE = "Usage: ./cub3d maps/<map_name.cub>"


class Game:
    """A running scene: the player, its controller and the frame it sees."""

    def __init__(self, scene: Scene, width: int = WIN_WIDTH, height: int = WIN_HEIGHT):
        self.scene = scene
        self.player = Player.spawn(scene.start_x, scene.start_y, scene.start_dir)
        self.controller = Controller(self.player, scene.grid, win_width=width)
        self.frame = Frame(width, height)

    @property
    def closed(self) -> bool:
        return self.controller.closed

    def redraw(self) -> Frame:
        """Render the view and the minimap; return the frame."""
        render_scene(self.frame, self.scene, self.player)
        draw_minimap(self.frame, self.scene.grid, self.player)
        return self.frame

    def handle_key(self, key: int) -> bool:
        """Apply a key press; return True when the frame was redrawn."""
        changed = self.controller.handle_key(key)
        if changed:
            self.redraw()
        return changed

    def handle_mouse(self, x: int, y: int) -> bool:
        """Apply mouse motion; return True when the frame was redrawn."""
        changed = self.controller.handle_mouse(x, y)
        if changed:
            self.redraw()
        return changed


_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_w: Key.W,
    pygame.K_a: Key.A,
    pygame.K_s: Key.S,
    pygame.K_d: Key.D,
}


def _frame_rgb(frame: Frame) -> bytes:
    pixels = frame.pixels
    data = bytearray(len(pixels) * 3)
    data[0::3] = bytes((p >> 16) & 0xFF for p in pixels)
    data[1::3] = bytes((p >> 8) & 0xFF for p in pixels)
    data[2::3] = bytes(p & 0xFF for p in pixels)
    return bytes(data)


def _present(screen: pygame.Surface, frame: Frame) -> None:
    surface = pygame.image.frombuffer(
        _frame_rgb(frame), (frame.width, frame.height), "RGB"
    )
    screen.blit(surface, (0, 0))
    pygame.display.flip()


def run(scene: Scene) -> None:
    """Open the window and play ``scene`` until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIN_WIDTH, WIN_HEIGHT))
        pygame.display.set_caption(TITLE)
        game = Game(scene)
        _present(screen, game.redraw())
        while not game.closed:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            changed = False
            if event.type == pygame.KEYDOWN:
                key = _PYGAME_KEYS.get(event.key)
                if key is not None:
                    changed = game.handle_key(key)
            elif event.type == pygame.MOUSEMOTION:
                changed = game.handle_mouse(*event.pos)
            if changed:
                _present(screen, game.frame)
    finally:
        pygame.quit()


def _report(message: str) -> None:
    sys.stderr.write(f"Error\n{message}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        _report(USAGE)
        return 1
    try:
        scene = load_scene(args[0])
    except SceneError as exc:
        _report(str(exc))
        return 1
    run(scene)
    return 0


if __name__ == "__main__":
    sys.exit(main())