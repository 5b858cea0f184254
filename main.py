"""
Zombies & Mummies - a point-and-click shooting gallery.

Usage:
    python main.py [--seed N] [--enemies N] [--mute] [--log-file PATH]
"""

from __future__ import annotations

import argparse
import os
import time

import pygame

from zombie_shooter.audio import AudioSystem
from zombie_shooter.constants import *
from zombie_shooter.determinism import get_rng, set_sim_seed
from zombie_shooter.logger import GameLogger
from zombie_shooter.render import PygameRenderer
from zombie_shooter.scheduler import FrameScheduler, now_ms
from zombie_shooter.session import GameSession
from zombie_shooter.sprites import SpriteProvider, load_background
from zombie_shooter.viewport import fit_rect, to_canvas_coords
from ui import HUD, MessageBanner


class Game:
    """
    Window owner: initializes pygame and the collaborators, pumps events and
    frames, and presents the canvas scaled into the window. Game rules live
    in GameSession.
    """

    def __init__(self, enemy_count: int = ENEMY_COUNT, muted: bool = False,
                 log_file: str = LOG_FILE) -> None:
        """Initialize subsystems, load assets, and populate the canvas."""
        pygame.init()
        pygame.display.set_caption("Zombies & Mummies")

        self.screen = pygame.display.set_mode((WIDTH, HEIGHT), pygame.RESIZABLE)
        self.canvas = pygame.Surface((WIDTH, HEIGHT))
        self.clock = pygame.time.Clock()
        self.font_small = pygame.font.Font(FONT_NAME, FONT_SIZE_MEDIUM)
        self.font_big = pygame.font.Font(FONT_NAME, FONT_SIZE_LARGE)
        self.current_width = WIDTH
        self.current_height = HEIGHT
        self.view_rect = fit_rect((WIDTH, HEIGHT), (WIDTH, HEIGHT))

        self.show_fps = False
        self.fps_samples: list[float] = []

        self.hud = HUD(self.font_small)
        self.banner = MessageBanner(self.font_big)
        self.logger = GameLogger(log_file)
        self.audio = AudioSystem(muted=muted)

        self.sprites = SpriteProvider()
        self.renderer = PygameRenderer(self.canvas, self.sprites, load_background())
        self.scheduler = FrameScheduler()
        self.session = GameSession(
            self.scheduler,
            renderer=self.renderer,
            audio=self.audio,
            sink=self,
            logger=self.logger,
            rng=get_rng(),
            enemy_count=enemy_count,
        )

        self.cursor_img: pygame.Surface | None = None
        self.load_cursor()

        # enemies only appear once every sprite can be drawn
        if self.sprites.load():
            self.session.populate()

    # --------------------------------- Sink -----------------------------------------

    def on_score(self, delta: int, total: int) -> None:
        self.hud.on_score(delta, total)

    def show_message(self, text: str, duration_ms: int = 0) -> None:
        self.banner.show(text, duration_ms)

    # --------------------------------- Setup ----------------------------------------

    def load_cursor(self) -> None:
        """Load the crosshair image; a drawn crosshair is used when it is missing."""
        pygame.mouse.set_visible(False)
        if not os.path.exists(CURSOR_PATH):
            return
        try:
            self.cursor_img = pygame.image.load(CURSOR_PATH).convert_alpha()
        except Exception as e:
            print(f"Failed to load cursor: {e}")
            self.cursor_img = None

    def handle_resize(self, new_width: int, new_height: int) -> None:
        """Handle window resize events and rescale fonts."""
        if new_width == self.current_width and new_height == self.current_height:
            return
        self.current_width = new_width
        self.current_height = new_height
        self.view_rect = fit_rect((new_width, new_height), (WIDTH, HEIGHT))

        scale_factor = min(new_width / WIDTH, new_height / HEIGHT)
        self.font_small = pygame.font.Font(FONT_NAME, max(12, int(FONT_SIZE_MEDIUM * scale_factor)))
        self.font_big = pygame.font.Font(FONT_NAME, max(18, int(FONT_SIZE_LARGE * scale_factor)))
        self.hud.update_fonts(self.font_small)
        self.banner.update_fonts(self.font_big)

    # --------------------------------- Loop -----------------------------------------

    def run(self) -> None:
        """Main loop: process events, run due frames, present; exits on quit request."""
        running = True
        while running:
            current_fps = self.clock.get_fps()
            self.fps_samples.append(current_fps)
            if len(self.fps_samples) > 10:
                self.fps_samples.pop(0)
            avg_fps = sum(self.fps_samples) / len(self.fps_samples)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.handle_resize(event.w, event.h)
                elif event.type == pygame.KEYDOWN:
                    if not self.handle_key(event.key):
                        running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.handle_click(event.pos)

            timestamp = now_ms()
            self.scheduler.run_pending(timestamp)
            if not self.session.running:
                # keep the stopped/paused canvas current (resets, hitbox toggle)
                self.session.render()
            self.banner.update(timestamp)
            self.hud.update(timestamp)

            self.draw(avg_fps)
            self.clock.tick(FPS)

        pygame.quit()

    # --------------------------------- Input ----------------------------------------

    def handle_key(self, key: int) -> bool:
        """Apply a key binding. Returns False when the player quits."""
        if key == pygame.K_ESCAPE:
            return False
        if key in (pygame.K_SPACE, pygame.K_RETURN):
            self.session.start()
        elif key == pygame.K_p:
            self.session.toggle_pause()
        elif key == pygame.K_r:
            self.session.reset()
        elif key == pygame.K_m:
            self.audio.toggle_mute()
        elif key == pygame.K_f:
            self.show_fps = not self.show_fps
        elif key == pygame.K_b:
            self.session.show_hitboxes = not self.session.show_hitboxes
        return True

    def handle_click(self, pos: tuple[int, int]) -> None:
        """Translate a window click to canvas space and shoot."""
        x, y = to_canvas_coords(pos, self.view_rect, (WIDTH, HEIGHT))
        self.session.handle_click(x, y)

    # --------------------------------- Rendering ------------------------------------

    def draw_cursor(self) -> None:
        mouse_x, mouse_y = pygame.mouse.get_pos()
        if not (0 <= mouse_x < self.current_width and 0 <= mouse_y < self.current_height):
            return
        if self.cursor_img:
            self.screen.blit(self.cursor_img, self.cursor_img.get_rect(center=(mouse_x, mouse_y)))
            return
        pygame.draw.circle(self.screen, CROSSHAIR_COLOR, (mouse_x, mouse_y), 12, 2)
        pygame.draw.line(self.screen, CROSSHAIR_COLOR, (mouse_x - 18, mouse_y), (mouse_x - 6, mouse_y), 2)
        pygame.draw.line(self.screen, CROSSHAIR_COLOR, (mouse_x + 6, mouse_y), (mouse_x + 18, mouse_y), 2)
        pygame.draw.line(self.screen, CROSSHAIR_COLOR, (mouse_x, mouse_y - 18), (mouse_x, mouse_y - 6), 2)
        pygame.draw.line(self.screen, CROSSHAIR_COLOR, (mouse_x, mouse_y + 6), (mouse_x, mouse_y + 18), 2)

    def draw(self, fps: float) -> None:
        """Compose the window: letterboxed canvas, HUD, banner, cursor."""
        self.screen.fill((0, 0, 0))
        left, top, view_w, view_h = self.view_rect
        if (view_w, view_h) == (WIDTH, HEIGHT):
            self.screen.blit(self.canvas, (left, top))
        else:
            self.screen.blit(pygame.transform.scale(self.canvas, (view_w, view_h)), (left, top))

        self.hud.draw(self.screen, self.show_fps, fps,
                      muted=self.audio.muted,
                      show_hitboxes=self.session.show_hitboxes)
        self.banner.draw(self.screen)
        self.draw_cursor()

        pygame.display.flip()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Zombies & Mummies - click the undead before they vanish"
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the gameplay RNG for a reproducible run")
    parser.add_argument("--enemies", type=int, default=ENEMY_COUNT,
                        help=f"Number of enemies on the canvas (default: {ENEMY_COUNT})")
    parser.add_argument("--mute", action="store_true", help="Start with audio muted")
    parser.add_argument("--log-file", default=LOG_FILE,
                        help="Markdown file for the event log")
    args = parser.parse_args(argv)
    if args.enemies < 0:
        parser.error("--enemies must be >= 0")
    return args


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    seed = set_sim_seed(args.seed if args.seed is not None else time.time_ns())
    game = Game(enemy_count=args.enemies, muted=args.mute, log_file=args.log_file)
    game.logger.log_state("SEED", str(seed))
    game.run()


if __name__ == "__main__":
    main()
