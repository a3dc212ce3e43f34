#!/usr/bin/env python3
"""
dino_client.py

pygame host for the game: window, sprites, input mapping and rendering.
The simulation itself never touches pygame.
"""

from typing import Optional

import pygame

from .constants import (
    FIELD_WIDTH, FIELD_HEIGHT, GROUND_OFFSET, PLAYER_WIDTH, PLAYER_HEIGHT,
    OBSTACLE_WIDTH, OBSTACLE_HEIGHT, RENDER_FPS, IDLE_FPS, WINDOW_TITLE,
    DINO_SPRITE_PATH, CACTUS_SPRITE_PATH
)
from .controller import GameController, JUMP, START_OR_RESTART
from .data_models import Phase, Snapshot
from .scheduler import FrameScheduler
from .simulation import Simulation

BACKGROUND = (247, 247, 247)
INK = (51, 51, 51)
BUTTON_COLOR = (83, 83, 83)
WHITE = (255, 255, 255)

IDLE_TEXT = "Press Start or Space to begin"
GAME_OVER_TEXT = "Game over! Press Space to restart"

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN)


def command_for_key(key: int, phase: Phase) -> Optional[str]:
    """Maps a pressed key to a controller command for the current phase."""
    if phase is Phase.RUNNING:
        return JUMP if key in JUMP_KEYS else None
    return START_OR_RESTART if key in START_KEYS else None


def load_sprite(path: str) -> Optional[pygame.Surface]:
    """Loads an image, or returns None so the renderer falls back to shapes."""
    try:
        return pygame.image.load(path).convert_alpha()
    except (pygame.error, FileNotFoundError) as e:
        print(f"Sprite {path} unavailable ({e}); drawing shapes instead.")
        return None


# ----------------- Rendering -----------------

class PygameRenderer:
    """Draws snapshots handed over by the controller."""

    def __init__(self, screen: pygame.Surface,
                 dino_sheet: Optional[pygame.Surface] = None,
                 cactus: Optional[pygame.Surface] = None):
        self.screen = screen
        self.dino_sheet = dino_sheet
        self.cactus = None
        if cactus is not None:
            self.cactus = pygame.transform.scale(cactus, (OBSTACLE_WIDTH, OBSTACLE_HEIGHT))

        self.font = pygame.font.Font(None, 36)
        self.small_font = pygame.font.Font(None, 24)
        self.start_button = pygame.Rect(0, 0, 140, 36)

    def draw(self, snapshot: Snapshot):
        screen = self.screen
        screen.fill(BACKGROUND)
        width, height = snapshot.field_width, snapshot.field_height

        # Ground
        pygame.draw.rect(screen, INK, (0, height - GROUND_OFFSET, width, 2))

        # Player
        x, y, w, h = snapshot.player
        if self.dino_sheet is not None:
            area = pygame.Rect(snapshot.frame_index * PLAYER_WIDTH, 0, PLAYER_WIDTH, PLAYER_HEIGHT)
            screen.blit(self.dino_sheet, (x, y), area)
        else:
            pygame.draw.rect(screen, INK, (x, y, w, h))
            # Alternate the leg so the run animation shows without sprites
            leg_x = x + 8 if snapshot.frame_index == 0 else x + w - 16
            if not snapshot.jumping:
                pygame.draw.rect(screen, BACKGROUND, (leg_x, y + h - 6, 8, 6))

        # Obstacles
        for ox, oy, ow, oh in snapshot.obstacles:
            if self.cactus is not None:
                screen.blit(self.cactus, (ox, oy))
            else:
                pygame.draw.rect(screen, (35, 120, 50), (ox, oy, ow, oh))

        # HUD
        score_text = self.font.render(f"Score: {snapshot.score}", True, INK)
        screen.blit(score_text, (width - score_text.get_width() - 16, 12))

        if snapshot.phase is not Phase.RUNNING:
            message = IDLE_TEXT if snapshot.phase is Phase.IDLE else GAME_OVER_TEXT
            text = self.font.render(message, True, INK)
            screen.blit(text, (width // 2 - text.get_width() // 2, height // 2 - 40))
            self._draw_start_button(width, height)

        pygame.display.flip()

    def _draw_start_button(self, width: float, height: float):
        self.start_button.center = (int(width // 2), int(height // 2 + 10))
        pygame.draw.rect(self.screen, BUTTON_COLOR, self.start_button, border_radius=6)
        label = self.small_font.render("Start", True, WHITE)
        self.screen.blit(label, label.get_rect(center=self.start_button.center))


# ----------------- Game Client (window / input / frame pump) -----------------

class DinoClient:
    def __init__(self, width: int = FIELD_WIDTH):
        pygame.init()
        self.screen = pygame.display.set_mode((width, FIELD_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.renderer = PygameRenderer(
            self.screen,
            dino_sheet=load_sprite(DINO_SPRITE_PATH),
            cactus=load_sprite(CACTUS_SPRITE_PATH),
        )
        self.scheduler = FrameScheduler()
        self.controller = GameController(
            simulation=Simulation(),
            scheduler=self.scheduler,
            renderer=self.renderer,
        )
        self.clock = pygame.time.Clock()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Feeds one pygame event to the controller. Returns False to quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            command = command_for_key(event.key, self.controller.phase)
            if command:
                self.controller.dispatch(command)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if (self.controller.phase is not Phase.RUNNING and
                    self.renderer.start_button.collidepoint(event.pos)):
                self.controller.dispatch(START_OR_RESTART)
        elif event.type == pygame.VIDEORESIZE:
            self.controller.resize(event.w, FIELD_HEIGHT)
        return True

    def run(self):
        """Polls input and pumps the frame scheduler until the window closes."""
        width = self.screen.get_width()
        print(f"Dino Run started ({width}x{FIELD_HEIGHT}, {RENDER_FPS} FPS).")
        self.controller.resize(width, FIELD_HEIGHT)

        running = True
        try:
            while running:
                self.clock.tick(IDLE_FPS if self.scheduler.idle else RENDER_FPS)
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                self.scheduler.run_frame()
        except KeyboardInterrupt:
            pass
        finally:
            pygame.quit()
            print(f"Dino Run stopped after {self.scheduler.frame_count} frames.")


def main():
    DinoClient().run()


if __name__ == "__main__":
    main()
