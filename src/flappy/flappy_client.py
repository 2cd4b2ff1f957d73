#!/usr/bin/env python3
"""
flappy_client.py

Pygame front end: feeds frame time and flap input into a Session and
draws what it reads back. Sprites are generated at startup, no files needed.
"""

import argparse
import logging
import random
from typing import Optional, Sequence, Tuple

import pygame

from .config import GameConfig, ConfigError
from .constants import RENDER_FPS, MIN_PIPE_DISPLAY_HEIGHT
from .data_models import Obstacle
from .session import Session

logger = logging.getLogger(__name__)

HINT_TEXT = "Press SPACE or click to flap"

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
SKY_TOP = (179, 229, 252)
SKY_BOTTOM = (135, 206, 235)
GROUND_COLOR = (51, 204, 102)
PIPE_COLOR = (50, 205, 50)
PIPE_CAP_COLOR = (46, 139, 87)
PIPE_CAP_HEIGHT = 28
GAME_OVER_TINT = (255, 0, 0, 255)

# Art coordinates assume a 420x640 canvas and are scaled to the playfield
ART_WIDTH = 420
ART_HEIGHT = 640
CLOUDS = ((80, 90, 60, 28), (140, 70, 38, 20), (300, 120, 70, 30))
GROUND_TOP = 560


def is_flap_event(event) -> bool:
    """Space or any mouse button flaps (and restarts after a crash)."""
    if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
        return True
    return event.type == pygame.MOUSEBUTTONDOWN


def is_quit_event(event) -> bool:
    if event.type == pygame.QUIT:
        return True
    return event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE


# ----------------- Procedural sprites -----------------

def make_background(width: int, height: int) -> pygame.Surface:
    surface = pygame.Surface((width, height))
    for row in range(height):
        t = row / max(height - 1, 1)
        color = tuple(round(a + (b - a) * t) for a, b in zip(SKY_TOP, SKY_BOTTOM))
        pygame.draw.line(surface, color, (0, row), (width, row))

    sx = width / ART_WIDTH
    sy = height / ART_HEIGHT
    for cx, cy, rx, ry in CLOUDS:
        rect = pygame.Rect(0, 0, round(2 * rx * sx), round(2 * ry * sy))
        rect.center = (round(cx * sx), round(cy * sy))
        pygame.draw.ellipse(surface, WHITE, rect)

    ground_y = round(GROUND_TOP * sy)
    pygame.draw.rect(surface, GROUND_COLOR, (0, ground_y, width, height - ground_y))
    return surface


def make_bird_sprite(width: float, height: float) -> pygame.Surface:
    """Round yellow bird with a wing, eye and beak, facing right."""
    base = pygame.Surface((48, 36), pygame.SRCALPHA)
    pygame.draw.circle(base, (255, 213, 79), (18, 18), 12)
    pygame.draw.circle(base, (165, 124, 18), (18, 18), 12, 2)
    pygame.draw.ellipse(base, (255, 138, 101), pygame.Rect(20, 18, 12, 8))
    pygame.draw.circle(base, BLACK, (16, 16), 3)
    pygame.draw.polygon(base, (255, 112, 67), [(30, 12), (36, 13), (40, 12), (38, 7), (30, 8)])
    return pygame.transform.smoothscale(base, (max(1, round(width)), max(1, round(height))))


def tinted(surface: pygame.Surface, tint: Tuple[int, int, int, int]) -> pygame.Surface:
    copy = surface.copy()
    copy.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
    return copy


def render_outlined(font: pygame.font.Font, text: str, color=WHITE,
                    outline=BLACK, thickness: int = 3) -> pygame.Surface:
    """Text with a solid stroke around it, drawn by offset blits."""
    inner = font.render(text, True, color)
    edge = font.render(text, True, outline)
    w, h = inner.get_width() + 2 * thickness, inner.get_height() + 2 * thickness
    surface = pygame.Surface((w, h), pygame.SRCALPHA)
    for dx in range(-thickness, thickness + 1):
        for dy in range(-thickness, thickness + 1):
            if dx * dx + dy * dy <= thickness * thickness:
                surface.blit(edge, (thickness + dx, thickness + dy))
    surface.blit(inner, (thickness, thickness))
    return surface


# ----------------- Game Client (input / rendering) -----------------

class FlappyClient:
    def __init__(self, session: Session, fps: int = RENDER_FPS):
        pygame.init()
        self.session = session
        cfg = session.config
        self.width = int(cfg.width)
        self.height = int(cfg.height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Flappy Bird")

        # Time Management
        self.clock = pygame.time.Clock()
        self.fps = fps

        # Assets
        self.background = make_background(self.width, self.height)
        self.bird_sprite = make_bird_sprite(cfg.bird_width, cfg.bird_height)
        self.dead_bird_sprite = tinted(self.bird_sprite, GAME_OVER_TINT)
        self.score_font = pygame.font.Font(None, 52)
        self.title_font = pygame.font.Font(None, 64)
        self.summary_font = pygame.font.Font(None, 40)
        self.hint_font = pygame.font.Font(None, 22)

    def run(self):
        """The main client execution loop."""
        logger.info("Client started at %d FPS", self.fps)
        running = True
        while running:
            delta_time = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if is_quit_event(event):
                    running = False
                elif is_flap_event(event):
                    self.session.on_flap_input()

            self.session.tick(delta_time)
            self._draw_game()

        logger.info("Client closed with score %d", self.session.score)
        pygame.quit()

    def _draw_pipe(self, pipe: Obstacle):
        screen = self.screen
        left = round(pipe.left)
        width = round(pipe.width)

        top_height = max(MIN_PIPE_DISPLAY_HEIGHT, pipe.gap_top)
        top = pygame.Rect(left, round(pipe.gap_top - top_height), width, round(top_height))
        pygame.draw.rect(screen, PIPE_COLOR, top)
        pygame.draw.rect(screen, PIPE_CAP_COLOR,
                         (left, top.bottom - PIPE_CAP_HEIGHT, width, PIPE_CAP_HEIGHT))

        bottom_height = max(MIN_PIPE_DISPLAY_HEIGHT, self.height - pipe.gap_bottom)
        bottom = pygame.Rect(left, round(pipe.gap_bottom), width, round(bottom_height))
        pygame.draw.rect(screen, PIPE_COLOR, bottom)
        pygame.draw.rect(screen, PIPE_CAP_COLOR, (left, bottom.top, width, PIPE_CAP_HEIGHT))

    def _blit_centered(self, surface: pygame.Surface, center: Tuple[float, float]):
        self.screen.blit(surface, surface.get_rect(center=(round(center[0]), round(center[1]))))

    def _draw_game(self):
        """Renders the session state using Pygame."""
        session = self.session
        self.screen.blit(self.background, (0, 0))

        for pipe in session.obstacles:
            self._draw_pipe(pipe)

        actor = session.actor
        sprite = self.bird_sprite if actor.alive else self.dead_bird_sprite
        # pygame rotates counter-clockwise; positive rotation tips the beak down
        self._blit_centered(pygame.transform.rotate(sprite, -actor.rotation), (actor.x, actor.y))

        # HUD
        score = render_outlined(self.score_font, str(session.score), thickness=3)
        self.screen.blit(score, score.get_rect(midtop=(self.width // 2, 24)))

        summary = session.summary
        hint = summary.hint if summary else HINT_TEXT
        self._blit_centered(render_outlined(self.hint_font, hint, thickness=2),
                            (self.width / 2, self.height - 100))

        if summary:
            self._blit_centered(render_outlined(self.title_font, summary.title, thickness=4),
                                (self.width / 2, self.height / 2 - 40))
            self._blit_centered(render_outlined(self.summary_font, summary.score_text, thickness=3),
                                (self.width / 2, self.height / 2 + 16))

        pygame.display.flip()


# ----------------- Entry point -----------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy", description="Single-player Flappy Bird.")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed the pipe gap generator for a repeatable run.")
    parser.add_argument("--fps", type=int, default=RENDER_FPS,
                        help=f"Render frame cap (default {RENDER_FPS}).")
    parser.add_argument("--gap-size", type=float, default=None,
                        help="Vertical opening between pipes, in pixels.")
    parser.add_argument("--log-level", default="info",
                        choices=["debug", "info", "warning", "error"])
    return parser


def main(argv: Optional[Sequence[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_overrides(gap_size=args.gap_size)
    except ConfigError as e:
        parser.error(str(e))

    rng = random.Random(args.seed) if args.seed is not None else None
    client = FlappyClient(Session(config, rng), fps=args.fps)
    client.run()


if __name__ == "__main__":
    main()
