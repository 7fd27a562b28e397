"""Ease Gallery - Interactive spring easing visualizer.

Exercises tick-ease: one top-level TweenerGroup holds a nested group per
orb, each with its own ``x``/``y`` tweeners and spring settings.

Controls:
  Click   Send every orb to the cursor
  Space   Scatter orbs to random targets
  R       Reset orbs to the center
  Esc     Quit
"""
from __future__ import annotations

import logging
import random
import sys

import pygame

from tick_ease import TweenerGroup, TweenOptions
from ui.constants import (
    BG_COLOR,
    FPS,
    ORB_RADIUS,
    ORB_STYLES,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TARGET_COLOR,
    TEXT_COLOR,
    TEXT_DIM,
)

logger = logging.getLogger("ease-gallery")


class GalleryState:
    """Holds the animation groups and frame stats."""

    def __init__(self) -> None:
        self.orbs = TweenerGroup()
        self.settled_count = 0
        self.moving = False
        cx, cy = SCREEN_W / 2, (SCREEN_H - STATUS_H) / 2
        for name, (spring, speed, _color) in ORB_STYLES.items():
            orb = TweenerGroup()
            options = TweenOptions(speed=speed, spring=spring, on_settled=self._on_settled)
            orb.set_target("x", cx, cx, options)
            orb.set_target("y", cy, cy, options)
            self.orbs.add(orb, name)

    def _on_settled(self, tweener) -> None:
        self.settled_count += 1

    def send_to(self, x: float, y: float) -> None:
        for name in ORB_STYLES:
            orb = self.orbs.get_tweener(name)
            orb.set_target("x", x, x)
            orb.set_target("y", y, y)
        logger.info("targets set to (%.0f, %.0f)", x, y)

    def scatter(self) -> None:
        pad = ORB_RADIUS * 2
        for name in ORB_STYLES:
            orb = self.orbs.get_tweener(name)
            orb.set_target("x", 0, random.uniform(pad, SCREEN_W - pad))
            orb.set_target("y", 0, random.uniform(pad, SCREEN_H - STATUS_H - pad))

    def position(self, name: str) -> tuple[int, int]:
        orb = self.orbs.get_tweener(name)
        return int(orb.get_tweener("x").current), int(orb.get_tweener("y").current)

    def target(self, name: str) -> tuple[int, int]:
        orb = self.orbs.get_tweener(name)
        return int(orb.get_target("x")), int(orb.get_target("y"))


def draw(screen: pygame.Surface, font: pygame.font.Font, state: GalleryState) -> None:
    screen.fill(BG_COLOR)

    for name, (spring, _speed, color) in ORB_STYLES.items():
        tx, ty = state.target(name)
        pygame.draw.circle(screen, TARGET_COLOR, (tx, ty), ORB_RADIUS + 4, 1)
        x, y = state.position(name)
        pygame.draw.circle(screen, color, (x, y), ORB_RADIUS)
        label = font.render(f"{name} ({spring})", True, TEXT_DIM)
        screen.blit(label, (x + ORB_RADIUS + 4, y - 7))

    bar = pygame.Rect(0, SCREEN_H - STATUS_H, SCREEN_W, STATUS_H)
    pygame.draw.rect(screen, STATUS_BG, bar)
    status = "all moving" if state.moving else "some at rest"
    text = font.render(
        f"{status}  |  settled events: {state.settled_count}  |  click/space/R/esc",
        True,
        TEXT_COLOR,
    )
    screen.blit(text, (10, SCREEN_H - STATUS_H + 10))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Ease Gallery - tick-ease demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = GalleryState()
    running = True

    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    state.scatter()
                elif event.key == pygame.K_r:
                    state.send_to(SCREEN_W / 2, (SCREEN_H - STATUS_H) / 2)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                if my < SCREEN_H - STATUS_H:
                    state.send_to(mx, my)

        # --- Tick: one update per frame ---
        state.moving = state.orbs.update()

        # --- Render ---
        draw(screen, font, state)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
