"""
tick-timer Bouncing HUD
Interactive pygame demo: fixed-rate ball physics, capped rendering, live UPS/FPS readout.
"""

import logging
import math
import random
import sys
from dataclasses import dataclass

import pygame

from tick_timer import TickScheduler

# --- Configuration ---
WIDTH, HEIGHT = 1024, 768
UPS = 60
FPS_CHOICES = [0, 15, 30, 60, 144]
TITLE = "tick-timer Bouncing HUD"

INITIAL_BALL_COUNT = 16
MIN_RADIUS = 10.0
MAX_RADIUS = 30.0
MIN_SPEED = 80.0
MAX_SPEED = 260.0
GRAVITY_STRENGTH = 600.0
RESTITUTION = 0.9
# Milliseconds of artificial work per frame when "lag" is on.
LAG_MS = 120

# Colors
BG_COLOR = (26, 26, 46)
HUD_COLOR = (200, 200, 220)
OUTLINE_COLOR = (255, 255, 255)
BALL_COLORS = [
    (0, 255, 255),    # cyan
    (255, 0, 200),    # magenta
    (0, 255, 100),    # lime
    (255, 160, 0),    # orange
    (255, 215, 0),    # gold
    (180, 100, 255),  # violet
]


@dataclass
class Ball:
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    color: tuple[int, int, int]


def spawn_ball(x: float, y: float) -> Ball:
    angle = random.uniform(0, 2 * math.pi)
    speed = random.uniform(MIN_SPEED, MAX_SPEED)
    return Ball(
        x=x,
        y=y,
        vx=math.cos(angle) * speed,
        vy=math.sin(angle) * speed,
        radius=random.uniform(MIN_RADIUS, MAX_RADIUS),
        color=random.choice(BALL_COLORS),
    )


def step(balls: list[Ball], dt: float, gravity: bool) -> None:
    """Advance every ball by one fixed step and bounce off the walls."""
    for ball in balls:
        if gravity:
            ball.vy += GRAVITY_STRENGTH * dt
        ball.x += ball.vx * dt
        ball.y += ball.vy * dt

        if ball.x - ball.radius < 0:
            ball.x = ball.radius
            ball.vx = abs(ball.vx) * RESTITUTION
        elif ball.x + ball.radius > WIDTH:
            ball.x = WIDTH - ball.radius
            ball.vx = -abs(ball.vx) * RESTITUTION

        if ball.y - ball.radius < 0:
            ball.y = ball.radius
            ball.vy = abs(ball.vy) * RESTITUTION
        elif ball.y + ball.radius > HEIGHT:
            ball.y = HEIGHT - ball.radius
            ball.vy = -abs(ball.vy) * RESTITUTION


def main():
    logging.basicConfig(level=logging.INFO)

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    font = pygame.font.SysFont("monospace", 14)

    fps_index = 2
    scheduler = TickScheduler(UPS, FPS_CHOICES[fps_index])
    dt = 1.0 / UPS

    balls = [
        spawn_ball(random.uniform(80, WIDTH - 80), random.uniform(80, HEIGHT - 80))
        for _ in range(INITIAL_BALL_COUNT)
    ]

    # --- State ---
    gravity = False
    lag = False
    paused = False
    running = True

    while running:
        if scheduler.is_window_elapsed():
            pygame.display.set_caption(
                f"{TITLE}  |  UPS {scheduler.captured_update_rate}"
                f"  FPS {scheduler.captured_render_rate}"
            )

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_g:
                    gravity = not gravity
                elif event.key == pygame.K_l:
                    lag = not lag
                elif event.key == pygame.K_f:
                    # Rates are fixed per scheduler, so switching FPS starts a new one.
                    fps_index = (fps_index + 1) % len(FPS_CHOICES)
                    scheduler = TickScheduler(UPS, FPS_CHOICES[fps_index])
                elif event.key == pygame.K_c:
                    balls.clear()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mx, my = event.pos
                balls.append(spawn_ball(float(mx), float(my)))

        # --- Update (replays every missed step) ---
        while scheduler.is_update_due():
            if not paused:
                step(balls, dt, gravity)

        # --- Draw (missed frames are skipped) ---
        if scheduler.is_render_due():
            screen.fill(BG_COLOR)
            for ball in balls:
                center = (int(ball.x), int(ball.y))
                pygame.draw.circle(screen, ball.color, center, int(ball.radius))
                pygame.draw.circle(screen, OUTLINE_COLOR, center, int(ball.radius), 1)

            fps_cap = FPS_CHOICES[fps_index] or "unlimited"
            hud_lines = [
                f"Balls: {len(balls)}   UPS: {scheduler.captured_update_rate}/{UPS}"
                f"   FPS: {scheduler.captured_render_rate}/{fps_cap}",
                f"Gravity: {'ON' if gravity else 'OFF'}   Lag: {'ON' if lag else 'OFF'}"
                f"{'   [PAUSED]' if paused else ''}",
                "LClick=Ball  G=Gravity  L=Lag  F=FPS cap  Space=Pause  C=Clear  Esc=Quit",
            ]
            for i, line in enumerate(hud_lines):
                surf = font.render(line, True, HUD_COLOR)
                screen.blit(surf, (10, 8 + i * 20))

            pygame.display.flip()
            if lag:
                pygame.time.wait(LAG_MS)

        scheduler.yield_cpu()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
