"""Window, drawing and the main game loop."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Mapping

import pygame

from sacrifice.components import Collider, ColliderShape, Health, Position, Sprite
from sacrifice.ecs import ComponentType
from sacrifice.world import build_world, movement_input

logger = logging.getLogger(__name__)

GAME_WIDTH = 1280
GAME_HEIGHT = 720
TARGET_FPS = 60

BACKGROUND_COLOR = (80, 80, 80)
ORANGE = (255, 161, 0, 255)
COLLIDING_COLOR = (255, 161, 0, 150)
RAYWHITE = (245, 245, 245)
HEALTH_BAR_COLOR = (0, 228, 48)
HEALTH_BAR_RECT = (10, 10, 500, 15)
HEALTH_BAR_BORDER = 2
HEALTH_BAR_SCALE = 5

ERROR_TEXTURE_SIZE = (16, 16)
_ERROR_COLORS = ((255, 0, 255), (0, 0, 0))


def _error_texture() -> pygame.Surface:
    surface = pygame.Surface(ERROR_TEXTURE_SIZE)
    half_w = ERROR_TEXTURE_SIZE[0] // 2
    half_h = ERROR_TEXTURE_SIZE[1] // 2
    for cx in (0, 1):
        for cy in (0, 1):
            color = _ERROR_COLORS[(cx + cy) % 2]
            surface.fill(color, pygame.Rect(cx * half_w, cy * half_h, half_w, half_h))
    return surface


def load_texture(path: str | Path) -> pygame.Surface:
    """Load an image; on failure log the error and return a checkerboard placeholder."""
    try:
        surface = pygame.image.load(str(path))
    except (pygame.error, FileNotFoundError, OSError):
        logger.error("Texture %s is not valid", path)
        return _error_texture()
    if pygame.display.get_surface() is not None:
        surface = surface.convert_alpha()
    return surface


def render_sprites(
    surface: pygame.Surface,
    sprites: Mapping[int, Sprite],
    positions: Mapping[int, Position],
) -> None:
    """Draw every sprite whose entity has a position, top-left at that position."""
    for entity in sorted(sprites):
        position = positions.get(entity)
        if position is None:
            continue
        surface.blit(sprites[entity].texture, (int(position.x), int(position.y)))


def draw_collision_bounds(
    surface: pygame.Surface,
    positions: Mapping[int, Position],
    colliders: Mapping[int, Collider],
) -> None:
    """Outline each collider, filling it in while it touches something."""
    for entity in sorted(colliders):
        position = positions.get(entity)
        if position is None:
            continue
        collider = colliders[entity]
        colliding = collider.colliding_count > 0
        color = COLLIDING_COLOR if colliding else ORANGE
        width = 0 if colliding else 1
        center_x = position.x + collider.offset[0]
        center_y = position.y + collider.offset[1]

        if collider.shape_type is ColliderShape.CIRCLE:
            pygame.draw.circle(
                surface,
                color,
                (int(center_x), int(center_y)),
                int(collider.radius),
                width,
            )
        elif collider.shape_type is ColliderShape.RECTANGLE:
            rect = pygame.Rect(
                int(center_x - collider.width / 2),
                int(center_y - collider.height / 2),
                int(collider.width),
                int(collider.height),
            )
            pygame.draw.rect(surface, color, rect, width)


def draw_health_bar(surface: pygame.Surface, health: Health | None) -> None:
    """Draw the player's health bar frame and, if there is health, its fill."""
    x, y, w, h = HEALTH_BAR_RECT
    pygame.draw.rect(surface, RAYWHITE, pygame.Rect(x, y, w, h), HEALTH_BAR_BORDER)
    if health is None:
        return
    fill = max(0, health.current_health * HEALTH_BAR_SCALE)
    if fill:
        pygame.draw.rect(surface, HEALTH_BAR_COLOR, pygame.Rect(x, y, fill, h))


def _draw_debug_text(surface: pygame.Surface, font: pygame.font.Font, clock, world) -> None:
    lines = [
        f"FPS: {clock.get_fps():.0f}",
        f"Next Entity Id: {world.ecs.next_entity}",
        f"Draw Collision Bounds (F1): {world.should_draw_collision_bounds}",
    ]
    y = 32
    for line in lines:
        surface.blit(font.render(line, True, RAYWHITE), (10, y))
        y += font.get_linesize()


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="sacrifice")
    parser.add_argument("--assets", type=Path, default=Path("assets"))
    parser.add_argument("--debug", action="store_true", help="show debug overlays")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)

    pygame.init()
    try:
        screen = pygame.display.set_mode((GAME_WIDTH, GAME_HEIGHT))
        pygame.display.set_caption("Sacrifice")

        sprites_dir = args.assets / "sprites"
        textures = {
            "cat": load_texture(sprites_dir / "cat.png"),
            "wall": load_texture(sprites_dir / "wall.png"),
            "rotund": load_texture(sprites_dir / "rotund_specimen.png"),
        }
        world = build_world(GAME_WIDTH, GAME_HEIGHT, textures)

        debug_layer = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        font = pygame.font.Font(None, 20) if args.debug else None
        clock = pygame.time.Clock()
        dt = 0.0
        running = True

        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif args.debug and event.key == pygame.K_F1:
                        world.should_draw_collision_bounds = not world.should_draw_collision_bounds
            if not running:
                break

            if args.debug:
                debug_layer.fill((0, 0, 0, 0))

            pressed = pygame.key.get_pressed()
            movement = movement_input(
                pressed[pygame.K_w], pressed[pygame.K_s], pressed[pygame.K_a], pressed[pygame.K_d]
            )
            world.step(movement, dt)

            positions = world.ecs.components(ComponentType.POSITION)
            if world.should_draw_collision_bounds:
                draw_collision_bounds(
                    debug_layer, positions, world.ecs.components(ComponentType.COLLIDER)
                )

            screen.fill(BACKGROUND_COLOR)
            render_sprites(screen, world.ecs.components(ComponentType.SPRITE), positions)
            draw_health_bar(screen, world.player_health)

            if args.debug:
                screen.blit(debug_layer, (0, 0))
                _draw_debug_text(screen, font, clock, world)

            pygame.display.flip()
            dt = clock.tick(TARGET_FPS) / 1000.0
    finally:
        pygame.quit()
    return 0