import pygame
import pytest

from sacrifice.app import (
    COLLIDING_COLOR,
    ERROR_TEXTURE_SIZE,
    HEALTH_BAR_COLOR,
    ORANGE,
    RAYWHITE,
    draw_collision_bounds,
    draw_health_bar,
    load_texture,
    render_sprites,
)
from sacrifice.components import Collider, Health, Position, Sprite

BLANK = (0, 0, 0, 0)


def _canvas(width=600, height=100):
    surface = pygame.Surface((width, height), pygame.SRCALPHA)
    surface.fill(BLANK)
    return surface


def test_load_texture_reads_image(tmp_path):
    source = pygame.Surface((7, 5))
    source.fill((10, 20, 30))
    path = tmp_path / "sprite.bmp"
    pygame.image.save(source, str(path))

    texture = load_texture(path)
    assert texture.get_size() == (7, 5)
    assert texture.get_at((3, 2))[:3] == (10, 20, 30)


def test_load_texture_missing_returns_placeholder(tmp_path):
    texture = load_texture(tmp_path / "missing.png")
    assert texture.get_size() == ERROR_TEXTURE_SIZE


def test_render_sprites_blits_at_position():
    canvas = _canvas(20, 20)
    texture = pygame.Surface((4, 4), pygame.SRCALPHA)
    texture.fill((200, 0, 0, 255))
    sprites = {1: Sprite(texture), 2: Sprite(texture)}
    positions = {1: Position(2, 3)}

    render_sprites(canvas, sprites, positions)
    assert canvas.get_at((2, 3)) == (200, 0, 0, 255)
    assert canvas.get_at((5, 6)) == (200, 0, 0, 255)
    assert canvas.get_at((1, 3)) == BLANK
    assert canvas.get_at((6, 7)) == BLANK


def test_draw_collision_bounds_rectangle_outline():
    canvas = _canvas(100, 100)
    collider = Collider.rectangle(20, 10, (10, 5), True)
    draw_collision_bounds(canvas, {1: Position(30, 40)}, {1: collider})
    assert canvas.get_at((30, 40)) == ORANGE
    assert canvas.get_at((40, 45)) == BLANK


def test_draw_collision_bounds_rectangle_filled_when_colliding():
    canvas = _canvas(100, 100)
    collider = Collider.rectangle(20, 10, (10, 5), True)
    collider.add_collision(2)
    draw_collision_bounds(canvas, {1: Position(30, 40)}, {1: collider})
    assert canvas.get_at((40, 45)) == COLLIDING_COLOR


def test_draw_collision_bounds_circle():
    canvas = _canvas(100, 100)
    idle = Collider.circle(8, (8, 8), True)
    hit = Collider.circle(8, (8, 8), True)
    hit.add_collision(1)
    draw_collision_bounds(
        canvas, {1: Position(10, 10), 2: Position(60, 60)}, {1: idle, 2: hit}
    )
    assert canvas.get_at((18, 18)) == BLANK
    assert canvas.get_at((68, 68)) == COLLIDING_COLOR


def test_draw_collision_bounds_skips_entities_without_position():
    canvas = _canvas(100, 100)
    collider = Collider.rectangle(20, 10, (10, 5), True)
    collider.add_collision(2)
    draw_collision_bounds(canvas, {}, {1: collider})
    assert pygame.transform.average_color(canvas) == BLANK


def test_draw_health_bar_frame_only_without_health():
    canvas = _canvas()
    draw_health_bar(canvas, None)
    assert canvas.get_at((10, 10))[:3] == RAYWHITE
    assert canvas.get_at((40, 17)) == BLANK


@pytest.mark.parametrize("max_health", [100, 50])
def test_draw_health_bar_fill_tracks_current_health(max_health):
    canvas = _canvas()
    health = Health(max_health)
    draw_health_bar(canvas, health)
    assert canvas.get_at((40, 17))[:3] == HEALTH_BAR_COLOR

    damaged = _canvas()
    health.current_health = 5
    draw_health_bar(damaged, health)
    assert damaged.get_at((40, 17)) == BLANK
    assert damaged.get_at((20, 17))[:3] == HEALTH_BAR_COLOR


def test_draw_health_bar_dead_player_has_no_fill():
    canvas = _canvas()
    health = Health(100)
    health.current_health = -20
    draw_health_bar(canvas, health)
    assert canvas.get_at((20, 17)) == BLANK
    assert canvas.get_at((10, 10))[:3] == RAYWHITE