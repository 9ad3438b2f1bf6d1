import math

import pygame
import pytest

from sacrifice.components import EntityTag
from sacrifice.ecs import ComponentType
from sacrifice.world import DebugData, World, build_world, movement_input

WIDTH = 1280
HEIGHT = 720


@pytest.fixture
def textures():
    return {
        "cat": pygame.Surface((32, 32)),
        "wall": pygame.Surface((16, 64)),
        "rotund": pygame.Surface((40, 40)),
    }


@pytest.fixture
def world(textures):
    return build_world(WIDTH, HEIGHT, textures)


def _entity_with_tag(world, tag):
    for entity, component in world.ecs.components(ComponentType.TAG).items():
        if component.tag == tag:
            return entity
    raise LookupError(tag)


def test_debug_data_defaults():
    data = DebugData()
    assert data.show_main_window is False
    assert data.show_entities_window is True
    assert data.show_entity_inspector_window is True
    assert data.currently_inspected_entity_id == 0


@pytest.mark.parametrize(
    "keys, expected",
    [
        ((False, False, False, False), (0.0, 0.0)),
        ((True, False, False, False), (0.0, -1.0)),
        ((False, True, False, False), (0.0, 1.0)),
        ((False, False, True, False), (-1.0, 0.0)),
        ((False, False, False, True), (1.0, 0.0)),
        ((True, True, True, True), (0.0, 0.0)),
        ((True, False, False, True), (1.0, -1.0)),
    ],
)
def test_movement_input(keys, expected):
    assert movement_input(*keys) == expected


def test_build_world_creates_three_active_entities(world):
    assert world.ecs.active_entities() == [1, 2, 3]
    assert world.player == 1


def test_build_world_player_setup(world):
    tag = world.ecs.get(world.player, ComponentType.TAG)
    assert tag.tag == EntityTag.PLAYER
    position = world.ecs.get(world.player, ComponentType.POSITION)
    assert (position.x, position.y) == (WIDTH // 2, HEIGHT // 2)
    assert world.player_health.current_health == 100
    assert world.player_move_speed == 6.0
    collider = world.ecs.get(world.player, ComponentType.COLLIDER)
    assert (collider.width, collider.height) == (32, 32)
    assert collider.offset == (16, 16)


def test_build_world_wall_and_enemy(world):
    wall = _entity_with_tag(world, EntityTag.WALL)
    wall_position = world.ecs.get(wall, ComponentType.POSITION)
    assert (wall_position.x, wall_position.y) == (200, HEIGHT // 2 - 75)
    assert world.ecs.get(wall, ComponentType.VELOCITY) is None

    enemy = _entity_with_tag(world, EntityTag.ENEMY)
    enemy_position = world.ecs.get(enemy, ComponentType.POSITION)
    assert (enemy_position.x, enemy_position.y) == (WIDTH - 300, HEIGHT // 2)
    assert world.ecs.get(enemy, ComponentType.HARM).damage == 10
    assert world.ecs.get(enemy, ComponentType.CHASE_BEHAVIOUR).target == world.player
    assert world.ecs.get(enemy, ComponentType.COLLIDER).radius == 20


def test_build_world_requires_all_textures(textures):
    del textures["wall"]
    with pytest.raises(KeyError):
        build_world(WIDTH, HEIGHT, textures)


def test_step_moves_player_by_speed(world):
    position = world.ecs.get(world.player, ComponentType.POSITION)
    start_x, start_y = position.x, position.y
    world.step(movement_input(False, False, False, True), 1 / 60)
    assert position.x == start_x + world.player_move_speed
    assert position.y == start_y
    assert world.player_velocity.x == world.player_move_speed


def test_step_enemy_closes_in_on_player(world):
    enemy = _entity_with_tag(world, EntityTag.ENEMY)
    player_pos = world.ecs.get(world.player, ComponentType.POSITION)
    enemy_pos = world.ecs.get(enemy, ComponentType.POSITION)

    def distance():
        return math.hypot(player_pos.x - enemy_pos.x, player_pos.y - enemy_pos.y)

    before = distance()
    world.step((0.0, 0.0), 1 / 60)
    world.step((0.0, 0.0), 1 / 60)
    assert distance() < before


def test_step_enemy_touch_damages_with_invincibility(world):
    enemy = _entity_with_tag(world, EntityTag.ENEMY)
    player_pos = world.ecs.get(world.player, ComponentType.POSITION)
    enemy_pos = world.ecs.get(enemy, ComponentType.POSITION)
    enemy_pos.x, enemy_pos.y = player_pos.x, player_pos.y
    health = world.player_health
    damage = world.ecs.get(enemy, ComponentType.HARM).damage

    world.step((0.0, 0.0), 0.1)
    assert health.current_health == health.max_health - damage
    assert health.is_invincible

    world.step((0.0, 0.0), 0.1)
    assert health.current_health == health.max_health - damage

    world.step((0.0, 0.0), health.invincibility_duration)
    assert health.current_health == health.max_health - 2 * damage


def test_step_keeps_player_inside_map(world):
    for _ in range(400):
        world.step(movement_input(True, False, True, False), 1 / 60)
    position = world.ecs.get(world.player, ComponentType.POSITION)
    assert position.x >= 0
    assert position.y >= 0


def test_world_without_player_velocity_still_steps(textures):
    world = build_world(WIDTH, HEIGHT, textures)
    bare = World(ecs=world.ecs, width=WIDTH, height=HEIGHT, player=2)
    wall_pos = world.ecs.get(2, ComponentType.POSITION)
    before = (wall_pos.x, wall_pos.y)
    bare.step((1.0, 1.0), 1 / 60)
    assert bare.player_velocity is None
    assert (wall_pos.x, wall_pos.y) == before