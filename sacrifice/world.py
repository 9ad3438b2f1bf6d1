"""Game world setup, player input and the per-frame simulation step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from sacrifice.ai import update_chase_behaviours
from sacrifice.combat import update_combat
from sacrifice.components import (
    ChaseBehaviour,
    Collider,
    EntityTag,
    Harm,
    Health,
    Position,
    Sprite,
    Tag,
    Velocity,
)
from sacrifice.ecs import ECS, ComponentType
from sacrifice.physics import (
    update_colliders,
    update_map_bounds,
    update_movement,
)

PLAYER_MOVE_SPEED = 6.0
PLAYER_MAX_HEALTH = 100
ENEMY_DAMAGE = 10


@dataclass
class DebugData:
    """State of the debug overlay windows."""

    show_main_window: bool = False
    show_entities_window: bool = True
    show_entity_inspector_window: bool = True
    currently_inspected_entity_id: int = 0


def movement_input(up: bool, down: bool, left: bool, right: bool) -> tuple[float, float]:
    """Turn four direction keys into a movement vector; opposite keys cancel."""
    x = 0.0
    y = 0.0
    if up:
        y -= 1.0
    if down:
        y += 1.0
    if left:
        x -= 1.0
    if right:
        x += 1.0
    return (x, y)


@dataclass
class World:
    """All entities of a running game plus the settings that drive them."""

    ecs: ECS
    width: int
    height: int
    player: int
    player_move_speed: float = PLAYER_MOVE_SPEED
    should_draw_collision_bounds: bool = False
    debug_data: DebugData = field(default_factory=DebugData)

    @property
    def player_health(self) -> Health | None:
        return self.ecs.get(self.player, ComponentType.HEALTH)

    @property
    def player_velocity(self) -> Velocity | None:
        return self.ecs.get(self.player, ComponentType.VELOCITY)

    def step(self, movement: tuple[float, float], dt: float) -> None:
        """Advance the simulation by one frame of dt seconds."""
        velocity = self.player_velocity
        if velocity is not None:
            velocity.x = movement[0] * self.player_move_speed
            velocity.y = movement[1] * self.player_move_speed

        ecs = self.ecs
        positions = ecs.components(ComponentType.POSITION)
        velocities = ecs.components(ComponentType.VELOCITY)
        colliders = ecs.components(ComponentType.COLLIDER)

        update_movement(positions, velocities)
        update_chase_behaviours(
            positions, velocities, ecs.components(ComponentType.CHASE_BEHAVIOUR)
        )
        update_colliders(positions, colliders, ecs.components(ComponentType.TAG))
        update_map_bounds(positions, colliders, (self.width, self.height))
        update_combat(
            colliders,
            ecs.components(ComponentType.HARM),
            ecs.components(ComponentType.HEALTH),
            dt,
        )


def _size_of(texture: Any) -> tuple[int, int]:
    width, height = texture.get_size()
    return int(width), int(height)


def build_world(width: int, height: int, textures: Mapping[str, Any]) -> World:
    """Create the starting level: a player, a wall and a chasing enemy.

    ``textures`` maps "cat", "wall" and "rotund" to images with ``get_size()``.
    """
    cat = textures["cat"]
    wall_texture = textures["wall"]
    rotund_texture = textures["rotund"]
    cat_w, cat_h = _size_of(cat)
    wall_w, wall_h = _size_of(wall_texture)
    rotund_w, rotund_h = _size_of(rotund_texture)

    ecs = ECS()
    player = ecs.new_entity()
    wall = ecs.new_entity()
    rotund = ecs.new_entity()

    ecs.attach(player, Tag(EntityTag.PLAYER), ComponentType.TAG)
    ecs.attach(player, Position(width // 2, height // 2), ComponentType.POSITION)
    ecs.attach(player, Velocity(0.0, 0.0), ComponentType.VELOCITY)
    ecs.attach(player, Sprite(cat), ComponentType.SPRITE)
    ecs.attach(
        player,
        Collider.rectangle(cat_w, cat_h, (cat_w // 2, cat_h // 2), True),
        ComponentType.COLLIDER,
    )
    ecs.attach(player, Health(PLAYER_MAX_HEALTH), ComponentType.HEALTH)

    ecs.attach(wall, Tag(EntityTag.WALL), ComponentType.TAG)
    ecs.attach(wall, Position(200, height // 2 - 75), ComponentType.POSITION)
    ecs.attach(wall, Sprite(wall_texture), ComponentType.SPRITE)
    ecs.attach(
        wall,
        Collider.rectangle(wall_w, wall_h, (wall_w // 2, wall_h // 2), True),
        ComponentType.COLLIDER,
    )

    ecs.attach(rotund, Tag(EntityTag.ENEMY), ComponentType.TAG)
    ecs.attach(rotund, Position(width - 300, height // 2), ComponentType.POSITION)
    ecs.attach(rotund, Velocity(0.0, 0.0), ComponentType.VELOCITY)
    ecs.attach(rotund, Sprite(rotund_texture), ComponentType.SPRITE)
    ecs.attach(
        rotund,
        Collider.circle(rotund_w // 2, (rotund_w // 2, rotund_h // 2), True),
        ComponentType.COLLIDER,
    )
    ecs.attach(rotund, Harm(ENEMY_DAMAGE), ComponentType.HARM)
    ecs.attach(rotund, ChaseBehaviour(player), ComponentType.CHASE_BEHAVIOUR)

    return World(ecs=ecs, width=width, height=height, player=player)