"""Component data types attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from sacrifice.ecs import MAX_COLLISIONS


class EntityTag(IntEnum):
    """Broad role of an entity."""

    PLAYER = 0
    WALL = 1 << 0
    ENEMY = 1 << 1


_TAG_NAMES = {
    EntityTag.PLAYER: "Player",
    EntityTag.WALL: "Wall",
    EntityTag.ENEMY: "Projectile",
}


def tag_name(tag: int) -> str:
    """Return the display name of a tag, or "Unknown"."""
    try:
        return _TAG_NAMES[EntityTag(tag)]
    except ValueError:
        return "Unknown"


@dataclass
class Tag:
    tag: EntityTag


@dataclass
class Position:
    x: float
    y: float


@dataclass
class Velocity:
    x: float
    y: float


class ColliderShape(Enum):
    RECTANGLE = 0
    CIRCLE = 1


@dataclass
class Collider:
    """A rectangle or circle collision shape with the entities it touches."""

    shape_type: ColliderShape
    offset: tuple[float, float]
    is_bound_to_map: bool
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0
    colliding_with: list[int] = field(default_factory=list)

    @classmethod
    def rectangle(
        cls,
        width: float,
        height: float,
        offset: tuple[float, float],
        is_bound_to_map: bool,
    ) -> Collider:
        return cls(
            shape_type=ColliderShape.RECTANGLE,
            offset=tuple(offset),
            is_bound_to_map=is_bound_to_map,
            width=width,
            height=height,
        )

    @classmethod
    def circle(
        cls, radius: float, offset: tuple[float, float], is_bound_to_map: bool
    ) -> Collider:
        return cls(
            shape_type=ColliderShape.CIRCLE,
            offset=tuple(offset),
            is_bound_to_map=is_bound_to_map,
            radius=radius,
        )

    @property
    def colliding_count(self) -> int:
        return len(self.colliding_with)

    def clear_collisions(self) -> None:
        """Forget every recorded collision."""
        self.colliding_with.clear()

    def add_collision(self, entity: int) -> None:
        """Record a collision with another entity."""
        if len(self.colliding_with) >= MAX_COLLISIONS:
            raise OverflowError(f"more than {MAX_COLLISIONS} collisions recorded")
        self.colliding_with.append(entity)


@dataclass
class Harm:
    damage: int


@dataclass
class Health:
    """Hit points with a short invincibility window after each hit."""

    max_health: int
    current_health: int = field(init=False)
    is_invincible: bool = False
    invincibility_duration: float = 1.0
    invincibility_timer: float = 0.0

    def __post_init__(self) -> None:
        self.current_health = self.max_health

    def receive_damage(self, harm: Harm) -> None:
        """Take the harm's damage unless currently invincible."""
        if self.is_invincible:
            return
        self.current_health -= harm.damage
        self.is_invincible = True
        self.invincibility_timer = 0.0

    def update_invincibility(self, dt: float) -> None:
        """Advance the invincibility timer by dt seconds."""
        if not self.is_invincible:
            return
        self.invincibility_timer += dt
        if self.invincibility_timer >= self.invincibility_duration:
            self.is_invincible = False
            self.invincibility_timer = 0.0


@dataclass
class ChaseBehaviour:
    target: int


@dataclass
class Sprite:
    texture: Any