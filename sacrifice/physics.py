"""Movement, collision detection and map-boundary systems."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from sacrifice.components import (
    Collider,
    ColliderShape,
    EntityTag,
    Position,
    Tag,
    Velocity,
)

logger = logging.getLogger(__name__)

Vector2 = tuple[float, float]


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


def check_collision_recs(a: Rectangle, b: Rectangle) -> bool:
    """Tell whether two rectangles overlap; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def check_collision_circle_rec(center: Vector2, radius: float, rec: Rectangle) -> bool:
    """Tell whether a circle and a rectangle overlap."""
    half_w = rec.width / 2.0
    half_h = rec.height / 2.0
    dx = abs(center[0] - (rec.x + half_w))
    dy = abs(center[1] - (rec.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_distance_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_distance_sq <= radius * radius


def check_collision_circles(
    center1: Vector2, radius1: float, center2: Vector2, radius2: float
) -> bool:
    """Tell whether two circles overlap or touch."""
    dx = center2[0] - center1[0]
    dy = center2[1] - center1[1]
    return dx * dx + dy * dy <= (radius1 + radius2) ** 2


def get_collision_rec(a: Rectangle, b: Rectangle) -> Rectangle:
    """Return the overlapping area of two rectangles, or an empty one at the origin."""
    left = max(a.x, b.x)
    right = min(a.x + a.width, b.x + b.width)
    top = max(a.y, b.y)
    bottom = min(a.y + a.height, b.y + b.height)
    if left < right and top < bottom:
        return Rectangle(left, top, right - left, bottom - top)
    return Rectangle(0.0, 0.0, 0.0, 0.0)


def _rect_of(position: Position, collider: Collider) -> Rectangle:
    return Rectangle(position.x, position.y, collider.width, collider.height)


def _circle_center(position: Position, collider: Collider) -> Vector2:
    return (position.x + collider.offset[0], position.y + collider.offset[1])


def _circle_on_rect(
    circle_pos: Position, circle: Collider, rect_pos: Position, rect: Collider
) -> bool:
    return check_collision_circle_rec(
        _circle_center(circle_pos, circle), circle.radius, _rect_of(rect_pos, rect)
    )


def _push_out_of_wall(
    our_position: Position,
    our_collider: Collider,
    their_position: Position,
    their_collider: Collider,
) -> None:
    overlap = get_collision_rec(
        _rect_of(our_position, our_collider), _rect_of(their_position, their_collider)
    )
    if overlap.width < overlap.height:
        if our_position.x > their_position.x:
            our_position.x += overlap.width
        else:
            our_position.x -= overlap.width
    else:
        if our_position.y > their_position.y:
            our_position.y += overlap.height
        else:
            our_position.y -= overlap.height


def update_movement(
    positions: Mapping[int, Position], velocities: Mapping[int, Velocity]
) -> None:
    """Add each entity's velocity to its position."""
    for entity, position in positions.items():
        velocity = velocities.get(entity)
        if velocity is None:
            continue
        position.x += velocity.x
        position.y += velocity.y


def update_colliders(
    positions: Mapping[int, Position],
    colliders: Mapping[int, Collider],
    tags: Mapping[int, Tag],
) -> None:
    """Recompute every collider's collisions and push players out of walls."""
    entities = sorted(colliders)
    for i in entities:
        our_collider = colliders[i]
        our_position = positions.get(i)
        if our_position is None:
            logger.error("Collider %u has no position component", i)
            continue

        our_collider.clear_collisions()

        for j in entities:
            their_position = positions.get(j)
            if i == j or their_position is None:
                continue
            their_collider = colliders[j]

            ours = our_collider.shape_type
            theirs = their_collider.shape_type
            detected = False

            if ours is ColliderShape.RECTANGLE and theirs is ColliderShape.RECTANGLE:
                detected = check_collision_recs(
                    _rect_of(our_position, our_collider),
                    _rect_of(their_position, their_collider),
                )
                our_tag = tags.get(i)
                their_tag = tags.get(j)
                if (
                    our_tag is not None
                    and our_tag.tag == EntityTag.PLAYER
                    and their_tag is not None
                    and their_tag.tag == EntityTag.WALL
                ):
                    _push_out_of_wall(
                        our_position, our_collider, their_position, their_collider
                    )
            elif ours is ColliderShape.CIRCLE and theirs is ColliderShape.RECTANGLE:
                detected = _circle_on_rect(
                    our_position, our_collider, their_position, their_collider
                )
            elif ours is ColliderShape.RECTANGLE and theirs is ColliderShape.CIRCLE:
                detected = _circle_on_rect(
                    their_position, their_collider, our_position, our_collider
                )
            elif ours is ColliderShape.CIRCLE and theirs is ColliderShape.CIRCLE:
                detected = check_collision_circles(
                    _circle_center(our_position, our_collider),
                    our_collider.radius,
                    _circle_center(their_position, their_collider),
                    their_collider.radius,
                )

            if detected:
                our_collider.add_collision(j)


def update_map_bounds(
    positions: Mapping[int, Position],
    colliders: Mapping[int, Collider],
    map_size: Vector2,
) -> None:
    """Keep colliders that are bound to the map inside it."""
    map_w, map_h = map_size
    for entity, position in positions.items():
        collider = colliders.get(entity)
        if collider is None or not collider.is_bound_to_map:
            continue

        if collider.shape_type is ColliderShape.RECTANGLE:
            if position.x < 0:
                position.x = 0
            elif position.x + collider.width > map_w:
                position.x = map_w - collider.width
            if position.y < 0:
                position.y = 0
            elif position.y + collider.height > map_h:
                position.y = map_h - collider.height
        elif collider.shape_type is ColliderShape.CIRCLE:
            off_x, off_y = collider.offset
            if position.x <= 0:
                position.x = 0
            elif position.x + off_x + collider.radius >= map_w:
                position.x = map_w - collider.radius - off_x
            if position.y <= 0:
                position.y = 0
            elif position.y + off_y + collider.radius >= map_h:
                position.y = map_h - collider.radius - off_y