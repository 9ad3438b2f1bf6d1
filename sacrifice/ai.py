"""Behaviour systems for non-player entities."""

from __future__ import annotations

import logging
import math
from typing import Mapping

from sacrifice.components import ChaseBehaviour, Position, Velocity

logger = logging.getLogger(__name__)

CHASE_SPEED = 3.0


def update_chase_behaviours(
    positions: Mapping[int, Position],
    velocities: Mapping[int, Velocity],
    chase_behaviours: Mapping[int, ChaseBehaviour],
) -> None:
    """Point each chaser's velocity at its target at a fixed speed."""
    for entity in sorted(chase_behaviours):
        position = positions.get(entity)
        velocity = velocities.get(entity)
        if position is None or velocity is None:
            continue

        target_position = positions.get(chase_behaviours[entity].target)
        if target_position is None:
            logger.error("chase target entity not found for entity %u", entity)
            continue

        dx = target_position.x - position.x
        dy = target_position.y - position.y
        length = math.hypot(dx, dy)
        if length > 0.0:
            dx /= length
            dy /= length

        velocity.x = dx * CHASE_SPEED
        velocity.y = dy * CHASE_SPEED