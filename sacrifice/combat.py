"""Damage dealt between colliding entities."""

from __future__ import annotations

from typing import Mapping

from sacrifice.components import Collider, Harm, Health


def update_combat(
    colliders: Mapping[int, Collider],
    harms: Mapping[int, Harm],
    healths: Mapping[int, Health],
    dt: float,
) -> None:
    """Tick invincibility and apply harm from every entity a health-bearer touches."""
    for entity in sorted(colliders):
        health = healths.get(entity)
        if health is None:
            continue

        health.update_invincibility(dt)

        for other in colliders[entity].colliding_with:
            harm = harms.get(other)
            if harm is not None:
                health.receive_damage(harm)