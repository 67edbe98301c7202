"""Moves entities by their rigid-body velocity."""

from __future__ import annotations

from starforge.components import Rigidbody
from starforge.ecs import Manager, System

__all__ = ["DESTROY_HEIGHT", "PhysicsSystem"]

DESTROY_HEIGHT = 200.0


class PhysicsSystem(System):
    """Integrates velocity into position and destroys entities above a height limit."""

    def __init__(self, manager: Manager) -> None:
        self.manager = manager

    def init(self) -> None:
        """Nothing to prepare."""

    def update(self, delta_time: float) -> None:
        for entity in self.manager.entities:
            if not (self.manager.has_component(entity, Rigidbody) and entity.is_alive()):
                continue
            velocity = self.manager.get_component(entity, Rigidbody).velocity
            x, y, z = (float(v) for v in entity.transform.position)
            entity.transform.set_position(
                x + velocity.x * delta_time,
                y + velocity.y * delta_time,
                z + velocity.z * delta_time,
            )
            if entity.transform.position[1] > DESTROY_HEIGHT:
                entity.destroy()