"""Broad-phase grid culling with sphere and box narrow-phase collision tests."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

from starforge.components import AABB, Collider, SphereCollider
from starforge.ecs import Entity, Manager, System
from starforge.utils import Vector3f

__all__ = ["CollisionSystem", "DEFAULT_CELL_SIZE"]

DEFAULT_CELL_SIZE = 10


class CollisionSystem(System):
    """Detects overlapping entities and notifies their scripts."""

    def __init__(self, manager: Manager) -> None:
        self.manager = manager
        self.cell_size = DEFAULT_CELL_SIZE

    @staticmethod
    def compute_aabb(entity: Entity, collider: Collider) -> AABB:
        """World-space box of ``collider`` on ``entity``."""
        px, py, pz = (float(v) for v in entity.transform.position)
        cx = px + collider.offset.x
        cy = py + collider.offset.y
        cz = pz + collider.offset.z
        hx = collider.size.x * 0.5
        hy = collider.size.y * 0.5
        hz = collider.size.z * 0.5
        return AABB(
            min=Vector3f(cx - hx, cy - hy, cz - hz),
            max=Vector3f(cx + hx, cy + hy, cz + hz),
        )

    @staticmethod
    def intersect_aabb(a: AABB, b: AABB) -> bool:
        """True when the boxes overlap or touch."""
        return (
            a.min.x <= b.max.x
            and a.max.x >= b.min.x
            and a.min.y <= b.max.y
            and a.max.y >= b.min.y
            and a.min.z <= b.max.z
            and a.max.z >= b.min.z
        )

    @staticmethod
    def sphere_intersect(
        sphere1: SphereCollider,
        pos1: Sequence[float],
        sphere2: SphereCollider,
        pos2: Sequence[float],
    ) -> bool:
        """True when the spheres overlap or touch."""
        x1, y1, z1 = (float(v) for v in pos1)
        x2, y2, z2 = (float(v) for v in pos2)
        dx = (x1 + sphere1.offset.x) - (x2 + sphere2.offset.x)
        dy = (y1 + sphere1.offset.y) - (y2 + sphere2.offset.y)
        dz = (z1 + sphere1.offset.z) - (z2 + sphere2.offset.z)
        radius_sum = sphere1.radius + sphere2.radius
        return dx * dx + dy * dy + dz * dz <= radius_sum * radius_sum

    @staticmethod
    def is_neighbor(a: Entity, b: Entity) -> bool:
        """True when the grid cells of ``a`` and ``b`` are equal or adjacent."""
        ga, gb = a.grid_position, b.grid_position
        return all(abs(cb - ca) <= 1 for ca, cb in zip(ga, gb))

    def init(self) -> None:
        """Nothing to prepare."""

    def _collides(self, a: Entity, b: Entity) -> bool:
        manager = self.manager
        if manager.has_component(a, SphereCollider) and manager.has_component(b, SphereCollider):
            return self.sphere_intersect(
                manager.get_component(a, SphereCollider),
                a.transform.position,
                manager.get_component(b, SphereCollider),
                b.transform.position,
            )
        if manager.has_component(a, Collider) and manager.has_component(b, Collider):
            return self.intersect_aabb(
                self.compute_aabb(a, manager.get_component(a, Collider)),
                self.compute_aabb(b, manager.get_component(b, Collider)),
            )
        return False

    def update(self, delta_time: float) -> None:
        """Refresh grid cells, test neighbouring pairs and call ``on_collide``."""
        entities = self.manager.entities
        for entity in entities:
            entity.update_grid(self.cell_size)

        for a, b in combinations(entities, 2):
            if not self.is_neighbor(a, b):
                continue
            if self._collides(a, b):
                for script in a.scripts:
                    script.on_collide(b)
                for script in b.scripts:
                    script.on_collide(a)