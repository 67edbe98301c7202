"""Gameplay scripts: score keeping, heads-up display and a follow camera."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from starforge.components import CameraComponent
from starforge.ecs import Entity, Manager, Script

__all__ = ["CAMERA_OFFSET", "CameraFollowScript", "HUDScript", "ScoreScript"]

_log = logging.getLogger(__name__)

CAMERA_OFFSET = (0.0, 5.0, 10.0)


class ScoreScript(Script):
    """Scores ten points per second survived."""

    def __init__(self) -> None:
        self._score = 0
        self.survival_time = 0.0

    def init(self) -> None:
        _log.debug("Score System Initialized")
        self._score = 0
        self.survival_time = 0.0

    def update(self, delta_time: float) -> None:
        """Add to the survival time; the score is recomputed from it."""
        self.survival_time += delta_time
        self._score = int(self.survival_time * 10)

    def add_points(self, points: int) -> None:
        self._score += points
        _log.info("Gained %d points! Total score: %d", points, self._score)

    @property
    def score(self) -> int:
        return self._score


class HUDScript(Script):
    """Holds the player's health, shield and boost for display."""

    def __init__(self) -> None:
        self.player_health = 100.0
        self.shield_active = False
        self.boost_level = 1.0

    def init(self) -> None:
        _log.debug("HUD System Initialized")

    def update(self, delta_time: float) -> None:
        self.render()

    def render(self) -> str:
        """Return the HUD line for the current values."""
        shield = "Active" if self.shield_active else "Inactive"
        return (
            f"[HUD] Health: {self.player_health:g}% | Shield: {shield}"
            f" | Boost: {self.boost_level:g}x"
        )

    def set_player_health(self, health: float) -> None:
        self.player_health = health

    def set_shield_status(self, active: bool) -> None:
        self.shield_active = active

    def set_boost_level(self, level: float) -> None:
        self.boost_level = level


class CameraFollowScript(Script):
    """Keeps the camera entity at a fixed offset from a target entity."""

    def __init__(self) -> None:
        self.target: Optional[Entity] = None

    def init(self) -> None:
        _log.debug("Camera Follow Script Initialized")

    def update(self, delta_time: float) -> None:
        """Per-frame hook; following is done by ``follow``."""

    def follow(self, delta_time: float, manager: Manager) -> None:
        """Move the camera entity to the target position plus the offset.

        Raises LookupError when a target is set but no camera entity exists.
        """
        if self.target is None:
            return
        camera_entity = manager.find_entity_with_component(CameraComponent)
        if camera_entity is None:
            raise LookupError("no entity with a CameraComponent")
        x, y, z = np.asarray(self.target.transform.position, dtype=float) + np.array(CAMERA_OFFSET)
        camera_entity.transform.set_position(float(x), float(y), float(z))

    def set_target(self, player: Optional[Entity]) -> None:
        self.target = player
        _log.debug("Camera target set!")