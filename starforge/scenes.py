"""Scenes and a manager that switches between them."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

__all__ = ["Scene", "SceneManager"]

_log = logging.getLogger(__name__)


class Scene(ABC):
    """A unit of game content that can load, update and render."""

    @abstractmethod
    def load_resources(self, device: Any) -> None:
        """Load what the scene needs on ``device``."""

    @abstractmethod
    def update(self, delta_time: float) -> None:
        """Advance the scene."""

    @abstractmethod
    def render(self) -> None:
        """Draw the scene."""


class SceneManager:
    """Holds named scenes and forwards updates to the active one."""

    def __init__(self) -> None:
        self._scenes: dict[str, Optional[Scene]] = {}
        self._active: Optional[Scene] = None
        self._name = ""

    @property
    def active_scene(self) -> Optional[Scene]:
        return self._active

    def add_scene(self, name: str, scene: Optional[Scene]) -> None:
        """Register ``scene`` under ``name``; an existing name is kept as it is."""
        self._scenes.setdefault(name, scene)

    def set_active_scene(self, name: str, device: Any) -> bool:
        """Activate the scene ``name`` and load its resources.

        Returns False when no such scene exists or it is empty.
        """
        if name not in self._scenes:
            _log.error("Scene '%s' not found!", name)
            return False
        self._active = self._scenes[name]
        self._name = name
        if self._active is None:
            return False
        self._active.load_resources(device)
        return True

    def update(self, delta_time: float) -> None:
        if self._active is not None:
            self._active.update(delta_time)

    @property
    def scene_name(self) -> str:
        """Name of the active scene, or "No Scene"."""
        return self._name or "No Scene"

    def window_title(self, fps: float) -> str:
        """Window caption showing the scene name and frame rate."""
        return f"Scene: {self._name} | {fps:.6f} FPS"

    def render(self, renderable: Any) -> None:
        """Run ``renderable`` when a scene is active."""
        if self._active is not None:
            renderable.run()