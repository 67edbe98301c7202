"""Keyboard and mouse state tracking for entities with an input component."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from starforge.components import InputComponent, KeyState
from starforge.ecs import Entity, Manager, System

__all__ = ["InputSystem"]

KeyReader = Callable[[int], bool]
CursorReader = Callable[[], Optional[Tuple[float, float]]]


def _no_key_pressed(key_code: int) -> bool:
    return False


def _no_cursor() -> Optional[Tuple[float, float]]:
    return None


def _next_state(state: KeyState, pressed: bool) -> KeyState:
    if pressed:
        return KeyState.PUSH if state in (KeyState.NONE, KeyState.UP) else KeyState.DOWN
    return KeyState.UP if state in (KeyState.DOWN, KeyState.PUSH) else KeyState.NONE


class InputSystem(System):
    """Tracks key and mouse-button states.

    ``key_reader(code)`` tells whether a key or mouse button is held down;
    ``cursor_reader()`` returns the cursor position, or None when unavailable.
    """

    def __init__(
        self,
        manager: Manager,
        key_reader: Optional[KeyReader] = None,
        cursor_reader: Optional[CursorReader] = None,
    ) -> None:
        self.manager = manager
        self._read_key = key_reader if key_reader is not None else _no_key_pressed
        self._read_cursor = cursor_reader if cursor_reader is not None else _no_cursor
        self.lock_cursor = True
        self.cursor_visible = True

    def _input_entities(self) -> list[Entity]:
        return [
            e
            for e in self.manager.entities
            if self.manager.has_component(e, InputComponent) and e.is_alive()
        ]

    def _first_input(self) -> InputComponent:
        entities = self._input_entities()
        if not entities:
            raise LookupError("no live entity with an InputComponent")
        return self.manager.get_component(entities[0], InputComponent)

    def init(self) -> None:
        self.cursor_visible = True

    def update(self, delta_time: float) -> None:
        for _ in self._input_entities():
            self.update_key_states()
            self.update_mouse_position()

    def update_key_states(self) -> None:
        """Advance every tracked key of every input component by one frame."""
        for entity in self._input_entities():
            component = self.manager.get_component(entity, InputComponent)
            for key, state in list(component.key_states.items()):
                component.key_states[key] = _next_state(state, self._read_key(key))

    def update_mouse_position(self) -> None:
        for entity in self._input_entities():
            component = self.manager.get_component(entity, InputComponent)
            cursor = self._read_cursor()
            if cursor is not None:
                component.mouse_x, component.mouse_y = float(cursor[0]), float(cursor[1])

    def get_mouse_button_state(self, button: int) -> KeyState:
        """Advance and return the state of ``button``; starts tracking it if new."""
        component = self._first_input()
        pressed = self._read_key(button)
        state = component.key_states.get(button)
        if state is None:
            new_state = KeyState.PUSH if pressed else KeyState.NONE
        else:
            new_state = _next_state(state, pressed)
        component.key_states[button] = new_state
        return new_state

    def get_key_state(self, key_code: int) -> KeyState:
        """Return the tracked state of ``key_code``; starts tracking it if new."""
        component = self._first_input()
        return component.key_states.setdefault(key_code, KeyState.NONE)

    def toggle_cursor_lock(self) -> None:
        self.cursor_visible = not self.lock_cursor

    def get_mouse_position(self) -> Tuple[float, float]:
        cursor = self._read_cursor()
        if cursor is None:
            return (0.0, 0.0)
        return (float(cursor[0]), float(cursor[1]))