import pytest

from starforge.components import InputComponent, KeyState
from starforge.ecs import Manager
from starforge.input import InputSystem


class Keyboard:
    def __init__(self):
        self.pressed = set()

    def __call__(self, key_code):
        return key_code in self.pressed


@pytest.fixture
def keyboard():
    return Keyboard()


@pytest.fixture
def setup(keyboard):
    manager = Manager()
    entity = manager.create_entity()
    component = manager.add_component(entity, InputComponent())
    system = manager.add_system(InputSystem, manager, keyboard, lambda: (10, 20))
    return manager, system, component


def test_unknown_key_registers_none(setup):
    _, system, component = setup
    assert system.get_key_state(ord("K")) is KeyState.NONE
    assert component.key_states[ord("K")] is KeyState.NONE


def test_key_state_cycle(setup, keyboard):
    _, system, _ = setup
    key = ord("Z")
    system.get_key_state(key)
    keyboard.pressed.add(key)
    system.update_key_states()
    assert system.get_key_state(key) is KeyState.PUSH
    system.update_key_states()
    assert system.get_key_state(key) is KeyState.DOWN
    keyboard.pressed.clear()
    system.update_key_states()
    assert system.get_key_state(key) is KeyState.UP
    system.update_key_states()
    assert system.get_key_state(key) is KeyState.NONE


def test_update_advances_keys_and_mouse(setup, keyboard):
    _, system, component = setup
    system.get_key_state(1)
    keyboard.pressed.add(1)
    system.update(0.016)
    assert component.key_states[1] is KeyState.PUSH
    assert (component.mouse_x, component.mouse_y) == (10.0, 20.0)


def test_mouse_button_first_press_then_held(setup, keyboard):
    _, system, _ = setup
    keyboard.pressed.add(0)
    assert system.get_mouse_button_state(0) is KeyState.PUSH
    assert system.get_mouse_button_state(0) is KeyState.DOWN
    keyboard.pressed.clear()
    assert system.get_mouse_button_state(0) is KeyState.UP
    assert system.get_mouse_button_state(0) is KeyState.NONE


def test_mouse_button_unpressed_new(setup):
    _, system, component = setup
    assert system.get_mouse_button_state(2) is KeyState.NONE
    assert 2 in component.key_states


def test_no_input_entity_raises(keyboard):
    manager = Manager()
    system = InputSystem(manager, keyboard, None)
    with pytest.raises(LookupError):
        system.get_key_state(1)
    with pytest.raises(LookupError):
        system.get_mouse_button_state(0)


def test_dead_entity_is_ignored(keyboard):
    manager = Manager()
    entity = manager.create_entity()
    manager.add_component(entity, InputComponent())
    entity.destroy()
    system = InputSystem(manager, keyboard, None)
    with pytest.raises(LookupError):
        system.get_key_state(1)


def test_mouse_position(setup):
    _, system, _ = setup
    assert system.get_mouse_position() == (10.0, 20.0)


def test_mouse_position_without_cursor():
    system = InputSystem(Manager(), None, None)
    assert system.get_mouse_position() == (0.0, 0.0)


def test_cursor_visibility(setup):
    _, system, _ = setup
    system.toggle_cursor_lock()
    assert system.cursor_visible is False
    system.init()
    assert system.cursor_visible is True