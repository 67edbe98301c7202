"""A generic finite state machine with actions, conditions and transitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

__all__ = [
    "Action",
    "StateBehaviour",
    "StateCondition",
    "StateMachine",
    "StateTransition",
]

Owner = TypeVar("Owner")
C = TypeVar("C", bound="StateCondition[Any]")


class Action(ABC, Generic[Owner]):
    """Work done while a state is active."""

    @abstractmethod
    def start(self, owner: Owner) -> None:
        """Called when the state is entered."""

    @abstractmethod
    def update(self, owner: Owner) -> None:
        """Called every update while the state is active."""

    @abstractmethod
    def end(self, owner: Owner) -> None:
        """Called when the state is left."""


class StateCondition(ABC, Generic[Owner]):
    """A test that a transition needs to pass; ``expected`` selects the outcome."""

    def __init__(self) -> None:
        self.expected: bool = True

    @abstractmethod
    def on_test(self, owner: Owner) -> bool:
        """Evaluate the raw condition."""

    def test(self, owner: Owner) -> bool:
        """Return whether the condition's result equals ``expected``."""
        return self.expected == bool(self.on_test(owner))


class StateTransition(Generic[Owner]):
    """A move to another state, taken when all conditions pass."""

    def __init__(self, transition_state: int) -> None:
        self._transition_state = transition_state
        self._conditions: list[StateCondition[Owner]] = []

    @property
    def transition_state(self) -> int:
        return self._transition_state

    @property
    def conditions(self) -> tuple[StateCondition[Owner], ...]:
        return tuple(self._conditions)

    def add_condition(self, condition_type: type[C]) -> C:
        """Create a condition of the given type, attach it and return it."""
        if not (isinstance(condition_type, type) and issubclass(condition_type, StateCondition)):
            raise TypeError("condition_type must be a subclass of StateCondition")
        condition = condition_type()
        self._conditions.append(condition)
        return condition

    def try_transition(self, owner: Owner) -> bool:
        """Return True when every condition passes."""
        return all(condition.test(owner) for condition in self._conditions)


class StateBehaviour(Generic[Owner]):
    """The actions and outgoing transitions of one state."""

    def __init__(self, owner: Owner) -> None:
        self.owner = owner
        self._actions: list[Action[Owner]] = []
        self._transitions: list[StateTransition[Owner]] = []

    def start(self) -> None:
        for action in self._actions:
            action.start(self.owner)

    def update(self) -> Optional[int]:
        """Run the actions, then return the first passing transition's state, if any."""
        for action in self._actions:
            action.update(self.owner)
        for transition in self._transitions:
            if transition.try_transition(self.owner):
                return transition.transition_state
        return None

    def end(self) -> None:
        for action in self._actions:
            action.end(self.owner)

    def add_action(self, action: Action[Owner]) -> None:
        self._actions.append(action)

    def create_transition(self, state: int) -> StateTransition[Owner]:
        transition: StateTransition[Owner] = StateTransition(state)
        self._transitions.append(transition)
        return transition


class StateMachine(Generic[Owner]):
    """Runs one behaviour at a time out of a fixed number of states."""

    def __init__(self, owner: Owner, state_count: int) -> None:
        if state_count < 0:
            raise ValueError("state_count must not be negative")
        self.owner = owner
        self._behaviours: list[Optional[StateBehaviour[Owner]]] = [None] * state_count
        self._current: Optional[int] = None

    @property
    def current_state(self) -> Optional[int]:
        """The active state, or None before any state was set."""
        return self._current

    def _check_index(self, state: int) -> None:
        if not 0 <= state < len(self._behaviours):
            raise IndexError(f"state {state} out of range")

    def set_state(self, state: int) -> None:
        """Leave the current state and enter ``state``."""
        self._check_index(state)
        behaviour = self._behaviours[state]
        if behaviour is None:
            raise LookupError(f"no behaviour for state {state}")
        if self._current is not None:
            current = self._behaviours[self._current]
            if current is not None:
                current.end()
        self._current = state
        behaviour.start()

    def update(self) -> None:
        """Update the active behaviour and follow any transition it reports."""
        if self._current is None:
            return
        behaviour = self._behaviours[self._current]
        if behaviour is None:
            return
        next_state = behaviour.update()
        if next_state is None:
            return
        self.set_state(next_state)

    def create_behaviour(self, state: int) -> StateBehaviour[Owner]:
        """Create and register the behaviour for ``state``."""
        self._check_index(state)
        behaviour: StateBehaviour[Owner] = StateBehaviour(self.owner)
        self._behaviours[state] = behaviour
        return behaviour