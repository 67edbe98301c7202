"""An entity-component-system framework for game logic: transforms, state machines, timing, collision, physics, input, camera and scenes."""

__version__ = "0.1.0"