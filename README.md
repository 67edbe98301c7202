# starforge

starforge is a small framework for real-time game logic. It is built around
an entity-component-system (ECS) core and depends only on numpy.

## What is in the package

- **`starforge.mathhelper`** provides numeric helpers:
  - `rand_f` and `rand_int` for random numbers.
  - `lerp` and `clamp`.
  - `angle_from_xy`, which returns a polar angle in [0, 2π).
  - `spherical_to_cartesian`.
  - `inverse_transpose` and `identity4x4` for matrices.
  - `rand_unit_vec3` and `rand_hemisphere_unit_vec3` for random unit vectors.
- **`starforge.transform`** provides the `Transform` class.
  - A `Transform` holds a position, a scale and a quaternion rotation. The quaternion is stored as (x, y, z, w).
  - It keeps the combined scale × rotation × translation matrix up to date, together with the `forward`, `right` and `up` axes.
  - Its methods are `set_position`, `translate`, `lerp_position`, `set_scale`, `set_rotation`, `add_rotate`, `rotate_quaternion`, `slerp_rotation`, `look_at` and `copy`.
  - The module also has free functions: `quaternion_rotation_axis`, `quaternion_multiply`, `quaternion_normalize`, `quaternion_slerp`, `quaternion_rotation_roll_pitch_yaw`, `matrix_rotation_quaternion`, `look_at_lh` and `perspective_fov_lh`.
  - Matrices are row-major and are applied to row vectors, in a left-handed coordinate system.
- **`starforge.utils`** provides:
  - `Vector3f`. Dividing a `Vector3f` by zero gives the zero vector.
  - `Vector3i`, which is hashable and is used for grid cells.
  - `normalize` and `lerp`.
  - `format_matrix` and `format_vector`, which return text.
  - `screen_to_world_ray`. It assumes a 1920×1080 screen.
- **`starforge.timer`** provides `GameTimer`.
  - It has `reset`, `start`, `stop`, `tick`, `delta_time` and `total_time`.
  - Paused time is left out of the total.
  - The clock is pluggable; the default is `time.perf_counter`.
- **`starforge.statemachine`** provides `StateMachine`, `StateBehaviour`, `StateTransition`, `StateCondition` and `Action`.
- **`starforge.ecs`** provides `Entity`, `Component`, `System` and `Script`, plus the `Manager`.
  - The `Manager` creates entities.
  - It attaches components, systems and scripts.
  - It updates systems, then entities, then scripts.
  - It removes destroyed entities when it refreshes.
- **`starforge.components`** provides:
  - `Collider`, `SphereCollider` and `AABB`.
  - `Rigidbody`.
  - `TagComponent`, with the `Tag` enum.
  - `InputComponent`, with the `KeyState` enum.
  - `CameraComponent`.
  - `LightComponent`, with the `LightType` enum.
- **Systems**:
  - `starforge.collision.CollisionSystem`. It places entities in grid cells, with a cell size of 10. It tests neighbouring pairs with sphere or box tests. It calls `on_collide` on the scripts of both entities.
  - `starforge.physics.PhysicsSystem`. It moves entities by their `Rigidbody` velocity. It destroys entities that rise above a height of 200.
  - `starforge.input.InputSystem`.
    - It tracks key and mouse-button states: `NONE`, `PUSH`, `DOWN` and `UP`.
    - The caller supplies a `key_reader(code) -> bool` and a `cursor_reader() -> (x, y) | None`.
    - When none is given, no key is ever pressed and there is no cursor.
  - `starforge.camera.CameraSystem`. It steers entities that have both a `CameraComponent` and an `InputComponent`:
    - Right-button drags change where the camera looks.
    - The Z, Q, S and D keys move it.
    - Left Shift widens the field of view.
- **`starforge.scenes`** provides `Scene` and `SceneManager`.
  - `SceneManager` switches the active scene.
  - It forwards updates to the active scene.
  - It gives a `scene_name`.
  - Its `window_title(fps)` returns a caption string.
- **`starforge.scripts`** provides three game scripts:
  - `ScoreScript` scores ten points per second survived; `add_points` adds more.
  - `HUDScript`: its `render()` returns the HUD line as a string.
  - `CameraFollowScript`: its `follow(delta_time, manager)` keeps the camera entity at an offset of (0, 5, 10) from the target.

## What it does not do

starforge has game logic only:

- It has no renderer.
- It has no window.
- It does not load meshes or textures.
- It has no lighting system. `LightComponent` only holds data.
- It has no command-line program.

Input comes only from the reader functions you pass to `InputSystem`.

## Installation

```
pip install starforge
```

## A quick example

```python
from starforge.ecs import Manager, Script
from starforge.components import Rigidbody
from starforge.physics import PhysicsSystem
from starforge.utils import Vector3f


class Mover(Script):
    def init(self):
        body = self.manager.add_component(self.entity, Rigidbody())
        body.velocity = Vector3f(1.0, 0.0, 0.0)

    def update(self, delta_time):
        pass


manager = Manager()
manager.add_system(PhysicsSystem, manager)

player = manager.create_entity()
manager.attach_script(player, Mover())
manager.init()

for _ in range(10):
    manager.update(0.1)

print(player.transform.position)  # roughly [1. 0. 0.]
```

## State machines

```python
from starforge.statemachine import Action, StateCondition, StateMachine


class Always(StateCondition):
    def on_test(self, owner):
        return True


class Log(Action):
    def start(self, owner):
        owner.append("start")

    def update(self, owner):
        owner.append("update")

    def end(self, owner):
        owner.append("end")


log = []
machine = StateMachine(log, 2)
idle = machine.create_behaviour(0)
idle.add_action(Log())
idle.create_transition(1).add_condition(Always)
machine.create_behaviour(1)

machine.set_state(0)
machine.update()
print(machine.current_state)  # 1
print(log)                    # ['start', 'update', 'end']
```

## Running the tests

```
pip install "starforge[test]"
pytest
```