import numpy as np

from starforge.components import (
    AABB,
    CameraComponent,
    Collider,
    InputComponent,
    KeyState,
    LightComponent,
    LightType,
    Rigidbody,
    SphereCollider,
    Tag,
    TagComponent,
)
from starforge.ecs import Manager
from starforge.utils import Vector3f


def test_collider_defaults():
    collider = Collider()
    assert collider.size == Vector3f(1.0, 1.0, 1.0)
    assert collider.offset == Vector3f()


def test_aabb_and_rigidbody_default_zero():
    box = AABB()
    assert box.min == Vector3f() and box.max == Vector3f()
    assert Rigidbody().velocity == Vector3f()


def test_defaults_not_shared():
    a = Rigidbody()
    b = Rigidbody()
    a.velocity.x = 3.0
    assert b.velocity.x == 0.0


def test_sphere_collider():
    sphere = SphereCollider(radius=2.5, offset=Vector3f(1.0, 0.0, 0.0))
    assert sphere.radius == 2.5
    assert SphereCollider().radius == 1.0


def test_tags():
    player = TagComponent(Tag.PLAYER)
    other = TagComponent(Tag.PLAYER)
    assert player.is_tag(Tag.PLAYER)
    assert not player.is_tag(Tag.ENEMY)
    assert player.compare_tag(other)
    assert not player.compare_tag(TagComponent())
    assert TagComponent().tag is Tag.NONE


def test_key_state_values():
    assert [s.value for s in KeyState] == [0, 1, 2, 3]
    assert InputComponent().key_states == {}


def test_camera_position_follows_transform():
    camera = CameraComponent()
    camera.camera_transform.set_position(1.0, 2.0, 3.0)
    np.testing.assert_allclose(camera.position, [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(camera.proj, np.eye(4))
    assert camera.radius == 5.0


def test_light_defaults():
    light = LightComponent()
    np.testing.assert_array_equal(light.direction, [0.0, -1.0, 0.0])
    assert light.falloff_start == 10.0
    assert light.falloff_end == 10.0
    assert light.spot_power == 64.0
    assert light.light_type is LightType.POINT_LIGHT


def test_components_attach_through_manager():
    manager = Manager()
    entity = manager.create_entity()
    body = manager.add_component(entity, Rigidbody(Vector3f(0.0, 0.0, 5.0)))
    manager.add_component(entity, Collider())
    assert manager.get_component(entity, Rigidbody) is body
    assert body.entity is entity
    assert manager.has_component(entity, Collider)
    assert not manager.has_component(entity, SphereCollider)