import math
import random

import numpy as np
import pytest

from starforge import mathhelper as mh


@pytest.fixture(autouse=True)
def _seed():
    random.seed(1234)


def test_rand_f_default_range():
    values = [mh.rand_f() for _ in range(500)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_rand_f_custom_range():
    values = [mh.rand_f(-3.0, 2.0) for _ in range(500)]
    assert all(-3.0 <= v < 2.0 for v in values)
    assert min(values) < -2.0 and max(values) > 1.0


def test_rand_int_inclusive():
    values = {mh.rand_int(2, 5) for _ in range(500)}
    assert values == {2, 3, 4, 5}


def test_lerp_endpoints_and_middle():
    assert mh.lerp(2.0, 6.0, 0.0) == 2.0
    assert mh.lerp(2.0, 6.0, 1.0) == 6.0
    assert mh.lerp(2.0, 6.0, 0.5) == 4.0


def test_lerp_arrays():
    a = np.array([0.0, 10.0])
    b = np.array([10.0, 0.0])
    np.testing.assert_allclose(mh.lerp(a, b, 0.5), [5.0, 5.0])


@pytest.mark.parametrize(
    "x, expected",
    [(-1, 0), (0, 0), (3, 3), (10, 10), (11, 10)],
)
def test_clamp(x, expected):
    assert mh.clamp(x, 0, 10) == expected


@pytest.mark.parametrize(
    "x, y",
    [(1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (-1.0, 1.0), (-1.0, -1.0), (0.0, -2.0), (3.0, -1.0)],
)
def test_angle_from_xy_matches_point(x, y):
    theta = mh.angle_from_xy(x, y)
    assert 0.0 <= theta < 2.0 * math.pi
    r = math.hypot(x, y)
    assert math.cos(theta) == pytest.approx(x / r, abs=1e-6)
    assert math.sin(theta) == pytest.approx(y / r, abs=1e-6)


def test_angle_from_xy_origin_is_nan():
    theta = mh.angle_from_xy(0.0, 0.0)
    assert theta == pytest.approx(float("nan"), nan_ok=True)
    assert not (0.0 <= theta < 2.0 * math.pi)


def test_constants_used_by_functions():
    assert mh.angle_from_xy(-1.0, 0.0) == pytest.approx(mh.PI, abs=1e-9)
    assert mh.PI == pytest.approx(math.pi, abs=1e-9)
    assert mh.clamp(1e40, 0.0, mh.INFINITY) == np.finfo(np.float32).max


def test_spherical_to_cartesian_length_and_w():
    p = mh.spherical_to_cartesian(2.5, 0.7, 1.1)
    assert p[3] == 1.0
    assert np.linalg.norm(p[:3]) == pytest.approx(2.5)


def test_spherical_to_cartesian_pole():
    p = mh.spherical_to_cartesian(3.0, 0.4, 0.0)
    np.testing.assert_allclose(p, [0.0, 3.0, 0.0, 1.0], atol=1e-12)


def test_identity4x4_is_fresh_identity():
    m = mh.identity4x4()
    np.testing.assert_array_equal(m, np.eye(4))
    m[0, 0] = 9.0
    np.testing.assert_array_equal(mh.identity4x4(), np.eye(4))


def test_inverse_transpose_of_rotation_is_rotation():
    c, s = math.cos(0.3), math.sin(0.3)
    rot = np.array(
        [[c, s, 0, 0], [-s, c, 0, 0], [0, 0, 1, 0], [5.0, 6.0, 7.0, 1]], dtype=float
    )
    result = mh.inverse_transpose(rot)
    expected = rot.copy()
    expected[3] = (0, 0, 0, 1)
    np.testing.assert_allclose(result, expected, atol=1e-12)


def test_inverse_transpose_scale_invariant():
    m = np.diag([2.0, 4.0, 0.5, 1.0])
    m[3, :3] = (1.0, 2.0, 3.0)
    result = mh.inverse_transpose(m)
    cleaned = m.copy()
    cleaned[3] = (0, 0, 0, 1)
    np.testing.assert_allclose(result.T @ cleaned, np.eye(4), atol=1e-12)


def test_inverse_transpose_rejects_bad_shape():
    with pytest.raises(ValueError):
        mh.inverse_transpose([[1.0, 0.0], [0.0, 1.0]])


def test_rand_unit_vec3_is_unit():
    for _ in range(100):
        v = mh.rand_unit_vec3()
        assert v.shape == (3,)
        assert np.linalg.norm(v) == pytest.approx(1.0)


def test_rand_hemisphere_unit_vec3_in_hemisphere():
    n = np.array([0.0, 1.0, 0.0, 0.0])
    for _ in range(100):
        v = mh.rand_hemisphere_unit_vec3(n)
        assert np.linalg.norm(v) == pytest.approx(1.0)
        assert v[1] >= 0.0