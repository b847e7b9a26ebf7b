import math

import pytest

from minirt.quaternion import Quaternion, rotation_to_negative_z
from minirt.vector import Vec3


def _t(v):
    return (v.x, v.y, v.z)


def _q(q):
    return (q.w, q.x, q.y, q.z)


DIRECTIONS = [
    Vec3(1.0, 0.0, 0.0),
    Vec3(0.0, 1.0, 0.0),
    Vec3(0.0, 0.0, -1.0),
    Vec3(1.0, 2.0, 3.0).normalized(),
    Vec3(-0.3, 0.4, -0.5).normalized(),
]


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_rotation_maps_direction_onto_negative_z(direction):
    q = rotation_to_negative_z(direction)
    assert _t(q.rotate(direction)) == pytest.approx((0.0, 0.0, -1.0), abs=1e-9)


@pytest.mark.parametrize("direction", DIRECTIONS)
def test_rotation_is_unit_quaternion(direction):
    q = rotation_to_negative_z(direction)
    assert math.sqrt(sum(c * c for c in _q(q))) == pytest.approx(1.0)


def test_rotation_preserves_length_and_angles():
    q = rotation_to_negative_z(Vec3(1.0, 2.0, 3.0).normalized())
    a = Vec3(4.0, -1.0, 2.0)
    b = Vec3(-2.0, 5.0, 0.5)
    ra, rb = q.rotate(a), q.rotate(b)
    assert ra.magnitude() == pytest.approx(a.magnitude())
    assert ra.dot(rb) == pytest.approx(a.dot(b))


def test_already_aligned_direction_gives_identity():
    q = rotation_to_negative_z(Vec3(0.0, 0.0, -1.0))
    assert q == Quaternion(1.0, 0.0, 0.0, 0.0)
    v = Vec3(3.0, -2.0, 7.0)
    assert _t(q.rotate(v)) == pytest.approx(_t(v))


def test_opposite_direction_raises():
    with pytest.raises(ZeroDivisionError):
        rotation_to_negative_z(Vec3(0.0, 0.0, 1.0))


def test_product_with_conjugate_is_real():
    q = Quaternion(0.5, -1.0, 2.0, 3.0)
    p = q * q.conjugate()
    norm_sq = sum(c * c for c in _q(q))
    assert _q(p) == pytest.approx((norm_sq, 0.0, 0.0, 0.0))


def test_conjugate_twice_is_identity_operation():
    q = Quaternion(0.1, 0.2, -0.3, 0.4)
    assert q.conjugate().conjugate() == q


def test_normalized_has_unit_length():
    q = Quaternion(2.0, -1.0, 0.5, 3.0).normalized()
    assert math.sqrt(sum(c * c for c in _q(q))) == pytest.approx(1.0)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Quaternion(0.0, 0.0, 0.0, 0.0).normalized()


def test_rotation_then_inverse_round_trip():
    q = rotation_to_negative_z(Vec3(-0.3, 0.4, -0.5).normalized())
    v = Vec3(1.0, 2.0, -3.0)
    assert _t(q.conjugate().rotate(q.rotate(v))) == pytest.approx(_t(v))