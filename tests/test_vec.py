import pytest

from particlebox.vec import Vec2, Vec3


def test_vec2_add_sub_round_trip():
    a = Vec2(1.5, -2.0)
    b = Vec2(3.25, 4.0)
    assert (a + b) - b == a


def test_vec2_scalar_mul_both_sides():
    a = Vec2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_vec2_mag_is_self_dot():
    a = Vec2(3.0, 4.0)
    assert a.mag() == a.dot(a)


def test_vec2_dot_orthogonal_is_zero():
    assert Vec2(1.0, 0.0).dot(Vec2(0.0, 5.0)) == 0.0


def test_vec2_proj_onto_axis_keeps_component():
    a = Vec2(3.0, 7.0)
    assert a.proj(Vec2(2.0, 0.0)) == Vec2(a.x, 0.0)


def test_vec2_proj_residual_is_orthogonal():
    a = Vec2(3.0, 7.0)
    b = Vec2(1.0, 2.0)
    assert (a - a.proj(b)).dot(b) == pytest.approx(0.0, abs=1e-9)


def test_vec2_proj_onto_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0).proj(Vec2())


def test_vec2_mul_rejects_vector():
    with pytest.raises(TypeError):
        Vec2(1.0, 1.0) * Vec2(1.0, 1.0)


def test_vec3_cross_of_unit_axes():
    x = Vec3(1.0, 0.0, 0.0)
    y = Vec3(0.0, 1.0, 0.0)
    z = Vec3(0.0, 0.0, 1.0)
    assert x.cross(y) == z
    assert y.cross(x) == z * -1


def test_vec3_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_vec3_add_sub_mul():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert (a + b) - b == a
    assert 3 * a == a + a + a
    assert a.mag() == a.dot(a)


def test_vec3_proj_residual_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)
    assert (a - a.proj(b)).dot(b) == pytest.approx(0.0, abs=1e-9)


def test_vec3_proj_onto_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 1.0, 1.0).proj(Vec3())