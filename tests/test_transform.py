import math

import pytest

from game.transform import heading_of, horizontal_basis, look_vector, move_delta, turn_toward, wrap_pi


def test_wrap_pi_range():
    assert wrap_pi(0.0) == 0.0
    assert wrap_pi(math.pi) == pytest.approx(math.pi)
    assert wrap_pi(-math.pi) == pytest.approx(math.pi)
    assert wrap_pi(3 * math.pi / 2) == pytest.approx(-math.pi / 2)
    for a in [-10.0, -3.5, 0.1, 7.0, 100.0]:
        w = wrap_pi(a)
        assert -math.pi < w <= math.pi
        assert math.cos(w) == pytest.approx(math.cos(a))
        assert math.sin(w) == pytest.approx(math.sin(a))


def test_turn_toward_takes_shortest_arc():
    # From 3.0 rad to -3.0 rad the short way crosses +pi, not zero.
    yaw = turn_toward(3.0, -3.0, 0.2)
    short = 2 * math.pi - 6.0
    assert yaw == pytest.approx(3.0 + short * 0.2)
    assert turn_toward(0.0, 1.0, 0.2) == pytest.approx(0.2)
    assert turn_toward(1.0, 1.0, 0.2) == pytest.approx(1.0)


def test_heading_of_axes():
    assert heading_of(0.0, 1.0) == pytest.approx(0.0)
    assert heading_of(1.0, 0.0) == pytest.approx(math.pi / 2)


def test_look_vector_default_faces_negative_z():
    v = look_vector(0.0, 0.0)
    assert (v.x, v.y, v.z) == pytest.approx((0.0, 0.0, -1.0), abs=1e-6)
    up = look_vector(0.0, math.pi / 2)
    assert up.y == pytest.approx(1.0, abs=1e-6)
    assert look_vector(0.7, 0.3).length() == pytest.approx(1.0, abs=1e-6)


def test_horizontal_basis_is_orthonormal():
    for yaw in [0.0, 0.5, -2.0, math.pi]:
        forward, right = horizontal_basis(yaw)
        assert forward.y == 0.0 and right.y == pytest.approx(0.0, abs=1e-6)
        assert forward.length() == pytest.approx(1.0, abs=1e-6)
        assert right.length() == pytest.approx(1.0, abs=1e-6)
        assert forward.dot(right) == pytest.approx(0.0, abs=1e-6)
    forward, right = horizontal_basis(0.0)
    assert (right.x, right.z) == pytest.approx((1.0, 0.0), abs=1e-6)


def test_move_delta_normalizes_diagonals():
    straight = move_delta(1.0, 0.0, 0.0, 5.0, 0.1)
    diagonal = move_delta(1.0, 1.0, 0.0, 5.0, 0.1)
    assert straight.length() == pytest.approx(0.5, abs=1e-6)
    assert diagonal.length() == pytest.approx(0.5, abs=1e-6)
    assert straight.z == pytest.approx(-0.5, abs=1e-6)
    idle = move_delta(0.0, 0.0, 1.2, 5.0, 0.1)
    assert idle.lengthSquared() == 0.0
