import math

import numpy as np
import pytest

from skatemechanics.model.vectors import (
    add,
    dot,
    e_r,
    e_t,
    norm,
    omega_cross,
    omega_cross_tn,
    scale,
    to_basis,
    to_world,
)


def test_basic_algebra():
    assert np.allclose(add([1.0, 2.0], [3.0, -1.0]), [4.0, 1.0])
    assert np.allclose(scale(2.0, [1.5, -0.5]), [3.0, -1.0])
    assert dot([1.0, 2.0], [3.0, 4.0]) == pytest.approx(11.0)
    assert norm([3.0, 4.0]) == pytest.approx(5.0)


def test_scale_row_by_row():
    v = np.array([[1.0, 0.0], [0.0, 1.0], [1.0, 1.0]])
    out = scale(np.array([1.0, 2.0, 3.0]), v)
    assert np.allclose(out, [[1.0, 0.0], [0.0, 2.0], [3.0, 3.0]])


@pytest.mark.parametrize("phi", [0.0, 0.3, math.pi / 2, 2.5, -1.2])
def test_basis_is_orthonormal_and_counter_clockwise(phi):
    r = e_r(phi)
    t = e_t(phi)
    assert norm(r) == pytest.approx(1.0)
    assert norm(t) == pytest.approx(1.0)
    assert dot(r, t) == pytest.approx(0.0, abs=1e-15)
    # e_r x e_t = +z
    assert r[0] * t[1] - r[1] * t[0] == pytest.approx(1.0)


def test_basis_is_vectorised():
    phi = np.linspace(0.0, math.pi, 5)
    assert e_r(phi).shape == (5, 2)
    assert np.allclose(e_t(phi)[0], [0.0, 1.0])


def test_cartesian_cross_is_quarter_turn():
    assert np.allclose(omega_cross(2.0, [1.0, 0.0]), [0.0, 2.0])
    assert np.allclose(omega_cross(2.0, [0.0, 1.0]), [-2.0, 0.0])


@pytest.mark.parametrize("omega", [1.2, -0.7])
@pytest.mark.parametrize("phi", [0.0, 0.8, 3.0])
def test_rotating_basis_cross_matches_cartesian(omega, phi):
    v_tn = np.array([0.9, -0.4])
    via_world = to_basis(phi, omega_cross(omega, to_world(phi, v_tn)))
    assert np.allclose(omega_cross_tn(omega, v_tn), via_world)


def test_world_basis_round_trip():
    phi = np.array([0.1, 1.0, 2.0])
    v_tn = np.array([[1.0, 2.0], [-0.5, 0.3], [0.0, 4.5]])
    assert np.allclose(to_basis(phi, to_world(phi, v_tn)), v_tn)


def test_to_world_single_phase_many_vectors():
    v_tn = np.array([[1.0, 0.0], [0.0, 1.0]])
    out = to_world(0.0, v_tn)
    assert np.allclose(out, [[0.0, 1.0], [1.0, 0.0]])
