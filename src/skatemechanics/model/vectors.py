"""
2D vector algebra and the rotating polar basis.

All functions accept anything numpy can broadcast, so they work both on single
vectors of shape (2,) and on whole trajectories of shape (N, 2).

Basis conventions
-----------------
At phase angle `phi` the polar basis is

    e_r(phi) = ( cos phi, sin phi)    radial, pointing away from the arc centre
    e_t(phi) = (-sin phi, cos phi)    tangential, counter-clockwise forward

Rotating-frame vectors are stored as `(t, n)` pairs, i.e. the tangential
component first and the radial component second:

    v = v_t * e_t + v_n * e_r

With Omega = omega * z, z x e_t = -e_r and z x e_r = +e_t, therefore

    Omega x v = (omega * v_n) * e_t + (-omega * v_t) * e_r

which is `omega_cross_tn`. In plain Cartesian components the same product is
`(-omega * y, omega * x)` (`omega_cross`). Mixing the two up flips the sign of
the Coriolis term.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt


def add(a: npt.ArrayLike, b: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.add(a, b, dtype=np.float64)


def scale(s: float | npt.ArrayLike, v: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Multiply vector(s) `v` by scalar(s) `s`; an array `s` scales row by row."""
    s = np.asarray(s, dtype=np.float64)
    v = np.asarray(v, dtype=np.float64)
    if s.ndim >= 1:
        s = s[..., np.newaxis]
    return s * v


def dot(a: npt.ArrayLike, b: npt.ArrayLike) -> float | npt.NDArray[np.float64]:
    """Row-wise dot product over the last axis."""
    return np.sum(np.multiply(a, b, dtype=np.float64), axis=-1)


def norm(v: npt.ArrayLike) -> float | npt.NDArray[np.float64]:
    """Euclidean norm over the last axis."""
    return np.linalg.norm(np.asarray(v, dtype=np.float64), axis=-1)


def e_r(phi: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Radial unit vector(s) at phase `phi`."""
    phi = np.asarray(phi, dtype=np.float64)
    return np.stack((np.cos(phi), np.sin(phi)), axis=-1)


def e_t(phi: float | npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Tangential (counter-clockwise) unit vector(s) at phase `phi`."""
    phi = np.asarray(phi, dtype=np.float64)
    return np.stack((-np.sin(phi), np.cos(phi)), axis=-1)


def omega_cross(omega: float, v: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Omega x v for Cartesian (x, y) components."""
    v = np.asarray(v, dtype=np.float64)
    return np.stack((-omega * v[..., 1], omega * v[..., 0]), axis=-1)


def omega_cross_tn(omega: float, v_tn: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Omega x v for rotating-basis (t, n) components."""
    v_tn = np.asarray(v_tn, dtype=np.float64)
    return np.stack((omega * v_tn[..., 1], -omega * v_tn[..., 0]), axis=-1)


def to_world(phi: float | npt.ArrayLike, v_tn: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """
    Express rotating-basis (t, n) components as world (x, y) components.

    Args:
        phi: Phase angle(s) of the basis, scalar or shape (N,).
        v_tn: Components of shape (2,) or (N, 2).

    Returns:
        World vectors with the broadcast shape of the inputs.
    """
    v_tn = np.asarray(v_tn, dtype=np.float64)
    return v_tn[..., 0:1] * e_t(phi) + v_tn[..., 1:2] * e_r(phi)


def to_basis(phi: float | npt.ArrayLike, p: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Inverse of `to_world`: project world vectors onto (e_t, e_r)."""
    p = np.asarray(p, dtype=np.float64)
    return np.stack((dot(p, e_t(phi)), dot(p, e_r(phi))), axis=-1)
