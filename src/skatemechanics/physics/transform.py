"""
Frame Transform
===============
Converts rotating-frame time series into world (absolute) coordinates, into
skater-relative coordinates, and into the "forward-up" display basis.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

import numpy as np

from skatemechanics.model.vectors import dot, e_r, e_t, scale, to_basis, to_world

if TYPE_CHECKING:
    import numpy.typing as npt

    from skatemechanics.physics.integrator import TimeSeries
    from skatemechanics.physics.parameters import DerivedParameters


@dataclass(frozen=True)
class AbsoluteTrajectory:
    """
    World-frame view of a TimeSeries.

    Attributes:
        time: Sample times, shape (N,).
        com: Centre-of-mass path in world coordinates, shape (N, 2).
        path: Swinging point in world coordinates, shape (N, 2).
        rot_rel: Swinging point relative to the CoM, in (t, n) components, shape (N, 2).
    """
    time: npt.NDArray[np.float64]
    com: npt.NDArray[np.float64]
    path: npt.NDArray[np.float64]
    rot_rel: npt.NDArray[np.float64]


def phase(params: DerivedParameters, time: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Phase angle of the CoM on the arc at the given time(s)."""
    return params.phi0 + params.omega * np.asarray(time, dtype=np.float64)


def to_absolute(params: DerivedParameters, series: TimeSeries) -> AbsoluteTrajectory:
    """
    Map a rotating-frame series to world coordinates.

    The rotating frame has its origin at the arc centre, so the world position
    of the swinging point is simply s_t e_t(phi) + s_n e_r(phi).
    """
    phi = phase(params, series.time)
    com = scale(params.R, e_r(phi))
    path = to_world(phi, series.position)
    rot_rel = series.position - params.com_offset
    return AbsoluteTrajectory(time=series.time, com=com, path=path, rot_rel=rot_rel)


def to_rotating(
    params: DerivedParameters,
    time: npt.ArrayLike,
    points: npt.ArrayLike,
) -> npt.NDArray[np.float64]:
    """Inverse of the world mapping: world points -> rotating (t, n) positions."""
    return to_basis(phase(params, time), points)


def _display_axes(params: DerivedParameters) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Display basis (right, up) at swing start.

    Up is the initial tangent e_t(phi0). Right is the arc interior (-e_r) for
    counter-clockwise rotation and the exterior (+e_r) for clockwise rotation.
    """
    up = e_t(params.phi0)
    inward = -1.0 if params.omega > 0 else 1.0
    right = inward * e_r(params.phi0)
    return right, up


def make_abs_projector(
    params: DerivedParameters,
) -> Callable[[npt.ArrayLike], npt.NDArray[np.float64]]:
    """
    Return a function projecting world points into the display basis.

    Example:
        project = make_abs_projector(params)
        view_points = project(trajectory.path)
    """
    right, up = _display_axes(params)

    def project(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        points = np.asarray(points, dtype=np.float64)
        return np.stack((dot(points, right), dot(points, up)), axis=-1)

    return project


def map_rot_rel_to_view(params: DerivedParameters, series: TimeSeries) -> npt.NDArray[np.float64]:
    """
    Skater-relative path rotated back to the initial basis, in display layout.

    The relative (t, n) components at time t are turned by phi(t) - phi0 into
    the basis at swing start, then laid out with forward up and the arc
    interior to the right (flipped for clockwise rotation).
    """
    d = params.omega * series.time
    c = np.cos(d)
    s = np.sin(d)

    rel = series.position - params.com_offset
    st = rel[:, 0]
    rn = rel[:, 1]
    t0 = c * st + s * rn
    r0 = -s * st + c * rn

    inward_sign = 1.0 if params.omega > 0 else -1.0
    return np.stack((inward_sign * (-r0), t0), axis=-1)
