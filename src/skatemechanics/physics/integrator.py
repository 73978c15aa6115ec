"""
Rotating-Frame Integrator
=========================
Advances the equations of motion of the swinging point in the frame that
rotates with the skater:

    s'' = -2 Omega x s' - Omega x (Omega x s) = -2 Omega x s' + omega^2 s

The force model selects which fictitious terms are kept. The scheme is a
fixed-step semi-implicit (symplectic) Euler: velocity first, then position
from the new velocity.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

from skatemechanics.config import MAX_STEPS
from skatemechanics.model.vectors import omega_cross_tn

if TYPE_CHECKING:
    import numpy.typing as npt

    from skatemechanics.physics.parameters import DerivedParameters

logger = logging.getLogger(__name__)


class ForceModel(StrEnum):
    IDEAL = "ideal"                  # no fictitious force
    CORIOLIS_ONLY = "coriolis_only"  # -2 Omega x v
    FULL = "full"                    # -2 Omega x v + omega^2 r


@dataclass(frozen=True)
class TimeSeries:
    """
    Integrator output. Arrays are read-only.

    Attributes:
        model: Force model used.
        time: Sample times, shape (N,), from 0 to dt inclusive.
        position: Rotating-frame positions (t, n), shape (N, 2), arc-centre origin.
        velocity: Rotating-frame velocities (t, n), shape (N, 2).
    """
    model: ForceModel
    time: npt.NDArray[np.float64]
    position: npt.NDArray[np.float64]
    velocity: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        for arr in (self.time, self.position, self.velocity):
            arr.setflags(write=False)

    def __len__(self) -> int:
        return self.time.size


def rotating_frame_acceleration(
    model: ForceModel,
    omega: float,
    position: npt.NDArray[np.float64],
    velocity: npt.NDArray[np.float64],
) -> npt.NDArray[np.float64]:
    """
    Fictitious acceleration in the rotating (t, n) basis.

    Args:
        model: Which terms to include.
        omega: Signed angular rate of the frame.
        position: (t, n) position measured from the rotation axis.
        velocity: (t, n) velocity relative to the rotating frame.

    Returns:
        Acceleration (t, n).
    """
    acc = np.zeros(2, dtype=np.float64)
    match model:
        case ForceModel.IDEAL:
            pass
        case ForceModel.CORIOLIS_ONLY:
            acc -= 2.0 * omega_cross_tn(omega, velocity)
        case ForceModel.FULL:
            acc -= 2.0 * omega_cross_tn(omega, velocity)
            # -Omega x (Omega x r) = +omega^2 r for r in the rotation plane
            acc += omega * omega * position
        case _:
            raise ValueError(f"Unknown force model: {model!r}")
    return acc


def step_count(dt: float, h: float) -> tuple[int, float]:
    """
    Number of steps covering [0, dt] and the step size actually used.

    The step is only enlarged when `ceil(dt / h)` would exceed MAX_STEPS.
    """
    steps = max(1, math.ceil(dt / h))
    if steps > MAX_STEPS:
        h_eff = dt / MAX_STEPS
        logger.warning(f"{steps} steps requested, enlarging step from {h:g} s to {h_eff:g} s")
        return MAX_STEPS, h_eff
    return steps, h


def integrate(
    params: DerivedParameters,
    model: ForceModel | str,
    *,
    reverse_at_midpoint: bool = False,
) -> TimeSeries:
    """
    Integrate the rotating-frame motion over the swing duration.

    Args:
        params: Derived parameters (initial state, omega, dt, h).
        model: Force model, enum member or its string value.
        reverse_at_midpoint: Negate the relative velocity once the swing is
            half way through ("swing out and back").

    Returns:
        A fresh TimeSeries with steps + 1 samples; the last time equals dt.
    """
    model = ForceModel(model)
    dt = params.dt
    steps, h = step_count(dt, params.h)
    omega = params.omega

    # Last sample clamped to dt; the final interval may be shorter than h
    time = np.minimum(np.arange(steps + 1, dtype=np.float64) * h, dt)
    time[-1] = dt
    position = np.empty((steps + 1, 2), dtype=np.float64)
    velocity = np.empty((steps + 1, 2), dtype=np.float64)

    s = params.initial_position
    v = params.initial_velocity
    position[0] = s
    velocity[0] = v
    reversed_ = not reverse_at_midpoint
    half = 0.5 * dt

    for i in range(steps):
        if not reversed_ and time[i] >= half:
            v = -v
            reversed_ = True

        h_i = time[i + 1] - time[i]
        a = rotating_frame_acceleration(model, omega, s, v)
        v = v + a * h_i
        s = s + v * h_i

        position[i + 1] = s
        velocity[i + 1] = v

    logger.debug(f"Integrated {model.value}: {steps} steps of {h:g} s over {dt:g} s")
    return TimeSeries(model=model, time=time, position=position, velocity=velocity)
