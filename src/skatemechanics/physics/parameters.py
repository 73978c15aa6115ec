"""
Parameter Deriver
=================
Maps raw user inputs onto a self-consistent set of physical parameters.

Coordinate convention
---------------------
The rotating frame has its origin at the arc centre. The centre of mass (CoM)
therefore sits at (t, n) = (0, R) for the whole run, and the swinging point
starts at (l cos theta0, R + l sin theta0). The skater-relative view is derived
from this state by subtracting (0, R); it is never integrated separately.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from skatemechanics.config import EPS, MIN_STEP, MIN_SWING_BEATS
from skatemechanics.model.inputs import Direction, RawInputs
from skatemechanics.utils import deg2rad

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DerivedParameters:
    """Physical parameters of one run. Angles in radians, SI units elsewhere."""
    Tb: float        # seconds per beat
    T: float         # arc traversal time
    omega: float     # signed angular rate (ccw > 0)
    R: float         # arc radius
    dt: float        # swing duration
    vmag: float      # relative swing speed
    phi0: float      # phase of the CoM on the arc at swing start
    h: float         # integration step

    # Initial rotating-frame state, (t, n) components, arc-centre origin
    s_t0: float
    s_n0: float
    v_t0: float
    v_n0: float

    @property
    def initial_position(self) -> npt.NDArray[np.float64]:
        return np.array([self.s_t0, self.s_n0], dtype=np.float64)

    @property
    def initial_velocity(self) -> npt.NDArray[np.float64]:
        return np.array([self.v_t0, self.v_n0], dtype=np.float64)

    @property
    def com_offset(self) -> npt.NDArray[np.float64]:
        """CoM position in the rotating frame."""
        return np.array([0.0, self.R], dtype=np.float64)


def derive(inputs: RawInputs) -> DerivedParameters:
    """
    Derive the physical parameters of a run.

    Every denominator is floored instead of rejected, so any input (even a
    tempo of zero) produces finite numbers.

    Args:
        inputs: The raw user inputs.

    Returns:
        The derived, immutable parameter set.
    """
    Tb = 60.0 / max(EPS, inputs.bpm)
    T = inputs.total_beats * Tb

    phi_span = deg2rad(inputs.central_deg)
    omega_mag = phi_span / max(EPS, T)
    omega = (-1.0 if inputs.direction == Direction.CW else 1.0) * omega_mag
    R = inputs.diameter / 2.0

    swing_beats = max(MIN_SWING_BEATS, inputs.swing_beats)
    dt = swing_beats * Tb
    vmag = inputs.swing_amp / max(EPS, dt)

    phi0 = (inputs.start_beat / max(EPS, inputs.total_beats)) * phi_span

    theta0 = deg2rad(inputs.offset_angle)
    theta_v = deg2rad(inputs.velocity_angle)
    s_t0 = inputs.offset_length * math.cos(theta0)
    s_n0 = R + inputs.offset_length * math.sin(theta0)
    v_t0 = vmag * math.cos(theta_v)
    v_n0 = vmag * math.sin(theta_v)

    h = max(MIN_STEP, inputs.step)

    if swing_beats != inputs.swing_beats or h != inputs.step:
        logger.debug(f"Clamped swing_beats={inputs.swing_beats} -> {swing_beats}, step={inputs.step} -> {h}")

    return DerivedParameters(
        Tb=Tb,
        T=T,
        omega=omega,
        R=R,
        dt=dt,
        vmag=vmag,
        phi0=phi0,
        h=h,
        s_t0=s_t0,
        s_n0=s_n0,
        v_t0=v_t0,
        v_n0=v_n0,
    )
