"""
Analytic estimates and theory-vs-simulation comparison.

The closed-form numbers assume a constant angular rate and a straight swing of
amplitude A over dt seconds:

    vrel  = A / dt
    a_cf  = omega^2 R              centripetal acceleration of the CoM
    a_c   = 2 |omega| vrel         Coriolis acceleration of the swing
    drift = 1/2 a_c dt^2           lateral drift seen by the skater
    dev   = atan2(drift, A)        deviation angle
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np

from skatemechanics.config import EPS
from skatemechanics.model.inputs import Direction
from skatemechanics.utils import deg2rad, rad2deg, safe_div

if TYPE_CHECKING:
    from skatemechanics.model.inputs import RawInputs
    from skatemechanics.physics.parameters import DerivedParameters
    from skatemechanics.physics.transform import AbsoluteTrajectory


@dataclass(frozen=True)
class TheoryBase:
    Tb: float
    T: float
    omega: float
    omega_abs: float
    R: float
    phi_span: float


@dataclass(frozen=True)
class SwingCase:
    """One row of the theory table."""
    label: str = ""
    swing_beats: float = 1.0
    swing_amp: float = 1.0
    mass: Optional[float] = None  # kg, enables the Coriolis force column


@dataclass(frozen=True)
class TheoryRow:
    label: str
    dt: float
    vrel: float
    a_cf: float
    a_c: float
    drift: float
    dev_deg: float
    force: Optional[float]


@dataclass(frozen=True)
class DriftMeasurement:
    """
    Displacement of the skater-relative path over the swing, expressed in the
    initial swing basis (along = initial velocity direction, lateral = 90° to
    its left in the (t, n) plane).
    """
    along: float
    lateral: float
    dev_deg: float


def compute_theory_base(inputs: RawInputs) -> TheoryBase:
    """Arc quantities shared by every row of the theory table."""
    Tb = safe_div(60.0, max(EPS, inputs.bpm))
    T = inputs.total_beats * Tb
    phi_span = deg2rad(inputs.central_deg)
    omega_abs = safe_div(phi_span, max(EPS, T))
    omega = (-1.0 if inputs.direction == Direction.CW else 1.0) * omega_abs
    return TheoryBase(Tb=Tb, T=T, omega=omega, omega_abs=omega_abs, R=inputs.diameter / 2.0, phi_span=phi_span)


def compute_theory_row(base: TheoryBase, case: SwingCase) -> TheoryRow:
    swing_beats = max(EPS, case.swing_beats)
    dt = swing_beats * base.Tb
    vrel = safe_div(case.swing_amp, dt)
    a_cf = base.omega_abs * base.omega_abs * base.R
    a_c = 2.0 * base.omega_abs * vrel
    drift = 0.5 * a_c * dt * dt
    dev_deg = rad2deg(math.atan2(drift, case.swing_amp))
    force = case.mass * a_c if case.mass is not None else None
    return TheoryRow(
        label=case.label,
        dt=dt,
        vrel=vrel,
        a_cf=a_cf,
        a_c=a_c,
        drift=drift,
        dev_deg=dev_deg,
        force=force,
    )


def compute_theory_rows(inputs: RawInputs, cases: Iterable[SwingCase]) -> list[TheoryRow]:
    base = compute_theory_base(inputs)
    return [compute_theory_row(base, case) for case in cases]


def measure_drift(params: DerivedParameters, trajectory: AbsoluteTrajectory) -> DriftMeasurement:
    """
    Measure the simulated drift of the swinging point as seen by the skater.

    Args:
        params: Parameters of the run (defines the initial swing direction).
        trajectory: World view of one integrated series.

    Returns:
        Along-swing and lateral displacement, and the deviation angle in degrees.
    """
    theta_v = math.atan2(params.v_n0, params.v_t0)
    u_along = np.array([math.cos(theta_v), math.sin(theta_v)])
    u_lateral = np.array([-math.sin(theta_v), math.cos(theta_v)])

    displacement = trajectory.rot_rel[-1] - trajectory.rot_rel[0]
    along = float(displacement @ u_along)
    lateral = float(displacement @ u_lateral)
    dev_deg = rad2deg(math.atan2(abs(lateral), along))
    return DriftMeasurement(along=along, lateral=lateral, dev_deg=dev_deg)
