"""
Simulation Pipeline
===================
This module wires the physics engine into one call that the presentation
layer (command line, GUI, notebook) can use.

Why is this file needed?
------------------------
1. Orchestration: derive -> integrate (three force models) -> transform ->
   measure, in one pure function.
2. Output contract: It exposes a results record of scalar quantities for a
   table, and two sets of renderer polylines (absolute view, relative view).

Classes:
    ModelRun: Everything computed for one force model.
    SimulationResult: The complete, immutable output of one run.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from skatemechanics.config import COM_COLOR, MODEL_COLORS
from skatemechanics.model.inputs import RawInputs
from skatemechanics.physics.integrator import ForceModel, TimeSeries, integrate
from skatemechanics.physics.parameters import DerivedParameters, derive
from skatemechanics.physics.theory import (
    DriftMeasurement,
    SwingCase,
    TheoryRow,
    compute_theory_base,
    compute_theory_row,
    measure_drift,
)
from skatemechanics.physics.transform import AbsoluteTrajectory, to_absolute
from skatemechanics.view.renderer import Polyline

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelRun:
    model: ForceModel
    series: TimeSeries
    trajectory: AbsoluteTrajectory
    drift: DriftMeasurement


@dataclass(frozen=True)
class SimulationResult:
    inputs: RawInputs
    params: DerivedParameters
    theory: TheoryRow
    runs: dict[ForceModel, ModelRun]

    def absolute_paths(self) -> list[Polyline]:
        """CoM path followed by the world path of each force model."""
        com = self.runs[ForceModel.IDEAL].trajectory.com
        paths = [Polyline(points=com, color=COM_COLOR, label="CoM")]
        for model, run in self.runs.items():
            paths.append(Polyline(points=run.trajectory.path, color=MODEL_COLORS[model.value], label=model.value))
        return paths

    def relative_paths(self) -> list[Polyline]:
        """Skater-relative path of each force model, in (t, n) components."""
        return [
            Polyline(points=run.trajectory.rot_rel, color=MODEL_COLORS[model.value], label=model.value)
            for model, run in self.runs.items()
        ]

    def summary(self) -> dict[str, float]:
        """Scalar quantities for tabular display, in display order."""
        p = self.params
        out: dict[str, float] = {
            "Tb [s]": p.Tb,
            "T [s]": p.T,
            "omega [rad/s]": p.omega,
            "R [m]": p.R,
            "dt [s]": p.dt,
            "vrel [m/s]": self.theory.vrel,
            "a_cf [m/s2]": self.theory.a_cf,
            "a_c [m/s2]": self.theory.a_c,
            "drift theory [m]": self.theory.drift,
            "deviation theory [deg]": self.theory.dev_deg,
        }
        for model, run in self.runs.items():
            out[f"drift {model.value} [m]"] = run.drift.lateral
            out[f"deviation {model.value} [deg]"] = run.drift.dev_deg
        return out


def run_simulation(inputs: RawInputs, *, reverse_at_midpoint: bool = False) -> SimulationResult:
    """
    Run all three force models for one set of inputs.

    Args:
        inputs: Raw user inputs.
        reverse_at_midpoint: Swing out and back instead of a single swing.

    Returns:
        The complete simulation result.
    """
    params = derive(inputs)
    logger.info(
        f"Derived parameters: Tb={params.Tb:.4g} s, omega={params.omega:.4g} rad/s, "
        f"R={params.R:.4g} m, dt={params.dt:.4g} s"
    )

    runs: dict[ForceModel, ModelRun] = {}
    for model in ForceModel:
        series = integrate(params, model, reverse_at_midpoint=reverse_at_midpoint)
        trajectory = to_absolute(params, series)
        runs[model] = ModelRun(
            model=model,
            series=series,
            trajectory=trajectory,
            drift=measure_drift(params, trajectory),
        )

    theory = compute_theory_row(
        compute_theory_base(inputs),
        SwingCase(label="swing", swing_beats=params.dt / params.Tb, swing_amp=inputs.swing_amp),
    )
    return SimulationResult(inputs=inputs, params=params, theory=theory, runs=runs)
