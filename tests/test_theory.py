import math

import pytest

from skatemechanics.model.inputs import Direction, RawInputs
from skatemechanics.physics.integrator import ForceModel, integrate
from skatemechanics.physics.parameters import derive
from skatemechanics.physics.theory import (
    SwingCase,
    compute_theory_base,
    compute_theory_row,
    compute_theory_rows,
    measure_drift,
)
from skatemechanics.physics.transform import to_absolute


def test_theory_base_matches_derived_parameters(scenario_inputs, scenario_params):
    base = compute_theory_base(scenario_inputs)
    assert base.Tb == pytest.approx(scenario_params.Tb)
    assert base.T == pytest.approx(scenario_params.T)
    assert base.omega == pytest.approx(scenario_params.omega)
    assert base.omega_abs == pytest.approx(abs(scenario_params.omega))
    assert base.R == 4.5
    assert base.phi_span == pytest.approx(math.pi)


def test_theory_row_for_scenario(scenario_inputs):
    row = compute_theory_row(compute_theory_base(scenario_inputs), SwingCase(label="one beat"))
    omega = math.pi / (6 * 60 / 138)

    assert row.label == "one beat"
    assert row.dt == pytest.approx(0.4348, abs=1e-4)
    assert row.vrel == pytest.approx(1.0 / row.dt)
    assert row.a_cf == pytest.approx(omega ** 2 * 4.5)
    assert row.a_c == pytest.approx(2.0 * omega * row.vrel)
    # omega * dt is a twelfth of a turn here
    assert row.drift == pytest.approx(math.pi / 6)
    assert row.dev_deg == pytest.approx(math.degrees(math.atan(math.pi / 6)))
    assert row.force is None


def test_mass_enables_force_column(scenario_inputs):
    row = compute_theory_row(compute_theory_base(scenario_inputs), SwingCase(mass=60.0))
    assert row.force == pytest.approx(60.0 * row.a_c)


def test_direction_does_not_change_magnitudes(scenario_inputs):
    ccw = compute_theory_row(compute_theory_base(scenario_inputs), SwingCase())
    cw_base = compute_theory_base(scenario_inputs.with_values(direction=Direction.CW))
    assert cw_base.omega < 0
    assert compute_theory_row(cw_base, SwingCase()) == ccw


def test_theory_rows_keep_order(scenario_inputs):
    cases = [SwingCase(label="half", swing_beats=0.5), SwingCase(label="two", swing_beats=2.0)]
    rows = compute_theory_rows(scenario_inputs, cases)
    assert [r.label for r in rows] == ["half", "two"]
    # drift grows linearly with the swing duration for a fixed amplitude
    assert rows[1].drift == pytest.approx(4.0 * rows[0].drift)


def test_degenerate_inputs_stay_finite():
    rows = compute_theory_rows(RawInputs(bpm=0.0, total_beats=0.0), [SwingCase(swing_beats=0.0, swing_amp=0.0)])
    for value in (rows[0].dt, rows[0].vrel, rows[0].a_cf, rows[0].a_c, rows[0].drift, rows[0].dev_deg):
        assert math.isfinite(value)


def test_ideal_run_has_no_lateral_drift(scenario_params):
    trajectory = to_absolute(scenario_params, integrate(scenario_params, ForceModel.IDEAL))
    drift = measure_drift(scenario_params, trajectory)
    assert drift.lateral == pytest.approx(0.0, abs=1e-9)
    assert drift.along == pytest.approx(1.0)
    assert drift.dev_deg == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("direction", [Direction.CCW, Direction.CW])
def test_short_swing_coriolis_drift_matches_theory(direction):
    inputs = RawInputs(direction=direction, swing_beats=0.25, swing_amp=0.5, step=0.001)
    params = derive(inputs)
    trajectory = to_absolute(params, integrate(params, ForceModel.CORIOLIS_ONLY))

    drift = measure_drift(params, trajectory)
    row = compute_theory_row(compute_theory_base(inputs), SwingCase(swing_beats=0.25, swing_amp=0.5))

    assert abs(drift.lateral) == pytest.approx(row.drift, rel=2e-2)
    assert drift.dev_deg == pytest.approx(row.dev_deg, rel=3e-2)


def test_coriolis_pushes_to_the_outside_for_ccw():
    params = derive(RawInputs(direction=Direction.CCW, swing_beats=0.5))
    ccw = measure_drift(params, to_absolute(params, integrate(params, ForceModel.CORIOLIS_ONLY)))
    params = derive(RawInputs(direction=Direction.CW, swing_beats=0.5))
    cw = measure_drift(params, to_absolute(params, integrate(params, ForceModel.CORIOLIS_ONLY)))
    # forward swing along +t: lateral is +n, away from the arc centre
    assert ccw.lateral > 0
    assert cw.lateral == pytest.approx(-ccw.lateral)
