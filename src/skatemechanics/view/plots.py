"""Time-history plots of a simulation result."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import matplotlib.pyplot as plt
import numpy as np

from skatemechanics.config import MODEL_COLORS

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from skatemechanics.controller.simulation import SimulationResult

logger = logging.getLogger(__name__)


def plot_lateral_drift(result: SimulationResult, save_path: Optional[str] = None, show: bool = False) -> Figure:
    """
    Plot the skater-relative lateral deviation against time for every force model.

    Args:
        result: Output of `run_simulation`.
        save_path: If given, the figure is written to this file.
        show: Open an interactive window.

    Returns:
        The matplotlib figure.
    """
    p = result.params
    theta_v = np.arctan2(p.v_n0, p.v_t0)
    u_lateral = np.array([-np.sin(theta_v), np.cos(theta_v)])

    plt.rcParams["figure.constrained_layout.use"] = True
    fig, ax = plt.subplots(figsize=(7, 5))

    for model, run in result.runs.items():
        rel = run.trajectory.rot_rel
        lateral = (rel - rel[0]) @ u_lateral
        ax.plot(run.series.time, lateral * 100.0, color=MODEL_COLORS[model.value], lw=2, label=model.value)

    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    ax.minorticks_on()
    ax.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    ax.set_title("Lateral deviation seen by the skater")
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Lateral deviation (cm)")
    ax.set_xlim(0.0, p.dt)
    ax.legend()

    if save_path:
        fig.savefig(save_path)
        logger.info(f"Plot saved to: {save_path}")
    if show:
        plt.show()
    return fig
