"""
Pytest configuration for the skatemechanics test suite.

Qt is forced onto the off-screen platform so the image tests run on machines
without a display.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from skatemechanics.model.inputs import Direction, RawInputs
from skatemechanics.physics.parameters import derive


class RecordingSurface:
    """Surface double that records every drawing call."""

    def __init__(self, width: int = 400, height: int = 300) -> None:
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self) -> None:
        self.calls = [("clear",)]

    def polyline(self, points, color, width) -> None:
        self.calls.append(("polyline", list(points), color, width))

    def circle(self, center, radius, color) -> None:
        self.calls.append(("circle", center, radius, color))

    def text(self, position, text, color, size) -> None:
        self.calls.append(("text", position, text, color, size))

    def of_kind(self, kind: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def scenario_inputs() -> RawInputs:
    """138 bpm half circle of 9 m in six beats, one-beat swing of 1 m."""
    return RawInputs(
        bpm=138.0,
        diameter=9.0,
        central_deg=180.0,
        total_beats=6.0,
        direction=Direction.CCW,
        start_beat=0.0,
        swing_beats=1.0,
        swing_amp=1.0,
        offset_length=0.0,
        step=0.01,
    )


@pytest.fixture
def scenario_params(scenario_inputs):
    return derive(scenario_inputs)


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture(scope="session")
def qt_app():
    from PySide6.QtGui import QGuiApplication

    app = QGuiApplication.instance() or QGuiApplication([])
    yield app
