"""Predefined ice-dance patterns (Catalog)."""
from enum import StrEnum

from skatemechanics.model.inputs import Direction, RawInputs


class Preset(StrEnum):
    """Keys for the pattern presets."""
    DUTCH_WALTZ = "dutch-waltz"
    WILLOW = "willow"


ALL_PRESETS: dict[Preset, RawInputs] = {
    # Dutch Waltz: half circle of 9 m over six beats
    Preset.DUTCH_WALTZ: RawInputs(
        bpm=138.0,
        diameter=9.0,
        central_deg=180.0,
        total_beats=6.0,
        direction=Direction.CCW,
        start_beat=0.0,
        swing_beats=1.0,
        swing_amp=1.0,
        offset_length=0.5,
        offset_angle=0.0,
        velocity_angle=0.0,
    ),
    # Willow: three-quarter lobe of 10 m over twelve beats, quick swing
    Preset.WILLOW: RawInputs(
        bpm=138.0,
        diameter=10.0,
        central_deg=270.0,
        total_beats=12.0,
        direction=Direction.CCW,
        start_beat=0.0,
        swing_beats=0.5,
        swing_amp=0.5,
        offset_length=0.3,
        offset_angle=0.0,
        velocity_angle=0.0,
    ),
}


def preset_inputs(preset: Preset | str) -> RawInputs:
    """
    Return the inputs of a named preset.

    Raises:
        ValueError: If `preset` is not a known preset name.
    """
    return ALL_PRESETS[Preset(preset)]
