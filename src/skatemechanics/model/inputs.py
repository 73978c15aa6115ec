"""
Raw User Inputs
===============
This module defines the flat record of user-supplied scalars that drives one
simulation run.

Why is this file needed?
------------------------
1. Contract: The presentation layer (form fields, command line, presets) hands
   over a flat mapping of strings/numbers. This module is the single place
   where that mapping is turned into typed values.
2. Robustness: Missing, non-numeric or non-finite fields are never fatal; they
   silently fall back to the documented default.

Classes:
    Direction: Rotation sense along the arc.
    RawInputs: The immutable input record.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import Any, Mapping

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    CCW = "ccw"
    CW = "cw"

    @classmethod
    def parse(cls, value: Any) -> Direction:
        """Anything other than 'cw' (case-insensitive) means counter-clockwise."""
        if isinstance(value, str) and value.strip().lower() == cls.CW.value:
            return cls.CW
        return cls.CCW


# Original form-field names -> dataclass field names
FIELD_ALIASES: dict[str, str] = {
    "centralDeg": "central_deg",
    "totalBeats": "total_beats",
    "startBeat": "start_beat",
    "swingBeats": "swing_beats",
    "swingAmp": "swing_amp",
    "l": "offset_length",
    "theta0": "offset_angle",
    "thetaV": "velocity_angle",
    "h": "step",
}


@dataclass(frozen=True)
class RawInputs:
    """
    User-supplied scalars for one run. Defaults are the Dutch Waltz pattern
    with the foot starting at the centre of mass.
    """
    bpm: float = 138.0                   # tempo, beats per minute
    diameter: float = 9.0                # arc diameter, m
    central_deg: float = 180.0           # arc central angle, deg
    total_beats: float = 6.0             # beats to traverse the arc
    direction: Direction = Direction.CCW
    start_beat: float = 0.0              # beat on the arc where the swing starts
    swing_beats: float = 1.0             # swing duration, beats
    swing_amp: float = 1.0               # swing amplitude, m
    offset_length: float = 0.0           # initial foot offset from CoM, m
    offset_angle: float = 0.0            # deg, 0 = forward, 90 = outward
    velocity_angle: float = 0.0          # deg, 0 = forward, 90 = outward
    step: float = 0.01                   # integration step, s

    @classmethod
    def from_fields(cls, values: Mapping[str, Any], base: RawInputs | None = None) -> RawInputs:
        """
        Build inputs from a flat mapping of field values.

        Args:
            values: Field name -> value. Keys may be the dataclass names or the
                original form-field names (see FIELD_ALIASES).
            base: Record supplying the fallback values. Defaults to RawInputs().

        Returns:
            A new RawInputs. Unusable values keep the fallback value.
        """
        base = base if base is not None else cls()
        known = {f.name for f in fields(cls)}
        updates: dict[str, Any] = {}

        for key, raw in values.items():
            name = FIELD_ALIASES.get(key, key)
            if name not in known:
                logger.debug(f"Ignoring unknown input field {key!r}")
                continue

            if name == "direction":
                updates[name] = Direction.parse(raw)
                continue

            number = _to_float(raw)
            if number is None:
                logger.debug(f"Field {key!r}={raw!r} is not a finite number, keeping default")
                continue
            updates[name] = number

        return replace(base, **updates)

    def with_values(self, **values: Any) -> RawInputs:
        """Shortcut for `RawInputs.from_fields(values, base=self)`."""
        return RawInputs.from_fields(values, base=self)


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None
