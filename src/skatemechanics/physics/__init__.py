"""
Rotating-Frame Physics Engine
=============================
The core implementation of the swing analysis.

Why is this package needed?
---------------------------
1. Physics: It derives the motion parameters and integrates the rotating-frame
   equations of motion (Coriolis and centrifugal terms).
2. Time-Stepping: It manages the fixed-step loop from t=0 to the end of the swing.
3. Frames: It maps rotating-frame trajectories to the world frame and back.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
