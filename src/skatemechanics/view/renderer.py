"""
Path Renderer
=============
Draws named polylines given in world units onto a fixed-size pixel surface.

The viewport is fitted to the data on every call: bounding box of all finite
points, padded on each side, one uniform scale for both axes (world aspect
ratio is preserved), centred, with world "up" mapped to decreasing pixel Y.

This module knows nothing about the physics; it only sees point sequences,
colours and line widths.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Sequence

import numpy as np

from skatemechanics.config import (
    AXES_COLOR,
    DEFAULT_GRID_STEP,
    DEFAULT_PAD,
    GRID_COLOR,
    MARKER_RADIUS,
    MAX_GRID_LINES,
    PLACEHOLDER_COLOR,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

Pixel = tuple[float, float]


class Surface(Protocol):
    """Minimal 2D drawing target. Coordinates are pixels, origin top-left."""
    width: int
    height: int

    def clear(self) -> None: ...
    def polyline(self, points: Sequence[Pixel], color: str, width: float) -> None: ...
    def circle(self, center: Pixel, radius: float, color: str) -> None: ...
    def text(self, position: Pixel, text: str, color: str, size: float) -> None: ...


@dataclass
class Polyline:
    """An ordered sequence of world points with its stroke style."""
    points: npt.ArrayLike
    color: str = "#000000"
    width: float = 2.0
    label: str = ""


@dataclass
class RenderOptions:
    pad: float = DEFAULT_PAD              # fraction of the larger span added on each side
    grid: bool = True
    grid_step: float = DEFAULT_GRID_STEP  # world units
    axes: bool = False


@dataclass(frozen=True)
class Viewport:
    """World -> pixel mapping fitted for one draw call."""
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    scale: float
    cx: float
    cy: float

    @classmethod
    def fit(cls, points: npt.NDArray[np.float64], width: int, height: int, pad: float = DEFAULT_PAD) -> Viewport:
        """
        Fit a viewport around `points` (shape (N, 2), all finite).

        Args:
            points: World points to enclose.
            width: Surface width in pixels.
            height: Surface height in pixels.
            pad: Padding as a fraction of max(span_x, span_y, 1).

        Returns:
            The fitted viewport.
        """
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        span_x = max(1e-9, max_x - min_x)
        span_y = max(1e-9, max_y - min_y)
        margin = pad * max(span_x, span_y, 1.0)

        min_x -= margin
        max_x += margin
        min_y -= margin
        max_y += margin

        sx = width / max(1e-9, max_x - min_x)
        sy = height / max(1e-9, max_y - min_y)
        s = 0.9 * min(sx, sy)  # 10% margin

        cx = width / 2 - s * ((min_x + max_x) / 2)
        cy = height / 2 + s * ((min_y + max_y) / 2)
        return cls(
            min_x=float(min_x),
            max_x=float(max_x),
            min_y=float(min_y),
            max_y=float(max_y),
            scale=float(s),
            cx=float(cx),
            cy=float(cy),
        )

    def to_px(self, points: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Map world point(s) of shape (2,) or (N, 2) to pixels."""
        points = np.asarray(points, dtype=np.float64)
        return np.stack((self.cx + self.scale * points[..., 0], self.cy - self.scale * points[..., 1]), axis=-1)

    def point(self, x: float, y: float) -> Pixel:
        return self.cx + self.scale * x, self.cy - self.scale * y


def _finite_points(points: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Rows of `points` with both coordinates finite, shape (M, 2)."""
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError):
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] < 2 or arr.shape[0] == 0:
        return np.empty((0, 2), dtype=np.float64)
    arr = arr[:, :2]
    return arr[np.isfinite(arr).all(axis=1)]


def _draw_grid(surface: Surface, vp: Viewport, step: float) -> None:
    if not step > 0:
        return
    start_x, end_x = math.ceil(vp.min_x / step), math.floor(vp.max_x / step)
    start_y, end_y = math.ceil(vp.min_y / step), math.floor(vp.max_y / step)
    if (end_x - start_x) + (end_y - start_y) > MAX_GRID_LINES:
        logger.debug(f"Grid step {step:g} too fine for the viewport, skipping grid")
        return

    for k in range(start_x, end_x + 1):
        gx = k * step
        surface.polyline([vp.point(gx, vp.min_y), vp.point(gx, vp.max_y)], GRID_COLOR, 1.0)
    for k in range(start_y, end_y + 1):
        gy = k * step
        surface.polyline([vp.point(vp.min_x, gy), vp.point(vp.max_x, gy)], GRID_COLOR, 1.0)


def _draw_axes(surface: Surface, vp: Viewport) -> None:
    surface.polyline([vp.point(0.0, vp.min_y), vp.point(0.0, vp.max_y)], AXES_COLOR, 1.5)
    surface.polyline([vp.point(vp.min_x, 0.0), vp.point(vp.max_x, 0.0)], AXES_COLOR, 1.5)


def render_paths(
    surface: Optional[Surface],
    paths: Sequence[Polyline],
    options: Optional[RenderOptions] = None,
) -> Optional[Viewport]:
    """
    Clear `surface` and draw `paths` fitted to it.

    Args:
        surface: Drawing target. None is accepted and ignored.
        paths: Polylines in world units.
        options: Padding, grid and axes settings.

    Returns:
        The viewport used, or None when nothing was drawn (no surface, or
        fewer than two finite points in total).
    """
    if surface is None:
        return None
    options = options or RenderOptions()

    surface.clear()

    cleaned = [(p, _finite_points(p.points)) for p in paths if p is not None]
    all_points = [pts for _, pts in cleaned if len(pts)]
    if sum(len(pts) for pts in all_points) < 2:
        surface.text((12.0, 20.0), "No data", PLACEHOLDER_COLOR, 14.0)
        return None

    vp = Viewport.fit(np.vstack(all_points), surface.width, surface.height, options.pad)

    if options.grid:
        _draw_grid(surface, vp, options.grid_step)
    if options.axes:
        _draw_axes(surface, vp)

    for path, pts in cleaned:
        if len(pts) < 2:
            continue
        px = vp.to_px(pts)
        surface.polyline([(float(x), float(y)) for x, y in px], path.color, path.width)
        surface.circle((float(px[0, 0]), float(px[0, 1])), MARKER_RADIUS, path.color)
        surface.circle((float(px[-1, 0]), float(px[-1, 1])), MARKER_RADIUS, path.color)

    return vp
