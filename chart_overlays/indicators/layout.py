from __future__ import annotations

import math
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from chart_overlays.core.types import Band, ChartArea, PixelScale
from .surface import DrawingSurface


Point = Tuple[float, float]

HIST_POSITIVE = "#4CAF5099"
HIST_NEGATIVE = "#F4433699"
HIST_HALF_WIDTH = 2.0
LEVEL_DASH = [2.0, 2.0]


def _finite(value: float) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


def finite_values(values: Iterable[float]) -> np.ndarray:
    arr = np.asarray(values, dtype=np.float64)
    return arr[np.isfinite(arr)]


def bottom_band(area: ChartArea, height_frac: float, margin_frac: float) -> Band:
    """Carve a horizontal band out of the bottom of the chart area."""
    bottom = area.bottom - area.height * margin_frac
    return Band(top=bottom - area.height * height_frac, bottom=bottom)


def band_mapper(band: Band, low: float, high: float) -> Callable[[float], float]:
    span = (high - low) or 1.0

    def to_y(value: float) -> float:
        return band.bottom - (value - low) / span * band.height

    return to_y


def price_mapper(y_scale: PixelScale) -> Callable[[float], float]:
    return y_scale.get_pixel_for_value


def synthetic_price_mapper(
    y_scale: PixelScale,
    anchor: float,
    mode: str = "scale",
    base: float = 1.0,
    divisor: float = 1.0,
) -> Callable[[float], float]:
    """
    Map an oscillator value to a made-up price near `anchor`, then to pixels.

    `scale`:  anchor * (base + v / divisor)
    `offset`: anchor + v
    """
    if mode == "offset":
        return lambda value: y_scale.get_pixel_for_value(anchor + value)
    return lambda value: y_scale.get_pixel_for_value(anchor * (base + value / divisor))


def project_points(
    times: Sequence[float],
    values: Sequence[float],
    x_scale: PixelScale,
    to_y: Callable[[float], float],
) -> List[Optional[Point]]:
    points: List[Optional[Point]] = []
    count = min(len(times), len(values))
    for i in range(count):
        value = values[i]
        if not _finite(value) or not _finite(times[i]):
            points.append(None)
            continue
        x = x_scale.get_pixel_for_value(float(times[i]))
        y = to_y(float(value))
        if not _finite(x) or not _finite(y):
            points.append(None)
            continue
        points.append((x, y))
    return points


def trace_path(surface: DrawingSurface, points: Sequence[Optional[Point]]) -> int:
    """Append the points to the current path, lifting the pen over every gap."""
    drawn = 0
    pen_down = False
    for point in points:
        if point is None:
            pen_down = False
            continue
        if pen_down:
            surface.line_to(point[0], point[1])
        else:
            surface.move_to(point[0], point[1])
            pen_down = True
        drawn += 1
    return drawn


def _apply_stroke(surface: DrawingSurface, color: str, width: float, dash: Optional[Sequence[float]]) -> None:
    surface.stroke_style = color
    surface.line_width = float(width)
    surface.set_line_dash(list(dash or []))


def stroke_line(
    surface: DrawingSurface,
    points: Sequence[Optional[Point]],
    color: str,
    width: float = 1.0,
    dash: Optional[Sequence[float]] = None,
) -> None:
    if not any(point is not None for point in points):
        return
    surface.begin_path()
    trace_path(surface, points)
    _apply_stroke(surface, color, width, dash)
    surface.stroke()


def fill_cloud(
    surface: DrawingSurface,
    upper: Sequence[Optional[Point]],
    lower: Sequence[Optional[Point]],
    color: str,
) -> None:
    upper_valid = [p for p in upper if p is not None]
    lower_valid = [p for p in lower if p is not None]
    if not upper_valid or not lower_valid:
        return
    surface.begin_path()
    surface.move_to(upper_valid[0][0], upper_valid[0][1])
    for x, y in upper_valid[1:]:
        surface.line_to(x, y)
    for x, y in reversed(lower_valid):
        surface.line_to(x, y)
    surface.close_path()
    surface.fill_style = color
    surface.fill()


def draw_level(
    surface: DrawingSurface,
    area: ChartArea,
    y: float,
    color: str,
    width: float = 1.0,
    dash: Optional[Sequence[float]] = None,
) -> None:
    if not _finite(y):
        return
    surface.begin_path()
    surface.move_to(area.left, y)
    surface.line_to(area.right, y)
    _apply_stroke(surface, color, width, LEVEL_DASH if dash is None else dash)
    surface.stroke()


def draw_histogram(
    surface: DrawingSurface,
    area: ChartArea,
    times: Sequence[float],
    values: Sequence[float],
    x_scale: PixelScale,
    height_frac: float = 0.15,
    margin_frac: float = 0.10,
    color_up: str = HIST_POSITIVE,
    color_down: str = HIST_NEGATIVE,
    half_width: float = HIST_HALF_WIDTH,
) -> None:
    finite = finite_values(values)
    if finite.size == 0:
        return
    low = float(finite.min())
    high = float(finite.max())
    scale = area.height * height_frac / ((high - low) or 1.0)
    zero_y = area.bottom - area.height * margin_frac
    zero_offset = (0.0 - low) * scale
    count = min(len(times), len(values))
    for i in range(count):
        value = values[i]
        if not _finite(value) or not _finite(times[i]):
            continue
        value = float(value)
        x = x_scale.get_pixel_for_value(float(times[i]))
        bar = abs((value - low) * scale - zero_offset)
        if value >= 0:
            surface.fill_style = color_up
            top = zero_y - bar
        else:
            surface.fill_style = color_down
            top = zero_y
        surface.fill_rect(x - half_width, top, half_width * 2, bar)


def draw_dots(
    surface: DrawingSurface,
    points: Sequence[Optional[Point]],
    colors: Sequence[str],
    radius: float = 3.0,
) -> None:
    for point, color in zip(points, colors):
        if point is None:
            continue
        surface.begin_path()
        surface.arc(point[0], point[1], radius, 0.0, 2 * math.pi)
        surface.fill_style = color
        surface.fill()


def draw_vertical_range(
    surface: DrawingSurface,
    x: float,
    y_top: float,
    y_bottom: float,
    color: str,
    width: float = 1.0,
    dash: Optional[Sequence[float]] = None,
) -> None:
    if not (_finite(x) and _finite(y_top) and _finite(y_bottom)):
        return
    surface.begin_path()
    surface.move_to(x, y_top)
    surface.line_to(x, y_bottom)
    _apply_stroke(surface, color, width, dash)
    surface.stroke()


def trend_colors(trend: Sequence[str], color_up: str, color_down: str) -> List[str]:
    return [color_up if flag == "up" else color_down for flag in trend]


def union_range(arrays: Iterable[Sequence[float]]) -> Optional[Tuple[float, float]]:
    parts = [finite_values(values) for values in arrays]
    parts = [p for p in parts if p.size]
    if not parts:
        return None
    merged = np.concatenate(parts)
    return float(merged.min()), float(merged.max())


def band_spec(spec: Dict[str, float], default_height: float, default_margin: float) -> Tuple[float, float]:
    return float(spec.get("height", default_height)), float(spec.get("margin", default_margin))
