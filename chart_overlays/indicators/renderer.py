from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Sequence

import numpy as np

from chart_overlays.core.types import IndicatorRenderContext
from . import layout
from .runtime import run_compute
from .surface import drawing_session


def value_mapper(context: IndicatorRenderContext, output: Dict[str, Any]) -> Optional[Callable[[float], float]]:
    kind = output.get("layout", "price")
    area = context.chart_area
    if kind == "band":
        spec = output.get("band") or {}
        height, margin = layout.band_spec(spec, 0.20, 0.05)
        band = layout.bottom_band(area, height, margin)
        return layout.band_mapper(band, float(spec.get("min", 0.0)), float(spec.get("max", 100.0)))
    if kind == "dynamic_band":
        spec = output.get("band") or {}
        value_range = layout.union_range(s.get("values", []) for s in output.get("series", []))
        if value_range is None:
            return None
        height, margin = layout.band_spec(spec, 0.30, 0.10)
        band = layout.bottom_band(area, height, margin)
        return layout.band_mapper(band, value_range[0], value_range[1])
    if kind == "price_relative":
        spec = output.get("projection") or {}
        return layout.synthetic_price_mapper(
            context.y_scale,
            float(spec.get("anchor", 100.0)),
            mode=str(spec.get("mode", "scale")),
            base=float(spec.get("base", 1.0)),
            divisor=float(spec.get("divisor", 1.0)),
        )
    return layout.price_mapper(context.y_scale)


def draw_output(context: IndicatorRenderContext, output: Dict[str, Any], times: Sequence[float]) -> None:
    """Project one compute() output onto the context's surface."""
    if not output:
        return
    to_y = value_mapper(context, output)
    if to_y is None:
        return
    surface = context.surface
    x_scale = context.x_scale

    for cloud in output.get("bands", []):
        upper = layout.project_points(times, cloud.get("upper", []), x_scale, to_y)
        lower = layout.project_points(times, cloud.get("lower", []), x_scale, to_y)
        layout.fill_cloud(surface, upper, lower, cloud.get("fill", "#FFFFFF33"))

    for series in output.get("series", []):
        points = layout.project_points(times, series.get("values", []), x_scale, to_y)
        layout.stroke_line(
            surface,
            points,
            series.get("color", "#FFFFFF"),
            float(series.get("width", 1.0)),
            series.get("dash"),
        )

    for hist in output.get("hist", []):
        layout.draw_histogram(
            surface,
            context.chart_area,
            times,
            hist.get("values", []),
            x_scale,
            height_frac=float(hist.get("height", 0.15)),
            margin_frac=float(hist.get("margin", 0.10)),
            color_up=hist.get("color_up", layout.HIST_POSITIVE),
            color_down=hist.get("color_down", layout.HIST_NEGATIVE),
        )

    for marker in output.get("markers", []):
        _draw_marker(context, marker, times)

    for level in output.get("levels", []):
        try:
            value = float(level.get("value"))
        except (TypeError, ValueError):
            continue
        layout.draw_level(
            surface,
            context.chart_area,
            to_y(value),
            level.get("color", "#8A8F9B"),
            float(level.get("width", 1.0)),
            level.get("dash"),
        )


def _draw_marker(context: IndicatorRenderContext, spec: Dict[str, Any], times: Sequence[float]) -> None:
    kind = spec.get("type", "dots")
    y_scale = context.y_scale
    if kind == "dots":
        points = layout.project_points(times, spec.get("values", []), context.x_scale, y_scale.get_pixel_for_value)
        colors = layout.trend_colors(
            spec.get("trend", []),
            spec.get("color_up", "#00BCD4"),
            spec.get("color_down", "#FF5722"),
        )
        layout.draw_dots(context.surface, points, colors, float(spec.get("radius", 3.0)))
        return
    if kind == "vline":
        try:
            x = context.x_scale.get_pixel_for_value(float(spec.get("time")))
            upper = y_scale.get_pixel_for_value(float(spec.get("upper")))
            lower = y_scale.get_pixel_for_value(float(spec.get("lower")))
        except (TypeError, ValueError):
            return
        layout.draw_vertical_range(
            context.surface,
            x,
            upper,
            lower,
            spec.get("color", "#FFFFFF"),
            float(spec.get("width", 1.0)),
            spec.get("dash"),
        )


class IndicatorRenderer:
    """A registered indicator: its compute() definition plus the params it renders with."""

    def __init__(
        self,
        name: str,
        compute: Callable[..., Dict[str, Any]],
        layout: str = "price",
        min_candles: int = 20,
        title: str = "",
        label: str = "",
        category: str = "trend",
        inputs: Optional[Dict[str, dict]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.name = name
        self.compute = compute
        self.layout = layout
        self.min_candles = int(min_candles)
        self.title = title or name
        self.label = label or name
        self.category = category
        self.inputs = dict(inputs or {})
        self.params = dict(params or {})

    def __repr__(self) -> str:
        return f"IndicatorRenderer(name={self.name!r}, layout={self.layout!r})"

    def compute_output(self, candles: Any) -> tuple[Dict[str, Any], np.ndarray]:
        return run_compute(candles, self.params, self.compute)

    def render(self, context: IndicatorRenderContext) -> None:
        output, times = self.compute_output(context.candles)
        with drawing_session(context.surface):
            draw_output(context, output, times)
