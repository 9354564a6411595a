from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import pyqtgraph as pg
from PyQt6.QtGui import QImage, QPainter

from chart_overlays.core.indicator_registry import indicator_renderers
from chart_overlays.core.types import Candle, ChartArea, IndicatorRenderContext, LinearScale
from chart_overlays.indicators.runtime import as_candles
from chart_overlays.ui.painter_surface import QPainterSurface


logger = logging.getLogger(__name__)


def fit_scales(candles: Sequence[Candle], area: ChartArea, padding: float = 0.05) -> Tuple[LinearScale, LinearScale]:
    """Time axis across left..right, price axis (low..high plus padding) bottom..top."""
    xs = [c.x for c in candles if math.isfinite(c.x)]
    lows = [c.l for c in candles if math.isfinite(c.l)]
    highs = [c.h for c in candles if math.isfinite(c.h)]
    if not xs or not lows or not highs:
        return (
            LinearScale(0.0, 1.0, area.left, area.right),
            LinearScale(0.0, 1.0, area.bottom, area.top),
        )
    low = min(lows)
    high = max(highs)
    pad = (high - low) * padding
    x_scale = LinearScale(min(xs), max(xs), area.left, area.right)
    y_scale = LinearScale(low - pad, high + pad, area.bottom, area.top)
    return x_scale, y_scale


def build_render_context(surface, area: ChartArea, candles: Iterable, padding: float = 0.05) -> IndicatorRenderContext:
    # Candle objects, x/o/h/l/c mappings and rows are all accepted; unreadable rows are dropped.
    candles = as_candles(candles)
    x_scale, y_scale = fit_scales(candles, area, padding)
    return IndicatorRenderContext(
        surface=surface,
        chart_area=area,
        x_scale=x_scale,
        y_scale=y_scale,
        candles=candles,
    )


def paint_indicators(
    surface,
    area: ChartArea,
    candles: Iterable,
    names: Iterable[str],
    on_error: Optional[Callable[[str], None]] = None,
) -> List[str]:
    """
    Paint the active indicators in registry order and return the names painted.

    Unknown names are skipped. So is any renderer that needs more candles than
    are available (`min_candles`). A renderer that raises is logged and reported
    through `on_error`; the others still paint.
    """
    active = set(names)
    for name in active:
        if name not in indicator_renderers:
            logger.debug("Unknown indicator %r skipped", name)
    context = build_render_context(surface, area, candles)
    painted: List[str] = []
    for name, renderer in indicator_renderers.items():
        if name not in active:
            continue
        if len(context.candles) < renderer.min_candles:
            logger.debug("Indicator %s skipped: %d candles < %d", name, len(context.candles), renderer.min_candles)
            continue
        try:
            renderer.render(context)
        except Exception as exc:
            logger.exception("Indicator %s failed to render", name)
            _report_error(on_error, f"{name}: {type(exc).__name__}: {exc}")
            continue
        painted.append(name)
    return painted


def _report_error(on_error: Optional[Callable[[str], None]], message: str) -> None:
    if on_error is None:
        return
    try:
        on_error(message)
    except Exception:
        logger.exception("Error callback failed")


def render_indicators_to_image(
    candles: Iterable,
    names: Iterable[str],
    width: int = 800,
    height: int = 400,
    background: str = "#121212",
    on_error: Optional[Callable[[str], None]] = None,
) -> QImage:
    """Paint into an offscreen image. Needs a QGuiApplication instance."""
    image = QImage(int(width), int(height), QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(pg.mkColor(background))
    area = ChartArea(left=0.0, top=0.0, right=float(width), bottom=float(height))
    painter = QPainter(image)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        paint_indicators(QPainterSurface(painter), area, candles, names, on_error=on_error)
    finally:
        painter.end()
    return image
