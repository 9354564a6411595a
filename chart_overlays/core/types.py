from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Optional, Protocol, Sequence


@dataclass(frozen=True)
class Candle:
    x: float
    o: float
    h: float
    l: float
    c: float


@dataclass(frozen=True)
class ChartArea:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top


class PixelScale(Protocol):
    def get_pixel_for_value(self, value: float) -> float:
        ...


@dataclass(frozen=True)
class LinearScale:
    """
    Monotonic value -> pixel mapping for one axis.

    `start`/`end` are the pixels for `min`/`max`. For a price axis pass
    `start=bottom, end=top` so larger prices land higher on the canvas.
    """

    min: float
    max: float
    start: float
    end: float

    def get_pixel_for_value(self, value: float) -> float:
        span = self.max - self.min
        if span == 0 or not math.isfinite(span):
            return (self.start + self.end) / 2.0
        return self.start + (float(value) - self.min) / span * (self.end - self.start)


@dataclass
class IndicatorRenderContext:
    surface: Any
    chart_area: ChartArea
    x_scale: PixelScale
    y_scale: PixelScale
    candles: Sequence[Candle]
    # Not consumed by any renderer yet; kept for windowed rendering.
    visible_candles: Optional[Sequence[Candle]] = None

    def __post_init__(self) -> None:
        if self.visible_candles is None:
            self.visible_candles = self.candles


@dataclass
class Band:
    top: float
    bottom: float

    @property
    def height(self) -> float:
        return self.bottom - self.top

