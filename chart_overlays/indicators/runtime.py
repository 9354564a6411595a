from __future__ import annotations

from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from chart_overlays.core.types import Candle
from . import helpers


def normalize_candles(candles: Iterable) -> List[List[float]]:
    normalized: List[List[float]] = []
    for candle in candles:
        if isinstance(candle, Candle):
            normalized.append([float(candle.x), float(candle.o), float(candle.h), float(candle.l), float(candle.c)])
        elif isinstance(candle, dict):
            try:
                x = float(candle.get("x", candle.get("time", 0)))
                o = float(candle.get("o", candle.get("open", 0)))
                h = float(candle.get("h", candle.get("high", 0)))
                l = float(candle.get("l", candle.get("low", 0)))
                c = float(candle.get("c", candle.get("close", 0)))
            except (TypeError, ValueError):
                continue
            normalized.append([x, o, h, l, c])
        else:
            try:
                row = [float(v) for v in list(candle)[:5]]
            except (TypeError, ValueError):
                continue
            if len(row) < 5:
                continue
            normalized.append(row)
    return normalized


class SeriesContext:
    """Math entry points handed to indicator definitions as `ctx`."""

    def __init__(self, candles_np: np.ndarray) -> None:
        self._bundle = helpers.series_bundle(candles_np)

    def __len__(self) -> int:
        return int(self._bundle.time.size)

    def series(self, candles: Iterable, field: str) -> np.ndarray:
        if field == "open":
            return self._bundle.open.copy()
        if field == "high":
            return self._bundle.high.copy()
        if field == "low":
            return self._bundle.low.copy()
        if field == "close":
            return self._bundle.close.copy()
        return self._bundle.close.copy()

    def time(self, candles: Iterable) -> np.ndarray:
        return self._bundle.time.copy()

    def last_close(self, default: float = 100.0) -> float:
        if self._bundle.close.size == 0:
            return default
        last = float(self._bundle.close[-1])
        if not np.isfinite(last) or last == 0:
            return default
        return last

    def ma(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.ma(values, length)

    def ema(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.ema(values, length)

    def wma(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.wma(values, length)

    def dema(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.dema(values, length)

    def tema(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.tema(values, length)

    def hma(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.hma(values, length)

    def kama(self, values: Iterable[float], length: int, fast: int = 2, slow: int = 30) -> np.ndarray:
        return helpers.kama(values, length, fast, slow)

    def macd(self, values: Iterable[float], fast: int, slow: int, signal: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.macd(values, fast, slow, signal)

    def rsi(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.rsi(values, length)

    def stochastic(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], k_len: int, d_len: int) -> Tuple[np.ndarray, np.ndarray]:
        return helpers.stochastic(high, low, close, k_len, d_len)

    def williams_r(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> np.ndarray:
        return helpers.williams_r(high, low, close, length)

    def atr(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> np.ndarray:
        return helpers.atr(high, low, close, length)

    def adx(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.adx(high, low, close, length)

    def cci(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> np.ndarray:
        return helpers.cci(high, low, close, length)

    def ichimoku(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], tenkan: int, kijun: int, span_b: int):
        return helpers.ichimoku(high, low, close, tenkan, kijun, span_b)

    def psar(self, high: Iterable[float], low: Iterable[float], accel: float, max_accel: float) -> Tuple[np.ndarray, List[str]]:
        return helpers.psar(high, low, accel, max_accel)

    def trix(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.trix(values, length)

    def donchian(self, high: Iterable[float], low: Iterable[float], length: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.donchian(high, low, length)

    def keltner(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int, mult: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.keltner(high, low, close, length, mult)

    def bollinger(self, values: Iterable[float], length: int, mult: float) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.bollinger(values, length, mult)

    def stddev(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.stddev(values, length)

    def momentum(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.momentum(values, length)

    def roc(self, values: Iterable[float], length: int) -> np.ndarray:
        return helpers.roc(values, length)

    def mfi(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> np.ndarray:
        return helpers.mfi(high, low, close, length)

    def aroon(self, high: Iterable[float], low: Iterable[float], length: int) -> Tuple[np.ndarray, np.ndarray]:
        return helpers.aroon(high, low, length)

    def aroon_oscillator(self, high: Iterable[float], low: Iterable[float], length: int) -> np.ndarray:
        return helpers.aroon_oscillator(high, low, length)

    def ultimate_oscillator(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], short_len: int, mid_len: int, long_len: int) -> np.ndarray:
        return helpers.ultimate_oscillator(high, low, close, short_len, mid_len, long_len)

    def awesome_oscillator(self, high: Iterable[float], low: Iterable[float]) -> np.ndarray:
        return helpers.awesome_oscillator(high, low)

    def ppo(self, values: Iterable[float], fast: int, slow: int) -> np.ndarray:
        return helpers.ppo(values, fast, slow)

    def linreg(self, values: Iterable[float], length: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        return helpers.linreg(values, length)

    def fisher(self, high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int) -> np.ndarray:
        return helpers.fisher(high, low, close, length)

    def stc(self, values: Iterable[float], fast: int, slow: int, cycle: int) -> np.ndarray:
        return helpers.stc(values, fast, slow, cycle)


def as_candles(candles: Iterable) -> List[Candle]:
    return [Candle(*row) for row in normalize_candles(candles)]


def run_compute(
    candles: Iterable,
    params: Dict[str, Any],
    compute_fn,
) -> Tuple[Dict[str, Any], np.ndarray]:
    normalized = normalize_candles(candles)
    ctx = SeriesContext(helpers.candles_to_numpy(normalized))
    result = compute_fn(normalized, params, ctx)
    return result or {}, ctx.time(normalized)
