from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Iterable, List, Tuple

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view


@dataclass
class SeriesBundle:
    time: np.ndarray
    open: np.ndarray
    high: np.ndarray
    low: np.ndarray
    close: np.ndarray


def candles_to_numpy(rows: List[Iterable[float]]) -> np.ndarray:
    if not rows:
        return np.empty((0, 5), dtype=np.float64)
    arr = np.asarray(rows, dtype=np.float64)
    if arr.ndim == 1:
        arr = np.expand_dims(arr, 0)
    return arr[:, :5]


def series_bundle(candles_np: np.ndarray) -> SeriesBundle:
    if candles_np.size == 0:
        empty = np.empty(0, dtype=np.float64)
        return SeriesBundle(empty, empty, empty, empty, empty)
    return SeriesBundle(
        time=candles_np[:, 0],
        open=candles_np[:, 1],
        high=candles_np[:, 2],
        low=candles_np[:, 3],
        close=candles_np[:, 4],
    )


def _as_float(values: Iterable[float]) -> np.ndarray:
    return np.asarray(values, dtype=np.float64)


def _empty_like(n: int) -> np.ndarray:
    return np.full(n, np.nan, dtype=np.float64)


def _windows(arr: np.ndarray, length: int) -> np.ndarray:
    return sliding_window_view(arr, length)


def ma(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    n = arr.size
    out = _empty_like(n)
    if length <= 0 or n < length:
        return out
    out[length - 1:] = _windows(arr, length).mean(axis=1)
    return out


def ema(values: Iterable[float], length: int) -> np.ndarray:
    """
    Exponential moving average seeded with the first finite input.

    NaN inputs produce NaN outputs without resetting the running value, so
    chained averages keep the warm-up gaps of their source.
    """
    arr = _as_float(values)
    n = arr.size
    out = _empty_like(n)
    if length <= 0 or n == 0:
        return out
    alpha = 2.0 / (length + 1.0)
    ema_val = np.nan
    for i in range(n):
        v = arr[i]
        if np.isnan(v):
            continue
        if np.isnan(ema_val):
            ema_val = v
        else:
            ema_val = alpha * v + (1 - alpha) * ema_val
        out[i] = ema_val
    return out


def wma(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    n = arr.size
    out = _empty_like(n)
    if length <= 0 or n < length:
        return out
    weights = np.arange(1, length + 1, dtype=np.float64)
    out[length - 1:] = _windows(arr, length) @ weights / weights.sum()
    return out


def dema(values: Iterable[float], length: int) -> np.ndarray:
    e1 = ema(values, length)
    e2 = ema(e1, length)
    return 2 * e1 - e2


def tema(values: Iterable[float], length: int) -> np.ndarray:
    e1 = ema(values, length)
    e2 = ema(e1, length)
    e3 = ema(e2, length)
    return 3 * e1 - 3 * e2 + e3


def hma(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    if length <= 0:
        return _empty_like(arr.size)
    diff = 2 * wma(arr, length // 2) - wma(arr, length)
    return wma(diff, int(math.sqrt(length)))


def kama(values: Iterable[float], length: int, fast: int = 2, slow: int = 30) -> np.ndarray:
    arr = _as_float(values)
    n = arr.size
    out = _empty_like(n)
    if length <= 0 or n <= length:
        return out
    fast_sc = 2.0 / (fast + 1.0)
    slow_sc = 2.0 / (slow + 1.0)
    steps = np.abs(np.diff(arr))
    out[length] = arr[length]
    for i in range(length + 1, n):
        change = abs(arr[i] - arr[i - length])
        volatility = steps[i - length:i].sum()
        er = 0.0 if volatility == 0 else change / volatility
        sc = (er * (fast_sc - slow_sc) + slow_sc) ** 2
        out[i] = out[i - 1] + sc * (arr[i] - out[i - 1])
    return out


def macd(values: Iterable[float], fast: int = 12, slow: int = 26, signal: int = 9) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    arr = _as_float(values)
    macd_line = ema(arr, fast) - ema(arr, slow)
    macd_line[: max(slow - 1, 0)] = np.nan
    signal_line = ema(macd_line, signal)
    hist = macd_line - signal_line
    return macd_line, signal_line, hist


def rsi(values: Iterable[float], length: int = 14) -> np.ndarray:
    arr = _as_float(values)
    n = arr.size
    out = _empty_like(n)
    if length <= 0 or n <= length:
        return out
    diffs = np.diff(arr)
    gains = np.where(diffs > 0, diffs, 0.0)
    losses = np.where(diffs < 0, -diffs, 0.0)
    for i in range(length, n):
        avg_gain = gains[i - length:i].sum() / length
        avg_loss = losses[i - length:i].sum() / length
        if avg_loss == 0:
            out[i] = 100.0
        else:
            out[i] = 100.0 - (100.0 / (1.0 + avg_gain / avg_loss))
    return out


def highest(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    out = _empty_like(arr.size)
    if length <= 0 or arr.size < length:
        return out
    out[length - 1:] = _windows(arr, length).max(axis=1)
    return out


def lowest(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    out = _empty_like(arr.size)
    if length <= 0 or arr.size < length:
        return out
    out[length - 1:] = _windows(arr, length).min(axis=1)
    return out


def midpoint(high: Iterable[float], low: Iterable[float], length: int) -> np.ndarray:
    return (highest(high, length) + lowest(low, length)) / 2.0


def stochastic(high: Iterable[float], low: Iterable[float], close: Iterable[float], k_len: int = 14, d_len: int = 3) -> Tuple[np.ndarray, np.ndarray]:
    c = _as_float(close)
    hh = highest(high, k_len)
    ll = lowest(low, k_len)
    denom = hh - ll
    with np.errstate(divide="ignore", invalid="ignore"):
        k = np.where(denom == 0, 50.0, (c - ll) / denom * 100.0)
    k[np.isnan(denom)] = np.nan
    return k, ma(k, d_len)


def williams_r(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 14) -> np.ndarray:
    c = _as_float(close)
    hh = highest(high, length)
    ll = lowest(low, length)
    denom = hh - ll
    with np.errstate(divide="ignore", invalid="ignore"):
        out = np.where(denom == 0, -50.0, (hh - c) / denom * -100.0)
    out[np.isnan(denom)] = np.nan
    return out


def true_range(high: Iterable[float], low: Iterable[float], close: Iterable[float]) -> np.ndarray:
    h = _as_float(high)
    l = _as_float(low)
    c = _as_float(close)
    tr = _empty_like(c.size)
    if c.size < 2:
        return tr
    prev_close = c[:-1]
    tr[1:] = np.maximum.reduce([h[1:] - l[1:], np.abs(h[1:] - prev_close), np.abs(l[1:] - prev_close)])
    return tr


def atr(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 14) -> np.ndarray:
    return ma(true_range(high, low, close), length)


def adx(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 14) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Return (adx, plus_di, minus_di), all aligned to the candle index.

    Directional movement starts at the second candle, so index 0 is always NaN.
    """
    h = _as_float(high)
    l = _as_float(low)
    n = h.size
    plus_di = _empty_like(n)
    minus_di = _empty_like(n)
    if length <= 0 or n < 2:
        return _empty_like(n), plus_di, minus_di
    up = h[1:] - h[:-1]
    down = l[:-1] - l[1:]
    plus_dm = np.zeros(n, dtype=np.float64)
    minus_dm = np.zeros(n, dtype=np.float64)
    plus_dm[1:] = np.where((up > down) & (up > 0), up, 0.0)
    minus_dm[1:] = np.where((down > up) & (down > 0), down, 0.0)
    tr_avg = atr(h, l, close, length)
    for i in range(length, n):
        tr_sum = tr_avg[i] * length
        if np.isnan(tr_sum) or tr_sum == 0:
            continue
        plus_di[i] = plus_dm[i + 1 - length: i + 1].sum() / tr_sum * 100.0
        minus_di[i] = minus_dm[i + 1 - length: i + 1].sum() / tr_sum * 100.0
    di_sum = plus_di + minus_di
    with np.errstate(divide="ignore", invalid="ignore"):
        dx = np.where(di_sum == 0, np.nan, np.abs(plus_di - minus_di) / di_sum * 100.0)
    return ma(dx, length), plus_di, minus_di


def cci(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 20) -> np.ndarray:
    tp = (_as_float(high) + _as_float(low) + _as_float(close)) / 3.0
    n = tp.size
    out = _empty_like(n)
    if length <= 0 or n < length:
        return out
    for i in range(length - 1, n):
        window = tp[i + 1 - length: i + 1]
        mean = window.mean()
        dev = np.abs(window - mean).mean()
        out[i] = 0.0 if dev == 0 else (tp[i] - mean) / (0.015 * dev)
    return out


def ichimoku(
    high: Iterable[float],
    low: Iterable[float],
    close: Iterable[float],
    tenkan_len: int = 9,
    kijun_len: int = 26,
    span_b_len: int = 52,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    c = _as_float(close)
    tenkan = midpoint(high, low, tenkan_len)
    kijun = midpoint(high, low, kijun_len)
    span_a = (tenkan + kijun) / 2.0
    span_b = midpoint(high, low, span_b_len)
    chikou = _empty_like(c.size)
    if 0 <= kijun_len < c.size:
        chikou[: c.size - kijun_len] = c[kijun_len:]
    return tenkan, kijun, span_a, span_b, chikou


def psar(high: Iterable[float], low: Iterable[float], accel: float = 0.02, max_accel: float = 0.2) -> Tuple[np.ndarray, List[str]]:
    h = _as_float(high)
    l = _as_float(low)
    n = h.size
    out = _empty_like(n)
    trend = ["up"] * n
    if n < 2:
        return out, trend
    sar = l[0]
    ep = h[0]
    af = accel
    uptrend = True
    for i in range(1, n):
        sar = sar + af * (ep - sar)
        if uptrend:
            if sar > l[i]:
                uptrend = False
                sar = ep
                ep = l[i]
                af = accel
            elif h[i] > ep:
                ep = h[i]
                af = min(af + accel, max_accel)
        else:
            if sar < h[i]:
                uptrend = True
                sar = ep
                ep = h[i]
                af = accel
            elif l[i] < ep:
                ep = l[i]
                af = min(af + accel, max_accel)
        out[i] = sar
        trend[i] = "up" if uptrend else "down"
    return out, trend


def trix(values: Iterable[float], length: int = 14) -> np.ndarray:
    e3 = ema(ema(ema(values, length), length), length)
    out = _empty_like(e3.size)
    if e3.size < 2:
        return out
    prev = e3[:-1]
    with np.errstate(divide="ignore", invalid="ignore"):
        out[1:] = np.where(prev != 0, (e3[1:] - prev) / prev * 10000.0, np.nan)
    return out


def donchian(high: Iterable[float], low: Iterable[float], length: int = 20) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    upper = highest(high, length)
    lower = lowest(low, length)
    return upper, (upper + lower) / 2.0, lower


def keltner(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 20, mult: float = 2.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    basis = ema(close, length)
    range_atr = atr(high, low, close, length)
    return basis + mult * range_atr, basis, basis - mult * range_atr


def stddev(values: Iterable[float], length: int) -> np.ndarray:
    arr = _as_float(values)
    out = _empty_like(arr.size)
    if length <= 0 or arr.size < length:
        return out
    out[length - 1:] = _windows(arr, length).std(axis=1)
    return out


def bollinger(values: Iterable[float], length: int = 20, mult: float = 2.0) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    basis = ma(values, length)
    dev = stddev(values, length) * mult
    return basis + dev, basis, basis - dev


def momentum(values: Iterable[float], length: int = 10) -> np.ndarray:
    arr = _as_float(values)
    out = _empty_like(arr.size)
    if length <= 0 or arr.size <= length:
        return out
    out[length:] = arr[length:] - arr[:-length]
    return out


def roc(values: Iterable[float], length: int = 12) -> np.ndarray:
    arr = _as_float(values)
    out = _empty_like(arr.size)
    if length <= 0 or arr.size <= length:
        return out
    prev = arr[:-length]
    with np.errstate(divide="ignore", invalid="ignore"):
        out[length:] = np.where(prev != 0, (arr[length:] - prev) / prev * 100.0, np.nan)
    return out


def mfi(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 14) -> np.ndarray:
    # No volume in the candle model: every bar carries unit volume.
    tp = (_as_float(high) + _as_float(low) + _as_float(close)) / 3.0
    n = tp.size
    out = _empty_like(n)
    if length <= 0 or n <= length:
        return out
    up = np.zeros(n, dtype=np.float64)
    down = np.zeros(n, dtype=np.float64)
    up[1:] = np.where(tp[1:] > tp[:-1], tp[1:], 0.0)
    down[1:] = np.where(tp[1:] < tp[:-1], tp[1:], 0.0)
    for i in range(length, n):
        positive = up[i + 1 - length: i + 1].sum()
        negative = down[i + 1 - length: i + 1].sum()
        if negative == 0:
            out[i] = 100.0
        else:
            out[i] = 100.0 - (100.0 / (1.0 + positive / negative))
    return out


def aroon(high: Iterable[float], low: Iterable[float], length: int = 14) -> Tuple[np.ndarray, np.ndarray]:
    h = _as_float(high)
    l = _as_float(low)
    n = h.size
    up = _empty_like(n)
    down = _empty_like(n)
    if length <= 0 or n <= length:
        return up, down
    for i in range(length, n):
        start = i + 1 - length
        up[i] = (int(np.argmax(h[start: i + 1])) + 1) / length * 100.0
        down[i] = (int(np.argmin(l[start: i + 1])) + 1) / length * 100.0
    return up, down


def aroon_oscillator(high: Iterable[float], low: Iterable[float], length: int = 14) -> np.ndarray:
    up, down = aroon(high, low, length)
    return up - down


def ultimate_oscillator(
    high: Iterable[float],
    low: Iterable[float],
    close: Iterable[float],
    short_len: int = 7,
    mid_len: int = 14,
    long_len: int = 28,
) -> np.ndarray:
    l = _as_float(low)
    c = _as_float(close)
    n = c.size
    out = _empty_like(n)
    longest = max(short_len, mid_len, long_len)
    if min(short_len, mid_len, long_len) <= 0 or n <= longest:
        return out
    tr = true_range(high, l, c)
    bp = _empty_like(n)
    bp[1:] = c[1:] - np.minimum(l[1:], c[:-1])

    def _ratio(i: int, length: int) -> float:
        tr_sum = tr[i + 1 - length: i + 1].sum()
        if tr_sum == 0:
            return 0.0
        return bp[i + 1 - length: i + 1].sum() / tr_sum

    for i in range(longest, n):
        out[i] = 100.0 * (4 * _ratio(i, short_len) + 2 * _ratio(i, mid_len) + _ratio(i, long_len)) / 7.0
    return out


def awesome_oscillator(high: Iterable[float], low: Iterable[float]) -> np.ndarray:
    median = (_as_float(high) + _as_float(low)) / 2.0
    return ma(median, 5) - ma(median, 34)


def ppo(values: Iterable[float], fast: int = 12, slow: int = 26) -> np.ndarray:
    fast_ema = ema(values, fast)
    slow_ema = ema(values, slow)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(slow_ema != 0, (fast_ema - slow_ema) / slow_ema * 100.0, np.nan)


def linreg(values: Iterable[float], length: int = 14) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Rolling least-squares fit over x = 1..length; returns (slope, intercept, r_squared)."""
    arr = _as_float(values)
    n = arr.size
    slope = _empty_like(n)
    intercept = _empty_like(n)
    r_squared = _empty_like(n)
    if length <= 1 or n < length:
        return slope, intercept, r_squared
    x = np.arange(1, length + 1, dtype=np.float64)
    sum_x = x.sum()
    sum_x2 = (x * x).sum()
    denom = length * sum_x2 - sum_x * sum_x
    for i in range(length - 1, n):
        y = arr[i + 1 - length: i + 1]
        sum_y = y.sum()
        m = (length * (x * y).sum() - sum_x * sum_y) / denom
        b = (sum_y - m * sum_x) / length
        ss_res = ((y - (m * x + b)) ** 2).sum()
        ss_tot = ((y - sum_y / length) ** 2).sum()
        slope[i] = m
        intercept[i] = b
        r_squared[i] = 0.0 if ss_tot == 0 else 1.0 - ss_res / ss_tot
    return slope, intercept, r_squared


def fisher(high: Iterable[float], low: Iterable[float], close: Iterable[float], length: int = 10) -> np.ndarray:
    c = _as_float(close)
    n = c.size
    out = _empty_like(n)
    if length <= 0 or n < length:
        return out
    hh = highest(high, length)
    ll = lowest(low, length)
    raw = _empty_like(n)
    with np.errstate(divide="ignore", invalid="ignore"):
        for i in range(length - 1, n):
            span = hh[i] - ll[i]
            raw[i] = 0.0 if span == 0 else 2.0 * ((c[i] - ll[i]) / span - 0.5)
            if i == length - 1:
                out[i] = 0.5 * np.log((1.0 + raw[i]) / (1.0 - raw[i]))
            else:
                smoothed = 0.33 * raw[i] + 0.67 * raw[i - 1]
                out[i] = 0.5 * np.log((1.0 + smoothed) / (1.0 - smoothed)) + 0.5 * out[i - 1]
    return out


def stc(values: Iterable[float], fast: int = 23, slow: int = 50, cycle: int = 10) -> np.ndarray:
    out, _, _ = macd(values, fast, slow, 1)
    if cycle <= 0:
        return out
    for _ in range(2):
        # Updated in place: later windows see already-rescaled values.
        for i in range(cycle - 1, out.size):
            if np.isnan(out[i]):
                continue
            window = out[i + 1 - cycle: i + 1]
            window = window[~np.isnan(window)]
            lo = window.min()
            hi = window.max()
            if hi != lo:
                out[i] = 100.0 * (out[i] - lo) / (hi - lo)
    return out
