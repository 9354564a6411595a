import math


def schema():
    return {
        "id": "ATR",
        "name": "Average True Range",
        "label": "ATR",
        "category": "volatility",
        "layout": "markers",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#FFC10799"},
        },
    }


def compute(candles, params, ctx):
    if len(ctx) == 0:
        return {"layout": "markers", "markers": []}
    close = ctx.series(candles, "close")
    atr = ctx.atr(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        close,
        int(params.get("length", 14)),
    )
    last_atr = float(atr[-1])
    last_close = float(close[-1])
    if not math.isfinite(last_atr) or not math.isfinite(last_close):
        return {"layout": "markers", "markers": []}
    return {
        "layout": "markers",
        "markers": [
            {
                "type": "vline",
                "id": "atr",
                "time": float(ctx.time(candles)[-1]),
                "upper": last_close + last_atr,
                "lower": last_close - last_atr,
                "color": params.get("color", "#FFC10799"),
                "width": 1,
                "dash": [2, 2],
            }
        ],
    }
