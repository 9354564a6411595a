def schema():
    return {
        "id": "EMA",
        "name": "Exponential Moving Average",
        "label": "EMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#00BFFF"},
            "width": {"type": "float", "default": 2.0, "min": 0.5, "max": 10.0, "step": 0.5},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    ema = ctx.ema(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "ema", "values": ema, "color": params.get("color", "#00BFFF"), "width": params.get("width", 2.0)}
        ],
    }
