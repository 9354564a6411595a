def schema():
    return {
        "id": "WMA",
        "name": "Weighted Moving Average",
        "label": "WMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#FFEB3B"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    wma = ctx.wma(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "wma", "values": wma, "color": params.get("color", "#FFEB3B"), "width": 2}
        ],
    }
