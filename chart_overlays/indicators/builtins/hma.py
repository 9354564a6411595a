def schema():
    return {
        "id": "HMA",
        "name": "Hull Moving Average",
        "label": "HMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 2, "max": 500},
            "color": {"type": "color", "default": "#FF4081"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    hma = ctx.hma(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "hma", "values": hma, "color": params.get("color", "#FF4081"), "width": 2}
        ],
    }
