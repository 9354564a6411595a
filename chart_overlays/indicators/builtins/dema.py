def schema():
    return {
        "id": "DEMA",
        "name": "Double EMA",
        "label": "DEMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#00ACC1"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    dema = ctx.dema(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "dema", "values": dema, "color": params.get("color", "#00ACC1"), "width": 2}
        ],
    }
