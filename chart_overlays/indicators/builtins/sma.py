def schema():
    return {
        "id": "MA",
        "name": "Moving Average",
        "label": "MA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#FFA500"},
            "width": {"type": "float", "default": 2.0, "min": 0.5, "max": 10.0, "step": 0.5},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    ma = ctx.ma(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "ma", "values": ma, "color": params.get("color", "#FFA500"), "width": params.get("width", 2.0)}
        ],
    }
