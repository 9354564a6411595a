def schema():
    return {
        "id": "StdDev",
        "name": "Standard Deviation Bands",
        "label": "SD",
        "category": "volatility",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#8BC34A80"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    length = int(params.get("length", 20))
    basis = ctx.ma(close, length)
    dev = ctx.stddev(close, length)
    color = params.get("color", "#8BC34A80")
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "upper", "values": basis + dev, "color": color, "width": 1.5},
            {"type": "line", "id": "lower", "values": basis - dev, "color": color, "width": 1.5},
        ],
    }
