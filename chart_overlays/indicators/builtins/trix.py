def schema():
    return {
        "id": "TRIX",
        "name": "TRIX",
        "label": "TRIX",
        "category": "trend",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#9C27B0"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    trix = ctx.trix(close, int(params.get("length", 14)))
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 1.0, "divisor": 10000.0},
        "series": [
            {"type": "line", "id": "trix", "values": trix, "color": params.get("color", "#9C27B0"), "width": 1.5}
        ],
    }
