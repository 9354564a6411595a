def schema():
    return {
        "id": "ROC",
        "name": "Rate of Change",
        "label": "ROC",
        "category": "momentum",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 12, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#FF9800"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    roc = ctx.roc(close, int(params.get("length", 12)))
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 1.0, "divisor": 100.0},
        "series": [
            {"type": "line", "id": "roc", "values": roc, "color": params.get("color", "#FF9800"), "width": 1.5, "dash": [3, 3]}
        ],
    }
