def schema():
    return {
        "id": "Momentum",
        "name": "Momentum",
        "label": "MOM",
        "category": "momentum",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 10, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#3F51B5"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    mom = ctx.momentum(close, int(params.get("length", 10)))
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "offset"},
        "series": [
            {"type": "line", "id": "momentum", "values": mom, "color": params.get("color", "#3F51B5"), "width": 1.5, "dash": [4, 4]}
        ],
    }
