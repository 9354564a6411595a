def schema():
    return {
        "id": "CCI",
        "name": "CCI",
        "label": "CCI",
        "category": "oscillator",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#4CAF50"},
        },
    }


def compute(candles, params, ctx):
    cci = ctx.cci(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("length", 20)),
    )
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 1.0, "divisor": 1000.0},
        "series": [
            {"type": "line", "id": "cci", "values": cci, "color": params.get("color", "#4CAF50"), "width": 1.5, "dash": [5, 5]}
        ],
    }
