def schema():
    return {
        "id": "Fisher",
        "name": "Fisher Transform",
        "label": "FISH",
        "category": "oscillator",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 10, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#9E9E9E"},
        },
    }


def compute(candles, params, ctx):
    fisher = ctx.fisher(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("length", 10)),
    )
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 1.0, "divisor": 10.0},
        "series": [
            {"type": "line", "id": "fisher", "values": fisher, "color": params.get("color", "#9E9E9E"), "width": 1.5, "dash": [4, 4]}
        ],
    }
