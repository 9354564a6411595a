def schema():
    return {
        "id": "WilliamsR",
        "name": "Williams %R",
        "label": "WR",
        "category": "oscillator",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#FFC107"},
        },
    }


def compute(candles, params, ctx):
    wr = ctx.williams_r(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("length", 14)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": -100.0, "max": 0.0},
        "series": [
            {"type": "line", "id": "williams_r", "values": wr, "color": params.get("color", "#FFC107"), "width": 1.5}
        ],
        "levels": [
            {"value": -80.0, "color": "#FFC1074D", "dash": [2, 2], "width": 1},
            {"value": -20.0, "color": "#FFC1074D", "dash": [2, 2], "width": 1},
        ],
    }
