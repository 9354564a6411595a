def schema():
    return {
        "id": "AroonOsc",
        "name": "Aroon Oscillator",
        "label": "AOSC",
        "category": "oscillator",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#795548"},
        },
    }


def compute(candles, params, ctx):
    osc = ctx.aroon_oscillator(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        int(params.get("length", 14)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": -100.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "aroon_osc", "values": osc, "color": params.get("color", "#795548"), "width": 1.5, "dash": [4, 4]}
        ],
        "levels": [
            {"value": 0.0, "color": "#7955484D", "dash": [2, 2], "width": 1},
        ],
    }
