def schema():
    return {
        "id": "UltimateOsc",
        "name": "Ultimate Oscillator",
        "label": "ULT",
        "category": "oscillator",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "short": {"type": "int", "default": 7, "min": 1, "max": 100},
            "mid": {"type": "int", "default": 14, "min": 1, "max": 200},
            "long": {"type": "int", "default": 28, "min": 1, "max": 400},
            "color": {"type": "color", "default": "#CDDC39"},
        },
    }


def compute(candles, params, ctx):
    uo = ctx.ultimate_oscillator(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("short", 7)),
        int(params.get("mid", 14)),
        int(params.get("long", 28)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "uo", "values": uo, "color": params.get("color", "#CDDC39"), "width": 1.5}
        ],
        "levels": [
            {"value": 30.0, "color": "#CDDC394D", "dash": [2, 2], "width": 1},
            {"value": 70.0, "color": "#CDDC394D", "dash": [2, 2], "width": 1},
        ],
    }
