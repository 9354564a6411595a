def schema():
    return {
        "id": "Aroon",
        "name": "Aroon",
        "label": "ARO",
        "category": "trend",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
        },
    }


def compute(candles, params, ctx):
    up, down = ctx.aroon(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        int(params.get("length", 14)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "up", "values": up, "color": "#4CAF50", "width": 1.5},
            {"type": "line", "id": "down", "values": down, "color": "#F44336", "width": 1.5},
        ],
    }
