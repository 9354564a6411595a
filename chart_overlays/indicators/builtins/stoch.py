def schema():
    return {
        "id": "Stochastic",
        "name": "Stochastic",
        "label": "STO",
        "category": "oscillator",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "k": {"type": "int", "default": 14, "min": 1, "max": 200},
            "d": {"type": "int", "default": 3, "min": 1, "max": 50},
            "k_color": {"type": "color", "default": "#00BCD4"},
            "d_color": {"type": "color", "default": "#FF9800"},
        },
    }


def compute(candles, params, ctx):
    k, d = ctx.stochastic(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("k", 14)),
        int(params.get("d", 3)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "k", "values": k, "color": params.get("k_color", "#00BCD4"), "width": 1.5},
            {"type": "line", "id": "d", "values": d, "color": params.get("d_color", "#FF9800"), "width": 1.5},
        ],
        "levels": [
            {"value": 20.0, "color": "#00BCD44D", "dash": [2, 2], "width": 1},
            {"value": 80.0, "color": "#00BCD44D", "dash": [2, 2], "width": 1},
        ],
    }
