def schema():
    return {
        "id": "ADX",
        "name": "ADX / DMI",
        "label": "ADX",
        "category": "trend",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
        },
    }


def compute(candles, params, ctx):
    adx, plus_di, minus_di = ctx.adx(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("length", 14)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "adx", "values": adx, "color": "#FF5722", "width": 1.5},
            {"type": "line", "id": "plus_di", "values": plus_di, "color": "#00E676", "width": 1.5},
            {"type": "line", "id": "minus_di", "values": minus_di, "color": "#FF1744", "width": 1.5},
        ],
    }
