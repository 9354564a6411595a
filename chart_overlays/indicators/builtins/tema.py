def schema():
    return {
        "id": "TEMA",
        "name": "Triple EMA",
        "label": "TEMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "color": {"type": "color", "default": "#AB47BC"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    tema = ctx.tema(close, int(params.get("length", 20)))
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "tema", "values": tema, "color": params.get("color", "#AB47BC"), "width": 2}
        ],
    }
