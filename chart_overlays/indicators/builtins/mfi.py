def schema():
    return {
        "id": "MFI",
        "name": "Money Flow Index",
        "label": "MFI",
        "category": "momentum",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#E91E63"},
        },
    }


def compute(candles, params, ctx):
    mfi = ctx.mfi(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("length", 14)),
    )
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "mfi", "values": mfi, "color": params.get("color", "#E91E63"), "width": 1.5, "dash": [2, 2]}
        ],
        "levels": [
            {"value": 20.0, "color": "#E91E634D", "dash": [2, 2], "width": 1},
            {"value": 80.0, "color": "#E91E634D", "dash": [2, 2], "width": 1},
        ],
    }
