def schema():
    return {
        "id": "RSI",
        "name": "RSI",
        "label": "RSI",
        "category": "oscillator",
        "layout": "band",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#9C27B0"},
            "ob": {"type": "float", "default": 70.0, "min": 0.0, "max": 100.0, "step": 0.1},
            "os": {"type": "float", "default": 30.0, "min": 0.0, "max": 100.0, "step": 0.1},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    rsi = ctx.rsi(close, int(params.get("length", 14)))
    return {
        "layout": "band",
        "band": {"height": 0.20, "margin": 0.05, "min": 0.0, "max": 100.0},
        "series": [
            {"type": "line", "id": "rsi", "values": rsi, "color": params.get("color", "#9C27B0"), "width": 2}
        ],
        "levels": [
            {"value": params.get("os", 30.0), "color": "#9C27B04D", "dash": [2, 2], "width": 1},
            {"value": params.get("ob", 70.0), "color": "#9C27B04D", "dash": [2, 2], "width": 1},
        ],
    }
