def schema():
    return {
        "id": "MACD",
        "name": "MACD",
        "label": "MACD",
        "category": "oscillator",
        "layout": "dynamic_band",
        "min_candles": 20,
        "inputs": {
            "fast": {"type": "int", "default": 12, "min": 1, "max": 200},
            "slow": {"type": "int", "default": 26, "min": 1, "max": 200},
            "signal": {"type": "int", "default": 9, "min": 1, "max": 200},
            "macd_color": {"type": "color", "default": "#FF00FF"},
            "signal_color": {"type": "color", "default": "#FFA500"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    macd_line, signal, _ = ctx.macd(
        close,
        int(params.get("fast", 12)),
        int(params.get("slow", 26)),
        int(params.get("signal", 9)),
    )
    return {
        "layout": "dynamic_band",
        "band": {"height": 0.30, "margin": 0.10},
        "series": [
            {"type": "line", "id": "macd", "values": macd_line, "color": params.get("macd_color", "#FF00FF"), "width": 1.5},
            {"type": "line", "id": "signal", "values": signal, "color": params.get("signal_color", "#FFA500"), "width": 1.5},
        ],
    }
