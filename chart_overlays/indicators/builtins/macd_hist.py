def schema():
    return {
        "id": "MACD_Histogram",
        "name": "MACD Histogram",
        "label": "HIST",
        "category": "oscillator",
        "layout": "histogram",
        "min_candles": 20,
        "inputs": {
            "fast": {"type": "int", "default": 12, "min": 1, "max": 200},
            "slow": {"type": "int", "default": 26, "min": 1, "max": 200},
            "signal": {"type": "int", "default": 9, "min": 1, "max": 200},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    _, _, hist = ctx.macd(
        close,
        int(params.get("fast", 12)),
        int(params.get("slow", 26)),
        int(params.get("signal", 9)),
    )
    return {
        "layout": "histogram",
        "hist": [
            {
                "type": "hist",
                "id": "hist",
                "values": hist,
                "height": 0.15,
                "margin": 0.10,
                "color_up": "#4CAF5099",
                "color_down": "#F4433699",
            }
        ],
    }
