def schema():
    return {
        "id": "KAMA",
        "name": "Kaufman Adaptive MA",
        "label": "KAMA",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 1, "max": 500},
            "fast": {"type": "int", "default": 2, "min": 1, "max": 100},
            "slow": {"type": "int", "default": 30, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#009688"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    kama = ctx.kama(
        close,
        int(params.get("length", 14)),
        int(params.get("fast", 2)),
        int(params.get("slow", 30)),
    )
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "kama", "values": kama, "color": params.get("color", "#009688"), "width": 2}
        ],
    }
