def schema():
    return {
        "id": "STC",
        "name": "Schaff Trend Cycle",
        "label": "STC",
        "category": "momentum",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "fast": {"type": "int", "default": 23, "min": 1, "max": 200},
            "slow": {"type": "int", "default": 50, "min": 1, "max": 400},
            "cycle": {"type": "int", "default": 10, "min": 1, "max": 100},
            "color": {"type": "color", "default": "#00E676"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    stc = ctx.stc(
        close,
        int(params.get("fast", 23)),
        int(params.get("slow", 50)),
        int(params.get("cycle", 10)),
    )
    # 0..100 cycle spread over half to one and a half of the last price.
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 0.5, "divisor": 200.0},
        "series": [
            {"type": "line", "id": "stc", "values": stc, "color": params.get("color", "#00E676"), "width": 1.5, "dash": [3, 3]}
        ],
    }
