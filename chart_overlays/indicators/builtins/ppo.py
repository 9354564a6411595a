def schema():
    return {
        "id": "PPO",
        "name": "Percentage Price Oscillator",
        "label": "PPO",
        "category": "oscillator",
        "layout": "price_relative",
        "min_candles": 20,
        "inputs": {
            "fast": {"type": "int", "default": 12, "min": 1, "max": 200},
            "slow": {"type": "int", "default": 26, "min": 1, "max": 200},
            "color": {"type": "color", "default": "#8BC34A"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    ppo = ctx.ppo(close, int(params.get("fast", 12)), int(params.get("slow", 26)))
    return {
        "layout": "price_relative",
        "projection": {"anchor": ctx.last_close(), "mode": "scale", "base": 1.0, "divisor": 100.0},
        "series": [
            {"type": "line", "id": "ppo", "values": ppo, "color": params.get("color", "#8BC34A"), "width": 1.5, "dash": [3, 3]}
        ],
    }
