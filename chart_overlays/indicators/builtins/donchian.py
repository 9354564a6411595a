def schema():
    return {
        "id": "Donchian",
        "name": "Donchian Channel",
        "label": "DC",
        "category": "volatility",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "edge_color": {"type": "color", "default": "#4CAF5080"},
            "basis_color": {"type": "color", "default": "#4CAF504D"},
        },
    }


def compute(candles, params, ctx):
    high = ctx.series(candles, "high")
    low = ctx.series(candles, "low")
    upper, middle, lower = ctx.donchian(high, low, int(params.get("length", 20)))
    edge = params.get("edge_color", "#4CAF5080")
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "upper", "values": upper, "color": edge, "width": 1.5},
            {"type": "line", "id": "middle", "values": middle, "color": params.get("basis_color", "#4CAF504D"), "width": 1.5},
            {"type": "line", "id": "lower", "values": lower, "color": edge, "width": 1.5},
        ],
    }
