def schema():
    return {
        "id": "Keltner",
        "name": "Keltner Channel",
        "label": "KC",
        "category": "volatility",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "mult": {"type": "float", "default": 2.0, "min": 0.1, "max": 10.0, "step": 0.1},
            "edge_color": {"type": "color", "default": "#9C27B080"},
            "basis_color": {"type": "color", "default": "#9C27B04D"},
        },
    }


def compute(candles, params, ctx):
    high = ctx.series(candles, "high")
    low = ctx.series(candles, "low")
    close = ctx.series(candles, "close")
    upper, basis, lower = ctx.keltner(
        high,
        low,
        close,
        int(params.get("length", 20)),
        float(params.get("mult", 2.0)),
    )
    edge = params.get("edge_color", "#9C27B080")
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "upper", "values": upper, "color": edge, "width": 1.5},
            {"type": "line", "id": "basis", "values": basis, "color": params.get("basis_color", "#9C27B04D"), "width": 1.5},
            {"type": "line", "id": "lower", "values": lower, "color": edge, "width": 1.5},
        ],
    }
