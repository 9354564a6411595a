def schema():
    return {
        "id": "Bollinger",
        "name": "Bollinger Bands",
        "label": "BB",
        "category": "volatility",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 20, "min": 1, "max": 500},
            "mult": {"type": "float", "default": 2.0, "min": 0.1, "max": 10.0, "step": 0.1},
            "edge_color": {"type": "color", "default": "#FFA50080"},
            "basis_color": {"type": "color", "default": "#FFA5004D"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    upper, basis, lower = ctx.bollinger(close, int(params.get("length", 20)), float(params.get("mult", 2.0)))
    edge = params.get("edge_color", "#FFA50080")
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "upper", "values": upper, "color": edge, "width": 1.5},
            {"type": "line", "id": "basis", "values": basis, "color": params.get("basis_color", "#FFA5004D"), "width": 1.5},
            {"type": "line", "id": "lower", "values": lower, "color": edge, "width": 1.5},
        ],
    }
