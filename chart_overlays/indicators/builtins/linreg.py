def schema():
    return {
        "id": "LinearReg",
        "name": "Linear Regression",
        "label": "LR",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "length": {"type": "int", "default": 14, "min": 2, "max": 500},
            "color": {"type": "color", "default": "#FF5722"},
        },
    }


def compute(candles, params, ctx):
    close = ctx.series(candles, "close")
    length = int(params.get("length", 14))
    slope, intercept, _ = ctx.linreg(close, length)
    # Regression value at the newest bar of each window (x runs 1..length).
    fitted = intercept + slope * length
    return {
        "layout": "price",
        "series": [
            {
                "type": "line",
                "id": "linreg",
                "values": fitted,
                "color": params.get("color", "#FF5722"),
                "width": 1.5,
                "dash": [5, 5],
            }
        ],
    }
