def schema():
    return {
        "id": "Ichimoku",
        "name": "Ichimoku (Tenkan/Kijun)",
        "label": "ICH",
        "category": "trend",
        "layout": "price",
        "min_candles": 20,
        "inputs": {
            "tenkan": {"type": "int", "default": 9, "min": 1, "max": 200},
            "kijun": {"type": "int", "default": 26, "min": 1, "max": 200},
            "span_b": {"type": "int", "default": 52, "min": 1, "max": 400},
        },
    }


def compute(candles, params, ctx):
    tenkan, kijun, _, _, _ = ctx.ichimoku(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        ctx.series(candles, "close"),
        int(params.get("tenkan", 9)),
        int(params.get("kijun", 26)),
        int(params.get("span_b", 52)),
    )
    return {
        "layout": "price",
        "series": [
            {"type": "line", "id": "tenkan", "values": tenkan, "color": "#FF69B4", "width": 1.5},
            {"type": "line", "id": "kijun", "values": kijun, "color": "#4169E1", "width": 1.5},
        ],
    }
