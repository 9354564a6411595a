def schema():
    return {
        "id": "ParabolicSAR",
        "name": "Parabolic SAR",
        "label": "SAR",
        "category": "trend",
        "layout": "markers",
        "min_candles": 20,
        "inputs": {
            "step": {"type": "float", "default": 0.02, "min": 0.001, "max": 1.0, "step": 0.001},
            "max": {"type": "float", "default": 0.2, "min": 0.01, "max": 1.0, "step": 0.01},
            "color_up": {"type": "color", "default": "#00BCD4"},
            "color_down": {"type": "color", "default": "#FF5722"},
        },
    }


def compute(candles, params, ctx):
    sar, trend = ctx.psar(
        ctx.series(candles, "high"),
        ctx.series(candles, "low"),
        float(params.get("step", 0.02)),
        float(params.get("max", 0.2)),
    )
    return {
        "layout": "markers",
        "markers": [
            {
                "type": "dots",
                "id": "psar",
                "values": sar,
                "trend": trend,
                "radius": 3,
                "color_up": params.get("color_up", "#00BCD4"),
                "color_down": params.get("color_down", "#FF5722"),
            }
        ],
    }
