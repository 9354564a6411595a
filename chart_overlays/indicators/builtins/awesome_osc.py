def schema():
    return {
        "id": "AwesomeOsc",
        "name": "Awesome Oscillator",
        "label": "AO",
        "category": "oscillator",
        "layout": "histogram",
        "min_candles": 20,
        "inputs": {},
    }


def compute(candles, params, ctx):
    ao = ctx.awesome_oscillator(ctx.series(candles, "high"), ctx.series(candles, "low"))
    return {
        "layout": "histogram",
        "hist": [
            {
                "type": "hist",
                "id": "ao",
                "values": ao,
                "height": 0.15,
                "margin": 0.10,
                "color_up": "#4CAF5099",
                "color_down": "#F4433699",
            }
        ],
    }
