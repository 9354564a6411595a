import os
import sys
import unittest


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (REPO_ROOT, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)


from chart_overlays.core.indicator_registry import get_indicator_renderer, indicator_renderers
from chart_overlays.core.types import Candle, ChartArea, IndicatorRenderContext, LinearScale
from chart_overlays.indicators.renderer import value_mapper
from surface_recorder import RecordingSurface


AREA = ChartArea(left=0.0, top=0.0, right=400.0, bottom=200.0)
PRICE_RELATIVE = ("CCI", "Momentum", "ROC", "PPO", "TRIX", "Fisher", "STC")


def _context(surface, candles):
    return IndicatorRenderContext(
        surface=surface,
        chart_area=AREA,
        x_scale=LinearScale(0.0, float(max(len(candles) - 1, 1)), AREA.left, AREA.right),
        y_scale=LinearScale(0.0, 200.0, AREA.bottom, AREA.top),
        candles=candles,
    )


class PriceRelativeTests(unittest.TestCase):
    def test_registry_layouts(self):
        names = tuple(name for name, r in indicator_renderers.items() if r.layout == "price_relative")
        self.assertEqual(set(names), set(PRICE_RELATIVE))

    def test_no_candles_uses_fallback_price(self):
        for name in PRICE_RELATIVE:
            with self.subTest(indicator=name):
                renderer = get_indicator_renderer(name)
                output, times = renderer.compute_output([])
                self.assertEqual(output["projection"]["anchor"], 100.0)
                self.assertEqual(len(times), 0)
                surface = RecordingSurface()
                renderer.render(_context(surface, []))
                self.assertEqual(surface.draw_ops(), [])

    def test_zero_last_close_uses_fallback_price(self):
        candles = [Candle(float(i), 1.0, 1.0, 0.0, 0.0) for i in range(5)]
        output, _ = get_indicator_renderer("ROC").compute_output(candles)
        self.assertEqual(output["projection"]["anchor"], 100.0)

    def test_transforms(self):
        candles = [Candle(float(i), 80.0, 81.0, 79.0, 80.0) for i in range(30)]
        context = _context(RecordingSurface(), candles)
        y = context.y_scale.get_pixel_for_value
        cases = {
            "CCI": (50.0, 80.0 * (1 + 50.0 / 1000)),
            "Momentum": (5.0, 85.0),
            "ROC": (10.0, 88.0),
            "PPO": (-10.0, 72.0),
            "TRIX": (100.0, 80.0 * 1.01),
            "Fisher": (1.0, 88.0),
            "STC": (200.0, 120.0),
        }
        for name, (value, price) in cases.items():
            with self.subTest(indicator=name):
                output, _ = get_indicator_renderer(name).compute_output(candles)
                to_y = value_mapper(context, output)
                self.assertAlmostEqual(to_y(value), y(price))

    def test_momentum_line_tracks_last_price(self):
        closes = [100.0 + i for i in range(30)]
        candles = [Candle(float(i), c, c + 1.0, c - 1.0, c) for i, c in enumerate(closes)]
        surface = RecordingSurface()
        context = _context(surface, candles)
        get_indicator_renderer("Momentum").render(context)
        ops = surface.path_ops()
        # Momentum(10) is a constant 10 once defined: drawn at last close + 10.
        self.assertEqual(len(ops), 20)
        for op in ops:
            self.assertAlmostEqual(op[2], context.y_scale.get_pixel_for_value(129.0 + 10.0))
        self.assertEqual(surface.named("stroke")[0][1:], ("#3F51B5", 1.5, (4, 4)))


if __name__ == "__main__":
    unittest.main()
