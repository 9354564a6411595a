import math
import os
import sys
import unittest


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (REPO_ROOT, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)


from chart_overlays.core.indicator_registry import get_indicator_renderer
from chart_overlays.core.types import Candle, ChartArea, IndicatorRenderContext, LinearScale
from surface_recorder import RecordingSurface


AREA = ChartArea(left=0.0, top=0.0, right=300.0, bottom=150.0)


def _context(surface, candles):
    return IndicatorRenderContext(
        surface=surface,
        chart_area=AREA,
        x_scale=LinearScale(0.0, float(max(len(candles) - 1, 1)), AREA.left, AREA.right),
        y_scale=LinearScale(80.0, 130.0, AREA.bottom, AREA.top),
        candles=candles,
    )


class AtrRangeMarkerTests(unittest.TestCase):
    def test_single_vertical_line_at_last_candle(self):
        candles = [Candle(float(i), 100.0, 102.0, 98.0, 100.0) for i in range(30)]
        surface = RecordingSurface()
        context = _context(surface, candles)
        get_indicator_renderer("ATR").render(context)

        y = context.y_scale.get_pixel_for_value
        x = context.x_scale.get_pixel_for_value(29.0)
        self.assertEqual(surface.path_ops(), [("move_to", x, y(104.0)), ("line_to", x, y(96.0))])
        self.assertEqual(surface.named("stroke"), [("stroke", "#FFC10799", 1.0, (2, 2))])

    def test_nothing_without_atr(self):
        for count in (0, 1, 10):
            with self.subTest(candles=count):
                candles = [Candle(float(i), 100.0, 102.0, 98.0, 100.0) for i in range(count)]
                surface = RecordingSurface()
                get_indicator_renderer("ATR").render(_context(surface, candles))
                self.assertEqual(surface.draw_ops(), [])


class ParabolicSarTests(unittest.TestCase):
    def test_one_circle_per_finite_value(self):
        highs = [10.0, 11.0, 12.0, 13.0, 9.0, 8.0, 7.0]
        lows = [9.0, 10.0, 11.0, 12.0, 6.0, 5.0, 4.0]
        candles = [Candle(float(i), h, h, l, l) for i, (h, l) in enumerate(zip(highs, lows))]
        surface = RecordingSurface()
        get_indicator_renderer("ParabolicSAR").render(_context(surface, candles))

        arcs = surface.named("arc")
        fills = surface.named("fill")
        self.assertEqual(len(arcs), len(candles) - 1)
        self.assertEqual(len(fills), len(arcs))
        for op in arcs:
            self.assertEqual(op[3], 3.0)
            self.assertAlmostEqual(op[5] - op[4], 2 * math.pi)
        self.assertEqual(fills[0], ("fill", "#00BCD4"))
        self.assertEqual(fills[-1], ("fill", "#FF5722"))
        # Every circle is its own path.
        self.assertEqual(len(surface.named("begin_path")), len(arcs))


if __name__ == "__main__":
    unittest.main()
