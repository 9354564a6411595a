import os
import sys
import unittest


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (REPO_ROOT, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)


from chart_overlays.core.indicator_registry import get_indicator_renderer
from chart_overlays.core.types import Candle, ChartArea, IndicatorRenderContext, LinearScale
from chart_overlays.indicators import layout
from surface_recorder import RecordingSurface


AREA = ChartArea(left=0.0, top=0.0, right=100.0, bottom=100.0)
IDENTITY = LinearScale(0.0, 100.0, 0.0, 100.0)
NAN = float("nan")


class HistogramTests(unittest.TestCase):
    def test_bars_colored_by_sign(self):
        surface = RecordingSurface()
        layout.draw_histogram(surface, AREA, [10, 20, 30, 40], [-2.0, 0.0, 3.0, NAN], IDENTITY)
        # min -2, max 3: scale 3 px per unit, baseline at y=90.
        expected = [
            (layout.HIST_NEGATIVE, 8.0, 90.0, 4.0, 6.0),
            (layout.HIST_POSITIVE, 18.0, 90.0, 4.0, 0.0),
            (layout.HIST_POSITIVE, 28.0, 81.0, 4.0, 9.0),
        ]
        rects = surface.named("fill_rect")
        self.assertEqual(len(rects), len(expected))
        for op, (color, x, y, w, h) in zip(rects, expected):
            self.assertEqual(op[1], color)
            for got, want in zip(op[2:], (x, y, w, h)):
                self.assertAlmostEqual(got, want)

    def test_zero_counts_as_positive(self):
        surface = RecordingSurface()
        layout.draw_histogram(surface, AREA, [1, 2], [0.0, -1.0], IDENTITY)
        self.assertEqual(surface.named("fill_rect")[0][1], layout.HIST_POSITIVE)
        self.assertEqual(surface.named("fill_rect")[1][1], layout.HIST_NEGATIVE)

    def test_all_nan_issues_no_calls(self):
        surface = RecordingSurface()
        layout.draw_histogram(surface, AREA, [1, 2, 3], [NAN, NAN, NAN], IDENTITY)
        self.assertEqual(surface.ops, [])

    def test_zero_range_uses_unit_divisor(self):
        surface = RecordingSurface()
        layout.draw_histogram(surface, AREA, [1, 2], [5.0, 5.0], IDENTITY)
        rects = surface.named("fill_rect")
        self.assertEqual(len(rects), 2)
        # scale = 100 * 0.15 / 1, bar = |0 - (0 - 5) * 15| = 75.
        self.assertAlmostEqual(rects[0][5], 75.0)
        self.assertAlmostEqual(rects[0][3], 15.0)


class HistogramRendererTests(unittest.TestCase):
    def _context(self, surface, candles):
        return IndicatorRenderContext(
            surface=surface,
            chart_area=AREA,
            x_scale=LinearScale(0.0, float(max(len(candles) - 1, 1)), AREA.left, AREA.right),
            y_scale=LinearScale(0.0, 200.0, AREA.bottom, AREA.top),
            candles=candles,
        )

    def test_warmup_only_input_draws_nothing(self):
        candles = [Candle(float(i), 100.0, 101.0, 99.0, 100.0 + i) for i in range(10)]
        for name in ("MACD_Histogram", "AwesomeOsc"):
            with self.subTest(indicator=name):
                surface = RecordingSurface()
                get_indicator_renderer(name).render(self._context(surface, candles))
                self.assertEqual(surface.draw_ops(), [])

    def test_awesome_oscillator_bars(self):
        candles = [Candle(float(i), 100.0, 101.0 + i % 6, 99.0 - i % 4, 100.0) for i in range(60)]
        surface = RecordingSurface()
        get_indicator_renderer("AwesomeOsc").render(self._context(surface, candles))
        rects = surface.named("fill_rect")
        # SMA34 of the median price is defined from index 33.
        self.assertEqual(len(rects), 60 - 33)
        for op in rects:
            self.assertEqual(op[4], 4.0)
            self.assertIn(op[1], (layout.HIST_POSITIVE, layout.HIST_NEGATIVE))


if __name__ == "__main__":
    unittest.main()
