import math
import os
import sys
import unittest


os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (REPO_ROOT, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)


from chart_overlays.core import indicator_registry
from chart_overlays.core.types import Candle, ChartArea
from chart_overlays.indicators.renderer import IndicatorRenderer
from surface_recorder import RecordingSurface


def _candles(count):
    out = []
    for i in range(count):
        close = 100.0 + 10.0 * math.sin(i / 7.0) + i * 0.2
        out.append(Candle(1_700_000_000.0 + i * 60.0, close - 0.5, close + 1.5, close - 1.5, close))
    return out


class FitScalesTests(unittest.TestCase):
    def test_price_axis_is_padded_and_inverted(self):
        from chart_overlays.ui.indicator_canvas import fit_scales

        candles = [Candle(0.0, 10.0, 20.0, 10.0, 15.0), Candle(10.0, 15.0, 30.0, 10.0, 20.0)]
        area = ChartArea(0.0, 0.0, 100.0, 200.0)
        x_scale, y_scale = fit_scales(candles, area, padding=0.05)
        self.assertEqual(x_scale.get_pixel_for_value(0.0), 0.0)
        self.assertEqual(x_scale.get_pixel_for_value(10.0), 100.0)
        self.assertAlmostEqual(y_scale.get_pixel_for_value(9.0), 200.0)
        self.assertAlmostEqual(y_scale.get_pixel_for_value(31.0), 0.0)

    def test_no_candles(self):
        from chart_overlays.ui.indicator_canvas import fit_scales

        x_scale, y_scale = fit_scales([], ChartArea(0.0, 0.0, 100.0, 50.0))
        self.assertEqual(x_scale.get_pixel_for_value(0.0), 0.0)
        self.assertEqual(y_scale.get_pixel_for_value(1.0), 0.0)


class PaintIndicatorsTests(unittest.TestCase):
    def test_registry_order_and_unknown_names(self):
        from chart_overlays.ui.indicator_canvas import paint_indicators

        surface = RecordingSurface()
        painted = paint_indicators(surface, ChartArea(0.0, 0.0, 400.0, 200.0), _candles(80), ["RSI", "Nope", "MA"])
        self.assertEqual(painted, ["MA", "RSI"])

    def test_short_history_skips_renderers_below_min_candles(self):
        from chart_overlays.ui.indicator_canvas import paint_indicators

        surface = RecordingSurface()
        painted = paint_indicators(surface, ChartArea(0.0, 0.0, 400.0, 200.0), _candles(15), ["RSI", "ATR", "Momentum"])
        self.assertEqual(painted, [])
        self.assertEqual(surface.ops, [])

        painted = paint_indicators(surface, ChartArea(0.0, 0.0, 400.0, 200.0), _candles(20), ["RSI", "ATR", "Momentum"])
        self.assertEqual(painted, ["RSI", "ATR", "Momentum"])

    def test_mapping_and_row_candles(self):
        from chart_overlays.ui.indicator_canvas import build_render_context, paint_indicators

        rows = [[c.x, c.o, c.h, c.l, c.c] for c in _candles(30)]
        dicts = [{"time": r[0], "open": r[1], "high": r[2], "low": r[3], "close": r[4]} for r in rows]
        area = ChartArea(0.0, 0.0, 400.0, 200.0)

        context = build_render_context(RecordingSurface(), area, dicts)
        self.assertEqual(context.candles, _candles(30))

        from_rows = RecordingSurface()
        from_objects = RecordingSurface()
        self.assertEqual(paint_indicators(from_rows, area, rows, ["MA"]), ["MA"])
        paint_indicators(from_objects, area, _candles(30), ["MA"])
        self.assertEqual(from_rows.ops, from_objects.ops)

    def test_failing_renderer_is_isolated(self):
        from chart_overlays.ui.indicator_canvas import paint_indicators

        def broken(candles, params, ctx):
            return {"layout": "price", "series": [{"type": "line", "values": None}]}

        errors = []
        indicator_registry.register_renderer(IndicatorRenderer("Broken", broken))
        try:
            surface = RecordingSurface()
            with self.assertLogs("chart_overlays.ui.indicator_canvas", level="ERROR"):
                painted = paint_indicators(
                    surface,
                    ChartArea(0.0, 0.0, 400.0, 200.0),
                    _candles(40),
                    ["MA", "Broken", "EMA"],
                    on_error=errors.append,
                )
        finally:
            indicator_registry.indicator_renderers.pop("Broken", None)
        self.assertEqual(painted, ["MA", "EMA"])
        self.assertEqual(len(errors), 1)
        self.assertTrue(errors[0].startswith("Broken:"))
        # The failing renderer's session was still closed.
        self.assertEqual(len(surface.named("save")), len(surface.named("restore")))


class QtPaintSmokeTests(unittest.TestCase):
    def test_render_every_indicator_offscreen(self):
        from PyQt6.QtWidgets import QApplication

        from chart_overlays.ui.indicator_canvas import render_indicators_to_image

        app = QApplication.instance() or QApplication([])
        _ = app  # keep reference for the duration of the test

        errors = []
        names = list(indicator_registry.indicator_renderers)
        img = render_indicators_to_image(_candles(120), names, width=320, height=200, on_error=errors.append)
        self.assertEqual(errors, [])
        self.assertFalse(img.isNull())
        self.assertEqual((img.width(), img.height()), (320, 200))

        background = img.pixel(0, 0)
        changed = any(img.pixel(x, y) != background for x in range(0, 320, 4) for y in range(0, 200, 4))
        self.assertTrue(changed)

    def test_empty_candles_offscreen(self):
        from PyQt6.QtWidgets import QApplication

        from chart_overlays.ui.indicator_canvas import render_indicators_to_image

        app = QApplication.instance() or QApplication([])
        _ = app

        errors = []
        img = render_indicators_to_image([], list(indicator_registry.indicator_renderers), 64, 64, on_error=errors.append)
        self.assertEqual(errors, [])
        self.assertFalse(img.isNull())


if __name__ == "__main__":
    unittest.main()
