import os
import sys
import unittest


REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
for path in (REPO_ROOT, os.path.dirname(os.path.abspath(__file__))):
    if path not in sys.path:
        sys.path.insert(0, path)


from chart_overlays.core import indicator_registry
from chart_overlays.core.indicator_registry import (
    get_indicator_renderer,
    indicator_renderers,
    make_renderer,
    register_renderer,
    resolve_params,
)
from chart_overlays.core.types import Candle, ChartArea, IndicatorRenderContext, LinearScale
from chart_overlays.indicators.renderer import IndicatorRenderer
from surface_recorder import RecordingSurface


EXPECTED_ORDER = [
    "MA", "EMA", "MACD", "MACD_Histogram", "Bollinger", "Ichimoku", "Ichimoku_Full",
    "RSI", "Stochastic", "CCI", "WilliamsR", "ADX", "ATR", "WMA", "ParabolicSAR",
    "TRIX", "DEMA", "TEMA", "Donchian", "Keltner", "Momentum", "ROC", "MFI", "Aroon",
    "AroonOsc", "UltimateOsc", "AwesomeOsc", "PPO", "HMA", "KAMA", "StdDev",
    "LinearReg", "Fisher", "STC",
]


class RegistryTests(unittest.TestCase):
    def test_registration_order(self):
        self.assertEqual(list(indicator_renderers), EXPECTED_ORDER)

    def test_names_match_keys(self):
        for key, renderer in indicator_renderers.items():
            self.assertEqual(renderer.name, key)
            self.assertEqual(renderer.min_candles, 20)

    def test_selection_metadata(self):
        categories = {"trend", "volatility", "oscillator", "momentum"}
        for renderer in indicator_renderers.values():
            self.assertTrue(renderer.label)
            self.assertIn(renderer.category, categories)
        self.assertEqual(get_indicator_renderer("Bollinger").label, "BB")
        self.assertEqual(get_indicator_renderer("Bollinger").category, "volatility")
        self.assertEqual(get_indicator_renderer("Ichimoku_Full").label, "ICH+")
        self.assertEqual(get_indicator_renderer("STC").category, "momentum")
        self.assertEqual(get_indicator_renderer("ADX").category, "trend")

    def test_unknown_name(self):
        self.assertIsNone(get_indicator_renderer("NotAnIndicator"))
        self.assertIsNone(get_indicator_renderer(""))

    def test_builtins_registered_with_defaults(self):
        self.assertEqual(get_indicator_renderer("RSI").params["length"], 14)
        self.assertEqual(get_indicator_renderer("KAMA").params["length"], 14)
        self.assertEqual(get_indicator_renderer("CCI").params["length"], 20)

    def test_reregistering_keeps_slot(self):
        previous = indicator_renderers["EMA"]
        try:
            replacement = IndicatorRenderer("EMA", previous.compute, layout="price")
            register_renderer(replacement)
            self.assertIs(get_indicator_renderer("EMA"), replacement)
            self.assertEqual(list(indicator_renderers), EXPECTED_ORDER)
        finally:
            register_renderer(previous)


class ResolveParamsTests(unittest.TestCase):
    INPUTS = {
        "length": {"type": "int", "default": 14, "min": 1, "max": 200},
        "mult": {"type": "float", "default": 2.0, "min": 0.1, "max": 10.0},
        "show": {"type": "bool", "default": True},
        "color": {"type": "color", "default": "#9C27B0"},
    }

    def test_defaults(self):
        self.assertEqual(
            resolve_params(self.INPUTS),
            {"length": 14, "mult": 2.0, "show": True, "color": "#9C27B0"},
        )

    def test_coerce_and_clamp(self):
        params = resolve_params(self.INPUTS, {"length": "30", "mult": 50, "show": "false"})
        self.assertEqual(params["length"], 30)
        self.assertEqual(params["mult"], 10.0)
        self.assertIs(params["show"], False)
        self.assertEqual(resolve_params(self.INPUTS, {"length": 0})["length"], 1)

    def test_bad_value_falls_back_to_default(self):
        with self.assertLogs(indicator_registry.logger, level="WARNING"):
            params = resolve_params(self.INPUTS, {"length": "abc", "color": "purple"})
        self.assertEqual(params["length"], 14)
        self.assertEqual(params["color"], "#9C27B0")

    def test_unknown_keys_pass_through(self):
        self.assertEqual(resolve_params(self.INPUTS, {"extra": 1})["extra"], 1)

    def test_make_renderer_with_overrides(self):
        info = indicator_registry.load_indicator(os.path.join(indicator_registry.BUILTINS_DIR, "rsi.py"))
        renderer = make_renderer(info, {"length": 5})
        self.assertEqual(renderer.name, "RSI")
        self.assertEqual(renderer.params["length"], 5)

        candles = [Candle(float(i), 100.0 + i, 101.0 + i, 99.0 + i, 100.0 + i) for i in range(10)]
        area = ChartArea(0.0, 0.0, 100.0, 100.0)
        surface = RecordingSurface()
        renderer.render(
            IndicatorRenderContext(
                surface=surface,
                chart_area=area,
                x_scale=LinearScale(0.0, 9.0, 0.0, 100.0),
                y_scale=LinearScale(90.0, 120.0, 100.0, 0.0),
                candles=candles,
            )
        )
        # RSI(5) is defined from index 5.
        self.assertEqual(len(surface.strokes()[0]), 5)


class ShortInputTests(unittest.TestCase):
    def test_no_renderer_raises_on_short_input(self):
        area = ChartArea(0.0, 0.0, 300.0, 150.0)
        for count in (0, 1, 2, 5, 19):
            candles = [Candle(float(i), 10.0, 11.0, 9.0, 10.0 + i) for i in range(count)]
            for name, renderer in indicator_renderers.items():
                with self.subTest(indicator=name, candles=count):
                    surface = RecordingSurface()
                    renderer.render(
                        IndicatorRenderContext(
                            surface=surface,
                            chart_area=area,
                            x_scale=LinearScale(0.0, float(max(count - 1, 1)), 0.0, 300.0),
                            y_scale=LinearScale(0.0, 40.0, 150.0, 0.0),
                            candles=candles,
                        )
                    )
                    self.assertEqual(surface.named("save"), [("save",)])
                    self.assertEqual(surface.named("restore"), [("restore",)])


if __name__ == "__main__":
    unittest.main()
