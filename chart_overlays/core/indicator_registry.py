from __future__ import annotations

from dataclasses import dataclass
import hashlib
import importlib.util
import logging
import os
from typing import Any, Dict, Iterable, List, Optional

from chart_overlays.indicators.renderer import IndicatorRenderer


logger = logging.getLogger(__name__)

BUILTINS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "indicators", "builtins")

# Module stems in registration (and paint) order.
BUILTIN_ORDER = (
    "sma",
    "ema",
    "macd",
    "macd_hist",
    "bb",
    "ichimoku",
    "ichimoku_full",
    "rsi",
    "stoch",
    "cci",
    "williams_r",
    "adx",
    "atr",
    "wma",
    "psar",
    "trix",
    "dema",
    "tema",
    "donchian",
    "keltner",
    "momentum",
    "roc",
    "mfi",
    "aroon",
    "aroon_osc",
    "ultimate_osc",
    "awesome_osc",
    "ppo",
    "hma",
    "kama",
    "stddev",
    "linreg",
    "fisher",
    "stc",
)

DEFAULT_MIN_CANDLES = 20


@dataclass
class IndicatorInfo:
    indicator_id: str
    name: str
    inputs: Dict[str, dict]
    layout: str
    min_candles: int
    path: str
    module_hash: str
    module: object
    load_error: Optional[str] = None
    label: str = ""
    category: str = "trend"


# Keep last-good indicator definition per file path so a broken edit doesn't drop the indicator.
_LAST_GOOD_BY_PATH: Dict[str, IndicatorInfo] = {}

indicator_renderers: Dict[str, IndicatorRenderer] = {}


def get_indicator_renderer(name: str) -> Optional[IndicatorRenderer]:
    return indicator_renderers.get(name)


def register_renderer(renderer: IndicatorRenderer) -> None:
    # Re-registering an existing name keeps its slot in the paint order.
    indicator_renderers[renderer.name] = renderer


def load_indicator(path: str) -> Optional[IndicatorInfo]:
    module, mod_err = _load_module_from_path(path)
    schema = _safe_schema(module) if module is not None else None
    if module is None or not schema or not callable(getattr(module, "compute", None)):
        err = mod_err or "schema/load failed"
        logger.warning("Indicator %s failed to load: %s", path, err)
        last_good = _LAST_GOOD_BY_PATH.get(path)
        if last_good is None:
            return None
        return IndicatorInfo(
            indicator_id=last_good.indicator_id,
            name=last_good.name,
            inputs=last_good.inputs,
            layout=last_good.layout,
            min_candles=last_good.min_candles,
            path=last_good.path,
            module_hash=last_good.module_hash,
            module=last_good.module,
            load_error=err,
            label=last_good.label,
            category=last_good.category,
        )
    stem = os.path.splitext(os.path.basename(path))[0]
    indicator_id = str(schema.get("id") or stem)
    try:
        min_candles = int(schema.get("min_candles", DEFAULT_MIN_CANDLES))
    except (TypeError, ValueError):
        min_candles = DEFAULT_MIN_CANDLES
    out = IndicatorInfo(
        indicator_id=indicator_id,
        name=str(schema.get("name") or indicator_id),
        inputs=schema.get("inputs") or {},
        layout=str(schema.get("layout") or "price"),
        min_candles=min_candles,
        path=path,
        module_hash=_hash_file(path),
        module=module,
        load_error=None,
        label=str(schema.get("label") or indicator_id),
        category=str(schema.get("category") or "trend"),
    )
    _LAST_GOOD_BY_PATH[path] = out
    return out


def discover_indicators(root_paths: str | Iterable[str]) -> List[IndicatorInfo]:
    indicators: List[IndicatorInfo] = []
    paths = [root_paths] if isinstance(root_paths, str) else list(root_paths)

    for root_path in paths:
        if not root_path or not os.path.isdir(root_path):
            continue
        for entry in sorted(os.listdir(root_path)):
            if not entry.endswith(".py"):
                continue
            if entry.startswith("_"):
                continue
            info = load_indicator(os.path.join(root_path, entry))
            if info is not None:
                indicators.append(info)

    indicators.sort(key=lambda info: info.name.lower())
    return indicators


def resolve_params(inputs: Dict[str, dict], overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge schema defaults with `overrides`.

    int/float inputs are coerced and clamped to their min/max; a value that
    cannot be coerced falls back to the schema default.
    """
    params: Dict[str, Any] = {}
    for key, spec in (inputs or {}).items():
        if isinstance(spec, dict) and "default" in spec:
            params[key] = spec.get("default")
    for key, value in (overrides or {}).items():
        spec = (inputs or {}).get(key)
        if not isinstance(spec, dict):
            params[key] = value
            continue
        try:
            params[key] = _coerce(spec, value)
        except (TypeError, ValueError):
            logger.warning("Invalid value %r for input %r, using default %r", value, key, spec.get("default"))
            params[key] = spec.get("default")
    return params


def _coerce(spec: dict, value: Any) -> Any:
    kind = spec.get("type")
    if kind == "int":
        out: Any = int(value)
    elif kind == "float":
        out = float(value)
    elif kind == "bool":
        if isinstance(value, str):
            out = value.strip().lower() in ("1", "true", "yes", "on")
        else:
            out = bool(value)
        return out
    elif kind == "color":
        if not isinstance(value, str) or not value.startswith("#"):
            raise ValueError(f"not a hex color: {value!r}")
        return value
    else:
        return value
    if spec.get("min") is not None and out < spec["min"]:
        out = type(out)(spec["min"])
    if spec.get("max") is not None and out > spec["max"]:
        out = type(out)(spec["max"])
    return out


def make_renderer(info: IndicatorInfo, overrides: Optional[Dict[str, Any]] = None) -> IndicatorRenderer:
    return IndicatorRenderer(
        name=info.indicator_id,
        compute=getattr(info.module, "compute"),
        layout=info.layout,
        min_candles=info.min_candles,
        title=info.name,
        label=info.label,
        category=info.category,
        inputs=info.inputs,
        params=resolve_params(info.inputs, overrides),
    )


def register_indicators(infos: Iterable[IndicatorInfo]) -> List[IndicatorRenderer]:
    registered: List[IndicatorRenderer] = []
    for info in infos:
        renderer = make_renderer(info)
        register_renderer(renderer)
        registered.append(renderer)
    return registered


def load_builtin_indicators() -> List[IndicatorInfo]:
    infos: List[IndicatorInfo] = []
    for stem in BUILTIN_ORDER:
        info = load_indicator(os.path.join(BUILTINS_DIR, f"{stem}.py"))
        if info is None:
            continue
        infos.append(info)
    return infos


def _load_module_from_path(path: str) -> tuple[Optional[object], Optional[str]]:
    try:
        spec = importlib.util.spec_from_file_location(f"indicator_{os.path.basename(path)}", path)
        if spec is None or spec.loader is None:
            return None, "no spec/loader"
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module, None
    except Exception as e:
        return None, f"{type(e).__name__}: {e}"


def _safe_schema(module: object) -> Optional[Dict[str, Any]]:
    try:
        schema_fn = getattr(module, "schema", None)
        if schema_fn is None:
            return None
        schema = schema_fn()
        if not isinstance(schema, dict):
            return None
        return schema
    except Exception:
        logger.debug("schema() raised", exc_info=True)
        return None


def _hash_file(path: str) -> str:
    hasher = hashlib.sha256()
    try:
        with open(path, "rb") as handle:
            while True:
                chunk = handle.read(8192)
                if not chunk:
                    break
                hasher.update(chunk)
    except OSError:
        return ""
    return hasher.hexdigest()


register_indicators(load_builtin_indicators())
