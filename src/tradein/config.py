from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from tradein.data_models import safe_float

DEFAULT_BRAND_PENALTIES: Dict[str, float] = {
    "JOHNSON": 0.5,
    "EVINRUDE": 0.5,
    "OMC": 0.5,
}
DEFAULT_MERCURY_MAX_AGE = 3
DEFAULT_MERCURY_FACTOR = 1.10
DEFAULT_MIN_TRADE_VALUE = 100.0


@dataclass(frozen=True)
class TradeValuationConfig:
    """Caller overrides as delivered by the config supplier. Every field is optional."""

    brand_penalties: Dict[str, float] = field(default_factory=dict)
    mercury_max_age: float | None = None
    mercury_factor: float | None = None
    min_trade_value: float | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any] | None) -> "TradeValuationConfig":
        raw = raw or {}
        penalties: Dict[str, float] = {}
        for brand in DEFAULT_BRAND_PENALTIES:
            factor = safe_float(_sub(raw, f"BRAND_PENALTY_{brand}", "factor"))
            if factor is not None:
                penalties[brand] = factor
        return cls(
            brand_penalties=penalties,
            mercury_max_age=safe_float(_sub(raw, "MERCURY_BONUS_YEARS", "max_age")),
            mercury_factor=safe_float(_sub(raw, "MERCURY_BONUS_YEARS", "factor")),
            min_trade_value=safe_float(_sub(raw, "MIN_TRADE_VALUE", "value")),
        )


@dataclass(frozen=True)
class ResolvedValuationConfig:
    brand_penalties: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_BRAND_PENALTIES))
    mercury_max_age: float = DEFAULT_MERCURY_MAX_AGE
    mercury_factor: float = DEFAULT_MERCURY_FACTOR
    min_trade_value: float = DEFAULT_MIN_TRADE_VALUE


ConfigInput = Union[None, Mapping[str, Any], TradeValuationConfig, ResolvedValuationConfig]


def resolve_config(config: ConfigInput = None) -> ResolvedValuationConfig:
    if isinstance(config, ResolvedValuationConfig):
        return config
    if config is None or isinstance(config, Mapping):
        config = TradeValuationConfig.from_mapping(config)

    penalties = dict(DEFAULT_BRAND_PENALTIES)
    for brand, factor in config.brand_penalties.items():
        value = safe_float(factor)
        if value is not None:
            penalties[brand.strip().upper()] = value

    return ResolvedValuationConfig(
        brand_penalties=penalties,
        mercury_max_age=_pick(config.mercury_max_age, DEFAULT_MERCURY_MAX_AGE),
        mercury_factor=_pick(config.mercury_factor, DEFAULT_MERCURY_FACTOR),
        min_trade_value=max(0.0, _pick(config.min_trade_value, DEFAULT_MIN_TRADE_VALUE)),
    )


def _sub(raw: Mapping[str, Any], key: str, attr: str) -> Any:
    entry = raw.get(key)
    if isinstance(entry, Mapping):
        return entry.get(attr)
    return None


def _pick(value: float | None, default: float) -> float:
    value = safe_float(value)
    return default if value is None else value
