from tradein.config import (
    DEFAULT_MERCURY_FACTOR,
    DEFAULT_MERCURY_MAX_AGE,
    DEFAULT_MIN_TRADE_VALUE,
    ResolvedValuationConfig,
    TradeValuationConfig,
    resolve_config,
)


def test_defaults_when_no_config():
    cfg = resolve_config()
    assert cfg.brand_penalties == {"JOHNSON": 0.5, "EVINRUDE": 0.5, "OMC": 0.5}
    assert cfg.mercury_max_age == DEFAULT_MERCURY_MAX_AGE
    assert cfg.mercury_factor == DEFAULT_MERCURY_FACTOR
    assert cfg.min_trade_value == DEFAULT_MIN_TRADE_VALUE


def test_each_field_falls_back_independently():
    cfg = resolve_config(
        {
            "BRAND_PENALTY_OMC": {"factor": 0.4},
            "MERCURY_BONUS_YEARS": {"factor": 1.2},
            "MIN_TRADE_VALUE": {"value": "150"},
        }
    )
    assert cfg.brand_penalties["OMC"] == 0.4
    assert cfg.brand_penalties["JOHNSON"] == 0.5
    assert cfg.mercury_max_age == 3
    assert cfg.mercury_factor == 1.2
    assert cfg.min_trade_value == 150.0


def test_unusable_values_are_ignored():
    cfg = resolve_config(
        {
            "BRAND_PENALTY_JOHNSON": {"factor": "n/a"},
            "MERCURY_BONUS_YEARS": 5,
            "MIN_TRADE_VALUE": {"value": None},
        }
    )
    assert cfg == ResolvedValuationConfig()


def test_negative_floor_clamped_to_zero():
    assert resolve_config({"MIN_TRADE_VALUE": {"value": -50}}).min_trade_value == 0.0


def test_typed_config_and_resolved_passthrough():
    typed = TradeValuationConfig(brand_penalties={"evinrude": 0.6}, mercury_max_age=5)
    cfg = resolve_config(typed)
    assert cfg.brand_penalties["EVINRUDE"] == 0.6
    assert cfg.mercury_max_age == 5
    assert resolve_config(cfg) is cfg


def test_from_mapping_reads_supplier_shape():
    typed = TradeValuationConfig.from_mapping({"BRAND_PENALTY_EVINRUDE": {"factor": 0.25}})
    assert typed.brand_penalties == {"EVINRUDE": 0.25}
    assert typed.min_trade_value is None
    assert TradeValuationConfig.from_mapping(None) == TradeValuationConfig()
