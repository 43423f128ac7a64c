import logging

import pytest

from tradein.adjustment import (
    apply_brand_penalty,
    brand_penalty_factor,
    compute_rounded_trade_in,
    normalize_brand,
    penalty_note,
)


def test_normalize_brand():
    assert normalize_brand("  Evinrude ") == "EVINRUDE"
    assert normalize_brand(None) == ""


def test_penalty_factor_for_defunct_brands():
    assert brand_penalty_factor("Johnson") == 0.5
    assert brand_penalty_factor("evinrude e-tec") == 0.5
    assert brand_penalty_factor("OMC Sea Drive") == 0.5
    assert brand_penalty_factor("Yamaha") == 1.0
    assert brand_penalty_factor("") == 1.0
    assert brand_penalty_factor(None) == 1.0


def test_penalty_factor_takes_most_severe_match():
    config = {"BRAND_PENALTY_EVINRUDE": {"factor": 0.7}, "BRAND_PENALTY_OMC": {"factor": 0.3}}
    assert brand_penalty_factor("Evinrude", config) == 0.7
    assert brand_penalty_factor("Evinrude (OMC)", config) == 0.3


def test_penalty_halves_range_and_adds_note():
    adj = apply_brand_penalty(1000, 2000, "Johnson")
    assert adj.low == 500
    assert adj.high == 1000
    assert adj.penalty_applied is True
    assert adj.factor == 0.5
    assert adj.factors == [penalty_note(0.5)]
    assert "-50%" in adj.factors[0]


def test_penalty_respects_floor():
    adj = apply_brand_penalty(120, 180, "Evinrude")
    assert adj.low == 100
    assert adj.high == 100


def test_floor_applies_without_penalty():
    adj = apply_brand_penalty(40, 80, "Yamaha")
    assert adj.low == 100
    assert adj.high == 100
    assert adj.penalty_applied is False
    assert adj.factor == 1.0
    assert adj.factors == []


def test_penalty_note_not_duplicated():
    factors: list[str] = []
    first = apply_brand_penalty(1000, 2000, "Johnson", factors)
    second = apply_brand_penalty(first.low, first.high, "Johnson", first.factors)
    assert second.factors.count(penalty_note(0.5)) == 1
    assert factors.count(penalty_note(0.5)) == 1


@pytest.mark.parametrize("brand", ["Johnson", "EVINRUDE", "omc", "Old Johnson 25"])
@pytest.mark.parametrize(("low", "high"), [(0, 0), (150, 250), (3000, 4500), (20000, 26000)])
def test_penalty_never_increases_value(brand, low, high):
    adj = apply_brand_penalty(low, high, brand)
    assert adj.low <= max(low, 100)
    assert adj.high <= max(high, 100)
    assert adj.low >= 100
    assert adj.high >= 100


def test_penalty_override_from_config():
    adj = apply_brand_penalty(1000, 2000, "Johnson", config={"BRAND_PENALTY_JOHNSON": {"factor": 0.8}})
    assert adj.low == pytest.approx(800)
    assert adj.high == pytest.approx(1600)
    assert "-20%" in adj.factors[0]


def test_penalty_emits_audit_log(caplog):
    with caplog.at_level(logging.INFO, logger="tradein.adjustment"):
        apply_brand_penalty(1000, 2000, "johnson")
    records = [r for r in caplog.records if r.getMessage() == "tradein_penalty_applied"]
    assert len(records) == 1
    data = records[0].extra_data
    assert data["brand"] == "JOHNSON"
    assert data["factor"] == 0.5
    assert data["original_low"] == 1000
    assert data["adjusted_high"] == 1000
    assert data["chosen"] == 750


def test_no_audit_log_without_penalty(caplog):
    with caplog.at_level(logging.INFO, logger="tradein.adjustment"):
        apply_brand_penalty(1000, 2000, "Mercury")
    assert not [r for r in caplog.records if r.getMessage() == "tradein_penalty_applied"]


def test_compute_rounded_trade_in():
    result = compute_rounded_trade_in(1000, 2000, "Evinrude")
    assert (result.low, result.high, result.rounded) == (500, 1000, 750)

    plain = compute_rounded_trade_in(300, 460)
    assert plain.rounded == 375

    floored = compute_rounded_trade_in(100, 200, "Yamaha", {"MIN_TRADE_VALUE": {"value": 500}})
    assert (floored.low, floored.high, floored.rounded) == (500, 500, 500)


def test_audit_log_with_infinite_range(caplog):
    inf = float("inf")
    with caplog.at_level(logging.INFO, logger="tradein.adjustment"):
        adj = apply_brand_penalty(inf, inf, "Johnson")
    assert adj.penalty_applied is True
    assert adj.low == inf
    (record,) = [r for r in caplog.records if r.getMessage() == "tradein_penalty_applied"]
    assert record.extra_data["chosen"] > 10**300


def test_audit_log_skipped_when_info_disabled(caplog):
    with caplog.at_level(logging.WARNING, logger="tradein.adjustment"):
        adj = apply_brand_penalty(1000, 2000, "Evinrude")
    assert adj.penalty_applied is True
    assert not [r for r in caplog.records if r.getMessage() == "tradein_penalty_applied"]
