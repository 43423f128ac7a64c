from __future__ import annotations

import dataclasses
from datetime import date
from functools import lru_cache
from typing import Any, Iterable, List, Mapping, Optional, Union

from tradein.adjustment import RoundedTradeIn, apply_brand_penalty, compute_rounded_trade_in
from tradein.config import ConfigInput, ResolvedValuationConfig, resolve_config
from tradein.data_models import TradeInInfo, TradeValueEstimate, normalize_condition
from tradein.ladder import ExactMatch, classify, penalty_brand, run_path
from tradein.matching import BracketInput, BracketTable
from tradein.reference_brackets import builtin_brackets
from tradein.rounding import median_rounded_to_25

__all__ = [
    "RoundedTradeIn",
    "apply_estimate",
    "compute_rounded_trade_in",
    "estimate_trade_value",
    "median_rounded_to_25",
    "trade_value_factors",
]

EXACT_MATCH_NOTE = "Exact model match found"

TRADE_VALUE_FACTORS = (
    "Hours of use",
    "Service history",
    "Physical condition",
    "Control compatibility",
    "Local demand",
    "Seasonal timing",
)

TradeInput = Union[TradeInInfo, Mapping[str, Any]]
BracketsInput = Union[None, BracketTable, Iterable[BracketInput]]


def build_bracket_table(brackets: BracketsInput = None) -> BracketTable:
    """Caller-supplied table when it has usable rows, else the built-in one."""
    if isinstance(brackets, BracketTable):
        table = brackets
    else:
        table = BracketTable(brackets or ())
    if len(table) == 0:
        return _builtin_table()
    return table


def _coerce_trade_info(trade_info: TradeInput) -> TradeInInfo:
    if not isinstance(trade_info, TradeInInfo):
        return TradeInInfo.from_mapping(trade_info)
    condition = normalize_condition(trade_info.condition)
    if condition != trade_info.condition:
        return dataclasses.replace(trade_info, condition=condition)
    return trade_info


@lru_cache(maxsize=1)
def _builtin_table() -> BracketTable:
    return BracketTable(builtin_brackets())


def estimate_trade_value(
    trade_info: TradeInput,
    brackets: BracketsInput = None,
    config: ConfigInput = None,
    current_year: Optional[int] = None,
) -> TradeValueEstimate:
    info = _coerce_trade_info(trade_info)
    resolved = resolve_config(config)
    table = build_bracket_table(brackets)
    year_now = current_year if current_year is not None else date.today().year

    choice = classify(info, table)
    result = run_path(choice, info, resolved, year_now)
    adjusted = apply_brand_penalty(
        result.low, result.high, penalty_brand(choice, info), list(result.factors), resolved
    )

    low, high = sorted((adjusted.low, adjusted.high))
    factors = adjusted.factors
    if isinstance(choice, ExactMatch) and not factors:
        factors = [EXACT_MATCH_NOTE]

    return TradeValueEstimate(
        low=low,
        high=high,
        average=(low + high) / 2,
        confidence=result.confidence,
        source=result.source,
        factors=factors,
        pre_penalty_low=result.low,
        pre_penalty_high=result.high,
        penalty_applied=adjusted.penalty_applied,
        penalty_factor=adjusted.factor,
        path=result.path,
    )


def trade_value_factors() -> List[str]:
    """What the dealer checks at inspection; shown next to the estimate."""
    return list(TRADE_VALUE_FACTORS)


def apply_estimate(
    trade_info: TradeInput,
    estimate: TradeValueEstimate,
    config: ConfigInput = None,
) -> TradeInInfo:
    """Copy of the trade-in record carrying the quote-facing value and audit fields."""
    info = _coerce_trade_info(trade_info)
    resolved: ResolvedValuationConfig = resolve_config(config)
    floor = resolved.min_trade_value
    final_value = median_rounded_to_25(estimate.low, estimate.high, floor)
    return dataclasses.replace(
        info,
        estimated_value=final_value,
        confidence_level=estimate.confidence,
        range_pre_penalty_low=estimate.pre_penalty_low,
        range_pre_penalty_high=estimate.pre_penalty_high,
        range_final_low=estimate.low,
        range_final_high=estimate.high,
        tradein_value_pre_penalty=median_rounded_to_25(estimate.pre_penalty_low, estimate.pre_penalty_high, floor),
        tradein_value_final=final_value,
        penalty_applied=estimate.penalty_applied,
        penalty_factor=estimate.penalty_factor,
    )
