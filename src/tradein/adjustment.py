from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from tradein.config import ConfigInput, resolve_config
from tradein.rounding import median_rounded_to_25

logger = logging.getLogger(__name__)

NO_PENALTY = 1.0


@dataclass(frozen=True)
class RangeAdjustment:
    low: float
    high: float
    factors: List[str] = field(default_factory=list)
    penalty_applied: bool = False
    factor: float = NO_PENALTY


@dataclass(frozen=True)
class RoundedTradeIn:
    low: float
    high: float
    rounded: int


def normalize_brand(brand: Optional[str]) -> str:
    return (brand or "").strip().upper()


def brand_penalty_factor(brand: Optional[str], config: ConfigInput = None) -> float:
    """Most severe penalty among the defunct brands named anywhere in ``brand``."""
    normalized = normalize_brand(brand)
    if not normalized:
        return NO_PENALTY
    resolved = resolve_config(config)
    factor = NO_PENALTY
    for name, penalty in resolved.brand_penalties.items():
        if name in normalized:
            factor = min(factor, penalty)
    return factor


def penalty_note(factor: float) -> str:
    percent = round((1 - factor) * 100)
    return (
        f"Adjusted for brand (-{percent}%): manufacturer out of business; "
        "parts & service availability limited."
    )


def apply_brand_penalty(
    low: float,
    high: float,
    brand: Optional[str] = None,
    factors: Optional[List[str]] = None,
    config: ConfigInput = None,
) -> RangeAdjustment:
    resolved = resolve_config(config)
    floor = resolved.min_trade_value
    # Notes are appended to the caller's list, as in a running quote
    notes = factors if factors is not None else []
    factor = brand_penalty_factor(brand, resolved)
    adjusted_low, adjusted_high = low, high
    penalty_applied = False

    if factor < NO_PENALTY:
        adjusted_low = max(low * factor, floor)
        adjusted_high = max(high * factor, floor)
        penalty_applied = True
        note = penalty_note(factor)
        if note not in notes:
            notes.append(note)
        if logger.isEnabledFor(logging.INFO):
            logger.info(
                "tradein_penalty_applied",
                extra={
                    "extra_data": {
                        "penalty_reason": "brand_out_of_business",
                        "brand": normalize_brand(brand),
                        "factor": factor,
                        "original_low": low,
                        "original_high": high,
                        "adjusted_low": adjusted_low,
                        "adjusted_high": adjusted_high,
                        "chosen": median_rounded_to_25(adjusted_low, adjusted_high, floor),
                    }
                },
            )

    adjusted_low = max(adjusted_low, floor)
    adjusted_high = max(adjusted_high, floor)
    return RangeAdjustment(
        low=adjusted_low,
        high=adjusted_high,
        factors=notes,
        penalty_applied=penalty_applied,
        factor=factor,
    )


def compute_rounded_trade_in(
    low: float,
    high: float,
    brand: Optional[str] = None,
    config: ConfigInput = None,
) -> RoundedTradeIn:
    """Penalty and display rounding for a range that has already been estimated."""
    resolved = resolve_config(config)
    adjusted = apply_brand_penalty(low, high, brand, [], resolved)
    return RoundedTradeIn(
        low=adjusted.low,
        high=adjusted.high,
        rounded=median_rounded_to_25(adjusted.low, adjusted.high, resolved.min_trade_value),
    )
