"""Valuation paths, tried in order: exact bracket, age formula, generic formula.

``classify`` picks the path up front, so the generic fallback for a bucket
without rows is a plain branch instead of a second trip through the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Dict, List, Union

from tradein.config import ResolvedValuationConfig
from tradein.data_models import Confidence, TradeInInfo, TradeValuationBracket, ValuationPath
from tradein.matching import BracketTable, brand_key, match_bracket, resolve_year_range

EXACT_SOURCE = "Harris Boat Works trade database"
AGE_BASED_SOURCE = "Age-based estimate"
GENERIC_SOURCE = "Generic estimate"

PRIMARY_BRAND = "mercury"
GENERIC_BRAND = "Generic"
VALUE_PER_HP = 40.0
HP_TOLERANCE = 15
OLDER_MOTOR_YEAR = 2015
# Any finite horsepower is accepted; path values are held inside this magnitude
VALUE_CAP = 1e300

AGE_BASED_MULTIPLIER: Dict[str, float] = {"excellent": 1.0, "good": 0.8, "fair": 0.6, "poor": 0.35}
GENERIC_MULTIPLIER: Dict[str, float] = {"excellent": 1.2, "good": 1.0, "fair": 0.75, "poor": 0.45}


@dataclass(frozen=True)
class ExactMatch:
    bracket: TradeValuationBracket
    name: ClassVar[ValuationPath] = "exact"


@dataclass(frozen=True)
class AgeBased:
    name: ClassVar[ValuationPath] = "age_based"


@dataclass(frozen=True)
class Generic:
    penalty_brand: str = ""
    name: ClassVar[ValuationPath] = "generic"


PathChoice = Union[ExactMatch, AgeBased, Generic]


@dataclass(frozen=True)
class PathEstimate:
    low: float
    high: float
    confidence: Confidence
    source: str
    path: ValuationPath
    factors: List[str] = field(default_factory=list)


def classify(info: TradeInInfo, table: BracketTable) -> PathChoice:
    if not table.has_brand(info.brand):
        return Generic(penalty_brand=info.brand)
    year_range = resolve_year_range(info.year)
    if year_range is None:
        return AgeBased()
    bracket = match_bracket(table.rows_for(info.brand, year_range), info.horsepower)
    if bracket is None:
        # A known brand with an empty bucket is valued and adjusted as a generic motor
        return Generic(penalty_brand=GENERIC_BRAND)
    return ExactMatch(bracket)


def is_mercury_bonus_eligible(info: TradeInInfo, config: ResolvedValuationConfig, current_year: int) -> bool:
    return brand_key(info.brand) == PRIMARY_BRAND and (current_year - info.year) < config.mercury_max_age


def exact_estimate(
    info: TradeInInfo,
    bracket: TradeValuationBracket,
    config: ResolvedValuationConfig,
    current_year: int,
) -> PathEstimate:
    base = bracket.value_for(info.condition)
    factors: List[str] = []
    confidence: Confidence = "high"

    mercury_bonus = is_mercury_bonus_eligible(info, config, current_year)
    if mercury_bonus:
        base *= config.mercury_factor

    if abs(bracket.horsepower - info.horsepower) > HP_TOLERANCE:
        confidence = "medium"
        factors.append(f"Estimated from {bracket.horsepower:g}HP value")
    if mercury_bonus:
        factors.append("Mercury trade bonus applied")
    if info.year < OLDER_MOTOR_YEAR:
        confidence = "low"
        factors.append("Older motor age estimate")

    return PathEstimate(
        low=base * 0.85,
        high=base * 1.15,
        confidence=confidence,
        source=EXACT_SOURCE,
        path=ExactMatch.name,
        factors=factors,
    )


def age_based_estimate(info: TradeInInfo, current_year: int) -> PathEstimate:
    motor_age = current_year - info.year
    depreciation = max(0.35, 1 - (motor_age - 20) * 0.03)
    value = info.horsepower * VALUE_PER_HP * depreciation * AGE_BASED_MULTIPLIER[info.condition]
    return PathEstimate(
        low=value * 0.8,
        high=value * 1.2,
        confidence="low",
        source=AGE_BASED_SOURCE,
        path=AgeBased.name,
        factors=["Motor age over 20 years", "Value based on condition and market demand"],
    )


def generic_estimate(info: TradeInInfo, current_year: int) -> PathEstimate:
    depreciation = max(0.3, 1 - (current_year - info.year) * 0.1)
    value = info.horsepower * VALUE_PER_HP * depreciation * GENERIC_MULTIPLIER[info.condition]
    return PathEstimate(
        low=value * 0.85,
        high=value * 1.15,
        confidence="low",
        source=GENERIC_SOURCE,
        path=Generic.name,
        factors=["Unknown brand", "Estimated depreciation"],
    )


def run_path(
    choice: PathChoice,
    info: TradeInInfo,
    config: ResolvedValuationConfig,
    current_year: int,
) -> PathEstimate:
    if isinstance(choice, ExactMatch):
        estimate = exact_estimate(info, choice.bracket, config, current_year)
    elif isinstance(choice, AgeBased):
        estimate = age_based_estimate(info, current_year)
    else:
        estimate = generic_estimate(info, current_year)
    return replace(estimate, low=_capped(estimate.low), high=_capped(estimate.high))


def _capped(value: float) -> float:
    return max(-VALUE_CAP, min(value, VALUE_CAP))


def penalty_brand(choice: PathChoice, info: TradeInInfo) -> str:
    """Brand the range adjuster sees for this path."""
    if isinstance(choice, Generic):
        return choice.penalty_brand
    return info.brand
