from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

Condition = Literal["excellent", "good", "fair", "poor"]
Confidence = Literal["high", "medium", "low"]
ValuationPath = Literal["exact", "age_based", "generic"]

CONDITION_GRADES: tuple[str, ...] = ("excellent", "good", "fair", "poor")
DEFAULT_CONDITION: Condition = "fair"


def safe_float(val: Any, default: float | None = None) -> float | None:
    if val is None or isinstance(val, bool):
        return default
    try:
        f = float(val)
    except (TypeError, ValueError, OverflowError):
        return default
    if f != f or f in (float("inf"), float("-inf")):
        return default
    return f


def normalize_condition(condition: Any) -> Condition:
    value = str(condition or "").strip().lower()
    if value in CONDITION_GRADES:
        return value  # type: ignore[return-value]
    return DEFAULT_CONDITION


@dataclass(frozen=True)
class TradeInInfo:
    brand: str = ""
    year: int = 0
    horsepower: float = 0.0
    condition: Condition = DEFAULT_CONDITION
    has_trade_in: bool = True
    model: str = ""
    serial_number: str = ""
    # Filled in once a valuation has been applied to the quote
    estimated_value: int | None = None
    confidence_level: Confidence | None = None
    range_pre_penalty_low: float | None = None
    range_pre_penalty_high: float | None = None
    range_final_low: float | None = None
    range_final_high: float | None = None
    tradein_value_pre_penalty: int | None = None
    tradein_value_final: int | None = None
    penalty_applied: bool | None = None
    penalty_factor: float | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "TradeInInfo":
        """Build from a partial form payload; accepts snake_case or camelCase keys."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in raw and raw[key] is not None:
                    return raw[key]
            return None

        year = safe_float(pick("year"), 0.0)
        has_trade_in = pick("has_trade_in", "hasTradeIn")
        return cls(
            brand=str(pick("brand") or ""),
            year=int(year) if year is not None else 0,
            horsepower=safe_float(pick("horsepower"), 0.0) or 0.0,
            condition=normalize_condition(pick("condition")),
            has_trade_in=True if has_trade_in is None else bool(has_trade_in),
            model=str(pick("model") or ""),
            serial_number=str(pick("serial_number", "serialNumber") or ""),
        )


@dataclass(frozen=True)
class TradeValuationBracket:
    brand: str
    year_range: str
    horsepower: float
    excellent: float
    good: float
    fair: float
    poor: float

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "TradeValuationBracket":
        return cls(
            brand=str(row.get("brand") or "").strip(),
            year_range=str(row.get("year_range") or "").strip(),
            horsepower=safe_float(row.get("horsepower"), 0.0) or 0.0,
            excellent=safe_float(row.get("excellent"), 0.0) or 0.0,
            good=safe_float(row.get("good"), 0.0) or 0.0,
            fair=safe_float(row.get("fair"), 0.0) or 0.0,
            poor=safe_float(row.get("poor"), 0.0) or 0.0,
        )

    def value_for(self, condition: Condition) -> float:
        return float(getattr(self, condition))


@dataclass(frozen=True)
class TradeValueEstimate:
    low: float
    high: float
    average: float
    confidence: Confidence
    source: str
    factors: list[str] = field(default_factory=list)
    pre_penalty_low: float = 0.0
    pre_penalty_high: float = 0.0
    penalty_applied: bool = False
    penalty_factor: float = 1.0
    path: ValuationPath = "generic"
