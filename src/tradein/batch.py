from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from tradein.config import ConfigInput, resolve_config
from tradein.data_models import TradeValuationBracket
from tradein.engine import BracketsInput, build_bracket_table, estimate_trade_value
from tradein.rounding import median_rounded_to_25

BRACKET_COLUMNS = ("brand", "year_range", "horsepower", "excellent", "good", "fair", "poor")
RESULT_COLUMNS = (
    "low",
    "high",
    "average",
    "rounded",
    "confidence",
    "source",
    "path",
    "penalty_applied",
    "penalty_factor",
    "pre_penalty_low",
    "pre_penalty_high",
)


def brackets_from_frame(frame: pd.DataFrame) -> List[TradeValuationBracket]:
    missing = [c for c in BRACKET_COLUMNS if c not in frame.columns]
    if missing:
        raise ValueError(f"bracket table is missing columns: {', '.join(missing)}")
    clean = frame.loc[:, list(BRACKET_COLUMNS)].dropna(subset=["brand", "year_range", "horsepower"])
    clean = clean.astype({"brand": str, "year_range": str})
    return [TradeValuationBracket.from_row(row) for row in clean.to_dict(orient="records")]


def load_brackets_csv(path: Union[str, Path]) -> List[TradeValuationBracket]:
    return brackets_from_frame(pd.read_csv(path, dtype={"year_range": str}))


def estimate_frame(
    frame: pd.DataFrame,
    brackets: BracketsInput = None,
    config: ConfigInput = None,
    current_year: Optional[int] = None,
) -> pd.DataFrame:
    """Value every trade-in row; input columns are kept and result columns appended."""
    resolved = resolve_config(config)
    table = build_bracket_table(brackets)
    records = []
    for row in frame.to_dict(orient="records"):
        trade = {k: v for k, v in row.items() if not _is_missing(v)}
        estimate = estimate_trade_value(trade, table, resolved, current_year)
        records.append(
            {
                "low": estimate.low,
                "high": estimate.high,
                "average": estimate.average,
                "rounded": median_rounded_to_25(estimate.low, estimate.high, resolved.min_trade_value),
                "confidence": estimate.confidence,
                "source": estimate.source,
                "path": estimate.path,
                "penalty_applied": estimate.penalty_applied,
                "penalty_factor": estimate.penalty_factor,
                "pre_penalty_low": estimate.pre_penalty_low,
                "pre_penalty_high": estimate.pre_penalty_high,
            }
        )
    results = pd.DataFrame(records, columns=list(RESULT_COLUMNS), index=frame.index)
    return pd.concat([frame.drop(columns=[c for c in RESULT_COLUMNS if c in frame.columns]), results], axis=1)


def _is_missing(value: object) -> bool:
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False
