from __future__ import annotations

import json
import logging
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any, Literal

import pandas as pd
from fastapi import FastAPI, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from tradein.batch import estimate_frame, load_brackets_csv
from tradein.config import ResolvedValuationConfig, TradeValuationConfig, resolve_config
from tradein.data_models import TradeInInfo
from tradein.engine import (
    apply_estimate,
    build_bracket_table,
    compute_rounded_trade_in,
    estimate_trade_value,
    trade_value_factors,
)
from tradein.matching import BracketTable
from tradein_service.logging_config import configure_logging, correlation_id, new_correlation_id
from tradein_service.settings import ServiceSettings

logger = logging.getLogger(__name__)


# ── Request / Response Models ───────────────────────────────────────

class TradeInRequest(BaseModel):
    brand: str = ""
    year: int = 0
    horsepower: float = 0.0
    condition: str = "fair"
    model: str = ""
    serial_number: str = ""
    has_trade_in: bool = True


class TradeValueResponse(BaseModel):
    low: float
    high: float
    average: float
    rounded: int
    pre_penalty_rounded: int
    confidence: Literal["high", "medium", "low"]
    source: str
    path: str
    factors: list[str]
    pre_penalty_low: float
    pre_penalty_high: float
    penalty_applied: bool
    penalty_factor: float


class BatchRequest(BaseModel):
    items: list[TradeInRequest] = Field(min_length=1)


class BatchResponse(BaseModel):
    count: int
    results: list[dict[str, Any]]


class RoundedRequest(BaseModel):
    low: float
    high: float
    brand: str = ""


class RoundedResponse(BaseModel):
    low: float
    high: float
    rounded: int


class HealthResponse(BaseModel):
    status: str
    bracket_rows: int


# ── Data sources ────────────────────────────────────────────────────

def load_bracket_table(path: str) -> BracketTable:
    """Operator bracket CSV when configured and readable, else the built-in table."""
    if not path:
        return build_bracket_table()
    try:
        rows = load_brackets_csv(path)
    except (OSError, ValueError) as exc:
        logger.warning("Bracket table %s unusable, using built-in brackets: %s", path, exc)
        return build_bracket_table()
    logger.info("Loaded %d bracket rows from %s", len(rows), path)
    return build_bracket_table(rows)


def load_valuation_config(path: str) -> ResolvedValuationConfig:
    if not path:
        return resolve_config()
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.warning("Valuation config %s unusable, using defaults: %s", path, exc)
        return resolve_config()
    if not isinstance(raw, dict):
        logger.warning("Valuation config %s is not an object, using defaults", path)
        return resolve_config()
    return resolve_config(TradeValuationConfig.from_mapping(raw))


# ── App Factory ─────────────────────────────────────────────────────

def create_app() -> FastAPI:
    settings = ServiceSettings()
    configure_logging(level=settings.log_level, fmt=settings.log_format)

    table = load_bracket_table(settings.brackets_path)
    config = load_valuation_config(settings.valuation_config_path)

    app = FastAPI(title="Outboard Trade-In Valuation API", version="0.1.0")

    @app.middleware("http")
    async def correlation_id_middleware(request: Request, call_next: Any) -> Response:
        cid = request.headers.get("X-Correlation-ID") or new_correlation_id()
        correlation_id.set(cid)
        response = await call_next(request)
        response.headers["X-Correlation-ID"] = cid
        return response

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", bracket_rows=len(table))

    @app.post("/trade-in/estimate", response_model=TradeValueResponse)
    async def estimate(payload: TradeInRequest) -> TradeValueResponse:
        t0 = time.monotonic()
        info = TradeInInfo.from_mapping(payload.model_dump())
        result = estimate_trade_value(info, table, config)
        quoted = apply_estimate(info, result, config)
        logger.info(
            "trade-in estimated",
            extra={
                "extra_data": {
                    "path": result.path,
                    "confidence": result.confidence,
                    "rounded": quoted.tradein_value_final,
                    "elapsed_ms": round((time.monotonic() - t0) * 1000, 2),
                }
            },
        )
        body = asdict(result)
        return TradeValueResponse(
            **body,
            rounded=quoted.tradein_value_final,
            pre_penalty_rounded=quoted.tradein_value_pre_penalty,
        )

    @app.post("/trade-in/estimate/batch", response_model=BatchResponse)
    async def estimate_batch(payload: BatchRequest) -> BatchResponse:
        if len(payload.items) > settings.max_batch_size:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"Batch exceeds {settings.max_batch_size} trade-ins",
            )
        frame = pd.DataFrame([item.model_dump() for item in payload.items])
        valued = estimate_frame(frame, table, config)
        results = json.loads(valued.to_json(orient="records"))
        return BatchResponse(count=len(results), results=results)

    @app.post("/trade-in/rounded", response_model=RoundedResponse)
    async def rounded(payload: RoundedRequest) -> RoundedResponse:
        result = compute_rounded_trade_in(payload.low, payload.high, payload.brand, config)
        return RoundedResponse(low=result.low, high=result.high, rounded=result.rounded)

    @app.get("/trade-in/factors")
    async def factors() -> dict[str, list[str]]:
        return {"factors": trade_value_factors()}

    return app


app = create_app()
