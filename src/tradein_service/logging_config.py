from __future__ import annotations

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from typing import Any, Dict

correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")

LOG_STYLES = ("json", "text")


def new_correlation_id() -> str:
    return uuid.uuid4().hex[:12]


class TradeInLogFormatter(logging.Formatter):
    """Renders a record as one JSON object or as a ``key=value`` text line.

    Both styles carry the same fields. The request's correlation id is read
    from the context var and the audit payload from ``extra_data``.
    """

    def __init__(self, style: str = "json", datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)
        self.style_name = style if style in LOG_STYLES else "text"

    def fields(self, record: logging.LogRecord) -> Dict[str, Any]:
        entry: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        cid = correlation_id.get("")
        if cid:
            entry["correlation_id"] = cid
        data = getattr(record, "extra_data", None)
        if data:
            entry["data"] = dict(data)
        if record.exc_info and record.exc_info[1]:
            entry["exception"] = self.formatException(record.exc_info)
        return entry

    def format(self, record: logging.LogRecord) -> str:
        entry = self.fields(record)
        if self.style_name == "json":
            return json.dumps(entry, default=str)

        line = f"{entry['timestamp']} {entry['level']:<8} [{entry['logger']}] {entry['message']}"
        pairs = dict(entry.get("data", {}))
        if "correlation_id" in entry:
            pairs = {"cid": entry["correlation_id"], **pairs}
        if pairs:
            line += " " + " ".join(f"{k}={v}" for k, v in pairs.items())
        if "exception" in entry:
            line += "\n" + entry["exception"]
        return line


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Route every logger through one stdout handler in the chosen style."""
    root = logging.getLogger()
    level_no = logging.getLevelName(level.upper())
    root.setLevel(level_no if isinstance(level_no, int) else logging.INFO)
    for existing in list(root.handlers):
        root.removeHandler(existing)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(TradeInLogFormatter(style=fmt))
    root.addHandler(handler)
