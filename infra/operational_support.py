"""Per-run trace ids and the JSON-lines event log kept beside app.log."""
from __future__ import annotations

import json
import logging
import os
import traceback
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Iterator, Mapping

from infra.path import user_data_dir
from infra.version import get_app_version

_TRACE_ID: ContextVar[str | None] = ContextVar("fletes_trace_id", default=None)


def create_trace_id() -> str:
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d%H%M%S")
    return f"run-{stamp}-{uuid.uuid4().hex[:8]}"


def current_trace_id() -> str | None:
    return _TRACE_ID.get()


@contextmanager
def bind_trace_id(trace_id: str | None = None) -> Iterator[str]:
    """Bind a trace id (a fresh one when not given) for the duration of a command."""
    value = (trace_id or "").strip() or create_trace_id()
    token = _TRACE_ID.set(value)
    try:
        yield value
    finally:
        _TRACE_ID.reset(token)


class TraceIdLogFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.trace_id = current_trace_id() or "-"
        return True


class OperationalSupport:
    """Appends one JSON object per line for report runs and crashes."""

    def __init__(self, events_path: str | Path | None = None) -> None:
        self.events_path = Path(events_path or user_data_dir() / "logs" / "support-events.jsonl")
        self.events_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = Lock()

    def emit_event(
        self,
        *,
        event_type: str,
        message: str,
        level: str = "INFO",
        trace_id: str | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> str:
        resolved = trace_id or current_trace_id() or create_trace_id()
        payload: dict[str, Any] = {
            "timestamp_utc": datetime.now(timezone.utc).isoformat(),
            "event_type": event_type,
            "level": level.upper(),
            "trace_id": resolved,
            "message": message,
            "app_version": get_app_version(),
            "pid": os.getpid(),
        }
        if data:
            payload["data"] = dict(data)

        line = json.dumps(payload, ensure_ascii=True, sort_keys=True, default=str)
        with self._lock, self.events_path.open("a", encoding="utf-8") as handle:
            handle.write(line + "\n")
        return resolved

    def capture_exception(self, exc: BaseException, *, context: str, trace_id: str | None = None) -> str:
        return self.emit_event(
            event_type="app.crash",
            level="ERROR",
            trace_id=trace_id,
            message=f"Unhandled exception in {context}: {exc}",
            data={
                "context": context,
                "exception_type": type(exc).__name__,
                "stacktrace": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            },
        )

    def read_events(self, *, trace_id: str | None = None) -> list[dict[str, Any]]:
        if not self.events_path.exists():
            return []
        events: list[dict[str, Any]] = []
        for line in self.events_path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            try:
                payload = json.loads(line)
            except json.JSONDecodeError:
                continue
            if trace_id and payload.get("trace_id") != trace_id:
                continue
            events.append(payload)
        return events


_SUPPORT: OperationalSupport | None = None


def get_operational_support() -> OperationalSupport:
    global _SUPPORT
    if _SUPPORT is None:
        _SUPPORT = OperationalSupport()
    return _SUPPORT


__all__ = [
    "OperationalSupport",
    "TraceIdLogFilter",
    "bind_trace_id",
    "create_trace_id",
    "current_trace_id",
    "get_operational_support",
]
