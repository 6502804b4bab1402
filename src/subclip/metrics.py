"""Lightweight metrics helpers for extraction runs."""

from __future__ import annotations

import json
import logging
import os
import socket
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from subclip.config import get_settings

logger = logging.getLogger(__name__)


def _env_bool(name: str) -> Optional[bool]:
    val = os.getenv(name)
    if val is None:
        return None
    val = val.strip().lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off"):
        return False
    return None


def should_log_metrics() -> bool:
    """
    Decide whether to emit local metrics.
    - Explicit override via SUBCLIP_METRICS (1/0).
    - Skip during pytest unless explicitly enabled.
    - Otherwise follow the ``metrics_enabled`` setting.
    """
    override = _env_bool("SUBCLIP_METRICS")
    if override is not None:
        return override

    if "PYTEST_CURRENT_TEST" in os.environ:
        return False

    return get_settings().metrics_enabled


def _resolve_log_path() -> Path:
    custom = os.getenv("SUBCLIP_METRICS_PATH")
    if custom:
        return Path(custom).expanduser().resolve()
    return get_settings().metrics_path.resolve()


def log_extract_metrics(event: dict[str, Any]) -> None:
    """Append a JSONL metric row; never raises."""
    if not should_log_metrics():
        return

    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "host": socket.gethostname(),
        "app_env": str(get_settings().app_env),
        **event,
    }

    path = _resolve_log_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as fh:
            fh.write(json.dumps(payload, ensure_ascii=False))
            fh.write("\n")
    except OSError as exc:
        # Metrics are best-effort; an unwritable path must not fail the run
        logger.warning("could not write metrics", extra={"data": {"path": str(path), "error": str(exc)}})
