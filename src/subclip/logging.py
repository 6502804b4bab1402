import json
import logging
import sys
from datetime import datetime
from typing import Any

from subclip.config import LogFormat, get_settings

PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """
    Formatter that outputs JSON strings after parsing the LogRecord.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        # Extra fields passed via extra={"data": ...}
        if hasattr(record, "data"):
            log_record["data"] = record.data  # type: ignore

        return json.dumps(log_record, default=str)


def setup_logging(level: str | None = None, fmt: LogFormat | str | None = None) -> logging.Logger:
    """
    Configure the root logger from settings, overridable per call.

    Records go to stderr; stdout is reserved for subtitle output.
    """
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    log_format = LogFormat(fmt or settings.log_format)

    logger = logging.getLogger()
    logger.setLevel(getattr(logging, level_name, logging.WARNING))

    handler = logging.StreamHandler(sys.stderr)
    if log_format == LogFormat.JSON:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    # Replace existing handlers so repeated calls do not duplicate output
    logger.handlers = []
    logger.addHandler(handler)
    return logger
