"""Logging setup for the address-converter CLI.

Records about a single address carry its id as ``extra={"address_id": ...}``;
the JSON formatter lifts it into a top-level ``address_id`` key so log lines
can be joined with the stored ``<id>.json`` files.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
STANDARD_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers kept at WARNING whatever the configured level
QUIET_LOGGERS = ("faker",)


def setup_logging(level: str = "INFO", format_type: str = "standard") -> None:
    """Route all logging to stderr, leaving stdout to command output.

    Parameters
    ----------
    level : str
        Log level name, case-insensitive. Unknown names fall back to INFO.
    format_type : str
        ``"json"`` for one JSON object per line, anything else for the
        human-readable format.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter: logging.Formatter
    if format_type == "json":
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt=STANDARD_DATEFMT)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers[:] = [handler]

    logging.getLogger("address_converter").setLevel(log_level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line, accents kept as-is."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        address_id = getattr(record, "address_id", None)
        if address_id is not None:
            entry["address_id"] = address_id
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)
