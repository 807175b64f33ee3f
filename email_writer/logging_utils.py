import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )


def log_event(logger: logging.Logger, record: dict[str, Any], level: int = logging.INFO) -> None:
    """Emit one JSON object as a single log line."""
    line = json.dumps(record, ensure_ascii=True, separators=(",", ":"), default=str)
    logger.log(level, line)
